"""
Configuration management using Pydantic Settings
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CRACKMATCH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Matching / scoring
    # dates are disambiguated towards the year closest to this one
    reference_year: int = 1990
    max_password_length: int = 100

    # Breach lookups (Have I Been Pwned range API)
    check_breach: bool = False
    breach_api_url: str = "https://api.pwnedpasswords.com/range/"
    breach_timeout: float = 6.0
    user_agent: str = "CrackMatch/1.0 (Password Pattern Matcher)"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.validate_settings()

    def validate_settings(self):
        """Validate settings on startup"""
        errors = []

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid log level: {self.log_level}")

        if not 1000 <= self.reference_year <= 2050:
            errors.append(f"Reference year out of range: {self.reference_year}")

        if self.max_password_length < 1:
            errors.append("Max password length must be positive")

        if self.breach_timeout <= 0:
            errors.append("Breach timeout must be positive")

        if errors:
            raise ValueError(f"Configuration errors: {'; '.join(errors)}")


settings = Settings()
