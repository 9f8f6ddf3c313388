"""
Built-in ranked word lists.

Each list is ordered most common first; a word's rank is its 1-based position.
The lists are deliberately short excerpts of the usual frequency corpora:
enough to recognize the words people actually put in passwords.
"""
from typing import Dict, Iterable

FREQUENCY_LISTS = {
    "passwords": """
        password 123456 12345678 1234 qwerty 12345 dragon pussy baseball
        football letmein monkey 696969 abc123 mustang michael shadow master
        jennifer 111111 2000 jordan superman harley 1234567 fuckme hunter
        fuckyou trustno1 ranger buster thomas tigger robert soccer fuck batman
        test pass killer hockey george charlie andrew michelle love sunshine
        jessica asshole 6969 pepper daniel access 123456789 654321 joshua
        maggie starwars silver william dallas yankees 123123 ashley 666666
        hello amanda orange biteme freedom computer sexy thunder nicole ginger
        heather hammer summer corvette taylor fucker austin 1111 merlin
        matthew 121212 golfer cheese princess martin chelsea patrick richard
        diamond yellow bigdog secret asdfgh sparky cowboy camaro anthony
        matrix falcon iloveyou bailey guitar jackson purple scooter phoenix
        aaaaaa morgan tigers porsche mickey maverick cookie nascar peanut
        justin 131313 money horny samantha panties steelers joseph snoopy
        boomer whatever iceman smokey gateway dakota cowboys eagles chicken
        dick black zxcvbn please andrea ferrari knight hardcore melissa
        compaq coffee booboo bitch johnny bulldog xxxxxx welcome james player
        ncc1701 wizard scooby charles junior internet bigdick mike brandy
        tennis blowjob banana monster spider lakers miller rabbit enter
        mercedes brandon steven fender john yamaha diablo chris boston tiger
        marine chicago rangers gandalf winter bigtits barney edward raiders
        porn badboy blowme spanky bigdaddy johnson chester london midnight
        blue fishing 000000 hannah slayer 11111111 rachel sexsex redsox
        thx1138 asdf marlboro panther zxcvbnm arsenal oliver qazwsx mother
        victoria 7777777 jasper angel david winner crystal golden butthead
        viking jack iwantu shannon murphy money1 admin login dolphin
    """,
    "english_wikipedia": """
        the of and to in was is for on as with by he at from his an were are
        which be this has or also first new after had one their its it not
        but who two they have her she been other when time during there into
        school more may years over only year most would world city some where
        between later three state such then national used made known under
        many university united while part season team these american than
        film second born south became states war through being including both
        before north high however people family early history album area them
        series against until since district county name work life group music
        following number company several four called played released career
        league game government house each based day same won use like around
        john club well general public small top home best long back war word
        pass dragon monkey secret admin user test login welcome love summer
        winter spring autumn sun star moon night light dark fire water earth
        king queen prince princess lord lady master power magic gold silver
        cat dog horse bird fish tiger lion bear wolf eagle snake mouse
    """,
    "female_names": """
        mary patricia linda barbara elizabeth jennifer maria susan margaret
        dorothy lisa nancy karen betty helen sandra donna carol ruth sharon
        michelle laura sarah kimberly deborah jessica shirley cynthia angela
        melissa brenda amy anna rebecca virginia kathleen pamela martha debra
        amanda stephanie carolyn christine marie janet catherine frances ann
        joyce diane alice julie heather teresa doris gloria evelyn jean cheryl
        mildred katherine joan ashley judith rose janice kelly nicole judy
        christina kathy theresa beverly denise tammy irene jane lori rachel
        marilyn andrea kathryn louise sara anne jacqueline wanda bonnie julia
        ruby lois tina phyllis norma paula diana annie lillian emily robin
    """,
    "male_names": """
        james john robert michael william david richard charles joseph thomas
        christopher daniel paul mark donald george kenneth steven edward brian
        ronald anthony kevin jason matthew gary timothy jose larry jeffrey
        frank scott eric stephen andrew raymond gregory joshua jerry dennis
        walter patrick peter harold douglas henry carl arthur ryan roger joe
        juan jack albert jonathan justin terry gerald keith samuel willie
        ralph lawrence nicholas roy benjamin bruce brandon adam harry fred
        wayne billy steve louis jeremy aaron randy howard eugene carlos russell
        bobby victor martin ernest phillip todd jesse craig alan shawn clarence
        sean philip chris johnny earl jimmy antonio danny bryan tony luis mike
    """,
    "surnames": """
        smith johnson williams jones brown davis miller wilson moore taylor
        anderson thomas jackson white harris martin thompson garcia martinez
        robinson clark rodriguez lewis lee walker hall allen young hernandez
        king wright lopez hill scott green adams baker gonzalez nelson carter
        mitchell perez roberts turner phillips campbell parker evans edwards
        collins stewart sanchez morris rogers reed cook morgan bell murphy
        bailey rivera cooper richardson cox howard ward torres peterson gray
        ramirez james watson brooks kelly sanders price bennett wood barnes
        ross henderson coleman jenkins perry powell long patterson hughes
        flores washington butler simmons foster gonzales bryant alexander
    """,
    "us_tv_and_film": """
        you i to the a and that it of me what is in this know i'm for no
        have my don't just not do be on your was we it's with so but all well
        are he oh about right you're get here out going like yeah if her she
        can up want think that's now go him at how got there one did why see
        come good they really as would look when time will okay back can't
        mean tell i'll from hey were he's could didn't yes his been or
        something who because some had then say ok take an way us little make
        need gonna never we're too love she's i've sure them more over our
        sorry where what's let thing am maybe down man very on by anything
        batman superman starwars matrix yoda hobbit gandalf frodo spock
    """,
}


def build_ranked_dict(ordered_list: Iterable[str]) -> Dict[str, int]:
    """Map each word to its 1-based position; repeated words keep the first rank"""
    result = {}
    for rank, word in enumerate(ordered_list, 1):
        result.setdefault(word, rank)
    return result


RANKED_DICTIONARIES = {
    name: build_ranked_dict(words.split())
    for name, words in FREQUENCY_LISTS.items()
}
