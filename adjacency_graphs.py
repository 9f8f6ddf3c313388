"""
Keyboard and keypad adjacency graphs.

Each layout below is drawn the way it looks. ``build_graph`` turns a drawing
into ``{character: [neighbor token or None, ...]}``: list position is the
direction, and a character's index inside a neighbor token tells whether it
needs shift (0 unshifted, 1 shifted).
"""
from typing import Dict, List, Optional

Graph = Dict[str, List[Optional[str]]]

QWERTY = r'''
`~ 1! 2@ 3# 4$ 5% 6^ 7& 8* 9( 0) -_ =+
    qQ wW eE rR tT yY uU iI oO pP [{ ]} \|
     aA sS dD fF gG hH jJ kK lL ;: '"
      zZ xX cC vV bB nN mM ,< .> /?
'''

DVORAK = r'''
`~ 1! 2@ 3# 4$ 5% 6^ 7& 8* 9( 0) [{ ]}
    '" ,< .> pP yY fF gG cC rR lL /? =+ \|
     aA oO eE uU iI dD hH tT nN sS -_
      ;: qQ jJ kK xX bB mM wW vV zZ
'''

KEYPAD = r'''
  / * -
7 8 9 +
4 5 6
1 2 3
  0 .
'''

MAC_KEYPAD = r'''
  = / *
7 8 9 -
4 5 6 +
1 2 3
  0 .
'''


def get_slanted_adjacent_coords(x, y):
    # clockwise from the key to the left; on a slanted keyboard only the two
    # near-diagonal keys above and below are neighbors
    return [(x - 1, y), (x, y - 1), (x + 1, y - 1), (x + 1, y), (x, y + 1), (x - 1, y + 1)]


def get_aligned_adjacent_coords(x, y):
    return [(x - 1, y), (x - 1, y - 1), (x, y - 1), (x + 1, y - 1),
            (x + 1, y), (x + 1, y + 1), (x, y + 1), (x - 1, y + 1)]


def build_graph(layout: str, slanted: bool) -> Graph:
    """
    Build an adjacency graph from a layout drawing.

    On qwerty, 'g' maps to ['fF', 'tT', 'yY', 'hH', 'bB', 'vV'];
    on the keypad, '7' maps to [None, None, None, '/', '8', '5', '4', None].
    """
    positions = {}
    tokens = layout.split()
    token_size = len(tokens[0])
    # a token plus its trailing space
    x_unit = token_size + 1
    adjacent_coords = get_slanted_adjacent_coords if slanted else get_aligned_adjacent_coords
    assert all(len(token) == token_size for token in tokens), layout

    for y, line in enumerate(layout.split('\n')):
        # each keyboard row is indented one more space than the row above
        slant = y - 1 if slanted else 0
        for token in line.split():
            x, remainder = divmod(line.index(token) - slant, x_unit)
            assert remainder == 0, f"unexpected x offset for {token!r}"
            positions[(x, y)] = token

    graph = {}
    for (x, y), chars in positions.items():
        for char in chars:
            graph[char] = [positions.get(coord) for coord in adjacent_coords(x, y)]
    return graph


def calc_average_degree(graph: Graph) -> float:
    """On qwerty 'g' has degree 6 and '\\' degree 1; average over all keys"""
    total = sum(len([n for n in neighbors if n]) for neighbors in graph.values())
    return total / len(graph)


GRAPHS = {
    "qwerty": build_graph(QWERTY, slanted=True),
    "dvorak": build_graph(DVORAK, slanted=True),
    "keypad": build_graph(KEYPAD, slanted=False),
    "mac_keypad": build_graph(MAC_KEYPAD, slanted=False),
}
