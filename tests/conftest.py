import random

import pytest


SQUARE_TSP = """NAME : square4
TYPE : TSP
COMMENT : four corners of a square
DIMENSION : 4
EDGE_WEIGHT_TYPE : EUC_2D
NODE_COORD_SECTION
1 0 0
2 10 0
3 10 10
4 0 10
EOF
"""

SQUARE_TOUR = """NAME : square4.opt.tour
TYPE : TOUR
DIMENSION : 4
TOUR_SECTION
1
2
3
4
-1
EOF
"""


@pytest.fixture
def square():
    return [(0, 0), (1, 0), (1, 1), (0, 1)]


@pytest.fixture
def five_points():
    return [(0, 0), (3, 0), (3, 4), (6, 4), (6, 8)]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def tsplib_root(tmp_path):
    (tmp_path / "square4.tsp").write_text(SQUARE_TSP)
    (tmp_path / "square4.opt.tour").write_text(SQUARE_TOUR)
    return tmp_path
