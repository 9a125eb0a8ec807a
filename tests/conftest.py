import pytest

from fencat.parsing.fen import parse_board

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
ITALIAN_FEN = "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R"


@pytest.fixture
def start_board():
    return parse_board(START_FEN)


@pytest.fixture
def italian_board():
    return parse_board(ITALIAN_FEN)
