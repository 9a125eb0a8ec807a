import pytest

from fencat.models.piece import Color, Kind, Piece
from fencat.parsing.fen import Board, parse_board
from fencat.rendering.schemes import DEFAULT_SCHEME, SCHEMES, get_scheme
from fencat.rendering.terminal import (
    GLYPHS,
    PLAIN_EMPTY_DARK,
    PLAIN_EMPTY_LIGHT,
    RESET_COLOR,
    display_squares,
    flip_square,
    is_light_square,
    render_board,
    render_cell,
    render_rows,
)

from conftest import ITALIAN_FEN, START_FEN


def _cells(line: str) -> list[str]:
    """Split a plain-mode row into its 3-column cells."""
    return [line[i:i + 3] for i in range(0, len(line), 3)]


def _letters(line: str) -> str:
    return "".join(cell.strip() for cell in _cells(line) if cell.strip() not in (".", ":"))


@pytest.mark.parametrize("fen", [START_FEN, ITALIAN_FEN, "8/8/8/8/8/8/8/8", "k7/8/8/8/8/8/8/7K"])
@pytest.mark.parametrize("flip", [False, True])
def test_eight_rows_of_eight_cells(fen: str, flip: bool) -> None:
    board = parse_board(fen)
    plain = render_rows(board, flip=flip, color=False)
    assert len(plain) == 8
    assert all(len(_cells(line)) == 8 and len(line) == 24 for line in plain)

    colored = render_rows(board, flip=flip, color=True)
    assert len(colored) == 8
    assert all(line.count(RESET_COLOR) == 8 for line in colored)


def test_empty_board_renders_blank_cells() -> None:
    lines = render_rows(Board.empty(), color=False)
    for line in lines:
        assert all(cell in (PLAIN_EMPTY_LIGHT, PLAIN_EMPTY_DARK) for cell in _cells(line))

    colored = render_rows(Board.empty(), color=True)
    for line in colored:
        assert not any(glyph in line for glyph in GLYPHS.values())


def test_start_position_unflipped(start_board: Board) -> None:
    lines = render_rows(start_board, color=False)
    assert _letters(lines[0]) == "rnbqkbnr"
    assert _letters(lines[1]) == "pppppppp"
    assert _letters(lines[6]) == "PPPPPPPP"
    assert _letters(lines[7]) == "RNBQKBNR"


def test_start_position_flipped(start_board: Board) -> None:
    lines = render_rows(start_board, flip=True, color=False)
    assert _letters(lines[0]) == "RNBKQBNR"
    assert _letters(lines[7]) == "rnbkqbnr"


def test_flip_reverses_files_within_rank(italian_board: Board) -> None:
    normal = render_rows(italian_board, color=False)
    flipped = render_rows(italian_board, flip=True, color=False)
    for i in range(8):
        assert _cells(flipped[i])[::-1] == _cells(normal[7 - i])
        assert _letters(flipped[i]) == _letters(normal[7 - i])[::-1]


def test_flip_square_is_an_involution() -> None:
    for r in range(8):
        for f in range(8):
            assert flip_square(*flip_square(r, f)) == (r, f)
    assert flip_square(0, 0) == (7, 7)
    assert flip_square(2, 5) == (5, 2)


def test_double_flip_matches_unflipped(italian_board: Board) -> None:
    twice = [[flip_square(*flip_square(r, f)) for r, f in row] for row in display_squares(False)]
    assert twice == display_squares(False)
    assert [[flip_square(r, f) for r, f in row] for row in display_squares(True)] == display_squares(False)

    def render_through(order):
        return [
            "".join(str(italian_board.piece_at(r, f) or ".") for r, f in row)
            for row in order
        ]

    flipped_twice = [[flip_square(r, f) for r, f in row] for row in display_squares(True)]
    assert render_through(flipped_twice) == render_through(display_squares(False))


def test_display_squares_order() -> None:
    normal = display_squares(False)
    flipped = display_squares(True)
    assert normal[0][0] == (0, 0)
    assert normal[7][7] == (7, 7)
    assert flipped[0][0] == (7, 7)
    assert flipped[0][7] == (7, 0)
    assert flipped[7][0] == (0, 7)


def test_shading_follows_board_coordinates() -> None:
    assert is_light_square(0, 0)
    assert not is_light_square(0, 1)
    assert is_light_square(7, 7)

    normal = render_rows(Board.empty(), color=False)
    flipped = render_rows(Board.empty(), flip=True, color=False)
    # a8 is light: top-left unflipped, bottom-right flipped
    assert _cells(normal[0])[0] == PLAIN_EMPTY_LIGHT
    assert _cells(flipped[7])[7] == PLAIN_EMPTY_LIGHT
    assert _cells(normal[0])[1] == PLAIN_EMPTY_DARK
    # a 180° rotation maps light squares onto light squares
    assert normal == flipped


def test_adjacent_cells_are_distinct_in_color_mode() -> None:
    line = render_rows(Board.empty(), color=True)[0]
    light = DEFAULT_SCHEME.background(True)
    dark = DEFAULT_SCHEME.background(False)
    assert line.startswith(light)
    assert line.count(light) == 4
    assert line.count(dark) == 4


def test_twelve_distinct_piece_cells() -> None:
    cells = {
        render_cell(Piece(color, kind), is_light=True, color=True)
        for color in Color for kind in Kind
    }
    assert len(cells) == 12
    plain = {
        render_cell(Piece(color, kind), is_light=True, color=False)
        for color in Color for kind in Kind
    }
    assert len(plain) == 12


def test_white_and_black_use_different_foregrounds() -> None:
    white = render_cell(Piece(Color.WHITE, Kind.ROOK), is_light=False)
    black = render_cell(Piece(Color.BLACK, Kind.ROOK), is_light=False)
    assert GLYPHS[Kind.ROOK] in white and GLYPHS[Kind.ROOK] in black
    assert "\x1b[38;5;231m" in white
    assert "\x1b[38;5;0m" in black
    assert white.endswith(RESET_COLOR)


def test_scheme_changes_backgrounds(start_board: Board) -> None:
    brown = get_scheme("brown")
    line = render_rows(start_board, scheme=brown)[0]
    assert brown.background(True) in line
    assert DEFAULT_SCHEME.background(True) not in line


def test_unknown_scheme() -> None:
    assert set(SCHEMES) == {"grey", "brown", "green", "blue"}
    with pytest.raises(ValueError):
        get_scheme("purple")


def test_render_board_with_coordinates(start_board: Board) -> None:
    lines = render_board(start_board, color=False)
    assert len(lines) == 10
    assert lines[0] == lines[-1]
    assert lines[0].split() == list("abcdefgh")
    assert lines[1].startswith("8 ") and lines[1].endswith(" 8")
    assert lines[8].startswith("1 ") and lines[8].endswith(" 1")
    assert lines[1][2:-2] == render_rows(start_board, color=False)[0]


def test_render_board_with_coordinates_flipped(start_board: Board) -> None:
    lines = render_board(start_board, flip=True, color=False)
    assert lines[0].split() == list("hgfedcba")
    assert lines[1].startswith("1 ") and lines[1].endswith(" 1")
    assert lines[8].startswith("8 ")
    assert _letters(lines[1][2:-2]) == "RNBKQBNR"


def test_render_board_without_coordinates(start_board: Board) -> None:
    assert render_board(start_board, coordinates=False) == render_rows(start_board)
    assert render_board(start_board, flip=True, color=False, coordinates=False) == \
        render_rows(start_board, flip=True, color=False)


def test_rendering_does_not_mutate_board(start_board: Board) -> None:
    before = start_board.to_fen()
    render_board(start_board, flip=True)
    assert start_board.to_fen() == before == START_FEN
