"""Unit tests for the game state engine."""

from __future__ import annotations

import itertools

import pytest

from tictactoe.engine import (
    EMPTY_BOARD,
    WINNING_LINES,
    Cell,
    Draw,
    GameSession,
    InProgress,
    InvalidIndex,
    Mark,
    Won,
    apply_move,
    evaluate,
    is_cell_playable,
    new_session,
    reset,
    winning_line,
)


def _play(indices, session: GameSession | None = None) -> GameSession:
    session = session or new_session()
    for index in indices:
        session = apply_move(session, index)
    return session


def _board(text: str):
    """Build a board from a 9-char string of 'X', 'O' and '.'."""

    lookup = {"X": Cell.X, "O": Cell.O, ".": Cell.EMPTY}
    return tuple(lookup[ch] for ch in text)


def test_new_session_is_empty_with_x_to_move() -> None:
    session = new_session()

    assert session.board == EMPTY_BOARD
    assert session.current_mark is Mark.X
    assert session.status == InProgress(Mark.X)


def test_apply_move_returns_new_session_and_flips_mark() -> None:
    session = new_session()

    moved = apply_move(session, 4)

    assert moved is not session
    assert session.board == EMPTY_BOARD
    assert moved.board[4] is Cell.X
    assert moved.current_mark is Mark.O


def test_evaluate_matches_line_definition_for_every_board() -> None:
    for cells in itertools.product((Cell.EMPTY, Cell.X, Cell.O), repeat=9):
        status = evaluate(cells)
        complete = [
            cells[a].mark
            for a, b, c in WINNING_LINES
            if cells[a] is not Cell.EMPTY and cells[a] is cells[b] is cells[c]
        ]
        if complete:
            assert status == Won(complete[0])
        elif Cell.EMPTY not in cells:
            assert status == Draw()
        else:
            assert isinstance(status, InProgress)


@pytest.mark.parametrize(
    "text, line",
    [
        ("XXX......", (0, 1, 2)),
        ("...OOO...", (3, 4, 5)),
        ("......XXX", (6, 7, 8)),
        ("O..O..O..", (0, 3, 6)),
        (".X..X..X.", (1, 4, 7)),
        ("..O..O..O", (2, 5, 8)),
        ("X...X...X", (0, 4, 8)),
        ("..O.O.O..", (2, 4, 6)),
    ],
)
def test_each_line_wins(text: str, line) -> None:
    board = _board(text)

    assert winning_line(board) == line
    assert evaluate(board) == Won(Mark(text[line[0]]))


def test_scan_order_decides_doubly_won_boards() -> None:
    # Not reachable in play since the game ends at the first completed line
    assert evaluate(_board("XXXOOO...")) == Won(Mark.X)
    assert evaluate(_board("OOOXXX...")) == Won(Mark.O)
    assert evaluate(_board("OX.OX.OX.")) == Won(Mark.O)
    assert winning_line(_board("XXX..X..X")) == (0, 1, 2)
    assert winning_line(_board("XXX.X...X")) == (0, 1, 2)


def test_evaluate_derives_mark_from_parity_when_not_given() -> None:
    assert evaluate(_board("X........")) == InProgress(Mark.O)
    assert evaluate(_board("XO.......")) == InProgress(Mark.X)
    assert evaluate(_board("X........"), Mark.X) == InProgress(Mark.X)


def test_strict_alternation() -> None:
    order = [4, 0, 2, 6, 3, 5, 1, 7, 8]
    session = new_session()
    for count, index in enumerate(order, start=1):
        session = apply_move(session, index)
        if session.status.is_terminal:
            break
        assert session.filled == count
        assert session.current_mark is (Mark.X if count % 2 == 0 else Mark.O)


def test_scenario_top_row_win() -> None:
    after_four = _play([0, 4, 1, 3])
    assert isinstance(after_four.status, InProgress)

    session = apply_move(after_four, 2)

    assert session.board[:3] == (Cell.X, Cell.X, Cell.X)
    assert session.status == Won(Mark.X)
    assert winning_line(session.board) == (0, 1, 2)


def test_scenario_full_board_without_line_is_draw() -> None:
    assert evaluate(_board("XOXOXOOXO")) == Draw()


def test_played_draw() -> None:
    session = _play([0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert session.board == _board("XOXXOOOXX")
    assert session.status == Draw()


def test_same_cell_twice_is_ignored() -> None:
    first = apply_move(new_session(), 0)

    second = apply_move(first, 0)

    assert second is first
    assert second.current_mark is Mark.O


def test_moves_after_win_are_ignored() -> None:
    won = _play([0, 4, 1, 3, 2])

    for index in (5, 6, 7, 8):
        assert apply_move(won, index) == won
        assert not is_cell_playable(won, index)


def test_moves_after_draw_are_ignored() -> None:
    drawn = _play([0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert all(apply_move(drawn, i) is drawn for i in range(9))


@pytest.mark.parametrize("index", [-1, 9, 100, 2.0, "3", None, True])
def test_invalid_index_raises(index) -> None:
    with pytest.raises(InvalidIndex):
        apply_move(new_session(), index)


def test_invalid_index_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        is_cell_playable(new_session(), 9)


def test_reset_after_moves_is_canonical() -> None:
    played = _play([0, 4, 1, 3, 2], reset())
    assert played != new_session()

    assert reset() == new_session() == GameSession()
    assert reset().board == EMPTY_BOARD
    assert reset().current_mark is Mark.X


def test_cell_mark() -> None:
    assert Cell.EMPTY.mark is None
    assert Cell.of(Mark.O) is Cell.O
    assert Cell.X.mark is Mark.X
    assert Mark.X.other() is Mark.O
    assert Mark.O.other() is Mark.X


@pytest.mark.parametrize(
    "text, mark",
    [
        (".........", Mark.O),
        ("X........", Mark.X),
        ("XO.......", Mark.O),
    ],
)
def test_session_rejects_mark_out_of_turn(text: str, mark: Mark) -> None:
    with pytest.raises(ValueError, match="cannot be next"):
        GameSession(board=_board(text), current_mark=mark)


def test_session_rejects_malformed_board() -> None:
    with pytest.raises(ValueError, match="exactly 9 cells"):
        GameSession(board=(Cell.EMPTY,) * 8)
    with pytest.raises(ValueError, match="exactly 9 cells"):
        GameSession(board=(None,) * 9)


def test_session_accepts_consistent_mark() -> None:
    session = GameSession(board=_board("XO......."), current_mark=Mark.X)

    assert apply_move(session, 8).board[8] is Cell.X
