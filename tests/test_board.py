import pytest

from jump61.core.board import Board
from jump61.core.readonly import ReadonlyBoard
from jump61.core.square import Square
from jump61.errors import (
    EmptyHistory,
    GameOver,
    InvalidMove,
    NotYourTurn,
    OutOfRange,
    ReadonlyBoardError,
)


def check_board(board, *contents):
    """
    contents is a sequence of (row, col, spots, owner) tuples. Every square
    not listed must be unowned with one spot.
    """
    listed = set()
    for r, c, n, owner in contents:
        assert board.get(r, c) == Square(owner, n), f"at {r} {c}"
        listed.add(board.sq_num(r, c))
    for i in range(board.size * board.size):
        if i not in listed:
            assert board.get_index(i) == Square(None, 1), f"square #{i}"


@pytest.mark.parametrize("size", [1, 2, 3, 6, 9])
def test_fresh_board_has_one_unowned_spot_per_square(size):
    b = Board(size)
    assert b.size == size
    assert b.num_pieces() == size * size
    assert b.num_of_side(None) == size * size
    assert all(sq == Square(None, 1) for sq in b.squares)
    assert b.winner() is None


def test_index_conversions():
    b = Board(5)
    assert b.sq_num(1, 1) == 0
    assert b.sq_num(2, 3) == 7
    assert (b.row(7), b.col(7)) == (2, 3)
    assert b.move_string(24) == "5 5"
    assert b.exists(5, 5) and not b.exists(0, 1) and not b.exists(1, 6)
    assert b.exists_index(24) and not b.exists_index(25) and not b.exists_index(-1)


def test_neighbor_counts():
    b = Board(4)
    assert b.neighbors(0) == 2
    assert b.neighbors(1) == 3
    assert b.neighbors(5) == 4
    assert b.neighbors(15) == 2
    assert b.neighbor_indices(5) == [6, 9, 1, 4]
    assert b.neighbor_indices(0) == [1, 4]
    assert Board(1).neighbors(0) == 0


def test_set_then_get():
    b = Board(5)
    b.set(2, 2, 1, "red")
    assert b.get(2, 2) == Square("red", 1)
    assert b.num_of_side("red") == 1
    assert b.num_of_side("blue") == 0
    assert b.num_of_side(None) == 24

    b.set(3, 4, 0, "blue")
    assert b.get(3, 4) == Square(None, 0)


def test_set_rejects_bad_input():
    b = Board(3)
    with pytest.raises(OutOfRange):
        b.set(4, 1, 1, "red")
    with pytest.raises(ValueError):
        b.set(1, 1, -1, "red")
    with pytest.raises(ValueError):
        b.set(1, 1, 2, "green")
    assert b.get(1, 1) == Square(None, 1)


def test_num_pieces_counts_spots():
    b = Board(6)
    assert b.num_pieces() == 36
    b.set(2, 2, 2, "red")
    assert b.num_pieces() == 37


def test_turn_alternates_with_spot_parity():
    b = Board(6)
    assert b.whose_move() == "red"
    b.add_spot("red", 0)
    assert b.whose_move() == "blue"
    b.add_spot("blue", 1)
    assert b.whose_move() == "red"


def test_moves_cascade_and_undo():
    b = Board(6)
    check_board(b)
    b.add_spot_at("red", 1, 1)
    check_board(b, (1, 1, 2, "red"))
    b.add_spot_at("blue", 2, 1)
    check_board(b, (1, 1, 2, "red"), (2, 1, 2, "blue"))
    b.add_spot_at("red", 1, 1)
    check_board(b, (1, 1, 1, "red"), (2, 1, 3, "red"), (1, 2, 2, "red"))
    b.undo()
    check_board(b, (1, 1, 2, "red"), (2, 1, 2, "blue"))
    b.undo()
    check_board(b, (1, 1, 2, "red"))
    b.undo()
    check_board(b)


def test_chain_reaction_spreads_through_neighbors():
    b = Board(6)
    b.set(2, 3, 4, "red")
    b.set(2, 2, 2, "red")
    b.set(3, 3, 4, "red")
    b.set(3, 2, 3, "red")
    b.set(3, 4, 2, "red")
    b.set(4, 3, 4, "red")
    b.set(4, 2, 2, "red")

    b.add_spot("red", 14)

    assert b.get_index(26).spots == 2
    assert b.get(3, 3) == Square("red", 3)
    assert b.get(4, 3) == Square("red", 1)
    assert b.get(2, 3) == Square("red", 1)
    assert b.get(1, 3) == Square("red", 2)
    # A cascade moves spots around but never creates or destroys them.
    assert b.num_pieces() == 36 + 14 + 1


def test_undo_restores_cascade_and_turn():
    b = Board(4)
    b.set(1, 1, 2, "red")
    b.set(1, 2, 3, "red")
    b.set(2, 1, 2, "blue")
    before = b.squares
    assert b.whose_move() == "red"

    b.add_spot_at("red", 1, 1)
    assert b.squares != before
    b.undo()
    assert b.squares == before
    assert b.whose_move() == "red"


def test_undo_matches_board_that_never_made_the_move():
    b = Board(6)
    b.add_spot("red", 0)
    b.add_spot("blue", 35)
    b.undo()

    b2 = Board(6)
    b2.add_spot("red", 0)
    assert b == b2


def test_undo_without_history_raises():
    b = Board(3)
    with pytest.raises(EmptyHistory):
        b.undo()
    b.set(1, 1, 2, "red")
    with pytest.raises(EmptyHistory):
        b.undo()


def test_clear_resets_size_and_history():
    b = Board(6)
    b.add_spot("red", 0)
    b.add_spot("blue", 35)
    b.clear(4)
    assert b == Board(4)
    assert b.history == []


def test_copy_is_independent_with_empty_history():
    b = Board(6)
    b.set(2, 2, 1, "red")
    b.add_spot("red", 0)

    c = b.copy()
    assert c.get(2, 2) == b.get(2, 2)
    assert c.history == []
    c.add_spot("blue", 35)
    assert b.get_index(35) == Square(None, 1)

    d = Board(3)
    d.copy_from(b)
    assert d.size == 6
    assert d.squares == b.squares
    assert d.history == []


def test_add_spot_errors():
    b = Board(3)
    with pytest.raises(OutOfRange):
        b.add_spot("red", 9)
    with pytest.raises(OutOfRange):
        b.add_spot_at("red", 0, 2)
    with pytest.raises(NotYourTurn):
        b.add_spot("blue", 0)

    b.add_spot("red", 0)
    with pytest.raises(InvalidMove):
        b.add_spot("blue", 0)
    assert len(b.history) == 1


def test_errors_are_value_errors():
    b = Board(3)
    with pytest.raises(ValueError):
        b.add_spot("blue", 0)


def test_is_legal():
    b = Board(6)
    assert b.is_legal("red", 0)
    assert b.is_legal_at("red", 1, 1)
    assert not b.is_legal("blue", 0)
    assert not b.is_legal("red", 36)
    assert b.can_move("red")
    assert not b.can_move("blue")

    b.set(1, 2, 2, "blue")
    b.set(1, 3, 2, "blue")
    assert b.whose_move() == "red"
    assert not b.is_legal("red", 1)
    assert b.legal_moves("red") == [n for n in range(36) if n not in (1, 2)]
    assert b.legal_moves("blue") == []


def test_full_ownership_wins_and_blocks_all_moves():
    b = Board(2)
    for r in (1, 2):
        for c in (1, 2):
            b.set(r, c, 2, "red")
    assert b.winner() == "red"
    assert not b.can_move("red")
    assert not b.can_move("blue")
    for n in range(4):
        assert not b.is_legal("red", n)
        assert not b.is_legal("blue", n)
    with pytest.raises(GameOver):
        b.add_spot(b.whose_move(), 0)


def test_win_mid_cascade_drops_pending_spots():
    b = Board(2)
    b.set(1, 1, 2, "red")
    b.set(1, 2, 2, "red")
    b.set(2, 1, 2, "red")
    b.set(2, 2, 2, "blue")
    assert b.whose_move() == "red"

    b.add_spot_at("red", 1, 1)

    assert b.winner() == "red"
    check_board(b, (1, 1, 1, "red"), (1, 2, 1, "red"), (2, 1, 1, "red"), (2, 2, 1, "red"))
    assert b.num_pieces() == 4

    b.undo()
    assert b.get(2, 2) == Square("blue", 2)
    assert b.winner() is None


def test_short_game_ends_with_blue_takeover():
    b = Board(3)
    moves = [
        ("red", 1, 1), ("blue", 2, 3), ("red", 2, 2), ("blue", 3, 3),
        ("red", 2, 2), ("blue", 2, 3), ("red", 1, 3), ("blue", 2, 3),
        ("red", 2, 1), ("blue", 3, 1), ("red", 2, 1), ("blue", 2, 2),
    ]
    for side, r, c in moves:
        b.add_spot_at(side, r, c)

    assert b.winner() == "blue"
    assert b.dump() == (
        "===\n"
        "    1b 3b 2b \n"
        "    1b 3b 1b \n"
        "    1b 3b 2b \n"
        "==="
    )


def test_dump_format():
    b = Board(2)
    assert b.dump() == "===\n    1- 1- \n    1- 1- \n==="

    b = Board(3)
    b.add_spot("red", 0)
    b.set(3, 3, 3, "red")
    b.set(2, 2, 0, None)
    assert str(b) == "===\n    2r 1- 1- \n    1- 0- 1- \n    1- 1- 3r \n==="


def test_display_format():
    b = Board(2)
    b.set(1, 2, 2, "red")
    assert b.display() == " 1 1- 2r\n 2 1- 1-\n    1  2"


def test_notifier_fires_on_changes():
    seen = []
    b = Board(3)
    b.set_notifier(lambda board: seen.append(board.num_pieces()))
    assert seen == [9]

    b.set(1, 1, 2, "red")
    b.clear(2)
    b.add_spot("red", 0)
    b.undo()
    b.copy_from(Board(3))
    assert seen == [9, 10, 4, 5, 4, 9]

    # Last notifier wins
    other = []
    b.set_notifier(other.append)
    b.set(1, 1, 1, "blue")
    assert len(seen) == 6
    assert other == [b, b]


def test_copies_do_not_notify():
    seen = []
    b = Board(3)
    b.set_notifier(seen.append)
    c = b.copy()
    c.set(1, 1, 2, "red")
    assert len(seen) == 1


def test_readonly_view_tracks_board_and_rejects_changes():
    b = Board(3)
    view = ReadonlyBoard(b)
    assert view.size == 3
    assert view.whose_move() == "red"

    b.add_spot("red", 4)
    assert view.get(2, 2) == Square("red", 2)
    assert view == b

    for call in (
        lambda: view.add_spot("red", 0),
        lambda: view.set(1, 1, 1, "red"),
        lambda: view.clear(3),
        lambda: view.undo(),
        lambda: view.copy_from(Board(3)),
    ):
        with pytest.raises(ReadonlyBoardError):
            call()

    c = view.copy()
    assert isinstance(c, Board)
    c.add_spot("blue", 0)
    assert b.get(1, 1) == Square(None, 1)


def test_readonly_view_hides_board_internals():
    b = Board(3)
    b.add_spot("red", 4)
    view = ReadonlyBoard(b)
    before = b.squares

    for name in ("cells", "history", "notifier", "_internal_set", "_jump", "_mark_undo", "_announce"):
        with pytest.raises(ReadonlyBoardError):
            getattr(view, name)
    with pytest.raises(AttributeError):
        view.no_such_thing
    with pytest.raises(AttributeError):
        view.size = 4

    assert b.squares == before
    assert len(b.history) == 1
    assert b.size == 3


def test_readonly_view_answers_queries():
    b = Board(3)
    b.add_spot("red", 0)
    view = ReadonlyBoard(b)

    assert view.squares == b.squares
    assert view.get_index(0) == Square("red", 2)
    assert view.num_pieces() == 10
    assert view.num_of_side("red") == 1
    assert view.winner() is None
    assert view.neighbors(4) == 4
    assert view.neighbor_indices(0) == [1, 3]
    assert not view.overfull(0)
    assert view.can_move("blue")
    assert view.is_legal_at("blue", 2, 2)
    assert view.legal_moves("blue") == list(range(1, 9))
    assert (view.row(5), view.col(5), view.sq_num(2, 3)) == (2, 3, 5)
    assert view.exists(3, 3) and view.exists_index(8)
    assert view.move_string(8) == "3 3"
    assert view.dump() == b.dump()
    assert view.display() == b.display()
    assert view.copy() == b.copy()
