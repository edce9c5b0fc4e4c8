import pytest

from draughts import actions
from draughts.actions import GameAction, GameActionType
from draughts.engine import select_interactivity_state
from draughts.reducer import create_initial_game_state, game_reducer
from draughts.rules import DRAW, STARTING_PLAYER, Color, GameMode
from draughts.types import Piece, PlayerStats, Position
from draughts.utils import create_empty_board, get_piece, initial_board

# Helpers


def place(board, x, y, color, king=False):
    piece = Piece(x, y, color, is_king=king)
    board[y][x] = piece
    return piece


def play(state, frm, to):
    state = game_reducer(state, actions.select_piece(frm))
    return game_reducer(state, actions.apply_move(to))


def double_jump_state():
    board = create_empty_board()
    place(board, 2, 2, Color.DARK, king=True)
    place(board, 3, 3, Color.LIGHT)
    place(board, 5, 5, Color.LIGHT)
    place(board, 0, 2, Color.LIGHT)
    return create_initial_game_state(board=board)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("creator, kind", [
    (actions.select_piece, GameActionType.SELECT_PIECE),
    (actions.deselect_piece, GameActionType.DESELECT_PIECE),
    (actions.apply_move, GameActionType.APPLY_MOVE),
])
def test_position_action_creators(creator, kind):
    assert creator(Position(2, 3)) == GameAction(kind, Position(2, 3))


def test_mode_and_new_game_action_creators():
    assert actions.set_mode(GameMode.PLAYER_VS_COMPUTER) == GameAction(
        GameActionType.SET_MODE, GameMode.PLAYER_VS_COMPUTER)
    assert actions.new_game() == GameAction(GameActionType.NEW_GAME)


# ---------------------------------------------------------------------------
# Initial state
# ---------------------------------------------------------------------------

def test_initial_state():
    state = create_initial_game_state()
    assert state.current_player == STARTING_PLAYER == Color.DARK
    assert state.mode is None
    assert state.winner is None
    assert state.selected_piece is None
    assert state.forced_capture_key is None
    assert state.stats == {Color.DARK: PlayerStats(), Color.LIGHT: PlayerStats()}
    assert state.board == initial_board()


def test_state_rejects_malformed_board():
    with pytest.raises(ValueError):
        create_initial_game_state(board=[[None] * 8])


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def test_select_own_movable_piece():
    state = create_initial_game_state()
    selected = game_reducer(state, actions.select_piece(Position(1, 5)))
    assert selected.selected_piece == Piece(1, 5, Color.DARK)
    assert state.selected_piece is None


@pytest.mark.parametrize("at", [
    Position(0, 2),   # opponent piece
    Position(0, 6),   # own piece with no move
    Position(0, 4),   # empty square
    Position(9, 9),   # off the board
])
def test_select_invalid_piece_is_noop(at):
    state = create_initial_game_state()
    assert game_reducer(state, actions.select_piece(at)) is state


def test_deselect_selected_piece():
    state = game_reducer(create_initial_game_state(), actions.select_piece(Position(1, 5)))
    assert game_reducer(state, actions.deselect_piece(Position(3, 5))) is state
    cleared = game_reducer(state, actions.deselect_piece(Position(1, 5)))
    assert cleared.selected_piece is None


def test_deselect_without_selection_is_noop():
    state = create_initial_game_state()
    assert game_reducer(state, actions.deselect_piece(Position(1, 5))) is state


# ---------------------------------------------------------------------------
# Moves
# ---------------------------------------------------------------------------

def test_simple_opening_move():
    state = play(create_initial_game_state(), Position(1, 5), Position(0, 4))
    assert get_piece(state.board, Position(1, 5)) is None
    assert get_piece(state.board, Position(0, 4)) == Piece(0, 4, Color.DARK)
    assert state.current_player == Color.LIGHT
    assert state.stats[Color.DARK] == PlayerStats(moves=1, captures=0)
    assert state.stats[Color.LIGHT] == PlayerStats()
    assert state.selected_piece is None


def test_apply_move_without_selection_is_noop():
    state = create_initial_game_state()
    assert game_reducer(state, actions.apply_move(Position(0, 4))) is state


def test_apply_move_to_illegal_target_is_noop():
    state = game_reducer(create_initial_game_state(), actions.select_piece(Position(1, 5)))
    assert game_reducer(state, actions.apply_move(Position(1, 4))) is state
    assert game_reducer(state, actions.apply_move(Position(3, 3))) is state


def test_mandatory_capture_blocks_other_pieces():
    board = initial_board()
    place(board, 2, 4, Color.LIGHT)
    state = create_initial_game_state(board=board)

    assert game_reducer(state, actions.select_piece(Position(5, 5))) is state

    selected = game_reducer(state, actions.select_piece(Position(1, 5)))
    assert game_reducer(selected, actions.apply_move(Position(0, 4))) is selected

    after = game_reducer(selected, actions.apply_move(Position(3, 3)))
    assert get_piece(after.board, Position(2, 4)) is None
    assert get_piece(after.board, Position(3, 3)) == Piece(3, 3, Color.DARK)
    assert after.current_player == Color.LIGHT
    assert after.forced_capture_key is None
    assert after.stats[Color.DARK] == PlayerStats(moves=1, captures=1)


def test_double_jump():
    state = double_jump_state()

    first = play(state, Position(2, 2), Position(4, 4))
    assert first.forced_capture_key == "4:4"
    assert first.current_player == Color.DARK
    assert first.selected_piece == Piece(4, 4, Color.DARK, is_king=True)
    assert first.stats[Color.DARK] == PlayerStats(moves=0, captures=1)
    assert select_interactivity_state(first).selectable == {"4:4"}
    assert get_piece(first.board, Position(3, 3)) is None

    second = game_reducer(first, actions.apply_move(Position(6, 6)))
    assert second.forced_capture_key is None
    assert second.current_player == Color.LIGHT
    assert second.selected_piece is None
    assert get_piece(second.board, Position(3, 3)) is None
    assert get_piece(second.board, Position(5, 5)) is None
    assert get_piece(second.board, Position(6, 6)).color == Color.DARK
    assert second.stats[Color.DARK] == PlayerStats(moves=1, captures=2)
    assert second.winner is None


def test_forced_piece_cannot_be_deselected():
    first = play(double_jump_state(), Position(2, 2), Position(4, 4))
    assert game_reducer(first, actions.deselect_piece(Position(4, 4))) is first


def test_set_mode_clears_forced_capture():
    first = play(double_jump_state(), Position(2, 2), Position(4, 4))
    moded = game_reducer(first, actions.set_mode(GameMode.PLAYER_VS_PLAYER))
    assert moded.mode == GameMode.PLAYER_VS_PLAYER
    assert moded.forced_capture_key is None


def test_capturing_last_piece_wins_the_game():
    board = create_empty_board()
    place(board, 3, 5, Color.DARK)
    place(board, 2, 4, Color.LIGHT)
    state = play(create_initial_game_state(board=board), Position(3, 5), Position(1, 3))
    assert state.winner == Color.DARK
    assert state.current_player == Color.DARK
    assert state.selected_piece is None
    assert state.forced_capture_key is None
    assert state.stats[Color.DARK] == PlayerStats(moves=1, captures=1)


def test_blocking_step_wins_the_game():
    board = create_empty_board()
    place(board, 7, 7, Color.DARK)
    place(board, 5, 7, Color.DARK)
    place(board, 7, 5, Color.LIGHT)
    state = play(create_initial_game_state(board=board), Position(7, 7), Position(6, 6))
    assert state.winner == Color.DARK
    assert state.current_player == Color.DARK
    assert state.stats[Color.DARK] == PlayerStats(moves=1, captures=0)


def test_actions_ignored_after_game_over():
    state = create_initial_game_state(winner=Color.LIGHT)
    for action in (
        actions.select_piece(Position(1, 5)),
        actions.set_mode(GameMode.PLAYER_VS_PLAYER),
        actions.deselect_piece(Position(1, 5)),
    ):
        assert game_reducer(state, action) is state


def test_new_game_resets_everything_including_mode():
    state = create_initial_game_state(mode=GameMode.PLAYER_VS_COMPUTER)
    state = play(state, Position(1, 5), Position(0, 4))
    state = game_reducer(state, actions.select_piece(Position(0, 2)))
    over = game_reducer(state, actions.new_game())
    assert over.mode is None
    assert over.current_player == Color.DARK
    assert over.selected_piece is None
    assert over.stats == {Color.DARK: PlayerStats(), Color.LIGHT: PlayerStats()}
    assert over.board == initial_board()

    finished = create_initial_game_state(winner=DRAW)
    assert game_reducer(finished, actions.new_game()).winner is None
