import pytest

from minesweeper.clock import GameClock, clock_digits
from minesweeper.config import GameConfig
from minesweeper.game import Button, Face, Game, Layout


class _KeepOrder:
    """Shuffler that leaves tiles in row-major order, so mines fill from (0, 0)."""

    def shuffle(self, items):
        pass


class _Timer:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _game(columns=3, rows=3, mines=1):
    timer = _Timer()
    clock = GameClock(timer=timer)
    game = Game(GameConfig(columns=columns, rows=rows, mines=mines), _KeepOrder(), clock)
    return game, timer


def _pixel(x, y):
    return x * 32 + 5, y * 32 + 5


def test_layout_debug_button_position():
    layout = Layout(25, 16)
    assert layout.buttons[Button.DEBUG] == (496, 528)


def test_layout_button_at_finds_each_button():
    layout = Layout(25, 16)
    for button, (x, y) in layout.buttons.items():
        assert layout.button_at(x + 1, y + 1) is button


def test_layout_button_at_board_is_none():
    layout = Layout(25, 16)
    assert layout.button_at(0, 0) is None
    assert layout.button_at(100, 100) is None


def test_layout_clock_positions_share_row_and_pairs_adjacent():
    positions = Layout(25, 16).clock_positions()
    assert len(positions) == 4
    assert len({y for _, y in positions}) == 1
    assert positions[1][0] - positions[0][0] == 21
    assert positions[3][0] - positions[2][0] == 21
    assert positions[0][1] > 16 * 32


def test_layout_tile_at():
    layout = Layout(4, 3)
    assert layout.tile_at(*_pixel(3, 2)) == (3, 2)
    assert layout.tile_at(4 * 32, 0) is None
    assert layout.tile_at(0, 3 * 32) is None
    assert layout.tile_at(-1, 0) is None


def test_new_game_is_happy_and_unrevealed():
    game, _ = _game()
    assert game.face() is Face.HAPPY
    assert game.board.revealed_count() == 0
    assert sum(t.mine for t in game.board) == 1


def test_too_many_mines_rejected():
    with pytest.raises(ValueError):
        _game(columns=2, rows=2, mines=5)


def test_clicking_mine_loses():
    game, _ = _game()
    game.left_click(*_pixel(0, 0))
    assert game.game_over
    assert not game.won
    assert game.debug
    assert game.face() is Face.LOSE


def test_flood_reveal_wins():
    game, _ = _game()
    game.left_click(*_pixel(2, 2))
    assert game.board.revealed_count() == 8
    assert game.won
    assert game.face() is Face.WIN
    assert not game.debug


def test_win_stops_the_clock():
    game, timer = _game()
    timer.now = 12.0
    game.left_click(*_pixel(2, 2))
    timer.now = 500.0
    assert game.clock_digits() == clock_digits(12)
    assert game.clock.paused()


def test_clicks_after_game_over_do_nothing():
    game, _ = _game(columns=3, rows=3, mines=2)
    game.left_click(*_pixel(0, 0))
    before = game.board.revealed_count()
    game.left_click(*_pixel(2, 2))
    assert game.board.revealed_count() == before
    assert game.face() is Face.LOSE


def test_partial_reveal_does_not_win():
    game, _ = _game(columns=3, rows=3, mines=1)
    game.left_click(*_pixel(1, 1))
    assert game.board.revealed_count() == 1
    assert not game.game_over
    assert game.face() is Face.HAPPY


def test_right_click_toggles_flag():
    game, _ = _game()
    game.right_click(*_pixel(1, 2))
    assert game.board.tile(1, 2).flagged
    game.right_click(*_pixel(1, 2))
    assert not game.board.tile(1, 2).flagged


def test_right_click_outside_board_is_ignored():
    game, _ = _game()
    game.right_click(5, 3 * 32 + 50)
    assert not any(t.flagged for t in game.board)


def test_toggle_debug_flips_during_play():
    game, _ = _game()
    assert game.toggle_debug() is True
    assert game.toggle_debug() is False


def test_debug_fixed_after_win_and_loss():
    won, _ = _game()
    won.left_click(*_pixel(2, 2))
    assert won.toggle_debug() is False
    assert won.toggle_debug() is False

    lost, _ = _game()
    lost.left_click(*_pixel(0, 0))
    assert lost.toggle_debug() is True
    assert lost.toggle_debug() is True


def test_debug_button_click():
    game, _ = _game(columns=20, rows=5, mines=0)
    x, y = game.layout.buttons[Button.DEBUG]
    game.left_click(x + 2, y + 2)
    assert game.debug
    assert game.board.revealed_count() == 0


def test_pause_button_click_freezes_clock():
    game, timer = _game(columns=20, rows=5, mines=3)
    timer.now = 7.0
    x, y = game.layout.buttons[Button.PAUSE]
    game.left_click(x + 2, y + 2)
    timer.now = 100.0
    assert game.clock.paused()
    assert game.clock_digits() == clock_digits(7)


def test_toggle_pause_resumes_and_accumulates():
    game, timer = _game()
    timer.now = 5.0
    assert game.toggle_pause() is True
    timer.now = 40.0
    assert game.toggle_pause() is False
    timer.now = 43.0
    assert game.clock_digits() == clock_digits(8)


def test_toggle_pause_ignored_after_game_over():
    game, _ = _game()
    game.left_click(*_pixel(0, 0))
    assert game.toggle_pause() is True
    assert game.toggle_pause() is True