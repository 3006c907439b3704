import io
import random
import sys

import pytest

from practicum.minesweeper import (
    EXPLODED,
    HIDDEN,
    MINE,
    TIME_LIMIT,
    WRONG_FLAG,
    Difficulty,
    Game,
    GameTimer,
    clamp_custom,
    main,
)
from practicum.records import DEFAULT_RECORDS, Records


class ScriptedRandom:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        if not 0 <= value < stop:
            raise ValueError("scripted value out of range")
        return value


def make_game(tmp_path, rows, columns, positions):
    values = [v for pos in positions for v in pos]
    records = Records(tmp_path / "records.txt")
    return Game(rows, columns, len(positions), ScriptedRandom(values), records)


def mine_positions(game):
    return {(c.row, c.column) for line in game.cells for c in line if c.has_mine}


def opened_positions(game):
    return {(c.row, c.column) for line in game.cells for c in line if c.opened}


def all_positions(game):
    return {(r, c) for r in range(game.rows) for c in range(game.columns)}


def test_default_game_is_beginner(tmp_path):
    game = Game(records=Records(tmp_path / "records.txt"))
    assert (game.rows, game.columns, game.mines) == (9, 12, 14)
    assert game.difficulty() is Difficulty.BEGINNER
    assert game.mines_left() == 14
    assert len(mine_positions(game)) == 14
    assert game.timer.label() == "Time:000"


def test_mines_placed_at_drawn_positions_skipping_repeats(tmp_path):
    records = Records(tmp_path / "records.txt")
    game = Game(3, 3, 2, ScriptedRandom([0, 0, 0, 0, 1, 1]), records)
    assert mine_positions(game) == {(0, 0), (1, 1)}


@pytest.mark.parametrize(
    "rows, columns, mines, expected",
    [
        (9, 12, 14, Difficulty.BEGINNER),
        (16, 16, 40, Difficulty.INTERMEDIATE),
        (16, 30, 99, Difficulty.EXPERT),
        (10, 10, 10, Difficulty.CUSTOM),
    ],
)
def test_difficulty_of_layout(rows, columns, mines, expected):
    assert Difficulty.of(rows, columns, mines) is expected


def test_preset_layout_round_trip():
    for difficulty in (Difficulty.BEGINNER, Difficulty.INTERMEDIATE, Difficulty.EXPERT):
        assert Difficulty.of(*difficulty.layout) is difficulty
    assert Difficulty.CUSTOM.layout is None


def test_too_many_mines_rejected(tmp_path):
    with pytest.raises(ValueError):
        Game(2, 2, 5, random.Random(1), Records(tmp_path / "records.txt"))


def test_out_of_bounds_cell(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0)])
    with pytest.raises(IndexError):
        game.open(3, 0)
    with pytest.raises(IndexError):
        game.toggle_flag(-1, 0)


def test_fresh_board_renders_hidden(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0)])
    assert game.render() == "\n".join([HIDDEN * 3] * 3)


def test_opening_empty_cell_floods(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0)])
    game.open(2, 2)
    assert opened_positions(game) == all_positions(game) - {(0, 0)}
    assert not game.lost
    assert not game.won


def test_opening_mine_loses(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0)])
    game.open(0, 0)
    assert game.lost
    assert all(c.blocked for line in game.cells for c in line)
    assert game.render().count(EXPLODED) == 1
    label = game.timer.label()
    game.timer.tick()
    assert game.timer.label() == label
    game.open(2, 2)
    assert not game.cells[2][2].opened


def test_flag_updates_counter_and_protects_cell(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0), (0, 2)])
    game.toggle_flag(2, 2)
    assert game.mines_left() == game.mines - 1
    game.open(2, 2)
    assert not game.cells[2][2].opened
    game.toggle_flag(2, 2)
    assert game.mines_left() == game.mines
    assert not game.cells[2][2].flagged


def test_flagging_all_mines_wins_and_saves_record(tmp_path):
    records = Records(tmp_path / "records.txt")
    game = Game(9, 12, 14, random.Random(7), records)
    for _ in range(5):
        game.timer.tick()
    for row, column in mine_positions(game):
        game.toggle_flag(row, column)
    assert game.won
    assert not game.timer.running
    assert all(c.blocked for line in game.cells for c in line)
    assert opened_positions(game) == all_positions(game) - mine_positions(game)
    assert records.best_time("Beginner") == game.timer.elapsed


def test_record_kept_when_not_faster(tmp_path):
    records = Records(tmp_path / "records.txt")
    records.update("Beginner", 3)
    game = Game(9, 12, 14, random.Random(11), records)
    for _ in range(5):
        game.timer.tick()
    for row, column in mine_positions(game):
        game.toggle_flag(row, column)
    assert game.won
    assert records.best_time("Beginner") == 3


def test_custom_win_leaves_records(tmp_path):
    game = make_game(tmp_path, 3, 3, [(1, 1)])
    game.toggle_flag(1, 1)
    assert game.won
    assert Records(tmp_path / "records.txt").read() == DEFAULT_RECORDS


def test_wrong_flag_prevents_win_and_shows_on_loss(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0), (0, 2)])
    game.toggle_flag(2, 2)
    game.toggle_flag(0, 0)
    assert not game.won
    game.open(0, 2)
    assert game.lost
    lines = game.render().splitlines()
    assert lines[2][2] == WRONG_FLAG
    assert lines[0][2] == EXPLODED
    game.toggle_flag(0, 0)
    assert game.cells[0][0].flagged


def test_loss_reveals_unflagged_mines(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0), (2, 2)])
    game.open(0, 0)
    lines = game.render().splitlines()
    assert lines[0][0] == EXPLODED
    assert lines[2][2] == MINE


def test_chord_opens_neighbours_when_flags_match(tmp_path):
    game = make_game(tmp_path, 3, 4, [(0, 0), (2, 3)])
    game.open(1, 1)
    assert opened_positions(game) == {(1, 1)}
    game.toggle_flag(0, 0)
    game.chord(1, 1)
    assert not game.lost
    neighbours = {(r, c) for r in range(3) for c in range(3)} - {(0, 0)}
    assert neighbours <= opened_positions(game)


def test_open_on_opened_cell_chords(tmp_path):
    game = make_game(tmp_path, 3, 4, [(0, 0), (2, 3)])
    game.open(1, 1)
    game.toggle_flag(0, 0)
    game.open(1, 1)
    assert game.cells[2][0].opened
    assert not game.lost


def test_chord_needs_matching_flags(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0), (2, 2)])
    game.open(1, 1)
    game.toggle_flag(0, 0)
    game.chord(1, 1)
    assert not game.cells[0][1].opened
    assert not game.lost


def test_chord_with_wrong_flag_hits_mine(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0), (2, 2)])
    game.open(1, 1)
    game.toggle_flag(0, 0)
    game.toggle_flag(0, 1)
    game.chord(1, 1)
    assert game.lost


def test_restart_resets_state(tmp_path):
    records = Records(tmp_path / "records.txt")
    game = Game(9, 12, 14, random.Random(3), records)
    game.timer.tick()
    first_mine = next(iter(mine_positions(game)))
    game.open(*first_mine)
    assert game.lost
    game.restart(16, 16, 40)
    assert not game.lost
    assert game.difficulty() is Difficulty.INTERMEDIATE
    assert game.mines_left() == 40
    assert len(mine_positions(game)) == 40
    assert game.timer.label() == "Time:000"
    assert game.timer.running


def test_timer_counts_only_while_running():
    timer = GameTimer()
    timer.tick()
    assert timer.elapsed == 0
    timer.start()
    for _ in range(3):
        timer.tick()
    assert timer.elapsed == 3
    timer.stop()
    timer.tick()
    assert timer.elapsed == 3
    timer.reset()
    assert timer.label() == "Time:000"


def test_timer_stops_at_limit():
    timer = GameTimer()
    calls = []
    timer.on_time_up = lambda: calls.append(timer.elapsed)
    timer.start()
    results = [timer.tick() for _ in range(TIME_LIMIT)]
    assert results[-1] is True
    assert not any(results[:-1])
    assert timer.label() == "Time:999"
    assert not timer.running
    assert calls == [TIME_LIMIT]


def test_time_limit_loses_game(tmp_path):
    game = make_game(tmp_path, 3, 3, [(0, 0)])
    for _ in range(TIME_LIMIT):
        game.timer.tick()
    assert game.lost
    assert game.cells[0][0].opened


def test_clamp_custom_lower_bounds():
    assert clamp_custom(0, 0, 0) == (9, 9, 1)


def test_clamp_custom_upper_bounds():
    rows, columns, mines = clamp_custom(100, 100, 100000)
    assert (rows, columns) == (24, 36)
    assert mines == rows * columns - 1


def test_clamp_custom_keeps_valid_values():
    assert clamp_custom(12, 20, 30) == (12, 20, 30)


def test_main_shows_board_and_quits(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("q\n"))
    path = tmp_path / "records.txt"
    code = main(["--custom", "0", "0", "0", "--seed", "1", "--records", str(path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Mines:1" in out
    assert "Time:000" in out
    assert out.splitlines().count(HIDDEN * 9) == 9