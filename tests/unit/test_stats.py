"""
Unit tests for GameStats.
"""
from minesweeper import GameResult, GameStats

from conftest import FakeClock


class TestGameStats:
    """Test counters and timing."""

    def test_new_stats(self, fake_clock: FakeClock) -> None:
        stats = GameStats(clock=fake_clock)
        assert stats.moves_made == 0
        assert stats.mines_uncovered == 0
        assert stats.result == GameResult.IN_PROGRESS
        assert stats.start_time == 100.0
        assert stats.total_time is None

    def test_counters(self) -> None:
        stats = GameStats()
        stats.increment_moves_made()
        stats.increment_moves_made()
        stats.increment_mines_uncovered()
        assert stats.moves_made == 2
        assert stats.mines_uncovered == 1

    def test_elapsed_while_running(self, fake_clock: FakeClock) -> None:
        stats = GameStats(clock=fake_clock)
        fake_clock.now = 107.5
        assert stats.elapsed() == 7.5

    def test_end_game_freezes_time(self, fake_clock: FakeClock) -> None:
        stats = GameStats(clock=fake_clock)
        fake_clock.now = 112.0
        stats.end_game(GameResult.WON)
        fake_clock.now = 150.0
        assert stats.result == GameResult.WON
        assert stats.total_time == 12.0
        assert stats.elapsed() == 12.0

    def test_first_result_is_kept(self, fake_clock: FakeClock) -> None:
        stats = GameStats(clock=fake_clock)
        stats.end_game(GameResult.LOST)
        fake_clock.now = 130.0
        stats.end_game(GameResult.WON)
        assert stats.result == GameResult.LOST
        assert stats.total_time == 0.0

    def test_result_terminal_flags(self) -> None:
        assert GameResult.IN_PROGRESS.is_terminal is False
        assert GameResult.WON.is_terminal is True
        assert GameResult.LOST.is_terminal is True
