import pytest

from falling_blocks.game import ScoreKeeper, ScoringRules, clear_lines

from conftest import fill_row


def test_drop_interval_follows_level():
    rules = ScoringRules()
    assert rules.drop_interval_ms(1) == 1000
    assert rules.drop_interval_ms(2) == 900
    assert rules.drop_interval_ms(10) == 100
    assert rules.drop_interval_ms(11) == 100
    assert rules.drop_interval_ms(50) == 100


def test_drop_interval_never_increases_with_level():
    rules = ScoringRules()
    intervals = [rules.drop_interval_ms(level) for level in range(1, 40)]
    assert intervals == sorted(intervals, reverse=True)
    assert min(intervals) == 100


@pytest.mark.parametrize("lines_before, level_before", [(0, 1), (9, 1), (18, 2), (37, 4)])
@pytest.mark.parametrize("cleared", [1, 2, 3, 4])
def test_register_clears_scores_at_level_before_increment(lines_before, level_before, cleared):
    keeper = ScoreKeeper(lines=lines_before, level=level_before, score=500)
    gained = keeper.register_clears(cleared)
    assert gained == cleared * 100 * level_before
    assert keeper.score == 500 + gained
    assert keeper.lines == lines_before + cleared
    assert keeper.level == (lines_before + cleared) // 10 + 1


def test_zero_clears_change_nothing():
    keeper = ScoreKeeper(score=300, lines=4, level=1)
    assert keeper.register_clears(0) == 0
    assert (keeper.score, keeper.lines, keeper.level) == (300, 4, 1)


def test_level_up_shortens_interval():
    keeper = ScoreKeeper(lines=9)
    assert keeper.drop_interval_ms == 1000
    keeper.register_clears(1)
    assert keeper.level == 2
    assert keeper.drop_interval_ms == 900


def test_clear_lines_pass(board):
    keeper = ScoreKeeper()
    fill_row(board, 19)
    fill_row(board, 17)
    fill_row(board, 18, skip={3})
    assert clear_lines(board, keeper) == 2
    assert keeper.score == 200
    assert keeper.lines == 2
    assert not board.is_row_full(19)
