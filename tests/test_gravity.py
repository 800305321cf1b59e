from falling_blocks.game import GravityScheduler


def test_drop_due_only_after_interval_is_exceeded():
    gravity = GravityScheduler(1000)
    assert not gravity.advance(600)
    assert not gravity.advance(400)
    assert gravity.accumulator_ms == 1000
    assert gravity.advance(1)


def test_reset_clears_accumulator():
    gravity = GravityScheduler(100)
    gravity.advance(150)
    gravity.reset()
    assert gravity.accumulator_ms == 0
    assert not gravity.advance(50)


def test_timestamps_use_first_frame_as_base():
    gravity = GravityScheduler(1000)
    assert not gravity.advance_to(50_000)
    assert not gravity.advance_to(50_900)
    assert gravity.advance_to(51_001)


def test_rebase_discards_time_between_frames():
    gravity = GravityScheduler(1000)
    gravity.advance_to(0)
    gravity.advance_to(500)
    gravity.rebase()
    assert not gravity.advance_to(90_000)
    assert gravity.accumulator_ms == 500


def test_negative_elapsed_is_ignored():
    gravity = GravityScheduler(1000)
    gravity.advance(-300)
    assert gravity.accumulator_ms == 0
