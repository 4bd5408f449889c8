"""Height sources never go backwards."""

import pytest

from ecostay.core.height import ManualHeightSource, WallClockHeightSource


def test_wall_clock_height_from_genesis():
    now = [1_000_000.0]
    source = WallClockHeightSource(
        genesis_timestamp=1_000_000 - 6000, block_interval_seconds=600, time_fn=lambda: now[0]
    )
    assert source.current_height() == 10
    now[0] += 600
    assert source.current_height() == 11


def test_wall_clock_height_does_not_rewind():
    now = [10_000.0]
    source = WallClockHeightSource(0, 100, time_fn=lambda: now[0])
    assert source.current_height() == 100
    now[0] = 5_000.0  # clock stepped back
    assert source.current_height() == 100


def test_wall_clock_before_genesis_is_zero():
    source = WallClockHeightSource(5_000, 100, time_fn=lambda: 1_000.0)
    assert source.current_height() == 0


def test_wall_clock_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        WallClockHeightSource(0, 0)


def test_manual_height_advances_and_refuses_decrease():
    source = ManualHeightSource(5)
    assert source.advance(3) == 8
    source.set(8)
    with pytest.raises(ValueError):
        source.set(7)
    assert source.current_height() == 8
