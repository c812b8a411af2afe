from __future__ import annotations

import random

from config.settings import PacingConfig
from services.pacing import (
    HumanPacer,
    LongPauseBand,
    jitter_delay,
    micro_interaction_hint,
    short_break_schedule,
    should_take_long_pause,
)

from fakes import FakeNavigator


def test_jitter_delay_stays_in_inclusive_band():
    rng = random.Random(7)
    values = [jitter_delay(300, 800, rng) for _ in range(500)]
    assert min(values) >= 300 and max(values) <= 800
    assert jitter_delay(500, 500, rng) == 500


def test_jitter_delay_accepts_reversed_bounds():
    rng = random.Random(1)
    assert 200 <= jitter_delay(600, 200, rng) <= 600


def test_first_item_never_takes_long_pause():
    band = short_break_schedule()
    rng = random.Random(3)
    assert not any(should_take_long_pause(0, band, rng) for _ in range(50))


def test_long_pause_follows_divisor_band():
    band = LongPauseBand(every_min=3, every_max=3, pause_min_ms=1, pause_max_ms=2)
    due = [i for i in range(10) if should_take_long_pause(i, band, random.Random(0))]
    assert due == [3, 6, 9]


def test_schedule_reads_pacing_config():
    band = short_break_schedule(PacingConfig(long_pause_every_min=2, long_pause_every_max=4, long_pause_min_ms=10, long_pause_max_ms=20))
    assert (band.every_min, band.every_max, band.pause_min_ms, band.pause_max_ms) == (2, 4, 10, 20)


def test_pointer_hint_inside_viewport():
    rng = random.Random(11)
    for _ in range(100):
        hint = micro_interaction_hint(1280, 800, rng)
        assert 0 <= hint.x < 1280 and 0 <= hint.y < 800
        assert 5 <= hint.steps <= 15


def test_human_pacer_sleeps_within_configured_bands():
    slept = []
    pacer = HumanPacer(PacingConfig(item_delay_min_ms=1500, item_delay_max_ms=4000), rng=random.Random(5), sleep=slept.append)
    pacer.item_delay()
    pacer.page_break()
    pacer.wait(250)
    assert 1.5 <= slept[0] <= 4.0
    assert 3.0 <= slept[1] <= 8.0
    assert slept[2] == 0.25


def test_pointer_failures_are_ignored():
    class Broken(FakeNavigator):
        def move_pointer(self, x, y, steps):
            raise RuntimeError("page closed")

    pacer = HumanPacer(PacingConfig(), rng=random.Random(2), sleep=lambda s: None)
    pacer.interact(Broken())
