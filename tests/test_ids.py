import re

from pipelines.ids import IdFactory


def test_ids_carry_prefix_and_digits(clock):
    ids = IdFactory(clock=clock)
    assert re.fullmatch(r"P-\d+", ids.new_id("P"))
    assert re.fullmatch(r"RES-\d+", ids.new_id("RES"))


def test_same_millisecond_still_yields_increasing_stamps(clock):
    ids = IdFactory(clock=clock)
    stamps = [ids.next_stamp() for _ in range(5)]
    assert stamps == sorted(stamps)
    assert len(set(stamps)) == 5
    assert stamps[0] == clock.now


def test_clock_stepping_back_does_not_reuse_stamps(clock):
    ids = IdFactory(clock=clock)
    first = ids.next_stamp()
    clock.advance(-500)
    assert ids.next_stamp() == first + 1


def test_clock_moving_forward_is_followed(clock):
    ids = IdFactory(clock=clock)
    ids.next_stamp()
    clock.advance(1000)
    assert ids.next_stamp() == clock.now
