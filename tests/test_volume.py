import pytest

from mpdlink.errors import ParseError
from mpdlink.volume import Volume


def test_constructor_clamps_to_maximum():
    assert Volume(150).value == 100


def test_constructor_clamps_to_minimum():
    assert Volume(-5).value == 0


def test_set_value_clamps():
    volume = Volume(10)
    volume.set_value(300)
    assert volume == Volume(100)


def test_inc_then_dec_round_trips():
    volume = Volume(50)
    volume.inc().dec()
    assert volume.value == 50


def test_inc_stops_at_maximum():
    volume = Volume(100)
    volume.inc()
    assert volume.value == 100


def test_dec_stops_at_minimum():
    volume = Volume(0)
    volume.dec()
    assert volume.value == 0


def test_inc_increases():
    volume = Volume(50)
    volume.inc()
    assert volume.value > 50


def test_inc_by_saturates():
    volume = Volume(50)
    volume.inc_by(200)
    assert volume.value == 100


def test_dec_by_saturates():
    volume = Volume(50)
    volume.dec_by(200)
    assert volume.value == 0


def test_inc_by_and_dec_by_round_trip():
    volume = Volume(40)
    volume.inc_by(20).dec_by(20)
    assert volume.value == 40


def test_next_reads_volume_line():
    volume = Volume()
    volume.next("volume: 42")
    assert volume.value == 42


def test_next_internal_ignores_other_keys():
    volume = Volume(30)
    assert volume.next_internal("other", "1") is False
    assert volume.value == 30


def test_next_internal_rejects_negative():
    with pytest.raises(ParseError):
        Volume().next_internal("volume", "-1")