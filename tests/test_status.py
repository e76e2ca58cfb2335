import pytest

from mpdlink.errors import GenericError, ParseError
from mpdlink.status import OnOffOneshot, State, Status
from mpdlink.volume import Volume


def parse(*lines):
    status = Status()
    for line in lines:
        status.next(line)
    return status


def test_state_parse_and_display():
    assert State.parse("play") is State.PLAY
    assert str(State.PLAY) == "Playing"
    assert str(State.STOP) == "Stopped"
    assert str(State.PAUSE) == "Paused"


def test_state_parse_rejects_unknown():
    with pytest.raises(GenericError) as info:
        State.parse("bogus")
    assert info.value.message == "Invalid State: 'bogus'"


@pytest.mark.parametrize("mode", list(OnOffOneshot))
def test_on_off_oneshot_round_trip(mode):
    assert OnOffOneshot.parse(mode.to_mpd_value()) is mode


def test_on_off_oneshot_values():
    assert OnOffOneshot.ONESHOT.to_mpd_value() == "oneshot"
    assert str(OnOffOneshot.ONESHOT) == "OS"
    assert str(OnOffOneshot.ON) == "On"
    assert str(OnOffOneshot.OFF) == "Off"


def test_on_off_oneshot_parse_rejects_unknown():
    with pytest.raises(GenericError) as info:
        OnOffOneshot.parse("2")
    assert info.value.message == "Received unknown value for OnOffOneshot '2'"


def test_cycle_visits_every_mode():
    mode = OnOffOneshot.ON
    seen = []
    for _ in range(3):
        mode = mode.cycle()
        seen.append(mode)
    assert seen == [OnOffOneshot.OFF, OnOffOneshot.ONESHOT, OnOffOneshot.ON]


def test_cycle_pre_mpd_24_skips_oneshot():
    assert OnOffOneshot.ON.cycle_pre_mpd_24() is OnOffOneshot.OFF
    assert OnOffOneshot.OFF.cycle_pre_mpd_24() is OnOffOneshot.ON
    assert OnOffOneshot.ONESHOT.cycle_pre_mpd_24() is OnOffOneshot.OFF


def test_defaults():
    status = Status()
    assert status.state is State.STOP
    assert status.single is OnOffOneshot.OFF
    assert status.volume == Volume(0)


def test_parses_full_status():
    status = parse(
        "volume: 55",
        "repeat: 1",
        "random: 0",
        "single: oneshot",
        "consume: 1",
        "playlist: 7",
        "playlistlength: 12",
        "state: play",
        "song: 3",
        "songid: 4",
        "elapsed: 12.5",
        "duration: 200.25",
        "bitrate: 320",
        "audio: 44100:16:2",
        "time: 12:200",
    )
    assert status.volume == Volume(55)
    assert status.repeat is True
    assert status.random is False
    assert status.single is OnOffOneshot.ONESHOT
    assert status.consume is OnOffOneshot.ON
    assert status.playlist == 7
    assert status.playlistlength == 12
    assert status.state is State.PLAY
    assert (status.song, status.songid) == (3, 4)
    assert status.elapsed == 12.5
    assert status.duration == 200.25
    assert status.bitrate == 320
    assert status.audio == "44100:16:2"


def test_unknown_volume_becomes_zero():
    status = parse("volume: -1")
    assert status.volume == Volume(0)


def test_zero_bitrate_is_none():
    status = parse("bitrate: 320", "bitrate: 0")
    assert status.bitrate is None


def test_unknown_key_is_not_handled():
    assert Status().next_internal("nonsense", "1") is False


def test_invalid_state_raises():
    with pytest.raises(GenericError):
        parse("state: spinning")


def test_invalid_number_raises():
    with pytest.raises(ParseError):
        parse("playlistlength: many")


def test_negative_elapsed_raises():
    with pytest.raises(ParseError):
        parse("elapsed: -1.0")