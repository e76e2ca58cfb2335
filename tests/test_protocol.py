import logging
from dataclasses import dataclass

import pytest

from mpdlink.errors import GenericError, ValueExpectedError
from mpdlink.protocol import FromMpd, split_line


@dataclass
class _Pair(FromMpd):
    val_a: str = ""
    val_b: str = ""

    def next_internal(self, key, value):
        if key == "fail":
            raise GenericError("intentional fail")
        if key == "val_a":
            self.val_a = value
        elif key == "val_b":
            self.val_b = value
        else:
            return False
        return True


def test_split_line():
    assert split_line("file: a.flac") == ("file", "a.flac")


def test_split_line_keeps_later_colons():
    assert split_line("Last-Modified: 2022-12-24T13:02:09Z") == ("Last-Modified", "2022-12-24T13:02:09Z")


def test_split_line_without_separator():
    with pytest.raises(ValueExpectedError) as excinfo:
        split_line("idc")
    assert excinfo.value.value == "idc"


def test_next_fills_fields():
    pair = _Pair()
    FromMpd.next(pair, "val_b: a")
    FromMpd.next(pair, "val_a: 5")
    assert pair == _Pair(val_a="5", val_b="a")


def test_next_lowercases_key():
    pair = _Pair()
    FromMpd.next(pair, "VAL_A: x")
    assert pair.val_a == "x"


def test_next_logs_unknown_pair(caplog):
    pair = _Pair()
    with caplog.at_level(logging.WARNING):
        FromMpd.next(pair, "Val_C: something")
    assert "Val_C" in caplog.text
    assert pair == _Pair()


def test_next_propagates_errors():
    with pytest.raises(GenericError) as excinfo:
        _Pair().next("fail: lol")
    assert excinfo.value == GenericError("intentional fail")


def test_from_mpd_is_abstract():
    with pytest.raises(TypeError):
        FromMpd()