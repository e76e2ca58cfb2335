import pytest

from mpdlink.errors import ParseError
from mpdlink.update import Update


def test_default_job_id():
    assert Update().job_id == 0


def test_other_values_not_handled():
    update = Update()
    assert update.next_internal("updating_db", "5") is False
    assert update == Update()


def test_matching_value_fails_to_parse():
    with pytest.raises(ParseError) as info:
        Update().next_internal("key", "updating_db")
    assert info.value.message == "invalid digit found in string"