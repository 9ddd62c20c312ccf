"""Tests for the opaque identifier and timestamp types."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from pushbullet_types.identifiers import DeviceId, PushbulletTime, PushId, UserId


class TestStringIdentifiers:
    """Tests for string-backed identifiers."""

    def test_value_equality(self):
        assert DeviceId("d1") == DeviceId("d1")
        assert DeviceId("d1") != DeviceId("d2")
        assert hash(DeviceId("d1")) == hash(DeviceId("d1"))

    def test_distinct_types_never_equal(self):
        assert DeviceId("x") != UserId("x")

    def test_str(self):
        assert str(PushId("ujpah72o0sjAoRtnM0jc")) == "ujpah72o0sjAoRtnM0jc"

    def test_json(self):
        assert PushId.model_validate("p1") == PushId("p1")
        assert PushId("p1").model_dump(mode="json") == "p1"
        assert PushId("p1").model_dump_json() == '"p1"'

    @pytest.mark.parametrize("value", [12, None, ["p1"], True])
    def test_rejects_non_strings(self, value):
        with pytest.raises(ValidationError):
            PushId.model_validate(value)

    def test_url_piece(self):
        assert PushId("ujpah72o0sjAoRtnM0jc").to_url_piece() == "ujpah72o0sjAoRtnM0jc"
        assert PushId("a/b c").to_url_piece() == "a%2Fb%20c"


class TestPushbulletTime:
    """Tests for PushbulletTime."""

    def test_from_seconds(self):
        time = PushbulletTime.model_validate(1412047948.579029)
        assert time.root == datetime.fromtimestamp(1412047948.579029, tz=UTC)

    def test_from_integer_seconds(self):
        assert PushbulletTime(0).root == datetime(1970, 1, 1, tzinfo=UTC)

    def test_to_seconds(self):
        time = PushbulletTime(1430000000.25)
        assert time.model_dump(mode="json") == 1430000000.25
        assert float(time) == 1430000000.25

    def test_naive_datetime_assumed_utc(self):
        time = PushbulletTime(datetime(2015, 1, 1))
        assert time.root.utcoffset() == timedelta(0)

    @pytest.mark.parametrize("value", ["1412047948", True, None, [1.0]])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError):
            PushbulletTime.model_validate(value)

    @pytest.mark.parametrize("value", [1e20, -1e20, float("inf"), float("-inf"), float("nan")])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValidationError, match="timestamp out of range"):
            PushbulletTime.model_validate(value)

    def test_equality_by_value(self):
        assert PushbulletTime(1.0) == PushbulletTime(1.0)
        assert PushbulletTime(1.0) != PushbulletTime(2.0)
