"""Tests for Condition parsing and rendering."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from xready.core.domain.conditions import (
    Condition,
    ConditionReason,
    ConditionStatus,
    Readiness,
)
from xready.core.errors import ConditionFormatError, ErrorCode


class TestFromDict:
    def test_full_condition(self):
        cond = Condition.from_dict(
            {
                "type": "Ready",
                "status": "False",
                "reason": "ReconcileError",
                "message": "boom",
                "lastTransitionTime": "2024-05-01T12:00:00Z",
            }
        )

        assert cond.type == "Ready"
        assert cond.status == "False"
        assert cond.reason == "ReconcileError"
        assert cond.message == "boom"
        assert cond.last_transition_time == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

    def test_optional_fields_default_to_empty(self):
        """type/reason/message 누락 → 빈 문자열."""
        cond = Condition.from_dict({"status": "True"})

        assert cond.type == ""
        assert cond.reason == ""
        assert cond.message == ""
        assert cond.last_transition_time is None

    def test_mistyped_optional_fields_default_to_empty(self):
        cond = Condition.from_dict(
            {"status": "True", "type": 1, "reason": ["x"], "message": None}
        )

        assert cond.type == ""
        assert cond.reason == ""
        assert cond.message == ""

    def test_invalid_timestamp_is_ignored(self):
        cond = Condition.from_dict({"status": "True", "lastTransitionTime": "yesterday"})

        assert cond.last_transition_time is None

    def test_unrecognised_status_is_kept(self):
        cond = Condition.from_dict({"status": "Maybe"})

        assert cond.status == "Maybe"
        assert cond.is_true() is False

    @pytest.mark.parametrize("data", [None, "Ready", 3, ["status", "True"]])
    def test_non_map_raises(self, data):
        with pytest.raises(ConditionFormatError) as exc_info:
            Condition.from_dict(data)

        assert exc_info.value.code == ErrorCode.CONDITION_FORMAT_INVALID

    @pytest.mark.parametrize(
        "data",
        [{}, {"type": "Ready"}, {"status": True}, {"status": None}, {"status": 1}],
    )
    def test_missing_or_mistyped_status_raises(self, data):
        with pytest.raises(ConditionFormatError):
            Condition.from_dict(data)


class TestPredicates:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [("True", True), ("False", False), ("Unknown", False), ("true", False)],
    )
    def test_is_true(self, status, expected):
        assert Condition(status=status).is_true() is expected

    def test_is_creating_requires_ready_type(self):
        assert Condition(type="Ready", status="False", reason="Creating").is_creating() is True
        assert Condition(type="Synced", status="False", reason="Creating").is_creating() is False
        assert Condition(type="Ready", status="False", reason="Deleting").is_creating() is False


class TestToDict:
    def test_renders_wire_form(self):
        ts = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        cond = Condition(
            type="NoErrors",
            status=ConditionStatus.FALSE,
            reason=ConditionReason.RECONCILE_ERROR,
            message="m",
            last_transition_time=ts,
        )

        assert cond.to_dict() == {
            "type": "NoErrors",
            "status": "False",
            "reason": "ReconcileError",
            "message": "m",
            "lastTransitionTime": "2024-05-01T12:00:00+00:00",
        }

    def test_naive_time_is_rendered_as_utc(self):
        cond = Condition(status="True", last_transition_time=datetime(2024, 1, 1))

        assert cond.to_dict()["lastTransitionTime"] == "2024-01-01T00:00:00+00:00"

    def test_offset_time_is_converted_to_utc(self):
        ts = datetime(2024, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=9)))
        cond = Condition(status="True", last_transition_time=ts)

        assert cond.to_dict()["lastTransitionTime"] == "2024-01-01T00:00:00+00:00"

    def test_omits_missing_time(self):
        assert "lastTransitionTime" not in Condition(status="True").to_dict()

    def test_condition_is_frozen(self):
        cond = Condition(status="True")

        with pytest.raises(Exception):
            cond.status = "False"  # type: ignore[misc]


class TestReadiness:
    def test_wire_values(self):
        assert Readiness.UNSPECIFIED.value == "READY_UNSPECIFIED"
        assert Readiness.TRUE.value == "READY_TRUE"
        assert Readiness.FALSE.value == "READY_FALSE"
