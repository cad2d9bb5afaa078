"""Tests for processing type definitions and priority labels."""

import pytest

from exec_assistant.processing.types import (
    EDITABLE_FIELDS,
    PRIORITY_LABEL,
    EmailAnalysis,
    EmailInput,
    Priority,
)


class TestPriority:
    def test_values_run_low_to_urgent(self) -> None:
        assert [p.value for p in Priority] == [1, 2, 3, 4, 5]
        assert Priority(1) is Priority.LOW
        assert Priority(5) is Priority.URGENT

    def test_is_int_enum(self) -> None:
        assert Priority.HIGH > Priority.NORMAL

    def test_all_priorities_have_a_label(self) -> None:
        assert [PRIORITY_LABEL[p] for p in Priority] == [
            "Low", "Normal", "Elevated", "High", "Urgent",
        ]


class TestEmailInput:
    def test_editable_fields(self) -> None:
        assert EDITABLE_FIELDS == ("sender", "subject", "body")

    def test_is_frozen(self) -> None:
        email = EmailInput(id="1", sender="a", subject="b", body="c")
        with pytest.raises((AttributeError, TypeError)):
            email.sender = "other"  # type: ignore[misc]


class TestEmailAnalysis:
    def test_priority_property(self) -> None:
        a = EmailAnalysis(summary="One sentence.", priority_score=4)
        assert a.priority is Priority.HIGH

    def test_to_dict_uses_wire_names(self) -> None:
        a = EmailAnalysis(summary="One sentence.", priority_score=2)
        assert a.to_dict() == {"summary": "One sentence.", "priorityScore": 2}
