"""Types for the email summarisation and prioritisation pipeline."""

from dataclasses import dataclass
from enum import Enum


class Priority(int, Enum):
    """Email priority, from least to most urgent.

    Integer values are the ``priorityScore`` the model returns, so a score
    converts with ``Priority(score)`` without a separate mapping step.
    """

    LOW = 1
    NORMAL = 2
    ELEVATED = 3
    HIGH = 4
    URGENT = 5


PRIORITY_LABEL: dict[Priority, str] = {
    Priority.LOW: "Low",
    Priority.NORMAL: "Normal",
    Priority.ELEVATED: "Elevated",
    Priority.HIGH: "High",
    Priority.URGENT: "Urgent",
}

#: Editable fields of an EmailInput.
EDITABLE_FIELDS: tuple[str, ...] = ("sender", "subject", "body")


# ── Input ──────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EmailInput:
    """One editable email-like record supplied by the user.

    ``id`` is opaque and must stay constant across edits; results are merged
    back onto the request snapshot by position.
    """

    id: str
    sender: str
    subject: str
    body: str


# ── Analysis result ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EmailAnalysis:
    """Summary and priority produced by the model for a single email."""

    summary: str          # exactly one sentence
    priority_score: int   # 1 (low) → 5 (urgent)

    @property
    def priority(self) -> Priority:
        return Priority(self.priority_score)

    def to_dict(self) -> dict[str, object]:
        return {"summary": self.summary, "priorityScore": self.priority_score}


@dataclass(frozen=True)
class AnalysisResult:
    """An EmailInput merged with its EmailAnalysis, ready for display.

    Transient: the whole result set is rebuilt after every successful run.
    """

    email: EmailInput
    analysis: EmailAnalysis

    @property
    def id(self) -> str:
        return self.email.id

    @property
    def sender(self) -> str:
        return self.email.sender

    @property
    def subject(self) -> str:
        return self.email.subject

    @property
    def summary(self) -> str:
        return self.analysis.summary

    @property
    def priority_score(self) -> int:
        return self.analysis.priority_score

    @property
    def priority_label(self) -> str:
        return PRIORITY_LABEL[self.analysis.priority]

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "sender": self.sender,
            "subject": self.subject,
            **self.analysis.to_dict(),
        }
