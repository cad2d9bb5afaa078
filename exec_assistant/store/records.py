"""In-memory store for the editable email records."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable

from exec_assistant.processing.types import EDITABLE_FIELDS, EmailInput

logger = logging.getLogger(__name__)

#: Called with the store after every change.
Listener = Callable[["EmailStore"], None]


SEED_EMAILS: tuple[EmailInput, ...] = (
    EmailInput(
        id="1",
        sender="Sarah Jenkins (HR)",
        subject="Urgent: Payroll Discrepancy for Q3",
        body=(
            "Hello, we noticed a major error in the payroll calculations for the "
            "executive team. We need your approval to correct this by end of day "
            "to ensure everyone is paid correctly tomorrow."
        ),
    ),
    EmailInput(
        id="2",
        sender="John Doe (Marketing)",
        subject="Newsletter Draft for October",
        body=(
            "Hi, here is the first draft of our upcoming newsletter. Please take a "
            "look whenever you have a chance this week. No rush on the feedback."
        ),
    ),
    EmailInput(
        id="3",
        sender="Security Alerts",
        subject="Unauthorized Login Attempt Detected",
        body=(
            "Alert: An unrecognized device attempted to log into your account from "
            "a location in Eastern Europe. If this was not you, please secure your "
            "account immediately."
        ),
    ),
)


class EmailStore:
    """Holds the ordered list of EmailInput records being edited.

    Records are immutable; an edit swaps in a copy with one field replaced, so
    a snapshot taken before an analysis run is never affected by later typing.
    """

    def __init__(self, emails: Iterable[EmailInput] = SEED_EMAILS) -> None:
        self._emails: list[EmailInput] = list(emails)
        ids = [e.id for e in self._emails]
        if len(set(ids)) != len(ids):
            raise ValueError(f"email ids must be unique: {ids!r}")
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._emails)

    def snapshot(self) -> tuple[EmailInput, ...]:
        """Return the current records in order."""
        return tuple(self._emails)

    def get(self, email_id: str) -> EmailInput | None:
        return next((e for e in self._emails if e.id == email_id), None)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def update(self, email_id: str, field: str, value: str) -> bool:
        """Replace one field of the record with ``email_id``.

        Returns False, changing nothing, when no record has that id.

        Raises:
            ValueError: if ``field`` is not one of sender, subject or body.
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"unknown email field {field!r}")
        for i, email in enumerate(self._emails):
            if email.id == email_id:
                self._emails[i] = dataclasses.replace(email, **{field: value})
                break
        else:
            logger.debug("Ignoring edit for unknown email id %r", email_id)
            return False

        for listener in self._listeners:
            listener(self)
        return True
