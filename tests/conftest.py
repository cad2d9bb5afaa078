"""Shared pytest fixtures."""

import pytest

from exec_assistant.processing.types import EmailInput
from exec_assistant.store.records import SEED_EMAILS, EmailStore


@pytest.fixture
def seed_emails() -> tuple[EmailInput, ...]:
    """The three sample emails: HR payroll, newsletter, security alert."""
    return SEED_EMAILS


@pytest.fixture
def store() -> EmailStore:
    return EmailStore()
