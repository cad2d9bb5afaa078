"""Anthropic tool definition and prompt builder for batch email analysis."""

from collections.abc import Sequence
from typing import Any

from exec_assistant.processing.types import EmailInput

TOOL_NAME = "record_email_analyses"


# ── Tool definition ────────────────────────────────────────────────────────────

#: Structured-output schema declared to the model as a forced tool call.
#: ``analyses`` holds one entry per email, in the order the emails were sent.
ANALYSIS_TOOL: dict[str, Any] = {
    "name": TOOL_NAME,
    "description": "Record a summary and priority score for each email, in order.",
    "input_schema": {
        "type": "object",
        "properties": {
            "analyses": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "summary": {
                            "type": "string",
                            "description": "A one-sentence summary of the email.",
                        },
                        "priorityScore": {
                            "type": "number",
                            "description": "Priority from 1 to 5.",
                        },
                    },
                    "required": ["summary", "priorityScore"],
                },
            },
        },
        "required": ["analyses"],
    },
}


# ── Prompt builder ─────────────────────────────────────────────────────────────


def format_email(index: int, email: EmailInput) -> str:
    """Render one email as the numbered block embedded in the prompt."""
    return (
        f"Email {index}:\n"
        f"From: {email.sender}\n"
        f"Subject: {email.subject}\n"
        f"Body: {email.body}"
    )


def build_prompt(emails: Sequence[EmailInput]) -> str:
    """Build the instruction text for analysing every email in one request.

    The email count is taken from the input so the instructions always agree
    with the number of blocks that follow.
    """
    blocks = "\n\n".join(format_email(i, e) for i, e in enumerate(emails, start=1))
    return (
        f"Analyze the following {len(emails)} emails and provide a high-level "
        "summary and priority score (1-5) for each.\n"
        "Rules:\n"
        "1. Summary must be exactly one sentence.\n"
        "2. Priority score from 1 (Low) to 5 (Urgent).\n"
        "3. No hallucination.\n"
        f"4. Return exactly {len(emails)} analyses, in the same order as the emails.\n\n"
        f"Call {TOOL_NAME} with your findings.\n\n"
        f"Emails to analyze:\n{blocks}"
    )


def build_messages(emails: Sequence[EmailInput]) -> list[dict[str, str]]:
    """Build the Anthropic messages list for analysing a batch of emails."""
    return [{"role": "user", "content": build_prompt(emails)}]
