"""Email analysis client — one structured call summarises and scores a batch."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence

from anthropic import AsyncAnthropic
from anthropic.types import Message, TextBlock, ToolUseBlock

from exec_assistant.processing.prompts import ANALYSIS_TOOL, TOOL_NAME, build_messages
from exec_assistant.processing.types import AnalysisResult, EmailAnalysis, EmailInput

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"
DEFAULT_MAX_TOKENS = 1024

_MIN_SCORE = 1
_MAX_SCORE = 5


class AnalysisError(Exception):
    """Raised when the model's output cannot be turned into one analysis per email."""


# ── Client ─────────────────────────────────────────────────────────────────────


class EmailAnalyzer:
    """Sends a batch of emails to Claude and returns one EmailAnalysis per email.

    The response schema is declared as a forced tool call so the model answers
    with a JSON object rather than prose. The API key is passed in explicitly;
    reading it from the environment is the caller's job (see ``Settings``).

    Usage::

        analyzer = EmailAnalyzer(api_key=settings.api_key)
        analyses = await analyzer.analyze(emails)
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        self._client = AsyncAnthropic(api_key=api_key)
        self._model = model
        self._max_tokens = max_tokens

    async def analyze(
        self,
        emails: Sequence[EmailInput],
        expected_count: int | None = None,
    ) -> list[EmailAnalysis]:
        """Analyse every email in one request; results keep the input order.

        ``expected_count`` defaults to ``len(emails)``.

        Raises:
            AnalysisError: if the output is unparseable, or does not hold
                exactly one valid analysis per email.
            anthropic.APIError: on transport, auth or status failures.
        """
        expected = len(emails) if expected_count is None else expected_count
        if expected != len(emails):
            raise AnalysisError(
                f"expected {expected} emails but was given {len(emails)}"
            )

        response = await self._client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            tools=[ANALYSIS_TOOL],  # type: ignore[list-item]
            tool_choice={"type": "tool", "name": TOOL_NAME},
            messages=build_messages(emails),  # type: ignore[arg-type]
        )

        analyses = parse_analyses(extract_payload(response))
        if len(analyses) != expected:
            raise AnalysisError(
                f"model returned {len(analyses)} analyses for {expected} emails "
                f"(stop_reason={response.stop_reason!r})"
            )
        logger.info("Analysed %d emails with %s", len(analyses), self._model)
        return analyses


# ── Response parsing ───────────────────────────────────────────────────────────


def extract_payload(response: Message) -> Mapping[str, object]:
    """Return the structured JSON object carried by a Messages API response.

    The forced tool call is preferred; a plain text reply is parsed as JSON.
    """
    for block in response.content:
        if isinstance(block, ToolUseBlock) and block.name == TOOL_NAME:
            return _as_object(block.input)

    for block in response.content:
        if isinstance(block, TextBlock):
            return _as_object(block.text)

    raise AnalysisError(
        "could not process the model's output: no analysis payload "
        f"(stop_reason={response.stop_reason!r})"
    )


def _as_object(raw: object) -> Mapping[str, object]:
    if isinstance(raw, str):
        try:
            raw = json.loads(raw or "{}")
        except json.JSONDecodeError as exc:
            logger.error("Failed to parse model output as JSON: %s", exc)
            raise AnalysisError("could not process the model's output") from exc
    if not isinstance(raw, Mapping):
        raise AnalysisError(
            f"could not process the model's output: expected an object, got {type(raw).__name__}"
        )
    return raw


def parse_analyses(payload: Mapping[str, object]) -> list[EmailAnalysis]:
    """Convert the ``analyses`` array into typed EmailAnalysis objects.

    A payload without ``analyses`` yields an empty list; ``analyze`` rejects
    that as a count mismatch whenever emails were sent.
    """
    items = payload.get("analyses")
    if items is None:
        return []
    if not isinstance(items, list):
        raise AnalysisError("could not process the model's output: 'analyses' is not a list")
    return [_parse_analysis(i, item) for i, item in enumerate(items)]


def _parse_analysis(index: int, item: object) -> EmailAnalysis:
    """Validate one raw ``{summary, priorityScore}`` entry."""
    if not isinstance(item, Mapping):
        raise AnalysisError(f"analysis {index} is not an object")
    summary = item.get("summary")
    score = item.get("priorityScore")
    if not isinstance(summary, str):
        raise AnalysisError(f"analysis {index} has no summary")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise AnalysisError(f"analysis {index} has a non-numeric priorityScore: {score!r}")
    if not _MIN_SCORE <= score <= _MAX_SCORE or score != int(score):
        raise AnalysisError(
            f"analysis {index} priorityScore {score!r} is not an integer "
            f"in [{_MIN_SCORE}, {_MAX_SCORE}]"
        )
    return EmailAnalysis(summary=summary.strip(), priority_score=int(score))


# ── Merge ──────────────────────────────────────────────────────────────────────


def merge_results(
    emails: Sequence[EmailInput],
    analyses: Sequence[EmailAnalysis],
) -> list[AnalysisResult]:
    """Pair each email with the analysis at the same position, most urgent first."""
    if len(emails) != len(analyses):
        raise AnalysisError(
            f"cannot merge {len(analyses)} analyses onto {len(emails)} emails"
        )
    return sort_by_priority(
        AnalysisResult(email=e, analysis=a) for e, a in zip(emails, analyses)
    )


def sort_by_priority(results: Iterable[AnalysisResult]) -> list[AnalysisResult]:
    """Sort by descending priority score; equal scores keep their order."""
    return sorted(results, key=lambda r: -r.priority_score)
