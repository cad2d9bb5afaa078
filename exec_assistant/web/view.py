"""View state for the briefing page: loading gate, error banner, results."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from exec_assistant.processing.analyzer import merge_results
from exec_assistant.processing.types import AnalysisResult, EmailAnalysis, EmailInput
from exec_assistant.store.records import EmailStore

logger = logging.getLogger(__name__)

ANALYSIS_FAILED_MESSAGE = "Failed to analyze emails. Please check your API configuration."


@runtime_checkable
class Analyzer(Protocol):
    """Anything that turns a batch of emails into one analysis per email."""

    async def analyze(self, emails: Sequence[EmailInput]) -> list[EmailAnalysis]:
        ...


class AssistantView:
    """Drives one analysis run at a time over an EmailStore.

    States: idle → loading → idle with results, or idle with an error.
    ``loading`` is the only guard against overlapping runs; it runs on a
    single event loop so no lock is needed.
    """

    def __init__(self, store: EmailStore, analyzer: Analyzer) -> None:
        self.store = store
        self._analyzer = analyzer
        self.loading = False
        self.error: str | None = None
        self.results: list[AnalysisResult] = []

    @property
    def state(self) -> str:
        if self.loading:
            return "loading"
        if self.error:
            return "error"
        if self.results:
            return "results"
        return "idle"

    async def run_analysis(self) -> bool:
        """Analyse a snapshot of the store and replace the displayed results.

        Returns False without calling the analyzer if a run is already in
        flight. Failures never propagate: they set ``error`` and leave the
        previous results in place.
        """
        if self.loading:
            logger.info("Analysis already in progress; ignoring trigger")
            return False

        self.loading = True
        self.error = None
        emails = self.store.snapshot()
        try:
            analyses = await self._analyzer.analyze(emails)
            self.results = merge_results(emails, analyses)
        except Exception as exc:  # noqa: BLE001
            self.error = ANALYSIS_FAILED_MESSAGE
            logger.error("Email analysis failed: %s", exc, exc_info=True)
        finally:
            self.loading = False
        return True

    def to_dict(self) -> dict[str, object]:
        return {
            "emails": [
                {"id": e.id, "sender": e.sender, "subject": e.subject, "body": e.body}
                for e in self.store.snapshot()
            ],
            "results": [r.to_dict() for r in self.results],
            "loading": self.loading,
            "error": self.error,
        }
