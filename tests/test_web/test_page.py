"""Tests for server-side rendering of the briefing page."""

from unittest.mock import AsyncMock

from exec_assistant.processing.analyzer import merge_results
from exec_assistant.processing.types import EmailAnalysis
from exec_assistant.store.records import EmailStore
from exec_assistant.web.page import render_page
from exec_assistant.web.view import ANALYSIS_FAILED_MESSAGE, AssistantView


def _view(store: EmailStore) -> AssistantView:
    return AssistantView(store, AsyncMock())


class TestRenderPage:
    def test_idle_page(self, store: EmailStore) -> None:
        html = render_page(_view(store))
        assert "Summarize &amp; Prioritize" in html
        assert "Analysis results will appear here" in html
        assert 'class="error"' not in html
        assert "<button id=\"analyze\">" in html

    def test_one_form_column_per_email(self, store: EmailStore) -> None:
        html = render_page(_view(store))
        for email_id in ("1", "2", "3"):
            assert f'data-id="{email_id}" data-field="sender"' in html
            assert f'data-id="{email_id}" data-field="subject"' in html
            assert f'data-id="{email_id}" data-field="body"' in html

    def test_loading_disables_button(self, store: EmailStore) -> None:
        view = _view(store)
        view.loading = True
        html = render_page(view)
        assert '<button id="analyze" disabled>Analyzing...</button>' in html

    def test_error_banner(self, store: EmailStore) -> None:
        view = _view(store)
        view.error = ANALYSIS_FAILED_MESSAGE
        assert ANALYSIS_FAILED_MESSAGE in render_page(view)

    def test_results_in_priority_order(self, store: EmailStore) -> None:
        view = _view(store)
        analyses = [
            EmailAnalysis(summary="Payroll needs approval today.", priority_score=4),
            EmailAnalysis(summary="Newsletter draft is ready.", priority_score=1),
            EmailAnalysis(summary="Someone tried to log in.", priority_score=5),
        ]
        view.results = merge_results(store.snapshot(), analyses)

        html = render_page(view)

        login = html.index("Someone tried to log in.")
        payroll = html.index("Payroll needs approval today.")
        newsletter = html.index("Newsletter draft is ready.")
        assert login < payroll < newsletter
        assert "Urgent (5)" in html
        assert "badge-urgent" in html
        assert "Analysis results will appear here" not in html

    def test_user_text_is_escaped(self, store: EmailStore) -> None:
        store.update("1", "sender", '"><script>alert(1)</script>')
        store.update("2", "body", "</textarea><b>x</b>")

        html = render_page(_view(store))

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html
        assert "</textarea><b>x</b>" not in html

    def test_form_values_are_attribute_escaped(self, store: EmailStore) -> None:
        store.update("3", "subject", 'Re: "quoted" & <b>')

        html = render_page(_view(store))

        assert 'value="Re: &#34;quoted&#34; &amp; &lt;b&gt;"' in html


class TestPageScript:
    def test_edits_are_chained_in_order(self, store: EmailStore) -> None:
        html = render_page(_view(store))
        assert "pending = pending.then(" in html
        assert "method: 'PATCH'" in html

    def test_analyze_waits_for_pending_edits(self, store: EmailStore) -> None:
        html = render_page(_view(store))
        wait = html.index("await pending;")
        post = html.index("fetch('/api/analyze'")
        assert wait < post
