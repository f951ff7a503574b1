"""AI strategy insights over ledger statistics.

``InsightSummarizer`` never raises: every failure of the Gemini call
(no key, SDK error, timeout, empty text) turns into a locally computed
advisory. ``InsightPanel`` holds the text shown on the dashboard and makes
sure that when requests overlap only the newest one is applied.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from nova_pos.clients import GeminiClient
from nova_pos.config import get_settings
from nova_pos.events import EventHub, insight_generated
from nova_pos.formatting import plain_amount
from nova_pos.ledger.models import LedgerStats

logger = structlog.get_logger(__name__)

INSIGHT_PROMPT = (
    "Act as a senior business consultant. Analyze these POS stats: "
    "Total Income: ${income}, Outstanding Due: ${due}, "
    "Successful Orders: {success}, Pending: {pending}. "
    "Provide a short (max 3 sentence) high-level strategic insight for this business. "
    "Focus on cash flow and conversion."
)

FALLBACK_INSIGHT = (
    "Strategy: Focus on collecting the ${due} outstanding due "
    "to improve liquid cash flow immediately."
)

GENERIC_INSIGHT = (
    "Strategy: Focus on collecting outstanding dues "
    "to improve liquid cash flow immediately."
)

PLACEHOLDER_INSIGHT = (
    "Tap generate for an AI-powered business strategy based on your current ledger stats."
)


def build_prompt(stats: LedgerStats) -> str:
    """Embed the four statistics into the consultant prompt."""
    return INSIGHT_PROMPT.format(
        income=plain_amount(stats.total_income),
        due=plain_amount(stats.total_due),
        success=stats.success_count,
        pending=stats.pending_or_confirmed_count,
    )


def fallback_insight(stats: LedgerStats) -> str:
    """Deterministic advisory used whenever the model cannot answer."""
    return FALLBACK_INSIGHT.format(due=plain_amount(stats.total_due))


@dataclass(frozen=True)
class InsightResult:
    """Advisory text and whether it came from the local fallback."""

    text: str
    fallback: bool


class InsightSummarizer:
    """Turns a statistics snapshot into a short advisory string."""

    def __init__(
        self,
        client: GeminiClient | None = None,
        client_factory: Callable[[], GeminiClient] | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self._client = client
        self._client_factory = client_factory or GeminiClient
        self._timeout = timeout if timeout is not None else settings.insight_timeout
        self._logger = logger.bind(component="insight_summarizer")

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    async def summarize(self, stats: LedgerStats) -> str:
        """Return a strategy insight for ``stats``; never raises."""
        result = await self.generate(stats)
        return result.text

    async def generate(self, stats: LedgerStats) -> InsightResult:
        """Like :meth:`summarize`, but also reports whether it fell back."""
        try:
            prompt = build_prompt(stats)
            client = self._get_client()
            response = await asyncio.wait_for(client.generate(prompt), timeout=self._timeout)
            text = (response.content or "").strip()
            if not text:
                raise ValueError("empty response text")
        except asyncio.TimeoutError:
            self._logger.warning("insight_fallback", reason="timeout", timeout=self._timeout)
        except Exception as e:
            self._logger.warning(
                "insight_fallback", reason=type(e).__name__, error=str(e)
            )
        else:
            self._logger.info("insight_generated", chars=len(text))
            return InsightResult(text=text, fallback=False)

        return InsightResult(text=self._fallback(stats), fallback=True)

    def _fallback(self, stats: LedgerStats) -> str:
        try:
            return fallback_insight(stats)
        except Exception as e:
            self._logger.error("fallback_insight_failed", error=str(e))
            return GENERIC_INSIGHT


class InsightPanel:
    """Dashboard state for the insight box.

    Each ``refresh`` takes a generation token. When several refreshes
    overlap, whichever finishes last does not win; only the most recently
    started one is applied.
    """

    def __init__(
        self,
        summarizer: InsightSummarizer | None = None,
        hub: EventHub | None = None,
    ):
        self._summarizer = summarizer or InsightSummarizer()
        self._hub = hub
        self._text = ""
        self._generation = 0
        self._in_flight = 0
        self._logger = logger.bind(component="insight_panel")

    @property
    def text(self) -> str:
        """The applied insight, or the placeholder before the first one."""
        return self._text or PLACEHOLDER_INSIGHT

    @property
    def has_insight(self) -> bool:
        return bool(self._text)

    @property
    def is_generating(self) -> bool:
        """True while any request is outstanding."""
        return self._in_flight > 0

    async def refresh(self, stats: LedgerStats) -> str | None:
        """Generate a new insight and apply it if still current.

        Returns:
            The applied text, or None if a newer refresh superseded this one.
        """
        self._generation += 1
        token = self._generation
        self._in_flight += 1
        try:
            result = await self._summarizer.generate(stats)
        finally:
            self._in_flight -= 1

        if token != self._generation:
            self._logger.info("stale_insight_discarded", token=token, latest=self._generation)
            return None

        self._text = result.text
        if self._hub is not None:
            self._hub.publish(insight_generated(result.text, fallback=result.fallback))
        return result.text
