"""Claude API critique of design decisions and theme generation."""

import json
import logging
import re
import threading
from contextlib import contextmanager
from typing import Any, Iterable

from ..errors import ThemeGenerationInProgress
from ..models import DesignTheme
from ..text.split import parse_point_list
from .prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    CONSENSUS_SECTION,
    SIMPLIFY_SYSTEM_PROMPT,
    THEMES_SYSTEM_PROMPT,
    THEMES_USER_PROMPT,
)

logger = logging.getLogger(__name__)

FALLBACK_POINT = "This design decision requires further analysis"


class ProcessingGuard:
    """Non-blocking lock that rejects overlapping runs of an operation."""

    def __init__(self):
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def hold(self):
        if not self._lock.acquire(blocking=False):
            raise ThemeGenerationInProgress("Theme generation is already in progress")
        try:
            yield
        finally:
            self._lock.release()


def extract_json(text: str) -> Any:
    """Extract a JSON array or object from a model response.

    Tries a fenced code block, then the first balanced bracket span, then the
    whole text. Raises ValueError when nothing parses.
    """
    text = text.strip()
    candidates = []

    match = re.search(r"```(?:json)?\s*\n?(.*?)\n?\s*```", text, re.DOTALL)
    if match:
        candidates.append(match.group(1).strip())

    depth, start = 0, -1
    for i, ch in enumerate(text):
        if ch in "[{":
            if depth == 0:
                start = i
            depth += 1
        elif ch in "]}" and depth > 0:
            depth -= 1
            if depth == 0:
                candidates.append(text[start:i + 1])
                break

    candidates.append(text)

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue
    raise ValueError(f"No JSON found in response: {text[:100]!r}")


class Critic:
    """Critiques design decisions using Claude API."""

    def __init__(self, config: dict[str, Any], client=None):
        self.config = config
        if client is None:
            api_key = config.get("claude_api_key")
            if not api_key:
                raise ValueError("Claude API key required for critique. Set ANTHROPIC_API_KEY or claude_api_key in config.")

            import anthropic
            client = anthropic.Anthropic(api_key=api_key)
        self.client = client
        self.model = config.get("claude_model", "claude-sonnet-4-20250514")
        self.max_tokens = config.get("analysis", {}).get("max_tokens", 1000)
        self.theme_guard = ProcessingGuard()

    def _complete(self, system: str, user: str) -> str:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=system,
            messages=[{"role": "user", "content": user}],
        )
        return response.content[0].text

    def generate_analysis(
        self,
        decisions: Iterable[str],
        design_challenge: str = "",
        consensus_points: Iterable[str] = (),
    ) -> list[str]:
        """Return exactly ``analysis.point_count`` critical points about the decisions."""
        point_count = self.config.get("analysis", {}).get("point_count", 10)
        consensus_points = list(consensus_points)
        consensus = ""
        if consensus_points:
            consensus = CONSENSUS_SECTION.format(
                points="\n".join(f"{i}. {p}" for i, p in enumerate(consensus_points, 1))
            )

        system = ANALYSIS_SYSTEM_PROMPT.format(
            design_challenge=design_challenge or "No challenge specified",
            point_count=point_count,
            consensus=consensus,
        )
        user = "\n".join(f"- {d}" for d in decisions)

        logger.info(f"Requesting {point_count} critique points from {self.model}")
        text = self._complete(system, user)
        return parse_point_list(text, point_count, FALLBACK_POINT)

    def simplify_points(self, points: list[str]) -> list[str]:
        """Reword each point as one short sentence, preserving order and count."""
        if not points:
            return []
        system = SIMPLIFY_SYSTEM_PROMPT.format(point_count=len(points))
        user = " ** ".join(points)
        text = self._complete(system, user)
        return parse_point_list(text, len(points), points[-1])

    def generate_themes(self, design_proposals: list[str], thinking_dialogue: list[str]) -> list[DesignTheme]:
        """Identify the board's design themes.

        Only one generation may run at a time per Critic; an overlapping call
        raises ThemeGenerationInProgress.
        """
        with self.theme_guard.hold():
            if not design_proposals and not thinking_dialogue:
                raise ValueError("No design content found to generate themes from")

            theme_cfg = self.config.get("themes", {})
            theme_count = theme_cfg.get("count", 4)
            colors = theme_cfg.get("colors") or ["light_gray"]

            system = THEMES_SYSTEM_PROMPT.format(theme_count=theme_count)
            user = THEMES_USER_PROMPT.format(
                proposals="\n".join(f"- {p}" for p in design_proposals),
                dialogue="\n".join(f"- {d}" for d in thinking_dialogue),
            )
            parsed = extract_json(self._complete(system, user))
            if isinstance(parsed, dict):
                parsed = [parsed]
            if not isinstance(parsed, list):
                raise ValueError("Theme response must be a JSON array or object")

            names = [
                (item.get("name") if isinstance(item, dict) else None) or f"Theme {i}"
                for i, item in enumerate(parsed, 1)
            ]
            while len(names) < theme_count:
                names.append(f"Theme {len(names) + 1}")

            themes = [
                DesignTheme(name=name, color=colors[i % len(colors)])
                for i, name in enumerate(names[:theme_count])
            ]
            logger.info(f"Generated {len(themes)} themes")
            return themes
