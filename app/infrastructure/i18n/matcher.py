"""Supported culture matching with hierarchical fallback.

Matching order:
1. Exact (case-insensitive) match, candidates in preference order
2. Parent cultures, each candidate's full hierarchy before the next candidate

The first hit wins; candidates are never ranked against each other.
"""

from typing import Dict, Iterable, Optional, Sequence

import structlog

from infrastructure.i18n.cultures import (
    culture_hierarchy,
    is_valid_culture_name,
    normalize_culture_name,
)

logger = structlog.get_logger().bind(component="i18n.matcher")


class SupportedCultureMatcher:
    """Matches culture candidates against a set of supported cultures.

    Args:
        supported: Supported culture names, or None for no restriction.
    """

    def __init__(self, supported: Optional[Iterable[str]]):
        self._supported: Optional[Dict[str, str]] = None
        if supported is not None:
            self._supported = {
                normalize_culture_name(name).lower(): normalize_culture_name(name)
                for name in supported
            }

    @property
    def is_restricted(self) -> bool:
        return self._supported is not None

    def lookup(self, name: str) -> Optional[str]:
        """Return the supported spelling of ``name`` if it is supported."""
        if not is_valid_culture_name(name):
            return None
        if self._supported is None:
            return normalize_culture_name(name)
        return self._supported.get(normalize_culture_name(name).lower())

    def match(
        self,
        candidates: Sequence[str],
        allow_parent_fallback: bool = True,
    ) -> Optional[str]:
        """Find the first supported culture for the given candidates.

        Args:
            candidates: Candidate culture names in preference order.
            allow_parent_fallback: Whether parent cultures of each candidate
                may satisfy the match (e.g., "zh-Hans-CN" -> "zh-Hans" -> "zh").

        Returns:
            The matching supported culture in its canonical spelling, or None.
        """
        valid = [c for c in candidates if is_valid_culture_name(c)]
        if len(valid) != len(candidates):
            logger.debug(
                "invalid_culture_candidates_skipped",
                skipped=[c for c in candidates if c not in valid],
            )

        for candidate in valid:
            matched = self.lookup(candidate)
            if matched:
                return matched

        if not allow_parent_fallback or self._supported is None:
            return None

        for candidate in valid:
            for ancestor in culture_hierarchy(candidate):
                matched = self._supported.get(ancestor.lower())
                if matched:
                    logger.debug(
                        "matched_parent_culture",
                        candidate=candidate,
                        culture=matched,
                    )
                    return matched

        return None


def match_culture(
    candidates: Sequence[str],
    supported: Optional[Iterable[str]],
    allow_parent_fallback: bool = True,
) -> Optional[str]:
    """Match candidates against supported cultures.

    Convenience wrapper around SupportedCultureMatcher.

    Example:
        >>> match_culture(["zh-Hans-CN"], ["zh"], allow_parent_fallback=True)
        'zh'
        >>> match_culture(["jp", "ar-SA", "en-US"], ["ar-SA", "en-US"])
        'ar-SA'
    """
    return SupportedCultureMatcher(supported).match(candidates, allow_parent_fallback)
