"""Collects unique completion candidates from the exact and fuzzy scan passes."""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from cycleautocomplete.scanner import MatchKind, scan

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    text: str
    distance: int = 0
    match_kind: Optional[MatchKind] = None  # None only for the sentinel

    @classmethod
    def sentinel(cls, text: str) -> "Candidate":
        """The trailing entry that restores what the user typed."""
        return cls(text=text)

    @property
    def is_sentinel(self) -> bool:
        return self.match_kind is None


def merge_occurrences(found: Dict[str, Candidate], occurrences: Iterable,
                      cursor_pos: int, kind: MatchKind) -> int:
    """Fold scanner occurrences into found, keyed by token text.

    Known tokens only get their distance lowered; their match kind is
    kept. Returns the number of new tokens added.
    """
    added = 0
    for text, start in occurrences:
        distance = abs(start - cursor_pos)
        known = found.get(text)
        if known is not None:
            known.distance = min(known.distance, distance)
            continue
        found[text] = Candidate(text=text, distance=distance, match_kind=kind)
        added += 1
    return added


def collect(buffer, cursor_pos: int, prefix: str, word: str, settings) -> List[Candidate]:
    """Collect unique candidates for prefix, followed by the sentinel.

    Returns an empty list when neither pass finds anything.
    """
    found: Dict[str, Candidate] = {}
    exact = merge_occurrences(
        found, scan(buffer, cursor_pos, prefix, word, MatchKind.EXACT, settings, known=found),
        cursor_pos, MatchKind.EXACT)
    logger.debug("Exact pass for %r: %d new token(s)", prefix, exact)

    if not exact or not settings.skip_fuzzy_if_exact_found:
        fuzzy = merge_occurrences(
            found, scan(buffer, cursor_pos, prefix, word, MatchKind.FUZZY, settings, known=found),
            cursor_pos, MatchKind.FUZZY)
        logger.debug("Fuzzy pass for %r: %d new token(s)", prefix, fuzzy)

    candidates = list(found.values())
    if candidates:
        candidates.append(Candidate.sentinel(
            word if settings.strip_trailing_word_on_accept else prefix))
    return candidates
