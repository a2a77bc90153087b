"""Finds word-start occurrences of the typed prefix near the cursor."""
import enum
import logging
from typing import Iterable, Iterator, NamedTuple, Tuple

from cycleautocomplete.fuzzy import is_fuzzy_match

logger = logging.getLogger(__name__)

# distance_limit is expressed in units of this many characters
SEARCH_RADIUS_UNIT = 1024


class MatchKind(enum.IntEnum):
    """Scan mode, and the pass that found a token. Exact sorts before Fuzzy."""
    EXACT = 0
    FUZZY = 1


class Occurrence(NamedTuple):
    text: str
    start: int


def search_window(length: int, cursor_pos: int, distance_limit: int) -> Tuple[int, int]:
    """Return the [start, end) range to search, clamped to the buffer."""
    if distance_limit > 0:
        radius = distance_limit * SEARCH_RADIUS_UNIT
        return max(cursor_pos - radius, 0), min(cursor_pos + radius, length)
    return 0, length


def scan(buffer, cursor_pos: int, prefix: str, current_word: str, mode: MatchKind,
         settings, known: Iterable[str] = ()) -> Iterator[Occurrence]:
    """Yield occurrences of tokens completing prefix.

    Exact mode searches for the literal prefix. Fuzzy mode searches for its
    first character and keeps tokens that contain the whole prefix as a
    subsequence. Hits are anchored at word starts. Repeated tokens are
    yielded again so the caller can track the nearest one; the scan stops
    after settings.candidate_limit tokens not in known have been found.
    """
    start, end = search_window(buffer.length, cursor_pos, settings.distance_limit)
    pattern = prefix[:1] if mode is MatchKind.FUZZY else prefix
    seen = set(known)
    found = 0

    match = buffer.find_pattern(pattern, start, end, word_start=True)
    while match is not None:
        match_start = match[0]
        match_end = buffer.word_end(match_start + 1)
        token = buffer.extract_text(match_start, match_end)

        if mode is MatchKind.EXACT or is_fuzzy_match(prefix, token):
            if token in seen:
                yield Occurrence(token, match_start)
            elif token != current_word:
                seen.add(token)
                found += 1
                yield Occurrence(token, match_start)

        if found >= settings.candidate_limit:
            logger.debug("Candidate limit %d reached at offset %d",
                         settings.candidate_limit, match_start)
            break
        match = buffer.find_pattern(pattern, match_end, end, word_start=True)
