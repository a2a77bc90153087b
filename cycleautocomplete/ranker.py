"""Candidate ordering."""
from operator import attrgetter
from typing import List, Sequence

from cycleautocomplete.candidates import Candidate
from cycleautocomplete.config import SortOrder


def rank(candidates: Sequence[Candidate], sort_order: SortOrder,
         skip_fuzzy_if_exact_found: bool) -> List[Candidate]:
    """Order candidates for cycling, keeping a trailing sentinel last.

    First a stable sort by text or distance. Unless fuzzy matching is
    skipped when exact hits exist, a second stable sort moves exact matches
    ahead of fuzzy ones while keeping the first order within each kind.
    """
    if not candidates:
        return []
    body, tail = list(candidates), []
    if body[-1].is_sentinel:
        tail = [body.pop()]

    if sort_order is SortOrder.ALPHABETICAL:
        body.sort(key=attrgetter('text'))
    else:
        body.sort(key=attrgetter('distance'))

    if not skip_fuzzy_if_exact_found:
        body.sort(key=attrgetter('match_kind'))

    return body + tail
