"""Ordered-subsequence matching used by the fuzzy scan pass."""


def is_fuzzy_match(seed: str, token: str) -> bool:
    """Return True if every character of seed occurs in token, in order.

    Both sides are casefolded. The scan is a single left-to-right pass:
    each seed character must be found after the previous one.
    """
    haystack = token.casefold()
    pos = 0
    for ch in seed.casefold():
        pos = haystack.find(ch, pos)
        if pos == -1:
            return False
        pos += 1
    return True
