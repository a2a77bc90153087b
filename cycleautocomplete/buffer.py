"""Text buffer — word boundaries, anchored search and undoable edits over a string."""
import logging
import re
from typing import Optional, Tuple

from cycleautocomplete.undo import UndoStack, EditEntry, EditGroup

logger = logging.getLogger(__name__)


class TextBuffer:
    """In-memory buffer accessor used by the completion engine.

    Word characters are letters, digits and underscore, plus anything
    listed in ``word_chars``. Positions are string offsets.
    Subclasses backed by a real widget override ``text`` and the
    editing methods; the queries work unchanged on top of them.
    """

    def __init__(self, text: str = "", cursor: Optional[int] = None, word_chars: str = ""):
        self._text = text
        self._cursor = len(text) if cursor is None else cursor
        self._anchor: Optional[int] = None
        self._extra_word_chars = set(word_chars)
        self._undo_stack = UndoStack()
        self._group: Optional[EditGroup] = None
        self._undo_depth = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def undo_stack(self) -> UndoStack:
        return self._undo_stack

    def set_word_chars(self, word_chars: str):
        self._extra_word_chars = set(word_chars)

    def is_word_char(self, ch: str) -> bool:
        return ch.isalnum() or ch == '_' or ch in self._extra_word_chars

    # --- selection ---

    def select(self, anchor: int, pos: int):
        """Select the range between anchor and pos, leaving the cursor at pos."""
        self._anchor = anchor
        self._cursor = pos

    def selection_start(self) -> int:
        """Left end of the selection, or the cursor when nothing is selected."""
        if self._anchor is None:
            return self._cursor
        return min(self._anchor, self._cursor)

    def set_cursor(self, pos: int):
        self._anchor = None
        self._cursor = max(0, min(pos, self.length))

    # --- queries ---

    def word_start(self, pos: int) -> int:
        text = self.text
        while pos > 0 and self.is_word_char(text[pos - 1]):
            pos -= 1
        return pos

    def word_end(self, pos: int) -> int:
        text = self.text
        while pos < len(text) and self.is_word_char(text[pos]):
            pos += 1
        return pos

    def extract_text(self, start: int, end: int) -> str:
        return self.text[start:end]

    def find_pattern(self, pattern: str, start: int, end: int,
                     word_start: bool = True) -> Optional[Tuple[int, int]]:
        """Find the first occurrence of pattern lying fully inside [start, end).

        Matching ignores case. With word_start set, a hit only counts when
        the character before it is not a word character.
        Returns (match_start, match_end) or None.
        """
        if not pattern:
            return None
        text = self.text
        regex = re.compile(re.escape(pattern), re.IGNORECASE)
        match = regex.search(text, start, end)
        while match is not None:
            pos = match.start()
            if not word_start or pos == 0 or not self.is_word_char(text[pos - 1]):
                return pos, match.end()
            match = regex.search(text, pos + 1, end)
        return None

    # --- editing ---

    def replace_range(self, start: int, end: int, new_text: str):
        removed = self._text[start:end]
        self._text = self._text[:start] + new_text + self._text[end:]
        entry = EditEntry(start=start, removed=removed, inserted=new_text)
        if self._group is not None:
            self._group.edits.append(entry)
        else:
            self._undo_stack.push(EditGroup(cursor_before=self._cursor, edits=[entry]))
        if self._cursor > start:
            self._cursor = max(start, self._cursor + len(new_text) - (end - start))

    def begin_undo_action(self):
        if self._undo_depth == 0:
            self._group = EditGroup(cursor_before=self._cursor)
        self._undo_depth += 1

    def end_undo_action(self):
        if self._undo_depth == 0:
            logger.warning("end_undo_action() without matching begin_undo_action()")
            return
        self._undo_depth -= 1
        if self._undo_depth == 0:
            group, self._group = self._group, None
            if group.edits:
                self._undo_stack.push(group)

    def undo(self) -> bool:
        """Revert the most recent edit group. Returns False if there is none."""
        group = self._undo_stack.pop()
        if group is None:
            return False
        for entry in reversed(group.edits):
            end = entry.start + len(entry.inserted)
            self._text = self._text[:entry.start] + entry.removed + self._text[end:]
        self._anchor = None
        self._cursor = group.cursor_before
        return True

    def cancel_active_popup(self):
        """Nothing to dismiss for an in-memory buffer."""
