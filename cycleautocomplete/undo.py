"""Undo stack — groups buffer edits so a completion reverts in one step."""
from dataclasses import dataclass, field
from typing import List, Optional
from collections import deque


@dataclass
class EditEntry:
    start: int          # offset where the edit happened
    removed: str        # text that was there before
    inserted: str       # text that replaced it


@dataclass
class EditGroup:
    cursor_before: int
    edits: List[EditEntry] = field(default_factory=list)


class UndoStack:
    """Maintains a bounded stack of edit groups."""

    def __init__(self, max_size: int = 100):
        self._stack: deque[EditGroup] = deque(maxlen=max_size)

    def push(self, group: EditGroup):
        self._stack.append(group)

    def pop(self) -> Optional[EditGroup]:
        if self._stack:
            return self._stack.pop()
        return None

    @property
    def size(self) -> int:
        return len(self._stack)
