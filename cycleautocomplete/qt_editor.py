"""Qt text widget integration: buffer accessor over QPlainTextEdit and keybindings."""
import logging
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence, QTextCursor
from PyQt5.QtWidgets import QShortcut

from cycleautocomplete.buffer import TextBuffer

logger = logging.getLogger(__name__)


class QtEditorBuffer(TextBuffer):
    """Buffer accessor reading and editing a QPlainTextEdit (or QTextEdit).

    Queries run on the widget's plain text; edits go through QTextCursor
    so that one begin/end_undo_action pair is a single Ctrl+Z step.
    Offsets are QTextDocument positions, which match Python string offsets
    for text without characters outside the Basic Multilingual Plane.
    """

    def __init__(self, editor, word_chars: str = ""):
        super().__init__(word_chars=word_chars)
        self._editor = editor
        self._edit_cursor: Optional[QTextCursor] = None
        # plain text copy shared by all queries until the document changes
        self._text_cache: Optional[str] = None
        editor.document().contentsChanged.connect(self._drop_text_cache)

    @property
    def editor(self):
        return self._editor

    @property
    def text(self) -> str:
        if self._text_cache is None:
            self._text_cache = self._editor.toPlainText()
        return self._text_cache

    def _drop_text_cache(self):
        self._text_cache = None

    @property
    def cursor(self) -> int:
        return self._editor.textCursor().position()

    def selection_start(self) -> int:
        return self._editor.textCursor().selectionStart()

    def select(self, anchor: int, pos: int):
        tc = self._editor.textCursor()
        tc.setPosition(anchor)
        tc.setPosition(pos, QTextCursor.KeepAnchor)
        self._editor.setTextCursor(tc)

    def set_cursor(self, pos: int):
        tc = self._editor.textCursor()
        tc.setPosition(max(0, min(pos, self.length)))
        self._editor.setTextCursor(tc)

    def replace_range(self, start: int, end: int, new_text: str):
        tc = self._edit_cursor if self._edit_cursor is not None else QTextCursor(self._editor.document())
        tc.setPosition(start)
        tc.setPosition(end, QTextCursor.KeepAnchor)
        tc.insertText(new_text)
        self._drop_text_cache()

    def begin_undo_action(self):
        if self._edit_cursor is None:
            self._edit_cursor = QTextCursor(self._editor.document())
            self._edit_cursor.beginEditBlock()
        self._undo_depth += 1

    def end_undo_action(self):
        if self._undo_depth == 0:
            logger.warning("end_undo_action() without matching begin_undo_action()")
            return
        self._undo_depth -= 1
        if self._undo_depth == 0:
            self._edit_cursor.endEditBlock()
            self._edit_cursor = None

    def undo(self) -> bool:
        document = self._editor.document()
        if not document.isUndoAvailable():
            return False
        document.undo()
        self._drop_text_cache()
        return True

    def cancel_active_popup(self):
        """Hide the popup of a QCompleter attached to the editor, if any."""
        completer = getattr(self._editor, "completer", None)
        if callable(completer):
            completer = completer()
        if completer is not None and completer.popup().isVisible():
            completer.popup().hide()


def bind_shortcuts(editor, completer, forward: str, backward: str):
    """Register the cycle forward/backward key sequences on editor.

    Returns the two QShortcut objects; the caller keeps them to rebind later.
    """
    shortcuts = []
    for keys, handler in ((forward, completer.cycle_forward),
                          (backward, completer.cycle_backward)):
        shortcut = QShortcut(QKeySequence(keys), editor)
        shortcut.setContext(Qt.WidgetShortcut)
        # activated passes no arguments; the position comes from the editor
        shortcut.activated.connect(lambda handler=handler: handler())
        shortcuts.append(shortcut)
        logger.debug("Bound %s to %s", keys, handler.__name__)
    return tuple(shortcuts)
