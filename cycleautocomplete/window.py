"""Editor window hosting a QPlainTextEdit with cycle completion."""
import logging
from pathlib import Path
from typing import Optional

from PyQt5.QtWidgets import QMainWindow, QPlainTextEdit, QStatusBar, QAction

from cycleautocomplete.completer import Completer
from cycleautocomplete.qt_editor import QtEditorBuffer, bind_shortcuts

logger = logging.getLogger(__name__)


class EditorWindow(QMainWindow):
    """Plain text editor with Cycle-Autocomplete bound to the configured hotkeys."""

    def __init__(self, config, path: Optional[Path] = None, parent=None):
        super().__init__(parent)
        self.config = config
        self._settings_window = None
        self._shortcuts = ()

        self.setWindowTitle(f"Cycle-Autocomplete — {path.name}" if path else "Cycle-Autocomplete")
        self.resize(800, 600)

        self.editor = QPlainTextEdit()
        self.setCentralWidget(self.editor)
        if path is not None:
            self.editor.setPlainText(path.read_text(encoding="utf-8"))

        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)

        self.buffer = QtEditorBuffer(self.editor, word_chars=config.word_chars)
        self.completer = Completer(
            self.buffer, config,
            on_status=lambda message: self._statusbar.showMessage(message, 5000),
        )
        self._bind_shortcuts()
        self._build_menu()

    def _build_menu(self):
        menu = self.menuBar().addMenu("&Edit")

        forward = QAction("Cycle autocomplete forward", self)
        forward.triggered.connect(lambda: self.completer.cycle_forward())
        menu.addAction(forward)

        backward = QAction("Cycle autocomplete backward", self)
        backward.triggered.connect(lambda: self.completer.cycle_backward())
        menu.addAction(backward)

        menu.addSeparator()

        settings = QAction("Settings…", self)
        settings.triggered.connect(self._open_settings)
        menu.addAction(settings)

    def _bind_shortcuts(self):
        for shortcut in self._shortcuts:
            shortcut.setEnabled(False)
            shortcut.deleteLater()
        self._shortcuts = bind_shortcuts(
            self.editor, self.completer,
            self.config.hotkey_cycle_forward, self.config.hotkey_cycle_backward,
        )

    def _open_settings(self):
        if self._settings_window is None:
            from cycleautocomplete.settings_ui import SettingsWindow
            self._settings_window = SettingsWindow(self.config, parent=self)
            self._settings_window.saved.connect(self._on_settings_saved)
        self._settings_window.refresh()
        self._settings_window.show()
        self._settings_window.raise_()

    def _on_settings_saved(self):
        # a new session picks up the other options through Config.snapshot()
        self.completer.reset()
        self._bind_shortcuts()
        logging.getLogger().setLevel(logging.DEBUG if self.config.debug_logging else logging.INFO)
