"""Settings window (Qt) for Cycle-Autocomplete."""
import logging
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QGroupBox, QCheckBox, QLineEdit, QSpinBox, QPushButton,
    QFormLayout, QStatusBar, QComboBox,
)
from PyQt5.QtCore import pyqtSignal

from cycleautocomplete.config import (
    SortOrder, CANDIDATE_LIMIT_RANGE, DISTANCE_LIMIT_RANGE,
)

logger = logging.getLogger(__name__)

_SORT_ORDERS = [
    ("alphabetically", SortOrder.ALPHABETICAL),
    ("by distance", SortOrder.BY_DISTANCE),
]


class SettingsWindow(QMainWindow):
    """Settings window with all configuration options."""

    saved = pyqtSignal()

    def __init__(self, config, parent=None):
        super().__init__(parent)
        self.config = config

        self.setWindowTitle("Cycle-Autocomplete — Settings")
        self.setMinimumWidth(420)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        # === Completion ===
        completion_group = QGroupBox("Completion")
        completion_layout = QFormLayout(completion_group)

        self._sort_combo = QComboBox()
        for label, _ in _SORT_ORDERS:
            self._sort_combo.addItem(label)
        completion_layout.addRow("Sort completions:", self._sort_combo)

        self._candidate_limit_spin = QSpinBox()
        self._candidate_limit_spin.setRange(*CANDIDATE_LIMIT_RANGE)
        completion_layout.addRow("Limit number of possible completions:",
                                 self._candidate_limit_spin)

        self._distance_limit_spin = QSpinBox()
        self._distance_limit_spin.setRange(*DISTANCE_LIMIT_RANGE)
        self._distance_limit_spin.setSuffix(" kchars")
        self._distance_limit_spin.setSpecialValueText("whole document")
        completion_layout.addRow("Limit completion search radius:",
                                 self._distance_limit_spin)

        self._skip_fuzzy_cb = QCheckBox("Skip fuzzy matching if there are exact matches")
        completion_layout.addRow(self._skip_fuzzy_cb)

        self._strip_trailing_cb = QCheckBox("Remove trailing word part on completion")
        completion_layout.addRow(self._strip_trailing_cb)

        self._word_chars_input = QLineEdit()
        self._word_chars_input.setPlaceholderText("letters, digits and _ always count")
        completion_layout.addRow("Extra word characters:", self._word_chars_input)

        layout.addWidget(completion_group)

        # === Hotkeys ===
        hotkey_group = QGroupBox("Hotkeys")
        hotkey_layout = QFormLayout(hotkey_group)

        self._hotkey_forward = QLineEdit()
        hotkey_layout.addRow("Cycle autocomplete forward:", self._hotkey_forward)

        self._hotkey_backward = QLineEdit()
        hotkey_layout.addRow("Cycle autocomplete backward:", self._hotkey_backward)

        layout.addWidget(hotkey_group)

        # === Advanced ===
        adv_group = QGroupBox("Advanced")
        adv_layout = QFormLayout(adv_group)
        self._debug_cb = QCheckBox("Enable debug logging")
        adv_layout.addRow(self._debug_cb)
        layout.addWidget(adv_group)

        # === Buttons ===
        btn_row = QHBoxLayout()
        save_btn = QPushButton("Save")
        save_btn.clicked.connect(self._save)
        btn_row.addWidget(save_btn)

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.close)
        btn_row.addWidget(close_btn)

        layout.addLayout(btn_row)

        # Status bar
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)

        self.refresh()

    def refresh(self):
        """Load current config values into the widgets."""
        config = self.config
        orders = [order for _, order in _SORT_ORDERS]
        self._sort_combo.setCurrentIndex(orders.index(config.sort_order))
        self._candidate_limit_spin.setValue(config.candidate_limit)
        self._distance_limit_spin.setValue(config.distance_limit)
        self._skip_fuzzy_cb.setChecked(config.skip_fuzzy_if_exact_found)
        self._strip_trailing_cb.setChecked(config.strip_trailing_word_on_accept)
        self._word_chars_input.setText(config.word_chars)
        self._hotkey_forward.setText(config.hotkey_cycle_forward)
        self._hotkey_backward.setText(config.hotkey_cycle_backward)
        self._debug_cb.setChecked(config.debug_logging)

    def _save(self):
        _, sort_order = _SORT_ORDERS[self._sort_combo.currentIndex()]
        values = {
            "sort_order": sort_order.value,
            "candidate_limit": self._candidate_limit_spin.value(),
            "distance_limit": self._distance_limit_spin.value(),
            "skip_fuzzy_if_exact_found": self._skip_fuzzy_cb.isChecked(),
            "strip_trailing_word_on_accept": self._strip_trailing_cb.isChecked(),
            "word_chars": self._word_chars_input.text(),
            "hotkey_cycle_forward": self._hotkey_forward.text(),
            "hotkey_cycle_backward": self._hotkey_backward.text(),
            "debug_logging": self._debug_cb.isChecked(),
        }
        try:
            self.config.update(values)
        except OSError as e:
            logger.error("Saving settings to %s failed: %s", self.config.path, e)
            self._statusbar.showMessage(f"Configuration could not be saved: {e}", 5000)
            return
        logger.info("Settings saved to %s", self.config.path)
        self._statusbar.showMessage("Settings saved.", 3000)
        self.saved.emit()
