"""Entry point for Cycle-Autocomplete.

Usage:
    python -m cycleautocomplete.main [FILE]          # editor window
    python -m cycleautocomplete.main --settings      # settings window only
    python -m cycleautocomplete.main --list OFFSET FILE
                                                     # print ranked candidates, no GUI
"""
import sys
import signal
import logging
import argparse
from pathlib import Path


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def run_editor(config, path=None):
    """Open the editor window, optionally with FILE loaded."""
    from PyQt5.QtWidgets import QApplication
    from cycleautocomplete.window import EditorWindow

    app = QApplication(sys.argv)
    app.setApplicationName("Cycle-Autocomplete")

    window = EditorWindow(config, path=path)
    window.show()
    sys.exit(app.exec_())


def run_settings(config):
    """Open only the settings window."""
    from PyQt5.QtWidgets import QApplication
    from cycleautocomplete.settings_ui import SettingsWindow

    app = QApplication(sys.argv)
    app.setApplicationName("Cycle-Autocomplete")

    window = SettingsWindow(config)
    window.show()
    sys.exit(app.exec_())


def run_list(config, offset, text, out=None):
    """Print the ranked candidates for the word before offset in text.

    One line per candidate: distance, kind and text, tab separated; the
    sentinel comes last with kind "typed". Returns the exit status.
    """
    from cycleautocomplete.buffer import TextBuffer
    from cycleautocomplete.completer import Completer, NO_COMPLETIONS_MESSAGE

    out = out or sys.stdout
    logger = logging.getLogger(__name__)

    if not 0 <= offset <= len(text):
        logger.error("Offset %d outside document (length %d)", offset, len(text))
        return 2

    buffer = TextBuffer(text, cursor=offset)
    completer = Completer(buffer, config)
    candidates = completer.candidates_at(offset)
    if not candidates:
        start = buffer.word_start(offset)
        if start == offset:
            print("Nothing to complete.", file=out)
        else:
            print(NO_COMPLETIONS_MESSAGE % buffer.extract_text(start, offset), file=out)
        return 1

    for c in candidates:
        kind = "typed" if c.is_sentinel else c.match_kind.name.lower()
        distance = "-" if c.is_sentinel else str(c.distance)
        print(f"{distance}\t{kind}\t{c.text}", file=out)
    return 0


def main(argv=None):
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    parser = argparse.ArgumentParser(description="Cycle-Autocomplete")
    parser.add_argument("file", nargs="?", type=Path,
                        help="Document to open (or to scan with --list)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--settings", action="store_true",
                       help="Open the settings window only")
    group.add_argument("--list", type=int, metavar="OFFSET",
                       help="Print ranked completions for the word before OFFSET in FILE")
    parser.add_argument("--config", type=Path,
                        help="Use this config file instead of ~/.config/cycleautocomplete/config.json")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    from cycleautocomplete.config import Config

    config = Config(args.config)
    setup_logging(args.debug or config.debug_logging)

    if args.list is not None:
        if args.file is None:
            parser.error("--list needs a FILE")
        try:
            text = args.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            parser.error(f"cannot read {args.file}: {e}")
        return run_list(config, args.list, text)

    if args.settings:
        run_settings(config)
    else:
        run_editor(config, args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
