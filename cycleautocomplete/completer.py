"""Host-facing completion driver tying buffer, settings and session together."""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from cycleautocomplete.candidates import Candidate, collect
from cycleautocomplete.config import CompletionSettings
from cycleautocomplete.cycler import CompletionSession, CycleDirection, create_session
from cycleautocomplete.ranker import rank

logger = logging.getLogger(__name__)

NO_COMPLETIONS_MESSAGE = 'No completions found for "%s".'
NOT_APPLIED_MESSAGE = 'Text changed, "%s" was not inserted.'


@dataclass(frozen=True)
class Replacement:
    """Replace buffer[start:end] with text and move the cursor to cursor."""
    start: int
    end: int
    text: str
    cursor: int

    @property
    def range_to_replace(self) -> Tuple[int, int]:
        return self.start, self.end


@dataclass(frozen=True)
class NoCandidates:
    prefix: str

    @property
    def message(self) -> str:
        return NO_COMPLETIONS_MESSAGE % self.prefix


@dataclass(frozen=True)
class NoPrefix:
    position: int


@dataclass(frozen=True)
class NotApplied:
    """A proposed replacement whose range no longer matches the buffer."""
    replacement: Replacement

    @property
    def message(self) -> str:
        return NOT_APPLIED_MESSAGE % self.replacement.text


CompletionResult = Union[Replacement, NoCandidates, NoPrefix, NotApplied]


class Completer:
    """Inline cycle completion for one buffer.

    ``config`` is either a Config (re-read whenever a new session starts)
    or a fixed CompletionSettings. ``on_status`` receives user-facing
    messages such as "No completions found".
    """

    def __init__(self, buffer, config=None, session: Optional[CompletionSession] = None,
                 on_status: Optional[Callable[[str], None]] = None):
        self.buffer = buffer
        self.config = config if config is not None else CompletionSettings()
        self.session = session if session is not None else create_session()
        self.on_status = on_status
        self._settings: Optional[CompletionSettings] = None

    def read_settings(self) -> CompletionSettings:
        snapshot = getattr(self.config, "snapshot", None)
        settings = snapshot() if snapshot is not None else self.config
        set_word_chars = getattr(self.buffer, "set_word_chars", None)
        if set_word_chars is not None:
            set_word_chars(settings.word_chars)
        return settings

    def cycle_forward(self, pos: Optional[int] = None) -> CompletionResult:
        return self._insert_completion(CycleDirection.FORWARD, pos)

    def cycle_backward(self, pos: Optional[int] = None) -> CompletionResult:
        return self._insert_completion(CycleDirection.BACKWARD, pos)

    def _insert_completion(self, direction: CycleDirection, pos: Optional[int]) -> CompletionResult:
        result = self.propose(direction, pos)
        if isinstance(result, Replacement):
            if not self.apply(result):
                result = NotApplied(result)
                if self.on_status:
                    self.on_status(result.message)
        elif isinstance(result, NoCandidates):
            logger.info(result.message)
            if self.on_status:
                self.on_status(result.message)
        else:
            logger.debug("Nothing to complete at offset %d", result.position)
        return result

    def _word_at(self, pos: int):
        start = self.buffer.word_start(pos)
        end = self.buffer.word_end(pos)
        return start, end

    def propose(self, direction: CycleDirection, pos: Optional[int] = None) -> CompletionResult:
        """Work out the next replacement without touching the buffer.

        Starts a new session when the text before the cursor is not the
        completion inserted last time.
        """
        if pos is None:
            pos = self.buffer.selection_start()
        if self._settings is None:
            self._settings = self.read_settings()
        start, end = self._word_at(pos)
        if pos <= start:
            return NoPrefix(pos)

        prefix = self.buffer.extract_text(start, pos)
        if self.session.needs_rebuild(prefix):
            self._settings = self.read_settings()
            # word characters may have changed with the new settings
            start, end = self._word_at(pos)
            if pos <= start:
                return NoPrefix(pos)
            prefix = self.buffer.extract_text(start, pos)
            self.session.rebuild(self._ranked(pos, start, end, prefix))

        completion = self.session.cycle(direction)
        if completion is None:
            return NoCandidates(prefix)

        replace_end = end if self._settings.strip_trailing_word_on_accept else pos
        return Replacement(start=start, end=replace_end, text=completion.text,
                           cursor=start + len(completion.text))

    def _ranked(self, pos: int, start: int, end: int, prefix: str) -> List[Candidate]:
        settings = self._settings
        word = self.buffer.extract_text(start, end)
        candidates = collect(self.buffer, pos, prefix, word, settings)
        return rank(candidates, settings.sort_order, settings.skip_fuzzy_if_exact_found)

    def apply(self, replacement: Replacement) -> bool:
        """Insert a proposed completion as one undoable edit and accept it.

        The range is checked against the buffer's current word boundaries;
        if the text moved since the proposal nothing is changed and False
        is returned.
        """
        start, end = replacement.range_to_replace
        if end > self.buffer.length or self.buffer.word_start(end) != start:
            logger.warning("Stale completion range %d-%d, not applied", start, end)
            return False

        self.buffer.cancel_active_popup()
        self.buffer.begin_undo_action()
        try:
            self.buffer.replace_range(start, end, replacement.text)
            self.buffer.set_cursor(replacement.cursor)
        finally:
            self.buffer.end_undo_action()

        self.session.accept(replacement.text)
        logger.debug("Inserted completion %r at %d", replacement.text, start)
        return True

    def candidates_at(self, pos: Optional[int] = None) -> List[Candidate]:
        """Ranked candidates for the word before pos, sentinel last.

        Leaves the session untouched; meant for hosts that show a list.
        """
        if pos is None:
            pos = self.buffer.selection_start()
        self._settings = self.read_settings()
        start, end = self._word_at(pos)
        if pos <= start:
            return []
        prefix = self.buffer.extract_text(start, pos)
        return self._ranked(pos, start, end, prefix)

    def reset(self):
        self.session.reset()
        self._settings = None
