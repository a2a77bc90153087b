"""Completion session state and cycling through the ranked candidates."""
import enum
import logging
from typing import List, Optional, Sequence

from cycleautocomplete.candidates import Candidate

logger = logging.getLogger(__name__)


class CycleDirection(enum.Enum):
    FORWARD = 1
    BACKWARD = -1


def cycle(candidates: Sequence[Candidate], previous_completion: Optional[str],
          direction: CycleDirection) -> Candidate:
    """Pick the candidate after (or before) previous_completion, wrapping around.

    Without a previous completion, or when it is not in the list, the first
    candidate is returned.
    """
    if previous_completion is not None:
        for i, candidate in enumerate(candidates):
            if candidate.text == previous_completion:
                return candidates[(i + direction.value) % len(candidates)]
        logger.debug("Previous completion %r not in candidate list, restarting",
                     previous_completion)
    return candidates[0]


class CompletionSession:
    """One completion interaction: the ranked list and the last accepted text.

    Lifecycle: create_session() -> rebuild() on a new prefix -> cycle() and
    accept() per keypress -> destroy_session().
    """

    def __init__(self):
        self.candidates: List[Candidate] = []
        self.previous_completion: Optional[str] = None

    @property
    def is_fresh(self) -> bool:
        return self.previous_completion is None

    def needs_rebuild(self, prefix: str) -> bool:
        """True unless prefix is exactly the completion inserted last time."""
        return self.previous_completion is None or prefix != self.previous_completion

    def rebuild(self, candidates: Sequence[Candidate]):
        self.candidates = list(candidates)
        self.previous_completion = None

    def cycle(self, direction: CycleDirection) -> Optional[Candidate]:
        if not self.candidates:
            return None
        return cycle(self.candidates, self.previous_completion, direction)

    def accept(self, text: str):
        self.previous_completion = text

    def reset(self):
        self.candidates = []
        self.previous_completion = None


def create_session() -> CompletionSession:
    return CompletionSession()


def destroy_session(session: CompletionSession):
    session.reset()
