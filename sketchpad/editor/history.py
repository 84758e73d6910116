# history.py
import logging
from typing import Optional

from .change import Change

logger = logging.getLogger(__name__)


class History:
    def __init__(self):
        self.undo_stack: list[Change] = []
        self.redo_stack: list[Change] = []

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    @property
    def undo_text(self) -> Optional[str]:
        return self.undo_stack[-1].description if self.undo_stack else None

    @property
    def redo_text(self) -> Optional[str]:
        return self.redo_stack[-1].description if self.redo_stack else None

    def record(self, change: Change):
        """Push an already applied change; any redo branch is dropped."""
        self.undo_stack.append(change)
        if self.redo_stack:
            logger.debug(f"Discarding {len(self.redo_stack)} redoable change(s)")
        self.redo_stack.clear()
        logger.debug(f"Recorded {change!r}")

    def execute(self, change: Change):
        change.forward()
        self.record(change)

    def undo(self):
        if not self.undo_stack:
            logger.debug("Nothing to undo")
            return
        change = self.undo_stack.pop()
        change.reverse()
        self.redo_stack.append(change)
        logger.debug(f"Undid {change!r}")

    def redo(self):
        if not self.redo_stack:
            logger.debug("Nothing to redo")
            return
        change = self.redo_stack.pop()
        change.forward()
        self.undo_stack.append(change)
        logger.debug(f"Redid {change!r}")

    def clear(self):
        self.undo_stack.clear()
        self.redo_stack.clear()
