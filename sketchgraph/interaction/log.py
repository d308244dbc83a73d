"""Append-only log of click events and consumed markers."""

from typing import Iterator

from ..errors import InteractionLogError
from .events import CONSUMED, Clicked, ClickedEmpty, Consumed


class InteractionLog:
    """Ordered record of what was clicked, under which tool.

    Runs of raw click events are separated by single consumed markers; a
    marker always directly follows the click(s) it retired. Entries are
    immutable and never removed.

    ``record`` raises the change flag that triggers gesture resolution.
    ``mark_consumed`` does not, so a resolver appending a marker never
    re-triggers itself.
    """

    def __init__(self):
        self._entries: list[Clicked | ClickedEmpty | Consumed] = []
        self._changed = False

    def record(self, event: Clicked | ClickedEmpty) -> None:
        """Append a raw click event from the input layer."""
        if not isinstance(event, (Clicked, ClickedEmpty)):
            raise TypeError(
                f"Expected a click event, got {type(event).__name__}"
            )
        self._entries.append(event)
        self._changed = True

    def mark_consumed(self) -> None:
        """Retire the trailing raw click(s).

        Raises:
            InteractionLogError: If there is no raw click to retire.
        """
        if not self._entries:
            raise InteractionLogError("Cannot mark an empty log as consumed")
        if isinstance(self._entries[-1], Consumed):
            raise InteractionLogError("Last entry is already a consumed marker")
        self._entries.append(CONSUMED)

    def tail(self, n: int) -> tuple[Clicked | ClickedEmpty | Consumed, ...]:
        """Get the last ``n`` entries, oldest first."""
        if n <= 0:
            return ()
        return tuple(self._entries[-n:])

    def last(self) -> Clicked | ClickedEmpty | Consumed | None:
        return self._entries[-1] if self._entries else None

    def second_to_last(self) -> Clicked | ClickedEmpty | Consumed | None:
        return self._entries[-2] if len(self._entries) >= 2 else None

    @property
    def entries(self) -> tuple[Clicked | ClickedEmpty | Consumed, ...]:
        return tuple(self._entries)

    def is_changed(self) -> bool:
        """Check if a click was recorded since the last ``take_change``."""
        return self._changed

    def take_change(self) -> bool:
        """Read and clear the change flag."""
        changed = self._changed
        self._changed = False
        return changed

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Clicked | ClickedEmpty | Consumed]:
        return iter(self._entries)
