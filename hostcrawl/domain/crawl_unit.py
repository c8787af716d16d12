from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hostcrawl.exceptions import FetchError


class UnitState(Enum):
    PENDING = "pending"
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    DISPATCHING = "dispatching"
    DONE = "done"


_NEXT_STATES = {
    UnitState.PENDING: {UnitState.FETCHING},
    UnitState.FETCHING: {UnitState.EXTRACTING, UnitState.DONE},
    UnitState.EXTRACTING: {UnitState.DISPATCHING, UnitState.DONE},
    UnitState.DISPATCHING: {UnitState.DONE},
    UnitState.DONE: set(),
}


@dataclass
class CrawlUnit:
    """One in-flight fetch+extract+dispatch task for a claimed URL.

    Owned by a single worker thread; children it spawns are separate units.
    """

    url: str
    state: UnitState = UnitState.PENDING
    dispatched: int = 0
    error: Optional[FetchError] = None

    def advance(self, state: UnitState) -> None:
        if state not in _NEXT_STATES[self.state]:
            raise ValueError(f"illegal transition {self.state.value} -> {state.value} for {self.url}")
        self.state = state

    def fail(self, error: FetchError) -> None:
        self.error = error
        self.advance(UnitState.DONE)

    @property
    def done(self) -> bool:
        return self.state is UnitState.DONE
