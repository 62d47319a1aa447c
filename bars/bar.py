from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Sequence


# ---------------------------------------------------------------------------
# Bar State Enum: maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class BarState(Enum):
    DEFAULT    = "default"     # untouched
    COMPARING  = "comparing"   # yellow, being compared / scanned right now
    SORTED     = "sorted"      # green, in its final place
    PIVOT      = "pivot"       # red, quick sort pivot
    SELECTED   = "selected"    # purple, running minimum / largest / placed
    CURRENT    = "current"     # blue, the element being inserted or sifted


# ---------------------------------------------------------------------------
# Bar
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Bar:
    """
    One array slot under visualization.

    Attributes:
        value          : The sortable integer.
        state          : Current BarState for visual encoding.
        original_index : Position in the unsorted input.  Travels with the
                         bar when it is moved; renderers key transitions on it.
    """

    value:          int
    state:          BarState = BarState.DEFAULT
    original_index: int      = 0

    def with_state(self, state: BarState) -> "Bar":
        if state is self.state:
            return self
        return replace(self, state=state)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "value":         self.value,
            "state":         self.state.value,
            "originalIndex": self.original_index,
        }

    def __repr__(self) -> str:
        return f"Bar(value={self.value}, state={self.state.value}, orig={self.original_index})"


def initial_bars(values: Sequence[int]) -> List[Bar]:
    """Wrap raw values as DEFAULT bars whose original_index is their position."""
    return [Bar(value=int(v), original_index=i) for i, v in enumerate(values)]
