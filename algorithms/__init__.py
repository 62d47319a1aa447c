"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, tags, stable, …),
        …
    }

Adding a new algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.radix     import radix_sort     as _radix,     PSEUDOCODE as _radix_pc
from algorithms.shell     import shell_sort     as _shell,     PSEUDOCODE as _shell_pc


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)   # e.g. ["comparison", "quadratic"]
    stable:            bool     = False       # equal values keep their input order?
    in_place:          bool     = True        # O(1) auxiliary array space?
    complexity_best:   str      = ""
    complexity_time:   str      = ""          # average case, e.g. "O(n log n)"
    complexity_worst:  str      = ""
    complexity_space:  str      = ""
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "tags":             list(self.tags),
            "stable":           self.stable,
            "in_place":         self.in_place,
            "complexity_best":  self.complexity_best,
            "complexity_time":  self.complexity_time,
            "complexity_worst": self.complexity_worst,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "pseudocode":       list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        tags=["comparison", "quadratic"], stable=True,
        complexity_best="O(n)", complexity_time="O(n²)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Swaps adjacent out-of-order pairs; the largest value bubbles to the end each pass.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        tags=["comparison", "quadratic", "adaptive"], stable=True,
        complexity_best="O(n)", complexity_time="O(n²)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Inserts each element into the sorted prefix. Fast on nearly sorted data.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        tags=["comparison", "quadratic"],
        complexity_best="O(n²)", complexity_time="O(n²)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Selects the minimum of the unsorted part and swaps it to the front.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        tags=["comparison", "divide-and-conquer"], stable=True, in_place=False,
        complexity_best="O(n log n)", complexity_time="O(n log n)", complexity_worst="O(n log n)",
        complexity_space="O(n)",
        description="Splits in half, sorts each half, merges. Stable and predictable.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=["comparison", "divide-and-conquer"],
        complexity_best="O(n log n)", complexity_time="O(n log n)", complexity_worst="O(n²)",
        complexity_space="O(log n)",
        description="Partitions around the last element (Lomuto) and recurses on both sides.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        tags=["comparison"],
        complexity_best="O(n log n)", complexity_time="O(n log n)", complexity_worst="O(n log n)",
        complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root to the end.",
    ),

    "radix": AlgoInfo(
        key="radix", label="Radix Sort", fn=_radix, pseudocode=_radix_pc,
        tags=["non-comparison", "linear"], stable=True, in_place=False,
        complexity_best="O(nk)", complexity_time="O(nk)", complexity_worst="O(nk)",
        complexity_space="O(n + k)",
        description="Stable counting sort on each decimal digit, least significant first.",
    ),

    "shell": AlgoInfo(
        key="shell", label="Shell Sort", fn=_shell, pseudocode=_shell_pc,
        tags=["comparison", "gap-sequence"],
        complexity_best="O(n log n)", complexity_time="O(n^1.25)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Insertion sort over shrinking gaps n/2, n/4, …, 1.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
