"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, family, fn, pseudocode, complexity, …),
        …
    }

Four families share the one registry:

    sorting      fn(array)                         array mutated in place
    searching    fn(array, target)
    pathfinding  fn(grid, start, end, heuristic)   grid mutated in place
    traversal    fn(root)

`get_algorithm()` accepts a registry key ("astar"), a display name
("A*", case-insensitive) or one of the family enums below.  Adding a new
algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from algorithms.step import Complexity, Step

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.sorting.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.sorting.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.sorting.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.sorting.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.sorting.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.sorting.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.sorting.shell     import shell_sort     as _shell,     PSEUDOCODE as _shell_pc
from algorithms.sorting.cocktail  import cocktail_sort  as _cocktail,  PSEUDOCODE as _cocktail_pc
from algorithms.sorting.gnome     import gnome_sort     as _gnome,     PSEUDOCODE as _gnome_pc
from algorithms.sorting.comb      import comb_sort      as _comb,      PSEUDOCODE as _comb_pc
from algorithms.sorting.counting  import counting_sort  as _counting,  PSEUDOCODE as _counting_pc

from algorithms.searching.linear        import linear_search        as _linear, PSEUDOCODE as _linear_pc
from algorithms.searching.binary        import binary_search        as _binary, PSEUDOCODE as _binary_pc
from algorithms.searching.jump          import jump_search          as _jump,   PSEUDOCODE as _jump_pc
from algorithms.searching.interpolation import interpolation_search as _interp, PSEUDOCODE as _interp_pc
from algorithms.searching.exponential   import exponential_search   as _expo,   PSEUDOCODE as _expo_pc

from algorithms.pathfinding.dijkstra   import dijkstra   as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.pathfinding.astar      import astar      as _astar,    PSEUDOCODE as _ast_pc
from algorithms.pathfinding.greedy_bfs import greedy_bfs as _gbfs,     PSEUDOCODE as _gbfs_pc
from algorithms.pathfinding.bfs        import bfs        as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.pathfinding.dfs        import dfs        as _dfs,      PSEUDOCODE as _dfs_pc

from algorithms.traversal import (
    in_order as _in_order, pre_order as _pre_order, post_order as _post_order,
    IN_ORDER_PSEUDOCODE, PRE_ORDER_PSEUDOCODE, POST_ORDER_PSEUDOCODE,
    TreeNode, build_bst,
)
from algorithms.arrays import PATTERNS, generate_pattern, generate_random, shuffled


# ---------------------------------------------------------------------------
# Family enums — values are the display names
# ---------------------------------------------------------------------------
class SortingAlgorithm(Enum):
    BUBBLE    = "Bubble"
    QUICK     = "Quick"
    MERGE     = "Merge"
    SELECTION = "Selection"
    INSERTION = "Insertion"
    HEAP      = "Heap"
    SHELL     = "Shell"
    COCKTAIL  = "Cocktail"
    GNOME     = "Gnome"
    COMB      = "Comb"
    COUNTING  = "Counting"


class SearchAlgorithm(Enum):
    LINEAR        = "Linear"
    BINARY        = "Binary"
    JUMP          = "Jump"
    INTERPOLATION = "Interpolation"
    EXPONENTIAL   = "Exponential"


class PathfindingAlgorithm(Enum):
    DIJKSTRA = "Dijkstra"
    ASTAR    = "A*"
    GREEDY   = "Greedy"
    BFS      = "BFS"
    DFS      = "DFS"


class TraversalOrder(Enum):
    IN_ORDER   = "In-Order"
    PRE_ORDER  = "Pre-Order"
    POST_ORDER = "Post-Order"


AlgorithmName = Union[str, SortingAlgorithm, SearchAlgorithm, PathfindingAlgorithm, TraversalOrder]

FAMILIES = ("sorting", "searching", "pathfinding", "traversal")


class UnknownAlgorithmError(ValueError):
    """Raised when a lookup names no registered algorithm."""


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:             str                      # registry key, e.g. "astar"
    label:           str                      # display name, e.g. "A*"
    family:          str                      # one of FAMILIES
    fn:              Callable                 # the generator function
    pseudocode:      List[str]                # lines for the side-panel
    complexity:      Complexity               # display-only asymptotics
    stable:          Optional[bool] = None    # sorting only
    requires_sorted: bool           = False   # searching: input must ascend
    has_heuristic:   bool           = False   # A* / Greedy: expose heuristic selector?
    description:     str            = ""      # one-liner for the UI card

    @property
    def trace_text(self) -> str:
        """Human-readable trace code, one pseudocode line per text line."""
        return "\n".join(self.pseudocode)

    def to_dict(self) -> Dict:
        return {
            "key":             self.key,
            "label":           self.label,
            "family":          self.family,
            "trace_text":      self.trace_text,
            "pseudocode":      list(self.pseudocode),
            "complexity":      self.complexity.to_dict(),
            "stable":          self.stable,
            "requires_sorted": self.requires_sorted,
            "has_heuristic":   self.has_heuristic,
            "description":     self.description,
        }


def _c(best: str, average: str, worst: str, space: str) -> Complexity:
    return Complexity(best=best, average=average, worst=worst, space=space)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    # -- sorting ---------------------------------------------------------
    "bubble": AlgoInfo(
        key="bubble", label="Bubble", family="sorting", fn=_bubble, pseudocode=_bubble_pc,
        complexity=_c("O(n)", "O(n²)", "O(n²)", "O(1)"), stable=True,
        description="Swaps adjacent out-of-order pairs; the largest value bubbles to the end each pass.",
    ),
    "quick": AlgoInfo(
        key="quick", label="Quick", family="sorting", fn=_quick, pseudocode=_quick_pc,
        complexity=_c("O(nlogn)", "O(nlogn)", "O(n²)", "O(logn)"), stable=False,
        description="Lomuto partition around the last element, then sort each side.",
    ),
    "merge": AlgoInfo(
        key="merge", label="Merge", family="sorting", fn=_merge, pseudocode=_merge_pc,
        complexity=_c("O(nlogn)", "O(nlogn)", "O(nlogn)", "O(n)"), stable=True,
        description="Split in half, sort each half, merge the two runs back together.",
    ),
    "selection": AlgoInfo(
        key="selection", label="Selection", family="sorting", fn=_selection, pseudocode=_selection_pc,
        complexity=_c("O(n²)", "O(n²)", "O(n²)", "O(1)"), stable=False,
        description="Find the minimum of the unsorted tail and swap it into place.",
    ),
    "insertion": AlgoInfo(
        key="insertion", label="Insertion", family="sorting", fn=_insertion, pseudocode=_insertion_pc,
        complexity=_c("O(n)", "O(n²)", "O(n²)", "O(1)"), stable=True,
        description="Grow a sorted prefix by shifting each new key left into position.",
    ),
    "heap": AlgoInfo(
        key="heap", label="Heap", family="sorting", fn=_heap, pseudocode=_heap_pc,
        complexity=_c("O(nlogn)", "O(nlogn)", "O(nlogn)", "O(1)"), stable=False,
        description="Build a max-heap, then repeatedly move the root behind the heap.",
    ),
    "shell": AlgoInfo(
        key="shell", label="Shell", family="sorting", fn=_shell, pseudocode=_shell_pc,
        complexity=_c("O(nlogn)", "O(n¹·⁵)", "O(n²)", "O(1)"), stable=False,
        description="Gapped insertion sort with the gap halved every round.",
    ),
    "cocktail": AlgoInfo(
        key="cocktail", label="Cocktail", family="sorting", fn=_cocktail, pseudocode=_cocktail_pc,
        complexity=_c("O(n)", "O(n²)", "O(n²)", "O(1)"), stable=True,
        description="Bubble sort that alternates direction every pass.",
    ),
    "gnome": AlgoInfo(
        key="gnome", label="Gnome", family="sorting", fn=_gnome, pseudocode=_gnome_pc,
        complexity=_c("O(n)", "O(n²)", "O(n²)", "O(1)"), stable=True,
        description="Walk forward while ordered, swap and step back when not.",
    ),
    "comb": AlgoInfo(
        key="comb", label="Comb", family="sorting", fn=_comb, pseudocode=_comb_pc,
        complexity=_c("O(nlogn)", "O(n²)", "O(n²)", "O(1)"), stable=False,
        description="Bubble sort over a gap that shrinks by 1.3 each pass.",
    ),
    "counting": AlgoInfo(
        key="counting", label="Counting", family="sorting", fn=_counting, pseudocode=_counting_pc,
        complexity=_c("O(n+k)", "O(n+k)", "O(n+k)", "O(k)"), stable=False,
        description="Tally each value, then rewrite the array from the tallies.",
    ),

    # -- searching -------------------------------------------------------
    "linear": AlgoInfo(
        key="linear", label="Linear", family="searching", fn=_linear, pseudocode=_linear_pc,
        complexity=_c("O(1)", "O(n)", "O(n)", "O(1)"),
        description="Check every element left to right.  Works on unsorted input.",
    ),
    "binary": AlgoInfo(
        key="binary", label="Binary", family="searching", fn=_binary, pseudocode=_binary_pc,
        complexity=_c("O(1)", "O(log n)", "O(log n)", "O(1)"), requires_sorted=True,
        description="Halve the [low, high] window around the middle element.",
    ),
    "jump": AlgoInfo(
        key="jump", label="Jump", family="searching", fn=_jump, pseudocode=_jump_pc,
        complexity=_c("O(1)", "O(√n)", "O(√n)", "O(1)"), requires_sorted=True,
        description="Leap ahead √n at a time, then scan the block linearly.",
    ),
    "interpolation": AlgoInfo(
        key="interpolation", label="Interpolation", family="searching", fn=_interp, pseudocode=_interp_pc,
        complexity=_c("O(1)", "O(log(log n))", "O(n)", "O(1)"), requires_sorted=True,
        description="Guess the position from the value, like opening a phone book.",
    ),
    "exponential": AlgoInfo(
        key="exponential", label="Exponential", family="searching", fn=_expo, pseudocode=_expo_pc,
        complexity=_c("O(1)", "O(log i)", "O(log i)", "O(1)"), requires_sorted=True,
        description="Double a bound until it passes the target, then binary-search.",
    ),

    # -- pathfinding -----------------------------------------------------
    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra", family="pathfinding", fn=_dijkstra, pseudocode=_dij_pc,
        complexity=_c("O(E+V log V)", "O(E+V log V)", "O(E+V log V)", "O(V)"),
        description="Greedily expands the cheapest node. Optimal with mud costs.",
    ),
    "astar": AlgoInfo(
        key="astar", label="A*", family="pathfinding", fn=_astar, pseudocode=_ast_pc,
        complexity=_c("O(E)", "O(E)", "O(b^d)", "O(V)"), has_heuristic=True,
        description="Dijkstra + heuristic guidance. Optimal when h is admissible.",
    ),
    "greedy": AlgoInfo(
        key="greedy", label="Greedy", family="pathfinding", fn=_gbfs, pseudocode=_gbfs_pc,
        complexity=_c("O(E)", "O(b^d)", "O(b^d)", "O(V)"), has_heuristic=True,
        description="Pure heuristic — fast but NOT optimal. Compare with A* to see the difference!",
    ),
    "bfs": AlgoInfo(
        key="bfs", label="BFS", family="pathfinding", fn=_bfs, pseudocode=_bfs_pc,
        complexity=_c("O(V+E)", "O(V+E)", "O(V+E)", "O(V)"),
        description="Explores layer-by-layer. Fewest moves, but blind to mud.",
    ),
    "dfs": AlgoInfo(
        key="dfs", label="DFS", family="pathfinding", fn=_dfs, pseudocode=_dfs_pc,
        complexity=_c("O(V+E)", "O(V+E)", "O(V+E)", "O(V)"),
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
    ),

    # -- traversal -------------------------------------------------------
    "in_order": AlgoInfo(
        key="in_order", label="In-Order", family="traversal", fn=_in_order, pseudocode=IN_ORDER_PSEUDOCODE,
        complexity=_c("O(n)", "O(n)", "O(n)", "O(h)"),
        description="Left, root, right.  Visits a BST in ascending order.",
    ),
    "pre_order": AlgoInfo(
        key="pre_order", label="Pre-Order", family="traversal", fn=_pre_order, pseudocode=PRE_ORDER_PSEUDOCODE,
        complexity=_c("O(n)", "O(n)", "O(n)", "O(h)"),
        description="Root, left, right.  The order you'd copy a tree in.",
    ),
    "post_order": AlgoInfo(
        key="post_order", label="Post-Order", family="traversal", fn=_post_order, pseudocode=POST_ORDER_PSEUDOCODE,
        complexity=_c("O(n)", "O(n)", "O(n)", "O(h)"),
        description="Left, right, root.  Children before parents, as when freeing a tree.",
    ),
}

_BY_LABEL: Dict[str, str] = {info.label.lower(): key for key, info in REGISTRY.items()}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(name: AlgorithmName) -> AlgoInfo:
    """
    Return AlgoInfo by registry key, display name or enum member.

    Raises:
        UnknownAlgorithmError: nothing registered under that name.
    """
    if isinstance(name, Enum):
        name = name.value
    text = str(name).strip()
    if text in REGISTRY:
        return REGISTRY[text]
    key = _BY_LABEL.get(text.lower())
    if key is None:
        raise UnknownAlgorithmError(f"Unknown algorithm: {name!r}")
    return REGISTRY[key]


def list_algorithms(family: Optional[str] = None) -> List[AlgoInfo]:
    """Return registered algorithms in insertion order, optionally for one family."""
    if family is not None and family not in FAMILIES:
        raise ValueError(f"Unknown family {family!r}; expected one of {FAMILIES}")
    return [a for a in REGISTRY.values() if family is None or a.family == family]


def algorithms_by_family() -> Dict[str, List[AlgoInfo]]:
    return {family: list_algorithms(family) for family in FAMILIES}


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "FAMILIES",
    "Step",
    "Complexity",
    "TreeNode",
    "build_bst",
    "SortingAlgorithm",
    "SearchAlgorithm",
    "PathfindingAlgorithm",
    "TraversalOrder",
    "UnknownAlgorithmError",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_family",
    "PATTERNS",
    "generate_random",
    "generate_pattern",
    "shuffled",
]
