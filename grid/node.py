from typing import Any, Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Terrain costs — charged when ENTERING a cell
# ---------------------------------------------------------------------------
NORMAL_COST = 1
MUD_COST    = 5

INF = float("inf")


# ---------------------------------------------------------------------------
# GridNode
# ---------------------------------------------------------------------------
class GridNode:
    """
    One cell of the pathfinding grid.  Terrain (wall / mud) is owned by
    the user; everything else is algorithm state, wiped between runs.

    Attributes:
        row, col    : Position in the grid.
        is_wall     : Impassable obstacle.
        is_mud      : Passable, but entering costs MUD_COST instead of NORMAL_COST.
        is_visited  : Expanded (or, for BFS, enqueued) by the running algorithm.
        is_path     : Part of the reconstructed solution.
        distance    : Best known cost from the start (∞ until discovered).
        heuristic   : Estimated cost to the goal (∞ until computed).
        total_cost  : distance + heuristic — A* ordering key.
        previous    : Flat arena index of the node we came from, or None.
                      A back-reference only; never an ownership edge.
    """

    __slots__ = (
        "row", "col", "is_wall", "is_mud", "is_visited", "is_path",
        "distance", "heuristic", "total_cost", "previous",
    )

    def __init__(self, row: int, col: int, is_wall: bool = False, is_mud: bool = False):
        self.row:        int           = row
        self.col:        int           = col
        self.is_wall:    bool          = is_wall
        self.is_mud:     bool          = is_mud
        self.is_visited: bool          = False
        self.is_path:    bool          = False
        self.distance:   float         = INF
        self.heuristic:  float         = INF
        self.total_cost: float         = INF
        self.previous:   Optional[int] = None

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    def reset_algo_state(self) -> None:
        """Keep terrain, clear everything an algorithm may have written."""
        self.is_visited = False
        self.is_path    = False
        self.distance   = INF
        self.heuristic  = INF
        self.total_cost = INF
        self.previous   = None

    def toggle_wall(self) -> None:
        self.is_wall = not self.is_wall
        if self.is_wall:
            self.is_mud = False

    def toggle_mud(self) -> None:
        self.is_mud = not self.is_mud
        if self.is_mud:
            self.is_wall = False

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @property
    def move_cost(self) -> int:
        return MUD_COST if self.is_mud else NORMAL_COST

    def copy(self) -> "GridNode":
        clone = GridNode(self.row, self.col, self.is_wall, self.is_mud)
        clone.is_visited = self.is_visited
        clone.is_path    = self.is_path
        clone.distance   = self.distance
        clone.heuristic  = self.heuristic
        clone.total_cost = self.total_cost
        clone.previous   = self.previous
        return clone

    # ------------------------------------------------------------------
    # Serialisation  (terrain + visible algorithm state)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "row":        self.row,
            "col":        self.col,
            "is_wall":    self.is_wall,
            "is_mud":     self.is_mud,
            "is_visited": self.is_visited,
            "is_path":    self.is_path,
            "distance":   None if self.distance == INF else self.distance,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridNode":
        return cls(
            row=data["row"],
            col=data["col"],
            is_wall=bool(data.get("is_wall", False)),
            is_mud=bool(data.get("is_mud", False)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        terrain = "wall" if self.is_wall else "mud" if self.is_mud else "open"
        return f"GridNode(row={self.row}, col={self.col}, {terrain}, dist={self.distance})"
