"""
grid.py — Pathfinding Grid (node arena)
========================================
Single source of truth for the pathfinding board.  Algorithms and the
controller both talk to this object.

Responsibilities:
  1. Own the rows × cols cells as a FLAT arena of GridNode
  2. Neighbour queries                       (4-connected, walls excluded)
  3. Terrain editing                         (toggle wall / mud)
  4. Snapshots                               (clone / prepared copy)
  5. Path reconstruction support             (follow `previous` indices)
  6. Maze generation factory                 (randomised DFS carving)
  7. Serialisation round-trip                (to_dict / from_dict)

Design decisions:
  - Back-links are arena indices (row * cols + col), never object
    references, so `clone()` is a flat per-node copy with no aliasing.
  - Neighbour order is up, down, left, right.  The order matters for
    tie-breaking, so it is fixed here and nowhere else.
"""

import random
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from grid.node import GridNode


Position = Tuple[int, int]

_DIRECTIONS: List[Position] = [(-1, 0), (1, 0), (0, -1), (0, 1)]   # up, down, left, right


class Grid:
    """
    Attributes:
        rows, cols : Dimensions.  A 0 × 0 grid is legal (and has no nodes).
        nodes      : Flat list, index = row * cols + col.
    """

    def __init__(self, rows: int, cols: int, nodes: Optional[List[GridNode]] = None):
        self.rows: int = max(0, rows)
        self.cols: int = max(0, cols) if self.rows else 0
        if nodes is None:
            nodes = [GridNode(r, c) for r in range(self.rows) for c in range(self.cols)]
        self.nodes: List[GridNode] = nodes

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def node(self, row: int, col: int) -> GridNode:
        if not self.contains(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return self.nodes[self.index(row, col)]

    def index_of(self, node: GridNode) -> int:
        return self.index(node.row, node.col)

    def previous_of(self, node: GridNode) -> Optional[GridNode]:
        if node.previous is None:
            return None
        return self.nodes[node.previous]

    def as_matrix(self) -> List[List[GridNode]]:
        return [self.nodes[r * self.cols:(r + 1) * self.cols] for r in range(self.rows)]

    def __iter__(self) -> Iterator[GridNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    # ==================================================================
    # ADJACENCY
    # ==================================================================
    def neighbours(self, node: GridNode) -> List[GridNode]:
        """Passable 4-connected neighbours, in up / down / left / right order."""
        result = []
        for dr, dc in _DIRECTIONS:
            r, c = node.row + dr, node.col + dc
            if self.contains(r, c):
                nbr = self.nodes[self.index(r, c)]
                if not nbr.is_wall:
                    result.append(nbr)
        return result

    # ==================================================================
    # TERRAIN
    # ==================================================================
    def toggle_wall(self, row: int, col: int) -> None:
        self.node(row, col).toggle_wall()

    def toggle_mud(self, row: int, col: int) -> None:
        self.node(row, col).toggle_mud()

    def set_walls(self, positions: Iterable[Position]) -> None:
        for r, c in positions:
            n = self.node(r, c)
            n.is_wall = True
            n.is_mud  = False

    def set_mud(self, positions: Iterable[Position]) -> None:
        for r, c in positions:
            n = self.node(r, c)
            n.is_mud  = True
            n.is_wall = False

    # ==================================================================
    # SNAPSHOTS / RESET
    # ==================================================================
    def clone(self) -> "Grid":
        return Grid(self.rows, self.cols, [n.copy() for n in self.nodes])

    def prepared(self) -> "Grid":
        """Copy with terrain kept and all algorithm state wiped — one per solve."""
        fresh = self.clone()
        fresh.reset_algo_state()
        return fresh

    def reset_algo_state(self) -> None:
        for n in self.nodes:
            n.reset_algo_state()

    # ==================================================================
    # READ-OUTS
    # ==================================================================
    def visited_count(self) -> int:
        return sum(1 for n in self.nodes if n.is_visited)

    def path_nodes(self) -> List[GridNode]:
        return [n for n in self.nodes if n.is_path]

    def path_cost(self) -> int:
        """Cost of entering every path cell except the start (which has no back-link)."""
        return sum(n.move_cost for n in self.nodes if n.is_path and n.previous is not None)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "nodes": [n.to_dict() for n in self.nodes],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Grid":
        g = cls(int(data.get("rows", 0)), int(data.get("cols", 0)))
        for nd in data.get("nodes", []):
            if g.contains(nd["row"], nd["col"]):
                g.nodes[g.index(nd["row"], nd["col"])] = GridNode.from_dict(nd)
        return g

    # ==================================================================
    # GENERATORS — Factory class-methods
    # ==================================================================
    @classmethod
    def generate_maze(
        cls,
        rows: int,
        cols: int,
        seed: Optional[int] = None,
        keep_open: Iterable[Position] = (),
    ) -> "Grid":
        """
        Randomised depth-first carving.  Starts fully walled, carves from
        (1, 1) two cells at a time, knocking out the wall in between.
        Cells listed in `keep_open` (typically start / end) are cleared
        afterwards so they're never sealed in.
        """
        rng = random.Random(seed)
        g = cls(rows, cols)
        for n in g.nodes:
            n.is_wall = True

        if g.contains(1, 1):
            g.node(1, 1).is_wall = False
            stack: List[Position] = [(1, 1)]
            while stack:
                r, c = stack[-1]
                options = []
                for dr, dc in ((0, 2), (0, -2), (2, 0), (-2, 0)):
                    nr, nc = r + dr, c + dc
                    if 0 < nr < rows - 1 and 0 < nc < cols - 1 and g.node(nr, nc).is_wall:
                        options.append((nr, nc, r + dr // 2, c + dc // 2))
                if options:
                    nr, nc, mr, mc = rng.choice(options)
                    g.node(nr, nc).is_wall = False
                    g.node(mr, mc).is_wall = False
                    stack.append((nr, nc))
                else:
                    stack.pop()

        for r, c in keep_open:
            if g.contains(r, c):
                g.node(r, c).is_wall = False
        return g

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, walls={sum(n.is_wall for n in self.nodes)})"
