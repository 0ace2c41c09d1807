"""
traversal.py — Binary Tree Traversals
======================================
In-order, pre-order and post-order walks over a binary tree.  Each one
yields exactly one "visit" Step per node, with the node itself in
`active_node` and its value in `variables["value"]`.  The tree is never
copied; only the active node changes from frame to frame.

Walks are iterative with an explicit stack, so a degenerate (linked-list
shaped) tree can't blow the interpreter's recursion limit.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generator, Iterable, List, Optional

from algorithms.step import Step


# ---------------------------------------------------------------------------
# TreeNode — parent owns children, no back-pointers
# ---------------------------------------------------------------------------
@dataclass(eq=False)
class TreeNode:
    value: int
    left:  Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def insert(self, value: int) -> None:
        """BST insert.  Equal values go to the right subtree."""
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right

    def size(self) -> int:
        count, stack = 0, [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "left":  self.left.to_dict() if self.left else None,
            "right": self.right.to_dict() if self.right else None,
        }


def build_bst(values: Iterable[int]) -> Optional[TreeNode]:
    """Unbalanced BST built by inserting `values` in order.  None for no values."""
    root: Optional[TreeNode] = None
    for v in values:
        if root is None:
            root = TreeNode(v)
        else:
            root.insert(v)
    return root


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
IN_ORDER_PSEUDOCODE: List[str] = [
    "def in_order(node):",                 # 0
    "    if node is None: return",         # 1
    "    in_order(node.left)",             # 2
    "    visit(node)",                     # 3
    "    in_order(node.right)",            # 4
]

PRE_ORDER_PSEUDOCODE: List[str] = [
    "def pre_order(node):",                # 0
    "    if node is None: return",         # 1
    "    visit(node)",                     # 2
    "    pre_order(node.left)",            # 3
    "    pre_order(node.right)",           # 4
]

POST_ORDER_PSEUDOCODE: List[str] = [
    "def post_order(node):",               # 0
    "    if node is None: return",         # 1
    "    post_order(node.left)",           # 2
    "    post_order(node.right)",          # 3
    "    visit(node)",                     # 4
]


def _visit(line: int, node: TreeNode, count: int) -> Step:
    return Step(line=line, active_node=node, variables={"value": node.value, "visited": count})


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def in_order(root: Optional[TreeNode]) -> Generator[Step, None, None]:
    stack: List[TreeNode] = []
    node, count = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        count += 1
        yield _visit(3, node, count)
        node = node.right


def pre_order(root: Optional[TreeNode]) -> Generator[Step, None, None]:
    if root is None:
        return
    stack, count = [root], 0
    while stack:
        node = stack.pop()
        count += 1
        yield _visit(2, node, count)
        # right first so left pops first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def post_order(root: Optional[TreeNode]) -> Generator[Step, None, None]:
    stack: List[TreeNode] = []
    last: Optional[TreeNode] = None
    node, count = root, 0
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        peek = stack[-1]
        if peek.right is not None and last is not peek.right:
            node = peek.right
        else:
            count += 1
            yield _visit(4, peek, count)
            last = stack.pop()


TRAVERSALS: Dict[str, Callable[[Optional[TreeNode]], Generator[Step, None, None]]] = {
    "in_order":   in_order,
    "pre_order":  pre_order,
    "post_order": post_order,
}
