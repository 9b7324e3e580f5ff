"""Tree prefixes for displaying a flat, ordered list as a (multi-root) tree.

:func:`provide_prefix` computes, for every item, the box-drawing prefix that
links it to its parent and siblings::

    items = ["1", "1/2", "1/2/3", "1/4", "5", "5/6"]
    prefixes = provide_prefix(
        items,
        lambda parent, item: (
            parent.count("/") + 1 == item.count("/") and item.startswith(parent)
        ),
    )
    for prefix, item in zip(prefixes, items):
        print(prefix, item)

prints::

     1
     ├─ 1/2
     │  └─ 1/2/3
     └─ 1/4
     5
     └─ 5/6

The prefixes are plain strings, typically placed at the start of the first
cell of each table row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

EMPTY = "   "
EDGE = " └─"
PIPE = " │ "
BRANCH = " ├─"


@dataclass
class _TreeNode:
    parent: int | None = None
    level: list[bool] = field(default_factory=list)
    children: list[int] = field(default_factory=list)


def _level_to_string(level: list[bool]) -> str:
    if not level:
        return ""
    parts: list[str] = []
    last_col = len(level) - 1
    for col, is_last_child in enumerate(level):
        if col == last_col:
            parts.append(EDGE if is_last_child else BRANCH)
        else:
            parts.append(EMPTY if is_last_child else PIPE)
    return "".join(parts)


def _build_nodes(items: Sequence[T], is_parent_of: Callable[[T, T], bool]) -> list[_TreeNode]:
    """Link every item to its parent by walking back up from the previous item."""
    nodes: list[_TreeNode] = []
    current: int | None = None
    for i, item in enumerate(items):
        while current is not None and not is_parent_of(items[current], item):
            current = nodes[current].parent
        if current is not None:
            nodes[current].children.append(i)
        nodes.append(_TreeNode(parent=current))
        current = i
    return nodes


def _assign_levels(nodes: list[_TreeNode]) -> None:
    # Parents always precede their children, so one forward pass suffices.
    for node in nodes:
        remaining = len(node.children)
        for child in node.children:
            remaining -= 1
            nodes[child].level = [*node.level, remaining == 0]


def provide_prefix(items: Sequence[T], is_parent_of: Callable[[T, T], bool]) -> list[str]:
    """Return one tree prefix per item of *items*, in the same order.

    *items* must already be in display order, with every item's parent
    appearing before it as its most recent ancestor.
    ``is_parent_of(candidate, item)`` tells whether *candidate* is the direct
    parent of *item*.  Items without a parent are roots and get an empty
    prefix.  A predicate that breaks the ordering contract yields a wrong
    (but well-formed) tree; it is not detected.
    """
    nodes = _build_nodes(items, is_parent_of)
    _assign_levels(nodes)
    return [_level_to_string(node.level) for node in nodes]
