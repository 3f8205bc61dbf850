"""
Read-only structural views handed to a renderer.

>>> from collext import min_heap
>>> h = min_heap()
>>> h.push_all([3, 1, 2])
>>> h.snapshot()[0]
HeapEntry(label='1', left='3', right='2', color='red')
"""
import typing as t
from dataclasses import dataclass, field

RED = "red"
BLACK = "black"


class HeapEntry(t.NamedTuple):
    label: str
    left: str | None = None
    right: str | None = None
    color: str = RED


class TrieNodeView(t.NamedTuple):
    id: str
    label: str
    terminal: bool
    color: str


@dataclass
class TrieSnapshot:
    nodes: list[TrieNodeView] = field(default_factory=list)
    edges: list[tuple[str, str]] = field(default_factory=list)

    def children(self, node_id: str) -> list[str]:
        return [dst for src, dst in self.edges if src == node_id]

    def node(self, node_id: str) -> TrieNodeView:
        for n in self.nodes:
            if n.id == node_id:
                return n

        raise KeyError(f"{node_id=} is not part of the snapshot")
