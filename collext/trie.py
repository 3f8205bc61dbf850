import typing as t
from itertools import count, islice

from .errors import InvalidArgumentError
from .logger import logger
from .snapshot import BLACK, RED, TrieNodeView, TrieSnapshot

__all__ = ["Trie"]

ALPHABET = 26


class Slots(list):
    """Child slots of a node, addressable by letter ('a'..'z') or by position."""

    low = ord("a")

    @classmethod
    def position(cls, ch: str) -> int:
        pos = ord(ch) - cls.low if len(ch) == 1 else -1
        if not 0 <= pos < ALPHABET:
            raise InvalidArgumentError(f"Only 'a'..'z' can be stored, got {ch=}")

        return pos

    def _index(self, idx):
        if isinstance(idx, str):
            return self.position(idx)

        assert isinstance(idx, int)
        return idx

    def __getitem__(self, idx):
        return super().__getitem__(self._index(idx))

    def __setitem__(self, idx, val):
        return super().__setitem__(self._index(idx), val)


class Node:
    is_word: bool
    children: Slots

    def __init__(self):
        self.is_word = False
        self.children = Slots([None for _ in range(ALPHABET)])

    def is_leaf(self) -> bool:
        return all(child is None for child in self.children)

    def __repr__(self):
        chars = [chr(i + Slots.low) for i, e in enumerate(self.children) if e]
        return f"Node(is_word={self.is_word}, children={chars})"


class Trie:
    """
    Prefix tree over lowercase ascii words.

    >>> trie = Trie()
    >>> trie.add_words(["water", "wafer", "watermelon"])
    >>> trie.contains("water")
    True
    >>> trie.starts_with("wat")
    True
    >>> trie.remove("water")
    >>> trie.get_recommendations("wa", 5)
    ['wafer', 'watermelon']
    >>> trie.size()
    2

    Empty strings are ignored by every operation instead of raising.
    """

    root: Node

    def __init__(self):
        self.root = Node()
        self._size = 0

    def _walk(self, word: str) -> Node | None:
        temp = self.root
        for c in word:
            temp = temp.children[c]
            if temp is None:
                return None

        return temp

    def add_word(self, word: str):
        if not word:
            return

        # reject the whole word before any node is created
        for c in word:
            Slots.position(c)

        temp = self.root
        for c in word:
            if not temp.children[c]:
                temp.children[c] = Node()

            temp = temp.children[c]

        if temp.is_word:
            logger.debug(f"[add_word] {word=} is already stored")
            return

        temp.is_word = True
        self._size += 1

    def add_words(self, words: t.Iterable[str]):
        for word in words:
            self.add_word(word)

    def contains(self, word: str) -> bool:
        if not word:
            return False

        node = self._walk(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        if not prefix:
            return self._size != 0

        return self._walk(prefix) is not None

    def remove(self, word: str):
        if not word:
            return

        path = [self.root]
        for c in word:
            node = path[-1].children[c]
            if node is None:
                return

            path.append(node)

        if not path[-1].is_word:
            logger.debug(f"[remove] {word=} is only a prefix, nothing to remove")
            return

        path[-1].is_word = False
        self._size -= 1

        # path[i] is reached through word[i - 1]; the root itself is never pruned
        for i in range(len(word), 0, -1):
            node = path[i]
            if node.is_word or not node.is_leaf():
                break

            path[i - 1].children[word[i - 1]] = None
            logger.debug(f"[remove] pruned dead node at {word[:i]!r}")

    def _search(self, node: Node, curr="") -> t.Generator[str, None, None]:
        if node.is_word:
            yield curr

        for i, child in enumerate(node.children):
            if not child:
                continue
            yield from self._search(child, curr + chr(Slots.low + i))

    def get_recommendations(self, prefix: str, n: int) -> list[str]:
        if n <= 0:
            return []

        node = self._walk(prefix)
        if node is None:
            return []

        return list(islice(self._search(node, prefix), n))

    def words(self) -> t.Iterator[str]:
        return self._search(self.root)

    def size(self) -> int:
        return self._size

    def _traverse(self, node: Node, parent_id: str, depth: int, counter, snap: TrieSnapshot):
        for i, child in enumerate(node.children):
            if not child:
                continue

            label = chr(Slots.low + i)
            node_id = f"{label}_{depth}_{next(counter)}"
            color = RED if child.is_word else BLACK
            snap.nodes.append(TrieNodeView(node_id, label, child.is_word, color))
            snap.edges.append((parent_id, node_id))
            self._traverse(child, node_id, depth + 1, counter, snap)

    def snapshot(self) -> TrieSnapshot:
        snap = TrieSnapshot(nodes=[TrieNodeView("ROOT", "ROOT", False, BLACK)])
        self._traverse(self.root, "ROOT", 1, count(), snap)
        return snap

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __iter__(self):
        return self.words()

    def __len__(self):
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, root={self.root!r})"
