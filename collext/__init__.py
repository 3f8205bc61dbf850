from .errors import CollectionError, EmptyCollectionError, InvalidArgumentError
from .heap import Heap, Order, max_heap, min_heap, natural_compare
from .snapshot import HeapEntry, TrieNodeView, TrieSnapshot
from .trie import Trie

__all__ = [
    "CollectionError",
    "EmptyCollectionError",
    "InvalidArgumentError",
    "Heap",
    "Order",
    "min_heap",
    "max_heap",
    "natural_compare",
    "HeapEntry",
    "TrieNodeView",
    "TrieSnapshot",
    "Trie",
]
