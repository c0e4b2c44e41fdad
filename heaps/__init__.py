from heaps.binary import BinaryHeap, BinaryNode
from heaps.common import (
    Comparable,
    EmptyHeapError,
    HeapError,
    KeyIncreaseError,
    Ordering,
)
from heaps.fibonacci import FibonacciHeap, FibonacciNode
from heaps.queue import PriorityQueue

__all__ = [
    "BinaryHeap",
    "BinaryNode",
    "Comparable",
    "EmptyHeapError",
    "FibonacciHeap",
    "FibonacciNode",
    "HeapError",
    "KeyIncreaseError",
    "Ordering",
    "PriorityQueue",
]
