from __future__ import annotations
from collections import deque
from typing import Any, Deque, List


class Queue:
    "Απλή ουρά FIFO για βοηθητική χρήση στις διασχίσεις του δέντρου."

    def __init__(self):
        self._items: Deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        "Προσθέτει στοιχείο στο τέλος της ουράς."
        self._items.append(item)

    def dequeue(self) -> Any:
        "Αφαιρεί και επιστρέφει το πρώτο στοιχείο της ουράς."
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    "Απλή στοίβα LIFO."

    def __init__(self):
        self._items: List[Any] = []

    def push(self, item: Any) -> None:
        "Βάζει στοιχείο στην κορυφή της στοίβας."
        self._items.append(item)

    def pop(self) -> Any:
        "Αφαιρεί και επιστρέφει το στοιχείο της κορυφής."
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
