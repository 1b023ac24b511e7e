from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar


T = TypeVar("T")


class PermutationEnumerator(Iterator[Tuple[T, ...]]):
    """
    Yields every ordering of ``elements`` exactly once, lexicographically by
    index position, starting with the input order and ending with its
    reverse. The enumerator is single pass: build a new one to start over.
    """

    def __init__(self, elements: Sequence[T]):
        self._elements = list(elements)
        self._indices: List[int] = list(range(len(self._elements)))
        self._next: Optional[Tuple[T, ...]] = tuple(self._elements) if self._elements else None

    def __iter__(self) -> "PermutationEnumerator[T]":
        return self

    def __next__(self) -> Tuple[T, ...]:
        if self._next is None:
            raise StopIteration
        current = self._next
        self._advance()
        return current

    def _advance(self) -> None:
        idx = self._indices
        i = len(idx) - 2
        while i >= 0 and idx[i] > idx[i + 1]:
            i -= 1
        if i < 0:
            self._next = None
            return
        # Smallest index to the right of i that is larger than idx[i].
        j = len(idx) - 1
        while idx[j] < idx[i]:
            j -= 1
        idx[i], idx[j] = idx[j], idx[i]
        idx[i + 1 :] = reversed(idx[i + 1 :])
        self._next = tuple(self._elements[k] for k in idx)
