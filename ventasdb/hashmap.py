"""Chained hash tables keyed through a string hash."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from ventasdb.linkedlist import LinkedList

HashFunc = Callable[[Any], int]

_MASK = 0xFFFFFFFF


def default_hash(key: Any) -> int:
    """Hash the text form of ``key`` as an unsigned 32-bit value."""
    result = 0
    for byte in str(key).encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        result = (result * 101 + signed) & _MASK
    return result


@dataclass
class HashEntry:
    """A key and the value stored under it."""

    key: Any = None
    value: Any = None


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError("table size must be positive")


class HashMap:
    """Hash table whose buckets are always present; ``put`` never replaces."""

    def __init__(self, size: int, hash_func: HashFunc | None = None) -> None:
        _check_size(size)
        self.size = size
        self._hash = hash_func or default_hash
        self._table = [LinkedList() for _ in range(size)]

    def _bucket_for(self, key: Any) -> LinkedList:
        return self._table[self._hash(key) % self.size]

    def put(self, key: Any, value: Any) -> None:
        """Add an entry; an earlier entry with the same key stays in front."""
        self._bucket_for(key).append(HashEntry(key, value))

    def remove(self, key: Any) -> None:
        """Remove the first entry stored under ``key``."""
        bucket = self._bucket_for(key)
        for index, entry in enumerate(bucket):
            if entry.key == key:
                bucket.remove(index)
                return
        raise KeyError(key)

    def get(self, key: Any) -> Any:
        """Return the value of the first entry stored under ``key``."""
        for entry in self._bucket_for(key):
            if entry.key == key:
                return entry.value
        raise KeyError(key)

    def is_empty(self) -> bool:
        """Return True when no bucket holds an entry."""
        return all(bucket.is_empty() for bucket in self._table)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield every (key, value) pair in bucket order."""
        for bucket in self._table:
            for entry in bucket:
                yield entry.key, entry.value


class HashMapList:
    """Hash table with lazily created buckets; ``put`` replaces a key's value."""

    def __init__(self, size: int, hash_func: HashFunc | None = None) -> None:
        _check_size(size)
        self.size = size
        self._hash = hash_func or default_hash
        self._table: list[LinkedList | None] = [None] * size

    def _position(self, key: Any) -> int:
        return self._hash(key) % self.size

    def put(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, moving the entry to the bucket's end."""
        pos = self._position(key)
        bucket = self._table[pos]
        if bucket is None:
            bucket = self._table[pos] = LinkedList()
        else:
            for index, entry in enumerate(bucket):
                if entry.key == key:
                    bucket.remove(index)
                    break
        bucket.append(HashEntry(key, value))

    def remove(self, key: Any) -> None:
        """Remove the entry stored under ``key``."""
        bucket = self._table[self._position(key)]
        if bucket is not None:
            for index, entry in enumerate(bucket):
                if entry.key == key:
                    bucket.remove(index)
                    return
        raise KeyError(key)

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``."""
        bucket = self._table[self._position(key)]
        if bucket is not None:
            for entry in bucket:
                if entry.key == key:
                    return entry.value
        raise KeyError(key)

    def __contains__(self, key: Any) -> bool:
        try:
            self.get(key)
        except KeyError:
            return False
        return True

    def is_empty(self) -> bool:
        """Return True when no bucket holds an entry."""
        return all(bucket is None or bucket.is_empty() for bucket in self._table)

    def bucket(self, index: int) -> LinkedList | None:
        """Return the bucket at ``index``, or None if unused or out of range."""
        if 0 <= index < self.size:
            return self._table[index]
        return None

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield every (key, value) pair in bucket order."""
        for bucket in self._table:
            if bucket is None:
                continue
            for entry in bucket:
                yield entry.key, entry.value

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._table if bucket is not None)

    def format(self) -> str:
        """Describe every non-empty bucket, one line each."""
        lines = []
        for index, bucket in enumerate(self._table):
            if bucket is None or bucket.is_empty():
                continue
            pairs = " ".join(f"({entry.key}, {entry.value})" for entry in bucket)
            lines.append(f"Índice {index}: {pairs}")
        return "\n".join(lines)