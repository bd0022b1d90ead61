"""A single scope: a hash table of symbols with chained buckets."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from .hashing import HashFunction, sdbm_hash
from .symbol import SymbolInfo


class ScopeTable:
    """One scope's symbols, stored in ``num_buckets`` chained buckets."""

    def __init__(
        self,
        scope_id: int,
        num_buckets: int,
        parent: Optional["ScopeTable"] = None,
        hash_function: HashFunction = sdbm_hash,
        out: Optional[TextIO] = None,
    ) -> None:
        if num_buckets < 1:
            raise ValueError("number of buckets must be positive")
        self.scope_id = scope_id
        self.num_buckets = num_buckets
        self.parent = parent
        self.hash_function = hash_function
        self.collisions = 0
        self._out = out
        self._buckets: list[list[SymbolInfo]] = [[] for _ in range(num_buckets)]

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _index(self, name: str) -> int:
        return self.hash_function(name, self.num_buckets) % self.num_buckets

    def _find(self, name: str) -> tuple[int, Optional[int]]:
        index = self._index(name)
        for pos, entry in enumerate(self._buckets[index]):
            if entry.name == name:
                return index, pos
        return index, None

    def insert(self, name: str, type_: str) -> bool:
        """Add a symbol; return False if the name is already in this scope."""
        index, found = self._find(name)
        if found is not None:
            self.out.write(f"\t'{name}' already exists in the current ScopeTable\n")
            return False
        bucket = self._buckets[index]
        if bucket:
            self.collisions += 1
        bucket.append(SymbolInfo(name, type_))
        self.out.write(
            f"\tInserted in ScopeTable# {self.scope_id} at position {index + 1}, {len(bucket)}\n"
        )
        return True

    def lookup(self, name: str) -> Optional[SymbolInfo]:
        """Return the symbol called ``name`` in this scope, or None."""
        index, found = self._find(name)
        if found is None:
            return None
        self.out.write(
            f"\t'{name}' found in ScopeTable# {self.scope_id} at position {index + 1}, {found + 1}\n"
        )
        return self._buckets[index][found]

    def delete(self, name: str) -> bool:
        """Remove the symbol called ``name``; return whether it was present."""
        index, found = self._find(name)
        if found is None:
            self.out.write("\tNot found in the current ScopeTable\n")
            return False
        del self._buckets[index][found]
        self.out.write(
            f"\tDeleted '{name}' from ScopeTable# {self.scope_id} at position {index + 1}, {found + 1}\n"
        )
        return True

    def write(self, out: TextIO, indent: int = 1) -> None:
        """Write every bucket to ``out``, indented by ``indent`` tabs."""
        tab = "\t" * indent
        out.write(f"{tab}ScopeTable# {self.scope_id}\n")
        for number, bucket in enumerate(self._buckets, start=1):
            entries = "".join(f" {entry.render()}" for entry in bucket)
            out.write(f"{tab}{number}-->{entries} \n")

    def __iter__(self) -> Iterator[SymbolInfo]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name)[1] is not None