"""Scoped symbol table used by the lexical analyser.

Scope ids are dotted strings, and symbols print as ``< name : type >``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TextIO

StringHash = Callable[[str], int]

_MASK32 = 0xFFFFFFFF


def _signed_bytes(text: str) -> Iterator[int]:
    """Yield the bytes of ``text`` as signed 8-bit values."""
    for byte in text.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def sdbm_hash32(text: str) -> int:
    """Unreduced 32-bit SDBM hash of ``text``."""
    value = 0
    for char in _signed_bytes(text):
        value = (char + (value << 6) + (value << 16) - value) & _MASK32
    return value


@dataclass
class LexSymbolInfo:
    """A symbol found by the lexer: its lexeme and token type."""

    name: str
    type: str

    def render(self) -> str:
        """Return the printable form ``< name : type >``."""
        return f"< {self.name} : {self.type} >"

    def __str__(self) -> str:
        return self.render()


class LexScopeTable:
    """One scope's symbols, stored in ``num_buckets`` chained buckets."""

    def __init__(
        self,
        scope_id: str,
        num_buckets: int,
        parent: Optional["LexScopeTable"] = None,
        hash_function: StringHash = sdbm_hash32,
    ) -> None:
        if num_buckets < 1:
            raise ValueError("number of buckets must be positive")
        self.scope_id = scope_id
        self.num_buckets = num_buckets
        self.parent = parent
        self.hash_function = hash_function
        self.collisions = 0
        self._buckets: list[list[LexSymbolInfo]] = [[] for _ in range(num_buckets)]

    def _index(self, name: str) -> int:
        return self.hash_function(name) % self.num_buckets

    def insert(self, name: str, type_: str, out: TextIO) -> bool:
        """Add a symbol; return False (after reporting it) if the name exists."""
        if self.lookup(name, out) is not None:
            return False
        bucket = self._buckets[self._index(name)]
        if bucket:
            self.collisions += 1
        bucket.append(LexSymbolInfo(name, type_))
        return True

    def lookup(self, name: str, out: TextIO) -> Optional[LexSymbolInfo]:
        """Return the symbol called ``name``, reporting where it was found."""
        index = self._index(name)
        for pos, entry in enumerate(self._buckets[index]):
            if entry.name == name:
                out.write(
                    f"{entry.render()} already exists in ScopeTable# "
                    f"{self.scope_id} at position {index}, {pos}\n\n"
                )
                return entry
        return None

    def delete(self, name: str) -> bool:
        """Remove the symbol called ``name``; return whether it was present."""
        bucket = self._buckets[self._index(name)]
        for pos, entry in enumerate(bucket):
            if entry.name == name:
                del bucket[pos]
                return True
        return False

    def write(self, out: TextIO) -> None:
        """Write the non-empty buckets to ``out``."""
        out.write(f"ScopeTable # {self.scope_id}\n")
        for index, bucket in enumerate(self._buckets):
            if bucket:
                entries = "".join(entry.render() for entry in bucket)
                out.write(f"{index} --> {entries}\n")

    def __iter__(self) -> Iterator[LexSymbolInfo]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


class LexSymbolTable:
    """Nested lexer scopes, innermost first.

    Symbol reports go to ``out``; scope creation and removal and failed
    lookups are announced on standard output.
    """

    def __init__(
        self,
        num_buckets: int,
        scope_id: str = "1",
        out: Optional[TextIO] = None,
        hash_function: StringHash = sdbm_hash32,
    ) -> None:
        self.num_buckets = num_buckets
        self.collision_count = 0
        self._out = out
        self._last_id = scope_id
        self.current_scope: Optional[LexScopeTable] = LexScopeTable(
            scope_id, num_buckets, None, hash_function
        )
        sys.stdout.write(f"\tScopeTable# {scope_id} created\n")

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _active_scope(self) -> LexScopeTable:
        if self.current_scope is None:
            raise RuntimeError("no active scope")
        return self.current_scope

    def enter_scope(self) -> None:
        """Open a new innermost scope whose id extends the last one with ``.1``."""
        if self.current_scope is None:
            return
        self._last_id = f"{self._last_id}.1"
        self.current_scope = LexScopeTable(
            self._last_id,
            self.num_buckets,
            self.current_scope,
            self.current_scope.hash_function,
        )
        sys.stdout.write(f"\tScopeTable# {self._last_id} created\n")

    def exit_scope(self) -> None:
        """Close the innermost scope, if there is one."""
        if self.current_scope is None:
            return
        sys.stdout.write(f"\tScopeTable# {self.current_scope.scope_id} removed\n")
        self.current_scope = self.current_scope.parent

    def insert(self, name: str, type_: str) -> bool:
        """Insert into the innermost scope; return False on a duplicate name."""
        scope = self._active_scope()
        before = scope.collisions
        inserted = scope.insert(name, type_, self.out)
        self.collision_count += scope.collisions - before
        return inserted

    def remove(self, name: str) -> bool:
        """Remove ``name`` from the innermost scope; return whether it was there."""
        return self._active_scope().delete(name)

    def lookup(self, name: str) -> Optional[LexSymbolInfo]:
        """Find ``name`` in the innermost scope that holds it, or return None."""
        scope = self.current_scope
        while scope is not None:
            entry = scope.lookup(name, self.out)
            if entry is not None:
                return entry
            scope = scope.parent
        sys.stdout.write(f"\t'{name}' not found in any of the ScopeTables\n")
        return None

    def print_current_scope(self, out: Optional[TextIO] = None) -> None:
        """Write the innermost scope to ``out`` (the table's stream by default)."""
        self._active_scope().write(out if out is not None else self.out)

    def print_all_scopes(self) -> None:
        """Write every scope, innermost first, followed by a blank line."""
        scope = self.current_scope
        while scope is not None:
            scope.write(self.out)
            scope = scope.parent
        self.out.write("\n")

    def collision_ratio(self) -> float:
        """Collisions seen so far divided by the number of buckets."""
        return self.collision_count / self.num_buckets

    def reset_collision_count(self) -> None:
        """Set the collision count back to zero."""
        self.collision_count = 0