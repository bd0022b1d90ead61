"""A stack of nested scopes with shared collision accounting."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .hashing import HashFunction, sdbm_hash
from .scope import ScopeTable
from .symbol import SymbolInfo


class SymbolTable:
    """Nested scopes, innermost first, reporting every action to ``out``."""

    def __init__(
        self,
        num_buckets: int,
        scope_id: int = 1,
        out: Optional[TextIO] = None,
        hash_function: HashFunction = sdbm_hash,
    ) -> None:
        self.num_buckets = num_buckets
        self.collision_count = 0
        self._out = out
        self._last_id = scope_id
        self.current_scope: Optional[ScopeTable] = ScopeTable(
            scope_id, num_buckets, None, hash_function, out
        )
        self.out.write(f"\tScopeTable# {scope_id} created\n")

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _active_scope(self) -> ScopeTable:
        if self.current_scope is None:
            raise RuntimeError("no active scope")
        return self.current_scope

    def enter_scope(self) -> None:
        """Open a new innermost scope with the next scope id."""
        if self.current_scope is None:
            return
        self._last_id += 1
        self.current_scope = ScopeTable(
            self._last_id,
            self.num_buckets,
            self.current_scope,
            self.current_scope.hash_function,
            self._out,
        )
        self.out.write(f"\tScopeTable# {self._last_id} created\n")

    def exit_scope(self) -> None:
        """Close the innermost scope, if there is one."""
        if self.current_scope is None:
            return
        self.out.write(f"\tScopeTable# {self.current_scope.scope_id} removed\n")
        self.current_scope = self.current_scope.parent

    def insert(self, name: str, type_: str) -> bool:
        """Insert into the innermost scope; return False on a duplicate name."""
        scope = self._active_scope()
        before = scope.collisions
        inserted = scope.insert(name, type_)
        self.collision_count += scope.collisions - before
        return inserted

    def remove(self, name: str) -> bool:
        """Remove ``name`` from the innermost scope; return whether it was there."""
        return self._active_scope().delete(name)

    def lookup(self, name: str) -> Optional[SymbolInfo]:
        """Find ``name`` in the innermost scope that holds it, or return None."""
        scope = self.current_scope
        while scope is not None:
            entry = scope.lookup(name)
            if entry is not None:
                return entry
            scope = scope.parent
        self.out.write(f"\t'{name}' not found in any of the ScopeTables\n")
        return None

    def print_current_scope(self, out: Optional[TextIO] = None) -> None:
        """Write the innermost scope to ``out`` (the table's stream by default)."""
        self._active_scope().write(out if out is not None else self.out)

    def print_all_scopes(self) -> None:
        """Write every scope, innermost first, each one tab deeper than the last."""
        scope = self.current_scope
        indent = 1
        while scope is not None:
            scope.write(self.out, indent)
            scope = scope.parent
            indent += 1

    def collision_ratio(self) -> float:
        """Collisions seen so far divided by the number of buckets."""
        return self.collision_count / self.num_buckets

    def reset_collision_count(self) -> None:
        """Set the collision count back to zero."""
        self.collision_count = 0

    def close(self) -> None:
        """Remove every remaining scope, innermost first."""
        while self.current_scope is not None:
            self.exit_scope()

    def __enter__(self) -> "SymbolTable":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()