"""A named symbol with a type description."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SymbolInfo:
    """A symbol table entry: a name and its type string."""

    name: str
    type: str

    def render(self) -> str:
        """Return the printable form, expanding FUNCTION, STRUCT and UNION types."""
        if self.type.startswith("FUNCTION"):
            tokens = self.type.split()
            return_type = tokens[1] if len(tokens) > 1 else ""
            params = ",".join(tokens[2:])
            return f"<{self.name},FUNCTION,{return_type}<==({params})>"
        if self.type.startswith(("STRUCT", "UNION")):
            tokens = self.type.split()
            kind = tokens[0]
            rest = tokens[1:]
            fields = ",".join(
                f"({field_type},{field_name})"
                for field_type, field_name in zip(rest[0::2], rest[1::2])
            )
            return f"<{self.name},{kind},{{{fields}}}>"
        return f"<{self.name},{self.type}>"

    def __str__(self) -> str:
        return self.render()