"""Command-line driver that runs a script of symbol table commands."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, TextIO

from .hashing import get_hash_function, sdbm_hash
from .table import SymbolTable

SUMMARY_PATH = Path("textFolder") / "temp.txt"

_FIRST_WORD = re.compile(r"\s*(\S+)(.*)", re.DOTALL)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _split_word(text: str) -> tuple[str, str]:
    """Split off the first whitespace-separated word; return it and the rest."""
    match = _FIRST_WORD.match(text)
    if match is None:
        return "", ""
    return match.group(1), match.group(2)


def _mismatch(out: TextIO, command: str) -> None:
    out.write(f"\tNumber of parameters mismatch for the command {command}\n")


def run_commands(lines: Iterable[str], table: SymbolTable, out: TextIO) -> int:
    """Run each command line against ``table``; return how many were run."""
    count = 0
    for raw in lines:
        line = raw.rstrip("\n")
        if not line:
            continue
        count += 1
        out.write(f"Cmd {count}: {line}\n")
        command, rest = _split_word(line)

        if command == "I":
            name, rest = _split_word(rest)
            type_ = rest.strip()
            if not type_:
                _mismatch(out, "I")
                continue
            table.insert(name, type_)
        elif command in ("L", "D"):
            name, rest = _split_word(rest)
            if rest.strip() or not name:
                _mismatch(out, command)
                continue
            if command == "L":
                table.lookup(name)
            else:
                table.remove(name)
        elif command in ("S", "E", "Q"):
            if rest:
                _mismatch(out, "S")
                continue
            if command == "S":
                table.enter_scope()
            elif command == "E":
                table.exit_scope()
            else:
                table.close()
        elif command == "P":
            sub, _ = _split_word(rest)
            if sub == "A":
                table.print_all_scopes()
            elif sub == "C":
                table.print_current_scope(out)
    return count


def _parse_bucket_count(line: str) -> Optional[int]:
    match = _LEADING_INT.match(line)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def _write_summary(table: SymbolTable) -> None:
    try:
        with open(SUMMARY_PATH, "w", encoding="utf-8") as summary:
            summary.write(f"Total collisions: {table.collision_count}\n")
            summary.write(f"Collision ratio: {table.collision_ratio():g}\n")
    except OSError:
        print("Unable to open temp.txt")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run INPUT's commands, writing the log to OUTPUT; return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (2, 3):
        print("usage: symtab INPUT OUTPUT [sdbm|djb2|fnv]", file=sys.stderr)
        return 1
    input_path, output_path = args[0], args[1]

    hash_function = sdbm_hash
    if len(args) == 3:
        try:
            hash_function = get_hash_function(args[2])
        except ValueError:
            print("Invalid hash function")
            return 1

    try:
        infile = open(input_path, encoding="utf-8")
    except OSError as exc:
        print(f"Cannot open {input_path}: {exc.strerror}", file=sys.stderr)
        return 1

    with infile, open(output_path, "w", encoding="utf-8") as outfile:
        num_buckets = _parse_bucket_count(infile.readline())
        if num_buckets is None:
            print("The first line must give a positive number of buckets", file=sys.stderr)
            return 1
        table = SymbolTable(num_buckets, 1, outfile, hash_function)
        run_commands(infile, table, outfile)

    _write_summary(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())