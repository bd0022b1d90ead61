"""Compare hash functions by running the same script under each of them."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from . import cli

HASH_NAMES = ("sdbm", "djb2", "fnv")
COLUMN_WIDTH = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

PathLike = Union[str, Path]


@dataclass
class HashReport:
    """Collision figures for one hash function."""

    name: str
    collisions: int = 0
    ratio: float = 0.0


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def parse_report(path: PathLike, hash_name: str) -> HashReport:
    """Read the collision summary at ``path``; missing figures stay zero."""
    report = HashReport(hash_name)
    try:
        with open(path, encoding="utf-8") as summary:
            lines = summary.read().splitlines()
    except OSError:
        return report
    for line in lines:
        if "Total collisions:" in line:
            report.collisions = _leading_int(line.partition(":")[2])
        elif "Collision ratio:" in line:
            report.ratio = _leading_float(line.partition(":")[2])
    return report


def _row(*cells: object) -> str:
    return "".join(f"{cell!s:<{COLUMN_WIDTH}}" for cell in cells) + "\n"


def write_report(reports: Iterable[HashReport], path: PathLike) -> None:
    """Write a fixed-width table of ``reports`` to ``path``."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(_row("Hash Function", "Total Collisions", "Collision Ratio"))
        for report in reports:
            out.write(_row(report.name, report.collisions, f"{report.ratio:g}"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sample script under every hash function and tabulate collisions."""
    parser = argparse.ArgumentParser(
        prog="symtab-report",
        description="Compare collision counts of the available hash functions.",
    )
    parser.parse_args(argv)

    folder = Path("textFolder")
    reports = []
    for name in HASH_NAMES:
        args = [str(folder / "sample_input.txt"), str(folder / f"temp_{name}.txt"), name]
        print(f"Running: symtab {' '.join(args)}")
        if cli.main(args) != 0:
            print(f"Execution failed for hash function: {name}", file=sys.stderr)
            continue
        reports.append(parse_report(cli.SUMMARY_PATH, name))

    try:
        write_report(reports, folder / "report.txt")
    except OSError as exc:
        print(f"Cannot write report: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())