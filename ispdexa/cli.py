"""Command line entry: report on a simulation's results and draw its bubbles."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from ispdexa.bubbles import pack_file
from ispdexa.results import (
    RESULTS_FILE,
    global_report,
    load_results,
    resources_table,
    tasks_report,
    users_report,
    write_value_files,
)

LINK_DRAWING = "output.svg"
MACHINE_DRAWING = "output_2.svg"


def _hue(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not 0.0 <= value < 1.0:
        raise argparse.ArgumentTypeError("hue must lie in [0, 1)")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ispdexa",
        description=(
            "Print the reports of a simulation's results and draw the "
            "communication and processing of its resources as packed circles."
        ),
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help=f"directory holding {RESULTS_FILE} (default: current directory)",
    )
    parser.add_argument(
        "--hue",
        type=_hue,
        default=None,
        help="hue of the first circle, in [0, 1); random when left out",
    )
    return parser


def _print_section(title: str, lines: Sequence[str]) -> None:
    print(f"== {title} ==")
    for line in lines:
        print(line)
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the report; returns the process exit status."""
    args = _parser().parse_args(argv)
    directory = Path(args.directory)

    try:
        data = load_results(directory / RESULTS_FILE)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _print_section("Global", global_report(data))
    _print_section("Tasks", tasks_report(data))
    _print_section("Users", users_report(data))
    _print_section("Resources", ["\t".join(row) for row in resources_table(data)])

    machine_path, link_path = write_value_files(data, directory)
    drawings = (
        (link_path, directory / LINK_DRAWING),
        (machine_path, directory / MACHINE_DRAWING),
    )
    for source, target in drawings:
        try:
            pack_file(source, target, args.hue)
        except ValueError:
            print(f"{source.name}: nothing to draw", file=sys.stderr)
        else:
            print(f"wrote {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())