"""Build the documentation model described by a configuration file.

Loads every configured metadata module and doc-comment file, pairs them,
builds the symbol graph and resolves inherited documentation. Exits non-zero
when any fatal problem was reported.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from docmodel.run_build import run_build


def main(argv: Sequence[str] | None = None) -> int:
    """Run the model build."""
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument(
        "config",
        type=Path,
        help="YAML configuration file listing the source groups",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON build report to this path",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output (missing documentation, pairing details)",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_build(args.config, report_path=args.report)


if __name__ == "__main__":
    raise SystemExit(main())
