"""Main orchestration script: optional development checks, then the model build."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from docmodel.build_cli import main as build_main


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> int:
    """Run the documentation model build."""
    parser = argparse.ArgumentParser(
        description="Build the documentation model from assemblies and XML docs."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before building",
    )
    parser.add_argument(
        "--config",
        default="docmodel.yml",
        help="Path to configuration file (default: docmodel.yml)",
    )
    parser.add_argument(
        "--report",
        help="Write a JSON build report to this path",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with the build.\n")

    argv = [args.config]
    if args.report:
        argv.extend(["--report", args.report])
    if args.verbose:
        argv.append("--verbose")
    return build_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
