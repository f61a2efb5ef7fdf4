#!/usr/bin/env python3
# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the SwiftSpec CI checks locally: format, lint, tests with coverage, and build.

Pass step names (e.g. ``tests lint``) to run a subset.
"""

import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    "tests": ("Tests", ["uv", "run", "pytest", "--cov=swiftspec", "--cov-report=term-missing"]),
    "build": ("Build", ["uv", "build"]),
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps (all by default) and print a summary."""
    selected = argv or list(STEPS)
    unknown = [name for name in selected if name not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(STEPS)}"))
        return 2

    results = [_run_step(*STEPS[name]) for name in selected]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(title: str, cmd: list[str]) -> tuple[str, bool, float]:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root())
    return title, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    sep = "=" * 60
    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(sep))
    for title, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(color(f"  {status}  {title} ({elapsed:.1f}s)"))
    print()


def _repo_root() -> str:
    import pathlib

    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
