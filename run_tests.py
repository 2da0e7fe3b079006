#!/usr/bin/env python3
"""
Test runner script for blogdesk.
Provides convenient commands to run different groups of tests.
"""

import sys
import subprocess
import argparse
from pathlib import Path


TEST_GROUPS = {
    "all": ["tests/"],
    "unit": [
        "tests/test_models.py",
        "tests/test_repositories.py",
        "tests/test_schemas.py",
        "tests/test_services.py",
        "tests/test_utils.py",
    ],
    "integration": ["tests/test_integration.py"],
    "models": ["tests/test_models.py"],
    "repositories": ["tests/test_repositories.py"],
    "schemas": ["tests/test_schemas.py"],
    "services": ["tests/test_services.py"],
    "routes": ["tests/test_routes.py"],
    "utils": ["tests/test_utils.py"],
}


def run_command(cmd: list[str], description: str) -> int:
    """Run a command and return the exit code."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Run tests for blogdesk")
    parser.add_argument("test_type", choices=[*TEST_GROUPS, "coverage"], help="Type of tests to run")
    parser.add_argument("--verbose", "-v", action="store_true", help="Run tests in verbose mode")
    parser.add_argument("--coverage", "-c", action="store_true", help="Run with coverage report")
    parser.add_argument("--html-coverage", action="store_true", help="Generate HTML coverage report")

    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest"]
    if args.verbose:
        cmd.append("-v")
    if args.coverage or args.test_type == "coverage":
        cmd.extend(["--cov=blogdesk", "--cov-report=term-missing"])
        if args.html_coverage or args.test_type == "coverage":
            cmd.append("--cov-report=html:htmlcov")

    cmd.extend(TEST_GROUPS.get(args.test_type, TEST_GROUPS["all"]))
    description = f"{args.test_type.title()} tests"

    exit_code = run_command(cmd, description)

    if exit_code == 0:
        print(f"\n{description} completed successfully")
        if args.test_type == "coverage" or args.html_coverage:
            print("HTML coverage report generated in htmlcov/index.html")
    else:
        print(f"\n{description} failed with exit code {exit_code}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
