#!/usr/bin/env python3
"""
Test runner for logctl.

Usage:
    python run_tests.py             # Run fast unit tests only (default)
    python run_tests.py --all       # Run all tests including slow ones
    python run_tests.py --list      # List available test modules
    python run_tests.py --coverage  # Run with coverage report
"""

import sys
import subprocess
import argparse
from pathlib import Path


def run_tests(include_slow=False, verbose=True, coverage=False):
    """
    Run pytest with appropriate configuration.

    Returns:
        Exit code from pytest.
    """
    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--tb=short",
        "--durations=10",
    ]

    if verbose:
        cmd.append("-v")

    if not include_slow:
        cmd.extend(["-m", "not slow"])

    if coverage:
        cmd.extend([
            "--cov=logctl",
            "--cov-report=term-missing",
        ])

    print(f"Running: {' '.join(cmd)}")
    print("=" * 60)

    result = subprocess.run(cmd)
    return result.returncode


def list_tests():
    """List available test modules."""
    test_files = sorted(Path("tests").glob("test_*.py"))

    print()
    print("Available test modules:")
    print("-" * 40)
    for test_file in test_files:
        print(f"  {test_file.stem}")
    print("-" * 40)
    print()
    print("Run a specific module: python -m pytest tests/test_resolver.py")


def main():
    """Main entry point for test runner."""
    parser = argparse.ArgumentParser(
        description="Test runner for logctl",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py             # Run fast tests only
  python run_tests.py --all       # Run all tests including slow
  python run_tests.py --coverage  # Run with coverage report
  python run_tests.py --list      # List test modules
        """
    )
    parser.add_argument("--all", action="store_true",
                        help="Run all tests including slow ones")
    parser.add_argument("--coverage", action="store_true",
                        help="Run tests with coverage analysis")
    parser.add_argument("--list", action="store_true",
                        help="List available test modules")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Less verbose output")

    args = parser.parse_args()

    if args.list:
        list_tests()
        return 0

    print("=" * 60)
    print("LOGCTL TEST SUITE")
    print("=" * 60)

    if args.all:
        print("\nRunning ALL tests (including slow)...")
    else:
        print("\nRunning fast tests only (use --all for slow tests)...")

    print()
    exit_code = run_tests(
        include_slow=args.all,
        verbose=not args.quiet,
        coverage=args.coverage,
    )

    print()
    print("=" * 60)
    if exit_code == 0:
        print("SUCCESS: All tests passed!")
    else:
        print(f"FAILED: Tests failed with exit code {exit_code}")
    print("=" * 60)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
