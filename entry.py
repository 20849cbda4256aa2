#!/usr/bin/env python3
"""
Functional test runner. Needs a `bitcoind` on PATH or in $BITCOIND_EXE.

Usage:
    ./entry.py                          # Run all tests
    ./entry.py -t test_fund_wallet      # Run specific test
    ./entry.py -g variants              # Run test group
"""

import argparse
import os
import sys

import flexitest

from envconfigs import node_variant_envs
from factories.bitcoin import BitcoinFactory
from harness.config import ServiceType
from harness.runtime import BitcoindTestRuntime
from harness.test_logging import init_logger

TEST_DIR = os.path.join("tests", "functional")


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="entry.py",
        description="Run functional tests",
    )
    parser.add_argument(
        "-t",
        "--test",
        nargs="*",
        help="Run specific test(s)",
    )
    parser.add_argument(
        "-g",
        "--group",
        nargs="*",
        help="Run test group(s)",
    )
    return parser.parse_args(argv[1:])


def filter_tests(
    args: argparse.Namespace, test_dir: str, modules: dict[str, str]
) -> dict[str, str]:
    """
    Filters test modules against parsed args supplied from the command line.

    A test's groups are the directories between `test_dir` and its file.
    """
    arg_groups = frozenset(args.group or [])
    arg_tests = frozenset(os.path.split(t)[1].removesuffix(".py") for t in args.test or [])

    filtered = {}
    for test, path in modules.items():
        rel_parts = os.path.relpath(path, test_dir).split(os.path.sep)
        test_groups = frozenset(rel_parts[:-1])

        if arg_groups and not (arg_groups & test_groups):
            continue
        if arg_tests and test not in arg_tests:
            continue
        filtered[test] = path

    return filtered


def main(argv: list[str]) -> int:
    """Main entry point."""
    args = parse_args(argv)
    init_logger()

    # Create factories
    factories: dict[ServiceType, flexitest.Factory] = {
        ServiceType.Bitcoin: BitcoinFactory(range(18443, 18543)),
    }

    global_envs = node_variant_envs()

    # Set up test runtime
    root_dir = os.path.dirname(os.path.abspath(__file__))
    datadir = flexitest.create_datadir_in_workspace(os.path.join(root_dir, "_dd"))
    runtime = BitcoindTestRuntime(global_envs, datadir, factories)

    # Discover tests
    test_dir = os.path.join(root_dir, TEST_DIR)
    modules = flexitest.runtime.scan_dir_for_modules(test_dir)
    modules = filter_tests(args, test_dir, modules)
    tests = flexitest.runtime.load_candidate_modules(modules)

    # Run tests
    runtime.prepare_registered_tests()
    results = runtime.run_tests(tests)

    # Save and display results
    runtime.save_json_file("results.json", results)
    flexitest.dump_results(results)

    # Exit with error if any test failed
    flexitest.fail_on_error(results)

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
