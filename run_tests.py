#!/usr/bin/env python3
"""
Main test runner for the JKS lexer tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests() -> bool:
    """Discover and run every test under tests/."""
    print("JKS Lexer Test Suite")
    print("=" * 60)

    suite = unittest.TestLoader().discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    print(f"Ran {result.testsRun} tests: "
          f"{len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
