#!/usr/bin/env python3
"""
Main test runner for parsemath tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Run one expression through every pipeline stage."""

    print("🚀 parsemath Test Suite")
    print("=" * 60)

    try:
        from parsemath.lexer.lexer import Lexer
        from parsemath.parser.parser import Parser
        from parsemath.parser.ast_nodes import format_ast
        from parsemath.evaluator.evaluator import Evaluator

        print("✅ All pipeline modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import pipeline modules: {e}")
        return False

    print("Testing simple evaluation pipeline...")
    code = "2*3+(4-5)+2^3/4"

    print("  🔧 Lexing...")
    lexer = Lexer(code)
    tokens = lexer.tokenize()
    if lexer.has_errors():
        print(f"     ❌ Lexer errors: {len(lexer.errors)}")
        return False
    print(f"     Generated {len(tokens)} tokens")

    print("  🔧 Parsing...")
    ast = Parser(tokens).parse()
    print(f"     Generated AST {format_ast(ast)}")

    print("  🔧 Evaluating...")
    value = Evaluator().evaluate(ast)
    print(f"     Computed {value}")

    if value != 7.0:
        print("     ❌ Expected 7.0")
        return False

    print("✅ Pipeline smoke test passed")
    print()
    return True


def run_unit_tests():
    """Discover and run everything under tests/."""
    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    ok = run_smoke_test() and run_unit_tests()

    print("=" * 60)
    print("🎉 All tests passed" if ok else "❌ Some tests failed")
    sys.exit(0 if ok else 1)
