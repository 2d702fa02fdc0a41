"""
Tests for polynomial arithmetic over GF(256).
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir256 import gf256
from shamir256.polynomial import add_polynomials, multiply_polynomials, evaluate


def test_add_pads_shorter_operand():
    assert add_polynomials([1, 2], [3]) == [2, 2]
    assert add_polynomials([3], [1, 2]) == [2, 2]
    assert add_polynomials([], [4, 5, 6]) == [4, 5, 6]
    assert add_polynomials([], []) == []


def test_add_keeps_cancelled_terms():
    """Equal leading terms cancel to zero but the length is kept."""
    assert add_polynomials([1, 9], [2, 9]) == [3, 0]


def test_add_does_not_mutate_inputs():
    a, b = [1], [1, 2, 3]
    add_polynomials(a, b)
    assert a == [1]
    assert b == [1, 2, 3]


def test_multiply_known_products():
    print("Testing polynomial multiply...", end=" ")
    # (x + 1)^2 = x^2 + 1 in characteristic 2
    assert multiply_polynomials([1, 1], [1, 1]) == [1, 0, 1]
    # scaling by a constant
    assert multiply_polynomials([2, 3], [1]) == [2, 3]
    assert multiply_polynomials([5], [7, 2]) == [0x1B, 0x0A]
    # x * x
    assert multiply_polynomials([0, 1], [0, 1]) == [0, 0, 1]
    print("PASS")


def test_multiply_result_length():
    """len(a) + len(b) - 1, trailing zeros included."""
    assert multiply_polynomials([1, 0], [1, 0]) == [1, 0, 0]
    assert len(multiply_polynomials([1, 2, 3], [4, 5, 6, 7])) == 6
    assert multiply_polynomials([1, 2], [0]) == [0, 0]


def test_multiply_empty():
    assert multiply_polynomials([1, 2], []) == []


def test_evaluate():
    print("Testing polynomial evaluate...", end=" ")
    # 5 + 7x at x=1 and x=2
    assert evaluate([5, 7], 1) == 5 ^ 7
    assert evaluate([5, 7], 2) == 11
    # constant polynomial
    assert evaluate([42], 200) == 42
    # f(0) is the constant term
    assert evaluate([9, 8, 7], 0) == 9
    assert evaluate([], 3) == 0
    print("PASS")


def test_evaluate_matches_product():
    """Evaluating a product equals the product of evaluations."""
    a, b = [3, 14, 15], [92, 65]
    product = multiply_polynomials(a, b)
    for x in range(256):
        assert evaluate(product, x) == gf256.mul(evaluate(a, x), evaluate(b, x))


def main():
    tests = [
        test_add_pads_shorter_operand,
        test_add_keeps_cancelled_terms,
        test_add_does_not_mutate_inputs,
        test_multiply_known_products,
        test_multiply_result_length,
        test_multiply_empty,
        test_evaluate,
        test_evaluate_matches_product,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__}: {e}")
            failed += 1

    print(f"\nResults: {len(tests) - failed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
