"""
Polynomials over GF(256)
Coefficient lists in ascending degree: index 0 is the constant term.

These are the building blocks for share evaluation and for the Lagrange
basis polynomials used during recovery.
"""

from shamir256 import gf256


def add_polynomials(a: list[int], b: list[int]) -> list[int]:
    """
    Add two polynomials term by term.

    The shorter operand is padded with zero coefficients, so the result
    always has max(len(a), len(b)) terms.
    """
    if len(a) < len(b):
        a = list(a) + [0] * (len(b) - len(a))
    elif len(b) < len(a):
        b = list(b) + [0] * (len(a) - len(b))
    return [gf256.add(x, y) for x, y in zip(a, b)]


def multiply_polynomials(a: list[int], b: list[int]) -> list[int]:
    """
    Multiply two polynomials by convolution.

    Each coefficient b[j] scales a copy of a shifted up by j degrees, and
    the partial products are summed. For non-empty inputs the result has
    len(a) + len(b) - 1 terms; trailing zeros are kept.
    """
    result: list[int] = []
    for shift, b_term in enumerate(b):
        partial = [0] * shift + [gf256.mul(a_term, b_term) for a_term in a]
        result = add_polynomials(result, partial)
    return result


def evaluate(coefficients: list[int], x: int) -> int:
    """Evaluate a polynomial at x."""
    accumulator = 0
    x_i = 1
    for coeff in coefficients:
        accumulator = gf256.add(accumulator, gf256.mul(coeff, x_i))
        x_i = gf256.mul(x_i, x)
    return accumulator
