"""
Closed-form reference values for B7.

Both compute the same truncated series as the corrected table, for
n = 4, without going through the store:

    B7 = -(A0 + B1*A1 + B3*A3 + B5*A5),   A0 = -1/2 (2n-1)/(2n+1)

series_note_g() writes the series out directly. analytical_note_g()
walks it with named intermediates laid out like the table's columns,
which makes it easy to compare against a trace.
"""

from .config import B1, B3, B5


def series_note_g() -> float:
    n = 4.0

    result = 1.0 / 2.0 * (2 * n - 1) / (2 * n + 1)
    A = 2 * n / 2
    term = B1 * A
    result -= term

    A *= (2 * n - 1) / 3 * (2 * n - 2) / 4
    term = B3 * A
    result -= term

    A *= (2 * n - 3) / 5 * (2 * n - 4) / 6
    term = B5 * A
    result -= term

    return result


def analytical_note_g() -> float:
    one = 1.0
    two = 2.0
    n = 4.0
    result = 0.0
    denominator = 0.0

    two_n_minus_one = two_n_plus_one = numerator = two * n
    two_n_minus_one -= one
    two_n_plus_one += one
    A = two_n_minus_one / two_n_plus_one
    A /= two
    result += A

    denominator += two
    A = numerator / denominator
    term = B1 * A
    result -= term

    for coefficient in (B3, B5):
        numerator -= one
        denominator += one
        A *= numerator / denominator

        numerator -= one
        denominator += one
        A *= numerator / denominator

        term = coefficient * A
        result -= term

    return result
