"""Conversion of row/column indexes to spreadsheet A1 references."""

_UNIT = 26


def index_to_alphabet(number: int) -> str:
    """Return the column letters for a 1-based column number ("" below 1)."""
    if number < 1:
        return ""
    letters = []
    n = number
    while n > 0:
        n, rem = divmod(n - 1, _UNIT)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters))


def r1c1_to_a1(r: int, c: int) -> str:
    """Convert a 1-based row and column pair to an A1 style reference."""
    return f"{index_to_alphabet(c)}{r}"