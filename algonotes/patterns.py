"""Text patterns drawn with stars and digits.

Every drawing function returns its picture as a list of lines, each line
exactly as wide as the pattern's grid, trailing spaces included. A row count
of zero or less gives an empty picture.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = [
    "right_triangle",
    "triangle",
    "inverted_triangle",
    "right_arrow",
    "left_arrow",
    "spaced_triangle",
    "spaced_inverted_triangle",
    "spaced_right_arrow",
    "spaced_left_arrow",
    "palindromic_pyramid",
    "zigzag",
    "pascal_rows",
    "pascal_triangle",
]


def _fill(mask: Iterable[bool]) -> str:
    """Draw a star wherever ``mask`` is true and a space elsewhere."""
    return "".join("*" if inside else " " for inside in mask)


def _alternate(mask: Iterable[bool], on: bool = True) -> str:
    """Draw every other star inside ``mask``.

    A star is drawn at a position inside the mask only when the previous
    position was a space (or, for the first position, when ``on`` is true).
    """
    chars = []
    for inside in mask:
        if inside and on:
            chars.append("*")
            on = False
        else:
            chars.append(" ")
            on = True
    return "".join(chars)


def _arrow_heights(rows: int) -> Iterator[int]:
    """Yield the run length of each row of an arrow: rising, then falling."""
    height = 0
    for i in range(1, rows + 1):
        if rows % 2 == 0:
            if i <= rows // 2:
                height += 1
            if i > rows // 2 + 1:
                height -= 1
        elif i <= (rows + 1) // 2:
            height += 1
        else:
            height -= 1
        yield height


def _triangle_masks(rows: int) -> Iterator[list[bool]]:
    width = 2 * rows - 1
    for i in range(1, rows + 1):
        yield [rows + 1 - i <= j <= rows - 1 + i for j in range(1, width + 1)]


def _inverted_masks(rows: int) -> Iterator[list[bool]]:
    width = 2 * rows - 1
    for i in range(1, rows + 1):
        yield [i <= j <= 2 * rows - i for j in range(1, width + 1)]


def _right_arrow_masks(rows: int, width: int) -> Iterator[list[bool]]:
    for height in _arrow_heights(rows):
        yield [j <= height for j in range(1, width + 1)]


def _left_arrow_masks(rows: int) -> Iterator[list[bool]]:
    width = rows // 2 + 1
    for height in _arrow_heights(rows):
        yield [j >= width + 1 - height for j in range(1, width + 1)]


def right_triangle(rows: int) -> list[str]:
    """A left-aligned triangle whose i-th line holds i stars, each followed by a space."""
    return ["* " * i for i in range(1, rows + 1)]


def triangle(rows: int) -> list[str]:
    """A centred triangle, point up, ``2 * rows - 1`` columns wide."""
    return [_fill(mask) for mask in _triangle_masks(rows)]


def inverted_triangle(rows: int) -> list[str]:
    """A centred triangle, point down, ``2 * rows - 1`` columns wide."""
    return [_fill(mask) for mask in _inverted_masks(rows)]


def right_arrow(rows: int) -> list[str]:
    """An arrowhead pointing right, left-aligned in ``(rows + 1) // 2`` columns."""
    width = (rows + 1) // 2
    return [_fill(mask) for mask in _right_arrow_masks(rows, width)]


def left_arrow(rows: int) -> list[str]:
    """An arrowhead pointing left, right-aligned in ``rows // 2 + 1`` columns."""
    return [_fill(mask) for mask in _left_arrow_masks(rows)]


def spaced_triangle(rows: int) -> list[str]:
    """A centred triangle, point up, with a space between neighbouring stars."""
    return [_alternate(mask) for mask in _triangle_masks(rows)]


def spaced_inverted_triangle(rows: int) -> list[str]:
    """A centred triangle, point down, with a space between neighbouring stars."""
    return [_alternate(mask) for mask in _inverted_masks(rows)]


def spaced_right_arrow(rows: int) -> list[str]:
    """A right-pointing arrowhead of spaced stars, ``2 * rows - 1`` columns wide.

    Odd lines start with a star, even lines with a space, so the stars of
    neighbouring lines interleave.
    """
    width = 2 * rows - 1
    return [
        _alternate(mask, on=index % 2 == 0)
        for index, mask in enumerate(_right_arrow_masks(rows, width))
    ]


def spaced_left_arrow(rows: int) -> list[str]:
    """A left-pointing arrowhead of spaced stars, right-aligned in ``rows // 2 + 1`` columns."""
    return [_alternate(mask) for mask in _left_arrow_masks(rows)]


def palindromic_pyramid() -> list[str]:
    """Five centred lines of digits counting down to 1 and back up, nine columns wide."""
    rows, width = 5, 9
    lines = []
    for i in range(1, rows + 1):
        x = i
        chars = []
        for j in range(1, width + 1):
            if rows + 1 - i <= j <= rows - 1 + i:
                chars.append(str(x))
                x += -1 if j < rows else 1
            else:
                chars.append(" ")
        lines.append("".join(chars))
    return lines


def zigzag(width: int) -> list[str]:
    """Three lines tracing a zigzag across ``width`` two-character columns."""
    lines = []
    for i in range(1, 4):
        cells = (
            " *" if (i + j) % 4 == 0 or (i == 2 and j % 4 == 0) else "  "
            for j in range(1, width + 1)
        )
        lines.append("".join(cells))
    return lines


def pascal_rows(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    result = []
    for i in range(rows):
        row = [1]
        for j in range(1, i + 1):
            row.append(row[-1] * (i - j + 1) // j)
        result.append(row)
    return result


def pascal_triangle(rows: int) -> list[str]:
    """Pascal's triangle with each row's numbers written side by side."""
    return ["".join(map(str, row)) for row in pascal_rows(rows)]