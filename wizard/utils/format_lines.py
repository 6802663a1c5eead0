"""
Indentation-aware rendering of nested line lists
"""

from typing import Iterator, List, Union


class _Blank:
    """Marker for an empty separator line"""

    def __repr__(self) -> str:
        return "BLANK"


BLANK = _Blank()

# A line, a blank marker, or a nested list one indent level deeper
Lines = Union[str, _Blank, List["Lines"]]


def format_lines(*lines: Lines, spaces_per_indent: int = 4) -> str:
    """
    Render lines into text.

    Nested lists are indented one level per depth, BLANK becomes an empty
    line, and the result ends with a single newline.
    """
    return "\n".join(_indent_each(0, lines, spaces_per_indent)) + "\n"


def _indent_each(indent: int, lines, spaces_per_indent: int) -> Iterator[str]:
    for line in lines:
        if line is BLANK:
            yield ""
        elif isinstance(line, (list, tuple)):
            yield from _indent_each(indent + 1, line, spaces_per_indent)
        else:
            yield " " * (indent * spaces_per_indent) + line


def space_between(*groups: List[Lines]) -> List[Lines]:
    """Join non-empty groups with a BLANK between each pair"""
    result: List[Lines] = []
    for group in groups:
        if len(group) == 0:
            continue
        if result:
            result.append(BLANK)
        result.extend(group)
    return result
