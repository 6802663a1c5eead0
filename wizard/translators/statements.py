"""
Code-line normalization and function heading layout
"""

from typing import List, Optional, Sequence

from ..core.config import MAX_CAIRO_ARGS_LENGTH, MAX_SOLIDITY_HEADING_LENGTH
from ..core.models import Argument
from ..utils.format_lines import Lines


def with_semicolons(lines: Sequence[str]) -> List[str]:
    """Terminate every line with a semicolon"""
    return [line if line.endswith(";") else line + ";" for line in lines]


def normalize_code_lines(lines: Sequence[str], returns: Optional[str]) -> List[str]:
    """
    Apply trailing-semicolon rules to a Cairo function body.

    A line ending in `{`, `}` or `;` is left alone. Any other line gets a
    semicolon when more code follows or the function returns nothing. The
    last line of a returning function is its tail expression, so a trailing
    semicolon is stripped from it.
    """
    result = list(lines)
    for i, line in enumerate(result):
        if not line:
            continue
        needs_semicolon = i < len(result) - 1 or returns is None
        if needs_semicolon and line[-1] not in "{};":
            result[i] = line + ";"
        elif not needs_semicolon and line.endswith(";"):
            result[i] = line[:-1]
    return result


def print_cairo_argument(arg: Argument) -> str:
    if arg.type is not None:
        return f"{arg.name}: {arg.type}"
    return arg.name


def print_solidity_argument(arg: Argument) -> str:
    if arg.type is not None:
        return f"{arg.type} {arg.name}"
    return arg.name


def cairo_function_lines(kinded_name: str, args: List[str], tag: Optional[str],
                         returns: Optional[str], code: List[Lines]) -> List[Lines]:
    """
    Lay out a Cairo function or constructor.

    Arguments go one per line with a trailing comma when they do not fit
    on the heading line.
    """
    fn: List[Lines] = []
    if tag is not None:
        fn.append(f"#[{tag}]")

    heading = f"{kinded_name}("
    if args:
        joined = ", ".join(args)
        if len(joined) > MAX_CAIRO_ARGS_LENGTH:
            fn.append(heading)
            heading = ""
            fn.append([f"{arg}," for arg in args])
        else:
            heading += joined
    heading += ")"

    if returns is None:
        heading += " {"
    else:
        heading += f" -> {returns} {{"

    fn.append(heading)
    fn.append(code)
    fn.append("}")
    return fn


def solidity_function_lines(comments: List[str], kinded_name: str, args: List[str],
                            modifiers: List[str], code: List[Lines]) -> List[Lines]:
    """
    Lay out a Solidity function or constructor.

    Short headings stay on one line; longer ones put the modifiers on an
    indented line of their own. An empty body prints as `{}`.
    """
    fn: List[Lines] = list(comments)

    heading_length = sum(len(part) for part in [kinded_name, *args, *modifiers])
    braces = "{" if code else "{}"

    signature = f"{kinded_name}({', '.join(args)})"
    if heading_length <= MAX_SOLIDITY_HEADING_LENGTH:
        fn.append(" ".join([signature, *modifiers, braces]))
    else:
        fn.extend([signature, list(modifiers), braces])

    if code:
        fn.extend([list(code), "}"])
    return fn
