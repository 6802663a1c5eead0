"""
Printing helpers shared by the Cairo and Solidity generators
"""

from typing import Dict, List, Sequence

from ..core.config import TargetConfig
from ..core.models import NatspecTag, UseClause, Variable
from ..utils.format_lines import Lines

STANDALONE_GROUP = "Standalone Imports"


def name_with_alias(clause: UseClause) -> str:
    if clause.alias:
        return f"{clause.name} as {clause.alias}"
    return clause.name


def sort_use_clauses(clauses: Sequence[UseClause], config: TargetConfig) -> List[UseClause]:
    """Order by full path, case-insensitively first so `Foo` and `foo` stay adjacent"""
    def full_path(clause: UseClause) -> str:
        return f"{clause.container_path}{config.path_separator}{name_with_alias(clause)}"

    return sorted(clauses, key=lambda c: (full_path(c).lower(), full_path(c)))


def group_use_clauses(clauses: Sequence[UseClause], config: TargetConfig) -> Dict[str, List[UseClause]]:
    """Group sorted clauses by container path; non-groupable ones share one standalone group"""
    grouped: Dict[str, List[UseClause]] = {}
    for clause in sort_use_clauses(clauses, config):
        key = clause.container_path if clause.groupable else STANDALONE_GROUP
        grouped.setdefault(key, []).append(clause)
    return grouped


def print_use_clauses(clauses: Sequence[UseClause], config: TargetConfig) -> List[Lines]:
    lines: List[str] = []
    for group_name, group in group_use_clauses(clauses, config).items():
        if group_name == STANDALONE_GROUP or len(group) == 1:
            for clause in group:
                lines.append(config.single_import.format(
                    path=clause.container_path, name=name_with_alias(clause)
                ))
        else:
            names = ", ".join(name_with_alias(c) for c in group)
            lines.append(config.group_import.format(path=group_name, names=names))

    result: List[Lines] = []
    for line in lines:
        result.extend(split_long_line(line, config.max_import_line_length))
    return result


def split_long_line(line: str, max_length: int) -> List[Lines]:
    """
    Wrap an over-long braced import.

    The line is split after its first `{` and before its last `}`; the
    names in between are packed greedily, breaking at the last comma that
    fits, one indent level deeper.
    """
    if "{" not in line or len(line) <= max_length:
        return [line]

    first = line.index("{")
    last = line.rindex("}")
    return [line[:first + 1], _pack_names(line[first + 1:last], max_length), line[last:]]


def _pack_names(inner: str, max_length: int) -> List[str]:
    lines = []
    while len(inner) > max_length:
        comma = inner.rfind(",", 0, max_length)
        if comma == -1:
            comma = inner.find(",")
            if comma == -1:
                break
        lines.append(inner[:comma + 1])
        inner = inner[comma + 2:]
    lines.append(inner)
    return lines


def print_constants(constants: Sequence[Variable]) -> List[str]:
    lines = []
    for constant in constants:
        declaration = f"const {constant.name}: {constant.type} = {constant.value};"
        if constant.comment and constant.inline_comment:
            lines.append(f"{declaration} // {constant.comment}")
        elif constant.comment:
            lines.append(f"// {constant.comment}")
            lines.append(declaration)
        else:
            lines.append(declaration)
    return lines


def print_documentation_tags(tags: Sequence[NatspecTag]) -> List[str]:
    return [f"/// {tag.key} {tag.value}" for tag in tags]
