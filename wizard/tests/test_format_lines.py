"""
Tests for the line formatting engine and the long import splitter
"""

from wizard.core.config import CAIRO, SOLIDITY
from wizard.core.models import UseClause
from wizard.generators.common import print_use_clauses, sort_use_clauses, split_long_line
from wizard.utils.format_lines import BLANK, format_lines, space_between


def test_format_nested_lines():
    """Test indentation of nested lines"""
    text = format_lines("a {", ["b", ["c"]], "}")
    assert text == "a {\n    b\n        c\n}\n"


def test_format_blank_has_no_indentation():
    """Test that blank lines carry no indentation"""
    text = format_lines("a", [BLANK, "b"])
    assert text == "a\n\n    b\n"


def test_format_custom_indent():
    """Test a custom indent width"""
    assert format_lines("x", ["y"], spaces_per_indent=2) == "x\n  y\n"


def test_format_ends_with_single_newline():
    """Test the trailing newline"""
    assert format_lines("only") == "only\n"


def test_space_between_skips_empty_groups():
    """Test that empty groups add no blank lines"""
    result = space_between(["a"], [], ["b", "c"], [])
    assert result == ["a", BLANK, "b", "c"]


def test_space_between_all_empty():
    """Test spacing of only empty groups"""
    assert space_between([], []) == []


def test_short_line_not_split():
    """Test that short lines are kept"""
    line = "use a::{B, C};"
    assert split_long_line(line, 90) == [line]


def test_long_line_without_braces_not_split():
    """Test that lines without braces are kept"""
    line = "use " + "a" * 100 + ";"
    assert split_long_line(line, 90) == [line]


def test_long_import_split_at_braces():
    """Test wrapping of long grouped imports"""
    names = ", ".join(f"Name{i:02d}" for i in range(20))
    line = f"use some::path::{{{names}}};"
    assert len(line) > 90

    result = split_long_line(line, 90)
    assert result[0] == "use some::path::{"
    assert result[-1] == "};"

    continuation = result[1]
    assert isinstance(continuation, list)
    assert all(len(part) <= 90 for part in continuation)
    # Every line but the last breaks after a comma
    assert all(part.endswith(",") for part in continuation[:-1])
    assert not continuation[-1].endswith(",")
    rejoined = " ".join(continuation)
    assert rejoined == names


def test_solidity_import_split_keeps_path():
    """Test wrapping of long Solidity imports"""
    names = ", ".join(f"Contract{i}" for i in range(12))
    line = f'import {{{names}}} from "@openzeppelin/contracts/token/ERC20/ERC20.sol";'
    result = split_long_line(line, 90)
    assert result[0] == "import {"
    assert result[-1] == '} from "@openzeppelin/contracts/token/ERC20/ERC20.sol";'


def test_use_clauses_same_path_merge():
    """Test merging use clauses with a common path"""
    clauses = [UseClause("starknet", "ContractAddress"), UseClause("starknet", "ClassHash")]
    assert print_use_clauses(clauses, CAIRO) == ["use starknet::{ClassHash, ContractAddress};"]


def test_use_clauses_standalone_not_merged():
    """Test that standalone use clauses stay separate"""
    clauses = [
        UseClause("starknet", "ContractAddress"),
        UseClause("starknet", "ClassHash", groupable=False),
    ]
    lines = print_use_clauses(clauses, CAIRO)
    assert "use starknet::ContractAddress;" in lines
    assert "use starknet::ClassHash;" in lines
    assert len(lines) == 2


def test_use_clause_alias():
    """Test aliased use clauses"""
    clauses = [UseClause("a::b", "Thing", alias="Other")]
    assert print_use_clauses(clauses, CAIRO) == ["use a::b::Thing as Other;"]


def test_use_clauses_sorted_by_full_path():
    """Test use clause ordering"""
    clauses = [
        UseClause("zeta", "A"),
        UseClause("alpha", "b"),
        UseClause("alpha", "B"),
    ]
    ordered = sort_use_clauses(clauses, CAIRO)
    assert [(c.container_path, c.name) for c in ordered] == [
        ("alpha", "B"),
        ("alpha", "b"),
        ("zeta", "A"),
    ]


def test_solidity_import_format():
    """Test the Solidity import statement"""
    clauses = [UseClause("@openzeppelin/contracts/access/Ownable.sol", "Ownable")]
    assert print_use_clauses(clauses, SOLIDITY) == [
        'import {Ownable} from "@openzeppelin/contracts/access/Ownable.sol";'
    ]
