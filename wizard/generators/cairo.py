"""
Cairo contract printing
"""

from typing import Dict, List, Union

from ..core.config import (
    CAIRO,
    CAIRO_CONTRACTS_VERSION,
    DEFAULT_SECTION,
    EXTERNAL_SECTION,
    INTERNAL_SECTION,
)
from ..core.contract import ContractBuilder
from ..core.models import Argument, Component, Contract, ContractFunction, Impl, ImplementedTrait
from ..translators.statements import (
    cairo_function_lines,
    normalize_code_lines,
    print_cairo_argument,
    with_semicolons,
)
from ..translators.values import ValueTranslator
from ..utils.format_lines import BLANK, Lines, format_lines, space_between
from .common import print_constants, print_documentation_tags, print_use_clauses

SELF_ARG = Argument("ref self", "ContractState")


def print_contract(contract: Union[Contract, ContractBuilder]) -> str:
    """
    Render a contract as Cairo source.

    Args:
        contract: Frozen contract, or a builder that is frozen first

    Returns:
        Source text ending with a single newline
    """
    if isinstance(contract, ContractBuilder):
        contract = contract.freeze()

    values = ValueTranslator(CAIRO)
    attribute = "#[starknet::contract(account)]" if contract.account else "#[starknet::contract]"

    return format_lines(
        *space_between(
            [
                f"// SPDX-License-Identifier: {contract.license}",
                f"// Compatible with OpenZeppelin Contracts for Cairo {CAIRO_CONTRACTS_VERSION}",
            ],
            print_documentation_tags(contract.documentation_tags),
            _print_super_variables(contract),
            [
                attribute,
                f"mod {contract.name} {{",
                space_between(
                    print_use_clauses(contract.use_clauses, CAIRO),
                    print_constants(contract.constants),
                    _print_component_declarations(contract),
                    _print_impls(contract),
                    _print_storage(contract),
                    _print_events(contract),
                    _print_constructor(contract, values),
                    _print_implemented_traits(contract),
                ),
                "}",
            ],
        ),
        spaces_per_indent=CAIRO.spaces_per_indent,
    )


def _print_super_variables(contract: Contract) -> List[str]:
    return with_semicolons(
        f"const {v.name}: {v.type} = {v.value}" for v in contract.super_variables
    )


def _print_component_declarations(contract: Contract) -> List[str]:
    return [
        f"component!(path: {c.name}, storage: {c.substorage.name}, event: {c.event.name});"
        for c in contract.components
    ]


def _print_impls(contract: Contract) -> List[Lines]:
    grouped: Dict[str, List[Impl]] = {}
    for component in contract.components:
        for impl in component.impls:
            section = impl.section or (EXTERNAL_SECTION if impl.embed else INTERNAL_SECTION)
            grouped.setdefault(section, []).append(impl)

    sections = []
    for section in sorted(grouped):
        lines = [f"// {section}"]
        for impl in grouped[section]:
            if impl.embed:
                lines.append("#[abi(embed_v0)]")
            lines.append(f"impl {impl.name} = {impl.value};")
        sections.append(lines)
    return space_between(*sections)


def _print_storage(contract: Contract) -> List[Lines]:
    if not contract.components:
        return []
    slots = []
    for component in contract.components:
        slots.append("#[substorage(v0)]")
        slots.append(f"{component.substorage.name}: {component.substorage.type},")
    return ["#[storage]", "struct Storage {", slots, "}"]


def _print_events(contract: Contract) -> List[Lines]:
    if not contract.components:
        return []
    variants = []
    for component in contract.components:
        variants.append("#[flat]")
        variants.append(f"{component.event.name}: {component.event.type},")
    return ["#[event]", "#[derive(Drop, starknet::Event)]", "enum Event {", variants, "}"]


def _has_initializer(component: Component) -> bool:
    return component.initializer is not None and component.substorage is not None


def _print_constructor(contract: Contract, values: ValueTranslator) -> List[Lines]:
    has_initializers = any(c.initializer is not None for c in contract.components)
    if not has_initializers and not contract.constructor_code:
        return []

    initializers = [
        f"self.{c.substorage.name}.initializer("
        + ", ".join(values.visit(p) for p in c.initializer.params)
        + ")"
        for c in contract.components
        if _has_initializer(c)
    ]
    body = space_between(with_semicolons(initializers), with_semicolons(contract.constructor_code))
    args = [print_cairo_argument(a) for a in (SELF_ARG, *contract.constructor_args)]
    return cairo_function_lines("fn constructor", args, "constructor", None, body)


def _trait_sort_key(trait: ImplementedTrait):
    priority = float("inf") if trait.priority is None else trait.priority
    return (priority, len(trait.tags), trait.name)


def _print_implemented_traits(contract: Contract) -> List[Lines]:
    grouped: Dict[str, List[ImplementedTrait]] = {}
    for trait in sorted(contract.implemented_traits, key=_trait_sort_key):
        grouped.setdefault(trait.section or DEFAULT_SECTION, []).append(trait)

    sections = [
        _print_trait_section(section, grouped[section])
        for section in sorted(grouped)
    ]
    return space_between(*sections)


def _print_trait_section(section: str, traits: List[ImplementedTrait]) -> List[Lines]:
    lines: List[Lines] = []
    is_default = section == DEFAULT_SECTION
    if not is_default:
        lines.extend(["//", f"// {section}", "//"])
    for index, trait in enumerate(traits):
        if index > 0 or not is_default:
            lines.append(BLANK)
        lines.extend(_print_implemented_trait(trait))
    return lines


def _print_implemented_trait(trait: ImplementedTrait) -> List[Lines]:
    lines: List[Lines] = [f"#[{tag}]" for tag in trait.tags]
    lines.append(f"impl {trait.name} of {trait.of} {{")
    lines.append(with_semicolons(
        f"const {v.name}: {v.type} = {v.value}" for v in trait.super_variables
    ))
    lines.append(space_between(*[_print_function(fn) for fn in trait.functions]))
    lines.append("}")
    return lines


def _print_function(fn: ContractFunction) -> List[Lines]:
    code = normalize_code_lines([*fn.code_before, *fn.code], fn.returns)
    args = [print_cairo_argument(a) for a in fn.args]
    return cairo_function_lines(f"fn {fn.name}", args, fn.tag, fn.returns, code)
