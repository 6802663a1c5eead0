"""
Solidity contract printing
"""

import posixpath
import re
from dataclasses import replace
from typing import Dict, List, Optional, Union

from ..core.config import SOLIDITY, SOLIDITY_CONTRACTS_VERSION, SOLIDITY_PRAGMA_VERSION
from ..core.contract import ContractBuilder
from ..core.models import Component, Contract, ContractFunction, UseClause
from ..translators.statements import print_solidity_argument, solidity_function_lines
from ..translators.values import ValueTranslator
from ..utils.format_lines import Lines, format_lines, space_between
from .common import print_documentation_tags, print_use_clauses

INTERFACE_NAME = re.compile(r"^I[A-Z]")
UPGRADEABLE_SUFFIX = re.compile(r"(Upgradeable)?(?=\.|$)")
CONTRACTS_PACKAGE = re.compile(r"^@openzeppelin/contracts(?=/|$)")

OVERRIDES_BANNER = "// The following functions are overrides required by Solidity."

DISABLE_INITIALIZERS = [
    "/// @custom:oz-upgrades-unsafe-allow constructor",
    "constructor() {",
    ["_disableInitializers();"],
    "}",
]


def infer_transpiled(name: str, path: Optional[str] = None, transpiled: Optional[bool] = None) -> bool:
    """
    Whether a parent has an upgradeable counterpart.

    An explicit flag wins. Otherwise interfaces, recognised by an `I`
    followed by an uppercase letter in the name or in the file name
    (ignoring a `draft-` prefix), are not transpiled.
    """
    if transpiled is not None:
        return transpiled
    if INTERFACE_NAME.match(name):
        return False
    if path:
        stem = posixpath.splitext(posixpath.basename(path))[0]
        if stem.startswith("draft-"):
            stem = stem[len("draft-"):]
        if INTERFACE_NAME.match(stem):
            return False
    return True


def upgradeable_name(name: str) -> str:
    if name == "Initializable":
        return name
    return UPGRADEABLE_SUFFIX.sub("Upgradeable", name, count=1)


def upgradeable_path(path: str) -> str:
    directory, filename = posixpath.split(path)
    stem, ext = posixpath.splitext(filename)
    directory = CONTRACTS_PACKAGE.sub("@openzeppelin/contracts-upgradeable", directory)
    return posixpath.join(directory, upgradeable_name(stem) + ext)


class _Helpers:
    """Name and import rewriting for upgradeable contracts"""

    def __init__(self, contract: Contract):
        self.upgradeable = contract.upgradeable
        self.units: Dict[str, Component] = {c.name: c for c in contract.components}

    def is_transpiled(self, name: str) -> bool:
        unit = self.units.get(name)
        if unit is None:
            return infer_transpiled(name)
        return infer_transpiled(unit.name, unit.path, unit.transpiled)

    def transform_name(self, name: str) -> str:
        if self.upgradeable and self.is_transpiled(name):
            return upgradeable_name(name)
        return name

    def transform_import(self, clause: UseClause) -> UseClause:
        # Only imports backing a parent are rewritten, libraries keep their path
        if not self.upgradeable or clause.name not in self.units:
            return clause
        if not self.is_transpiled(clause.name):
            return clause
        return replace(
            clause,
            name=upgradeable_name(clause.name),
            container_path=upgradeable_path(clause.container_path),
        )


def print_contract(contract: Union[Contract, ContractBuilder]) -> str:
    """
    Render a contract as Solidity source.

    Args:
        contract: Frozen contract, or a builder that is frozen first

    Returns:
        Source text ending with a single newline
    """
    if isinstance(contract, ContractBuilder):
        contract = contract.freeze()

    helpers = _Helpers(contract)
    values = ValueTranslator(SOLIDITY)

    grouped = _sorted_functions(contract)
    printed = {
        group: [_print_function(fn, helpers) for fn in fns]
        for group, fns in grouped.items()
    }
    has_overrides = any(printed["override"])

    return format_lines(
        *space_between(
            [
                f"// SPDX-License-Identifier: {contract.license}",
                f"// Compatible with OpenZeppelin Contracts {SOLIDITY_CONTRACTS_VERSION}",
                f"pragma solidity ^{SOLIDITY_PRAGMA_VERSION};",
            ],
            print_use_clauses([helpers.transform_import(u) for u in contract.use_clauses], SOLIDITY),
            [
                *print_documentation_tags(contract.documentation_tags),
                _print_heading(contract, helpers),
                space_between(
                    _print_libraries(contract),
                    list(contract.variables),
                    _print_constructor(contract, helpers, values),
                    *printed["code"],
                    *printed["modifiers"],
                    [OVERRIDES_BANNER] if has_overrides else [],
                    *printed["override"],
                ),
                "}",
            ],
        ),
        spaces_per_indent=SOLIDITY.spaces_per_indent,
    )


def _print_heading(contract: Contract, helpers: _Helpers) -> str:
    parts = [f"contract {contract.name}"]
    if contract.parents:
        parts.append("is " + ", ".join(helpers.transform_name(p.name) for p in contract.parents))
    parts.append("{")
    return " ".join(parts)


def _print_libraries(contract: Contract) -> List[str]:
    return [
        f"using {library.name} for {target};"
        for library in contract.libraries
        for target in library.using_for
    ]


def _print_parent_constructor(parent: Component, helpers: _Helpers, values: ValueTranslator) -> List[str]:
    use_transpiled = helpers.upgradeable and helpers.is_transpiled(parent.name)
    params = parent.initializer.params if parent.initializer else []
    fn = f"__{parent.name}_init" if use_transpiled else parent.name
    if use_transpiled or params:
        return [fn + "(" + ", ".join(values.visit(p) for p in params) + ")"]
    return []


def _print_constructor(contract: Contract, helpers: _Helpers, values: ValueTranslator) -> List[Lines]:
    parents = contract.parents
    has_parent_params = any(p.initializer and p.initializer.params for p in parents)
    with_initializers = [p for p in parents if p.initializer is not None]
    args = [print_solidity_argument(a) for a in contract.constructor_args]

    if not (has_parent_params or contract.constructor_code
            or (helpers.upgradeable and with_initializers)):
        return DISABLE_INITIALIZERS if helpers.upgradeable else []

    if not helpers.upgradeable:
        return solidity_function_lines(
            list(contract.constructor_comments),
            "constructor",
            args,
            [line for p in parents for line in _print_parent_constructor(p, helpers, values)],
            list(contract.constructor_code),
        )

    transpiled = [p for p in with_initializers if helpers.is_transpiled(p.name)]
    plain = [p for p in with_initializers if not helpers.is_transpiled(p.name)]
    if plain:
        allow = "/// @custom:oz-upgrades-unsafe-allow-reachable constructor"
    else:
        allow = "/// @custom:oz-upgrades-unsafe-allow constructor"

    constructor = solidity_function_lines(
        [allow],
        "constructor",
        [],
        [line for p in plain for line in _print_parent_constructor(p, helpers, values)],
        ["_disableInitializers();"],
    )
    if not transpiled:
        return constructor

    initializer = solidity_function_lines(
        list(contract.constructor_comments),
        "function initialize",
        args,
        ["public", "initializer"],
        space_between(
            [line + ";" for p in transpiled for line in _print_parent_constructor(p, helpers, values)],
            list(contract.constructor_code),
        ),
    )
    return space_between(constructor, initializer)


def _sorted_functions(contract: Contract) -> Dict[str, List[ContractFunction]]:
    """Functions with code first, then those with modifiers, then the rest"""
    grouped: Dict[str, List[ContractFunction]] = {"code": [], "modifiers": [], "override": []}
    for fn in contract.functions:
        if fn.code:
            grouped["code"].append(fn)
        elif fn.modifiers:
            grouped["modifiers"].append(fn)
        else:
            grouped["override"].append(fn)
    return grouped


def _print_function(fn: ContractFunction, helpers: _Helpers) -> List[Lines]:
    if len(fn.override) <= 1 and not fn.modifiers and not fn.code and not fn.final:
        return []

    modifiers = [fn.kind or "internal"]
    if fn.mutability and fn.mutability != "nonpayable":
        modifiers.append(fn.mutability)

    if len(fn.override) == 1:
        modifiers.append("override")
    elif len(fn.override) > 1:
        modifiers.append("override(" + ", ".join(helpers.transform_name(n) for n in fn.override) + ")")

    modifiers.extend(fn.modifiers)
    if fn.returns:
        modifiers.append(f"returns ({fn.returns})")

    code = list(fn.code)
    if fn.override and not fn.final:
        super_call = f"super.{fn.name}({', '.join(a.name for a in fn.args)});"
        code.append("return " + super_call if fn.returns else super_call)

    if len(modifiers) + len(fn.code) <= 1:
        return []

    return solidity_function_lines(
        list(fn.comments),
        f"function {fn.name}",
        [print_solidity_argument(a) for a in fn.args],
        modifiers,
        code,
    )
