"""
Contract builders: the mutable IR that feature modules fill in
"""

import copy
from dataclasses import replace
from typing import Dict, List, Optional, Set

from .config import DEFAULT_LICENSE, NATSPEC_KEY_PATTERN
from .errors import (
    ConflictingDefinition,
    DuplicateFinalizedFunction,
    IncompleteComponent,
    InvalidDocumentationKey,
    UnknownComponent,
)
from .models import (
    Argument,
    BaseFunction,
    BaseImplementedTrait,
    Component,
    Contract,
    ContractFunction,
    Impl,
    ImplementedTrait,
    Initializer,
    Library,
    NatspecTag,
    UseClause,
    Value,
    Variable,
)
from ..utils.identifiers import to_identifier

# Order is important
MUTABILITY_RANK = ["pure", "view", "nonpayable", "payable"]


def max_mutability(a: Optional[str], b: Optional[str]) -> str:
    """Pick the less restrictive of two mutabilities"""
    a = a or "nonpayable"
    b = b or "nonpayable"
    return MUTABILITY_RANK[max(MUTABILITY_RANK.index(a), MUTABILITY_RANK.index(b))]


def _check_redefinition(existing: Variable, new: Variable) -> None:
    if existing.type != new.type:
        raise ConflictingDefinition(new.name, "type", new.type, existing.type)
    if existing.value != new.value:
        raise ConflictingDefinition(new.name, "value", new.value, existing.value)


class ContractBuilder:
    """
    Accumulates everything one generated contract needs.

    Every registry is an insertion-ordered dict so printing never depends
    on hash order. Registration is idempotent: adding the same component,
    use clause, constant or function twice keeps the first one.
    """

    def __init__(self, name: str, account: bool = False):
        self.name = to_identifier(name, True)
        self.account = account
        self.license = DEFAULT_LICENSE
        self.upgradeable = False

        self.constructor_args: List[Argument] = []
        self.constructor_code: List[str] = []
        self.natspec_tags: List[NatspecTag] = []

        self._components: Dict[str, Component] = {}
        self._traits: Dict[str, ImplementedTrait] = {}
        self._constants: Dict[str, Variable] = {}
        self._use_clauses: Dict[str, UseClause] = {}
        self._interface_flags: Set[str] = set()

    @property
    def components(self) -> List[Component]:
        # run_first units go to the front, the rest keep insertion order
        return sorted(self._components.values(), key=lambda c: not c.run_first)

    @property
    def implemented_traits(self) -> List[ImplementedTrait]:
        return list(self._traits.values())

    @property
    def constants(self) -> List[Variable]:
        return list(self._constants.values())

    @property
    def use_clauses(self) -> List[UseClause]:
        return list(self._use_clauses.values())

    @property
    def interface_flags(self) -> Set[str]:
        return set(self._interface_flags)

    def add_use_clause(self, container_path: str, name: str,
                       groupable: bool = True, alias: str = "") -> None:
        clause = UseClause(container_path, name, groupable, alias)
        self._use_clauses.setdefault(clause.key, clause)

    def add_component(self, unit: Component, params: Optional[List[Value]] = None,
                      initializable: bool = True) -> bool:
        """
        Register a composition unit.

        Args:
            unit: Catalog definition, never mutated
            params: Initializer parameters
            initializable: Whether the constructor calls the unit's initializer

        Returns:
            True on first registration, False if the unit was already present
        """
        self.add_use_clause(unit.path, unit.name)
        if unit.name in self._components:
            return False

        self._components[unit.name] = replace(
            unit,
            impls=list(unit.impls),
            initializer=Initializer(list(params or [])) if initializable else None,
        )
        return True

    def add_impl_to_component(self, unit: Component, impl: Impl) -> None:
        self.add_component(unit)
        component = self._components.get(unit.name)
        if component is None:
            raise UnknownComponent(unit.name)
        if not any(i.name == impl.name for i in component.impls):
            component.impls.append(impl)

    def add_constant(self, constant: Variable) -> bool:
        """Returns False when an identical constant is already declared"""
        existing = self._constants.get(constant.name)
        if existing is not None:
            _check_redefinition(existing, constant)
            return False
        self._constants[constant.name] = constant
        return True

    def add_implemented_trait(self, base: BaseImplementedTrait) -> ImplementedTrait:
        existing = self._traits.get(base.name)
        if existing is not None:
            return existing
        trait = ImplementedTrait(
            name=base.name,
            of=base.of,
            tags=list(base.tags),
            per_item_tag=base.per_item_tag,
            section=base.section,
            priority=base.priority,
        )
        self._traits[base.name] = trait
        return trait

    def add_function(self, context: BaseImplementedTrait, fn: BaseFunction) -> ContractFunction:
        """Returns the existing function when one with the same signature exists"""
        trait = self.add_implemented_trait(context)
        for existing in trait.functions:
            if existing.signature == fn.signature:
                return existing

        contract_fn = ContractFunction(
            name=fn.name,
            args=[copy.copy(a) for a in fn.args],
            code=list(fn.code),
            returns=fn.returns,
            kind=fn.kind,
            mutability=fn.mutability,
            tag=context.per_item_tag,
        )
        trait.functions.append(contract_fn)
        return contract_fn

    def add_function_code_before(self, context: BaseImplementedTrait, fn: BaseFunction,
                                 code_before: str) -> None:
        existing = self.add_function(context, fn)
        if existing.final:
            raise DuplicateFinalizedFunction(fn.name)
        existing.code_before.append(code_before)

    def append_function_code(self, context: BaseImplementedTrait, fn: BaseFunction,
                             code: str) -> ContractFunction:
        existing = self.add_function(context, fn)
        if existing.final:
            raise DuplicateFinalizedFunction(fn.name)
        existing.code.append(code)
        return existing

    def finalize_function(self, context: BaseImplementedTrait, fn: BaseFunction,
                          code: List[str]) -> ContractFunction:
        existing = self.add_function(context, fn)
        if existing.final:
            raise DuplicateFinalizedFunction(fn.name)
        if existing.code:
            raise DuplicateFinalizedFunction(fn.name, "has additional code")
        existing.code.extend(code)
        existing.final = True
        return existing

    def add_constructor_argument(self, arg: Argument) -> None:
        if any(existing.name == arg.name for existing in self.constructor_args):
            return
        self.constructor_args.append(arg)

    def add_constructor_code(self, code: str) -> None:
        self.constructor_code.append(code)

    def add_natspec_tag(self, key: str, value: str) -> None:
        if not NATSPEC_KEY_PATTERN.match(key):
            raise InvalidDocumentationKey(key)
        self.natspec_tags.append(NatspecTag(key, value))

    def add_interface_flag(self, flag: str) -> None:
        """Marks an interface as implemented, e.g. ISRC5, to avoid registering it twice"""
        self._interface_flags.add(flag)

    def has_interface_flag(self, flag: str) -> bool:
        return flag in self._interface_flags

    def _snapshot_fields(self) -> Dict:
        return dict(
            name=self.name,
            license=self.license,
            account=self.account,
            upgradeable=self.upgradeable,
            use_clauses=tuple(copy.deepcopy(self.use_clauses)),
            components=tuple(copy.deepcopy(self.components)),
            constants=tuple(copy.deepcopy(self.constants)),
            constructor_args=tuple(copy.deepcopy(self.constructor_args)),
            constructor_code=tuple(self.constructor_code),
            documentation_tags=tuple(copy.deepcopy(self.natspec_tags)),
            implemented_traits=tuple(copy.deepcopy(self.implemented_traits)),
            interface_flags=frozenset(self._interface_flags),
        )

    def freeze(self) -> Contract:
        """Read-only snapshot for the printers"""
        return Contract(**self._snapshot_fields())


class CairoContractBuilder(ContractBuilder):
    """Builder for Starknet contracts"""

    def __init__(self, name: str, account: bool = False):
        super().__init__(name, account)
        self._super_variables: Dict[str, Variable] = {}

    def add_component(self, unit: Component, params: Optional[List[Value]] = None,
                      initializable: bool = True) -> bool:
        if unit.substorage is None:
            raise IncompleteComponent(unit.name, "substorage")
        if unit.event is None:
            raise IncompleteComponent(unit.name, "event")
        return super().add_component(unit, params, initializable)

    @property
    def super_variables(self) -> List[Variable]:
        return list(self._super_variables.values())

    def add_super_variable(self, variable: Variable) -> bool:
        """Declare a module-level constant and import it into the contract"""
        existing = self._super_variables.get(variable.name)
        if existing is not None:
            _check_redefinition(existing, variable)
            return False
        self._super_variables[variable.name] = variable
        self.add_use_clause("super", variable.name)
        return True

    def add_super_variable_to_trait(self, base: BaseImplementedTrait, variable: Variable) -> bool:
        trait = self.add_implemented_trait(base)
        for existing in trait.super_variables:
            if existing.name == variable.name:
                _check_redefinition(existing, variable)
                return False
        trait.super_variables.append(variable)
        return True

    def _snapshot_fields(self) -> Dict:
        fields = super()._snapshot_fields()
        fields["super_variables"] = tuple(copy.deepcopy(self.super_variables))
        return fields


class SolidityContractBuilder(ContractBuilder):
    """
    Builder for Solidity contracts.

    Functions live in a single owner context; parents are the components
    that are not import-only.
    """

    BODY = BaseImplementedTrait(name="", of="")

    def __init__(self, name: str):
        super().__init__(name)
        self.constructor_comments: List[str] = []
        self._libraries: Dict[str, Library] = {}
        self._variables: Dict[str, None] = {}

    @property
    def parents(self) -> List[Component]:
        return [c for c in self.components if not c.import_only]

    @property
    def functions(self) -> List[ContractFunction]:
        if self.BODY.name not in self._traits:
            return []
        return list(self._traits[self.BODY.name].functions)

    @property
    def libraries(self) -> List[Library]:
        return list(self._libraries.values())

    @property
    def variables(self) -> List[str]:
        return list(self._variables)

    def add_parent(self, unit: Component, params: Optional[List[Value]] = None) -> bool:
        existing = self._components.get(unit.name)
        if existing is not None and existing.import_only:
            # promoted from import-only, keeps its position
            self._components[unit.name] = replace(
                unit, impls=list(unit.impls), initializer=Initializer(list(params or []))
            )
            return True
        return self.add_component(unit, params)

    def add_import_only(self, unit: Component) -> bool:
        return self.add_component(replace(unit, import_only=True), initializable=False)

    def add_library(self, library: Library, using_for: List[str]) -> None:
        self.add_use_clause(library.path, library.name)
        existing = self._libraries.setdefault(library.name, replace(library, using_for=[]))
        for target in using_for:
            if target not in existing.using_for:
                existing.using_for.append(target)

    def add_variable(self, code: str) -> bool:
        present = code in self._variables
        self._variables[code] = None
        return not present

    def add_function(self, context: BaseImplementedTrait, fn: BaseFunction) -> ContractFunction:
        contract_fn = super().add_function(context, fn)
        if contract_fn.mutability is None:
            contract_fn.mutability = "nonpayable"
        return contract_fn

    def get_function(self, fn: BaseFunction) -> ContractFunction:
        return self.add_function(self.BODY, fn)

    def add_override(self, parent: Component, fn: BaseFunction, mutability: Optional[str] = None) -> None:
        contract_fn = self.get_function(fn)
        if parent.name not in contract_fn.override:
            contract_fn.override.append(parent.name)
        if mutability:
            contract_fn.mutability = max_mutability(contract_fn.mutability, mutability)

    def add_modifier(self, modifier: str, fn: BaseFunction) -> None:
        contract_fn = self.get_function(fn)
        if modifier not in contract_fn.modifiers:
            contract_fn.modifiers.append(modifier)

    def add_function_comment(self, comment: str, fn: BaseFunction) -> None:
        self.get_function(fn).comments.append(comment)

    def add_function_code(self, code: str, fn: BaseFunction, mutability: Optional[str] = None) -> None:
        contract_fn = self.append_function_code(self.BODY, fn, code)
        if mutability:
            contract_fn.mutability = max_mutability(contract_fn.mutability, mutability)

    def set_function_body(self, code: List[str], fn: BaseFunction, mutability: Optional[str] = None) -> None:
        contract_fn = self.finalize_function(self.BODY, fn, code)
        if mutability:
            contract_fn.mutability = mutability

    def add_constructor_comment(self, comment: str) -> None:
        self.constructor_comments.append(comment)

    def _snapshot_fields(self) -> Dict:
        fields = super()._snapshot_fields()
        fields.update(
            implemented_traits=(),
            functions=tuple(copy.deepcopy(self.functions)),
            libraries=tuple(copy.deepcopy(self.libraries)),
            variables=tuple(self.variables),
            constructor_comments=tuple(self.constructor_comments),
        )
        return fields
