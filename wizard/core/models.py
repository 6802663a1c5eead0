"""
Data models for the contract intermediate representation
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Lit:
    """Raw code, printed without quoting"""
    code: str


@dataclass(frozen=True)
class Note:
    """A value carrying a human-readable annotation"""
    value: "Value"
    note: str


# str is a string literal, int/float a numeric literal
Value = Union[str, int, float, Lit, Note]


@dataclass
class Argument:
    """Function or constructor argument"""
    name: str
    type: Optional[str] = None


@dataclass
class UseClause:
    """One imported symbol"""
    container_path: str
    name: str
    groupable: bool = True
    alias: str = ""

    @property
    def key(self) -> str:
        return self.alias or self.name


@dataclass
class Variable:
    """Constant or super variable declaration"""
    name: str
    type: str
    value: str
    comment: Optional[str] = None
    inline_comment: bool = False


@dataclass
class Substorage:
    name: str
    type: str


@dataclass
class Event:
    name: str
    type: str


@dataclass
class Impl:
    """Component impl, embedded in the public ABI unless embed is False"""
    name: str
    value: str
    embed: bool = True
    section: Optional[str] = None


@dataclass
class Initializer:
    params: List[Value] = field(default_factory=list)


@dataclass
class Component:
    """
    Composition unit mixed into a contract.

    A Cairo component (substorage, event and impls) or a Solidity parent
    contract (import path and constructor params through the initializer).
    """
    name: str
    path: str
    impls: List[Impl] = field(default_factory=list)
    substorage: Optional[Substorage] = None
    event: Optional[Event] = None
    initializer: Optional[Initializer] = None
    run_first: bool = False
    import_only: bool = False
    transpiled: Optional[bool] = None


@dataclass
class BaseImplementedTrait:
    """
    Owner context for functions.

    priority: lower prints first, None prints last
    """
    name: str
    of: str
    tags: List[str] = field(default_factory=list)
    per_item_tag: Optional[str] = None
    section: Optional[str] = None
    priority: Optional[int] = None


@dataclass
class ImplementedTrait(BaseImplementedTrait):
    super_variables: List[Variable] = field(default_factory=list)
    functions: List["ContractFunction"] = field(default_factory=list)


@dataclass
class BaseFunction:
    """Function template shared by feature modules"""
    name: str
    args: List[Argument] = field(default_factory=list)
    code: List[str] = field(default_factory=list)
    returns: Optional[str] = None
    kind: Optional[str] = None  # Solidity visibility
    mutability: Optional[str] = None

    @property
    def signature(self) -> Tuple[str, Tuple[str, ...]]:
        return self.name, tuple(a.name for a in self.args)


@dataclass
class ContractFunction(BaseFunction):
    code_before: List[str] = field(default_factory=list)
    tag: Optional[str] = None
    override: List[str] = field(default_factory=list)  # parent names, insertion ordered
    modifiers: List[str] = field(default_factory=list)
    final: bool = False
    comments: List[str] = field(default_factory=list)


@dataclass
class NatspecTag:
    key: str
    value: str


@dataclass
class Library:
    """Solidity library attached with `using ... for ...`"""
    name: str
    path: str
    using_for: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Contract:
    """Finished, read-only view of a contract handed to the printers"""
    name: str
    license: str
    account: bool = False
    upgradeable: bool = False
    use_clauses: Tuple[UseClause, ...] = ()
    components: Tuple[Component, ...] = ()
    constants: Tuple[Variable, ...] = ()
    constructor_args: Tuple[Argument, ...] = ()
    constructor_code: Tuple[str, ...] = ()
    constructor_comments: Tuple[str, ...] = ()
    documentation_tags: Tuple[NatspecTag, ...] = ()
    implemented_traits: Tuple[ImplementedTrait, ...] = ()
    super_variables: Tuple[Variable, ...] = ()
    functions: Tuple[ContractFunction, ...] = ()
    libraries: Tuple[Library, ...] = ()
    variables: Tuple[str, ...] = ()
    interface_flags: FrozenSet[str] = frozenset()

    @property
    def parents(self) -> Tuple[Component, ...]:
        """Components that are inherited rather than only imported"""
        return tuple(c for c in self.components if not c.import_only)
