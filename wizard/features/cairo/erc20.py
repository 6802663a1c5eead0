"""
Cairo ERC20 token
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from ...core.contract import CairoContractBuilder
from ...core.errors import OptionsError
from ...core.models import Argument, BaseImplementedTrait, Event, Impl, Substorage
from ...generators.cairo import print_contract
from ...utils.identifiers import to_byte_array, to_uint
from ..common import Access, Info, check_access, define_components, define_functions, set_info
from .access_control import require_access_control, set_access_control
from .common import ACCESS_OPTIONS, EXTERNAL_TRAIT, get_self_arg
from .pausable import add_pausable
from .upgradeable import set_upgradeable

PREMINT_PATTERN = re.compile(r"^(\d*\.?\d*)$")

HOOKS_TRAIT = BaseImplementedTrait(
    name="ERC20HooksImpl",
    of="ERC20Component::ERC20HooksTrait<ContractState>",
    tags=[],
    priority=1,
)


@dataclass
class ERC20Options:
    name: str = "MyToken"
    symbol: str = "MTK"
    burnable: bool = False
    pausable: bool = False
    premint: str = "0"
    mintable: bool = False
    access: Access = False
    upgradeable: bool = True
    info: Info = field(default_factory=Info)


def is_access_control_required(opts: ERC20Options) -> bool:
    return opts.mintable or opts.pausable or opts.upgradeable


def print_erc20(opts: Optional[ERC20Options] = None) -> str:
    return print_contract(build_erc20(opts or ERC20Options()))


def build_erc20(opts: ERC20Options) -> CairoContractBuilder:
    check_access(opts.access, ACCESS_OPTIONS)
    c = CairoContractBuilder(opts.name)

    _add_base(c, to_byte_array(opts.name), to_byte_array(opts.symbol))
    c.add_impl_to_component(
        components["ERC20Component"],
        Impl("ERC20MixinImpl", "ERC20Component::ERC20MixinImpl<ContractState>"),
    )

    if opts.premint:
        _add_premint(c, opts.premint)

    if opts.pausable:
        add_pausable(c, opts.access)

    if opts.burnable:
        c.add_use_clause("starknet", "get_caller_address")
        c.add_function(EXTERNAL_TRAIT, functions["burn"])

    if opts.mintable:
        c.add_use_clause("starknet", "ContractAddress")
        require_access_control(c, EXTERNAL_TRAIT, functions["mint"], opts.access, "MINTER", "minter")

    _add_hooks(c, opts)

    set_access_control(c, opts.access)
    set_upgradeable(c, opts.upgradeable, opts.access)
    set_info(c, opts.info)

    return c


def _add_base(c: CairoContractBuilder, name: str, symbol: str) -> None:
    c.add_component(components["ERC20Component"], [name, symbol])


def _add_hooks(c: CairoContractBuilder, opts: ERC20Options) -> None:
    if not opts.pausable:
        c.add_use_clause("openzeppelin::token::erc20", "ERC20HooksEmptyImpl")
        return

    c.add_implemented_trait(HOOKS_TRAIT)
    for line in ("let contract_state = self.get_contract()",
                 "contract_state.pausable.assert_not_paused()"):
        c.append_function_code(HOOKS_TRAIT, functions["before_update"], line)


def _add_premint(c: CairoContractBuilder, amount: str) -> None:
    if amount == "0":
        return
    if not PREMINT_PATTERN.match(amount):
        raise OptionsError({"premint": "Not a valid number"})

    premint_absolute = to_uint(get_initial_supply(amount, 18), "premint", "u256")

    c.add_use_clause("starknet", "ContractAddress")
    c.add_constructor_argument(Argument("recipient", "ContractAddress"))
    c.add_constructor_code(f"self.erc20.mint(recipient, {premint_absolute})")


def get_initial_supply(premint: str, decimals: int) -> str:
    """
    Calculates the initial supply for a premint amount and number of decimals.

    Args:
        premint: Premint amount in token units, may be fractional
        decimals: The number of decimals in the token

    Returns:
        `premint` with zeros padded or removed based on `decimals`

    Raises:
        OptionsError: If `premint` has more than one decimal point or is
            more precise than `decimals` allows
    """
    segments = premint.split(".")
    if len(segments) > 2:
        raise OptionsError({"premint": "Not a valid number"})

    integer = segments[0]
    fraction = segments[1] if len(segments) > 1 else ""
    if len(fraction) > decimals:
        raise OptionsError({"premint": "Too many decimals"})
    fraction += "0" * (decimals - len(fraction))

    return (integer + fraction).lstrip("0") or "0"


components = define_components(
    ERC20Component=dict(
        path="openzeppelin::token::erc20",
        substorage=Substorage("erc20", "ERC20Component::Storage"),
        event=Event("ERC20Event", "ERC20Component::Event"),
        impls=[
            Impl("ERC20InternalImpl", "ERC20Component::InternalImpl<ContractState>", embed=False),
        ],
    ),
)

functions = define_functions(
    burn=dict(
        args=[get_self_arg(), Argument("value", "u256")],
        code=["self.erc20.burn(get_caller_address(), value);"],
    ),
    mint=dict(
        args=[get_self_arg(), Argument("recipient", "ContractAddress"), Argument("amount", "u256")],
        code=["self.erc20.mint(recipient, amount);"],
    ),
    before_update=dict(
        args=[
            Argument("ref self", "ERC20Component::ComponentState<ContractState>"),
            Argument("from", "ContractAddress"),
            Argument("recipient", "ContractAddress"),
            Argument("amount", "u256"),
        ],
    ),
)
