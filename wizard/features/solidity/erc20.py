"""
Solidity ERC20 token
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from ...core.contract import SolidityContractBuilder
from ...core.errors import OptionsError
from ...core.models import Argument, Component
from ...generators.solidity import print_contract
from ..common import Access, Info, check_access, define_functions, set_info
from .access_control import require_access_control, set_access_control
from .common import ACCESS_OPTIONS
from .pausable import add_pause_functions
from .upgradeable import set_upgradeable

PREMINT_PATTERN = re.compile(r"^(\d*)(?:\.(\d+))?(?:e(\d+))?$")

parents = {
    "ERC20": Component("ERC20", "@openzeppelin/contracts/token/ERC20/ERC20.sol"),
    "ERC20Burnable": Component(
        "ERC20Burnable", "@openzeppelin/contracts/token/ERC20/extensions/ERC20Burnable.sol"
    ),
    "ERC20Pausable": Component(
        "ERC20Pausable", "@openzeppelin/contracts/token/ERC20/extensions/ERC20Pausable.sol"
    ),
    "ERC20Permit": Component(
        "ERC20Permit", "@openzeppelin/contracts/token/ERC20/extensions/ERC20Permit.sol"
    ),
}


@dataclass
class ERC20Options:
    name: str = "MyToken"
    symbol: str = "MTK"
    burnable: bool = False
    pausable: bool = False
    premint: str = "0"
    mintable: bool = False
    permit: bool = True
    access: Access = False
    upgradeable: Union[bool, str] = False
    info: Info = field(default_factory=Info)


def is_access_control_required(opts: ERC20Options) -> bool:
    return opts.mintable or opts.pausable or opts.upgradeable == "uups"


def print_erc20(opts: Optional[ERC20Options] = None) -> str:
    return print_contract(build_erc20(opts or ERC20Options()))


def build_erc20(opts: ERC20Options) -> SolidityContractBuilder:
    check_access(opts.access, ACCESS_OPTIONS)
    c = SolidityContractBuilder(opts.name)

    _add_base(c, opts.name, opts.symbol)

    if opts.burnable:
        c.add_parent(parents["ERC20Burnable"])

    if opts.pausable:
        c.add_parent(parents["ERC20Pausable"])
        c.add_override(parents["ERC20Pausable"], functions["_update"])
        add_pause_functions(c, opts.access)

    if opts.premint:
        _add_premint(c, opts.premint)

    if opts.mintable:
        require_access_control(c, functions["mint"], opts.access, "MINTER", "minter")
        c.add_function_code("_mint(to, amount);", functions["mint"])

    if opts.permit:
        c.add_parent(parents["ERC20Permit"], [opts.name])
        c.add_override(parents["ERC20Permit"], functions["nonces"])

    set_access_control(c, opts.access)
    set_upgradeable(c, opts.upgradeable, opts.access)
    set_info(c, opts.info)

    return c


def _add_base(c: SolidityContractBuilder, name: str, symbol: str) -> None:
    c.add_parent(parents["ERC20"], [name, symbol])
    c.add_override(parents["ERC20"], functions["_update"])


def _add_premint(c: SolidityContractBuilder, amount: str) -> None:
    """
    Mint `amount` tokens to a recipient in the constructor.

    The amount may carry a fraction and an exponent, e.g. `1.5e3`; it is
    rewritten as an integer count of units scaled by `decimals()`.
    """
    m = PREMINT_PATTERN.match(amount)
    if not m:
        raise OptionsError({"premint": "Not a valid number"})

    integer = (m.group(1) or "").lstrip("0")
    decimals = (m.group(2) or "").rstrip("0")
    exponent = int(m.group(3) or 0)

    if int(integer + decimals or "0") == 0:
        return

    decimal_place = len(decimals) - exponent
    zeroes = "0" * max(0, -decimal_place)
    units = integer + decimals + zeroes
    exp = "decimals()" if decimal_place <= 0 else f"(decimals() - {decimal_place})"

    c.add_constructor_argument(Argument("recipient", "address"))
    c.add_constructor_code(f"_mint(recipient, {units} * 10 ** {exp});")


functions = define_functions(
    _update=dict(
        kind="internal",
        args=[
            Argument("from", "address"),
            Argument("to", "address"),
            Argument("value", "uint256"),
        ],
    ),
    mint=dict(
        kind="public",
        args=[Argument("to", "address"), Argument("amount", "uint256")],
    ),
    nonces=dict(
        kind="public",
        args=[Argument("owner", "address")],
        returns="uint256",
        mutability="view",
    ),
)
