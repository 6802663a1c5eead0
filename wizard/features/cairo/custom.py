"""
Cairo custom contract: an empty shell with the common features
"""

from dataclasses import dataclass, field
from typing import Optional

from ...core.contract import CairoContractBuilder
from ...generators.cairo import print_contract
from ..common import Access, Info, check_access, set_info
from .access_control import set_access_control
from .common import ACCESS_OPTIONS
from .pausable import add_pausable
from .upgradeable import set_upgradeable


@dataclass
class CustomOptions:
    name: str = "MyContract"
    pausable: bool = False
    access: Access = False
    upgradeable: bool = True
    info: Info = field(default_factory=Info)


def is_access_control_required(opts: CustomOptions) -> bool:
    return opts.pausable or opts.upgradeable


def print_custom(opts: Optional[CustomOptions] = None) -> str:
    return print_contract(build_custom(opts or CustomOptions()))


def build_custom(opts: CustomOptions) -> CairoContractBuilder:
    check_access(opts.access, ACCESS_OPTIONS)
    c = CairoContractBuilder(opts.name)

    if opts.pausable:
        add_pausable(c, opts.access)

    set_access_control(c, opts.access)
    set_upgradeable(c, opts.upgradeable, opts.access)
    set_info(c, opts.info)

    return c
