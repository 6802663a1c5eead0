"""
Solidity pausable feature
"""

from typing import List

from ...core.contract import SolidityContractBuilder
from ...core.models import BaseFunction, Component
from ..common import Access, define_functions
from .access_control import require_access_control

PAUSABLE = Component("Pausable", "@openzeppelin/contracts/utils/Pausable.sol")


def add_pausable(c: SolidityContractBuilder, access: Access, pausable_fns: List[BaseFunction]) -> None:
    c.add_parent(PAUSABLE)

    for fn in pausable_fns:
        c.add_modifier("whenNotPaused", fn)

    add_pause_functions(c, access)


def add_pause_functions(c: SolidityContractBuilder, access: Access) -> None:
    require_access_control(c, functions["pause"], access, "PAUSER", "pauser")
    c.add_function_code("_pause();", functions["pause"])

    require_access_control(c, functions["unpause"], access, "PAUSER", "pauser")
    c.add_function_code("_unpause();", functions["unpause"])


functions = define_functions(
    pause=dict(kind="public", args=[]),
    unpause=dict(kind="public", args=[]),
)
