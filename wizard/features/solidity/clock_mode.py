"""
Clock used by vote checkpoints: block numbers or timestamps
"""

from typing import Union

from ...core.contract import SolidityContractBuilder
from ...core.errors import OptionsError
from ...core.models import Component
from ..common import define_functions

CLOCK_MODES = ("blocknumber", "timestamp")
DEFAULT_CLOCK_MODE = "blocknumber"


def resolve_clock_mode(votes: Union[bool, str]) -> str:
    """`True` selects the default clock"""
    clock_mode = DEFAULT_CLOCK_MODE if votes is True else votes
    if clock_mode not in CLOCK_MODES:
        raise OptionsError({"votes": f"Invalid clock mode: {votes}"})
    return clock_mode


def set_clock_mode(c: SolidityContractBuilder, parent: Component, clock_mode: str) -> None:
    if clock_mode != "timestamp":
        return

    c.add_override(parent, functions["clock"])
    c.set_function_body(["return uint48(block.timestamp);"], functions["clock"])

    c.add_function_comment("// solhint-disable-next-line func-name-mixedcase", functions["CLOCK_MODE"])
    c.add_override(parent, functions["CLOCK_MODE"])
    c.set_function_body(['return "mode=timestamp";'], functions["CLOCK_MODE"])


functions = define_functions(
    clock=dict(kind="public", args=[], returns="uint48", mutability="view"),
    CLOCK_MODE=dict(kind="public", args=[], returns="string memory", mutability="pure"),
)
