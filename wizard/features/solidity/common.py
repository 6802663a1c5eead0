"""
Pieces shared by the Solidity feature modules
"""

from ...core.models import Argument
from ..common import define_functions

ACCESS_OPTIONS = (False, "ownable", "roles", "managed")
UPGRADEABLE_OPTIONS = (False, "transparent", "uups")

functions = define_functions(
    supportsInterface=dict(
        kind="public",
        args=[Argument("interfaceId", "bytes4")],
        returns="bool",
        mutability="view",
    ),
)

supports_interface = functions["supportsInterface"]
