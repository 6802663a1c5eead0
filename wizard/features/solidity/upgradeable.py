"""
Solidity upgradeability: transparent or UUPS proxies
"""

from ...core.contract import SolidityContractBuilder
from ...core.errors import OptionsError
from ...core.models import Argument, Component
from ..common import Access, define_functions
from .access_control import require_access_control
from .common import UPGRADEABLE_OPTIONS

INITIALIZABLE = Component(
    "Initializable", "@openzeppelin/contracts/proxy/utils/Initializable.sol", run_first=True
)
UUPS_UPGRADEABLE = Component("UUPSUpgradeable", "@openzeppelin/contracts/proxy/utils/UUPSUpgradeable.sol")


def set_upgradeable(c: SolidityContractBuilder, upgradeable, access: Access) -> None:
    """
    Make the contract deployable behind a proxy.

    Args:
        c: Contract builder
        upgradeable: False, "transparent" or "uups"
        access: Access control guarding `_authorizeUpgrade` for UUPS
    """
    if upgradeable not in UPGRADEABLE_OPTIONS:
        raise OptionsError({"upgradeable": f"Unknown value for upgradeable: {upgradeable}"})
    if upgradeable is False:
        return

    c.upgradeable = True
    # Initializable has no initializer call of its own
    c.add_component(INITIALIZABLE, initializable=False)

    if upgradeable == "uups":
        c.add_parent(UUPS_UPGRADEABLE)
        c.add_override(UUPS_UPGRADEABLE, functions["_authorizeUpgrade"])
        require_access_control(c, functions["_authorizeUpgrade"], access, "UPGRADER", "upgrader")
        c.set_function_body([], functions["_authorizeUpgrade"])


functions = define_functions(
    _authorizeUpgrade=dict(kind="internal", args=[Argument("newImplementation", "address")]),
)
