"""
Solidity access control: Ownable, AccessControl roles or AccessManaged
"""

from typing import Optional

from ...core.contract import SolidityContractBuilder
from ...core.models import Argument, BaseFunction, Component, Lit
from ..common import Access
from .common import supports_interface

parents = {
    "Ownable": Component("Ownable", "@openzeppelin/contracts/access/Ownable.sol"),
    "AccessControl": Component("AccessControl", "@openzeppelin/contracts/access/AccessControl.sol"),
    "AccessManaged": Component("AccessManaged", "@openzeppelin/contracts/access/manager/AccessManaged.sol"),
}


def set_access_control(c: SolidityContractBuilder, access: Access) -> None:
    """Sets access control for the contract by adding inheritance"""
    if access == "ownable":
        if c.add_parent(parents["Ownable"], [Lit("initialOwner")]):
            c.add_constructor_argument(Argument("initialOwner", "address"))

    elif access == "roles":
        if c.add_parent(parents["AccessControl"]):
            c.add_constructor_argument(Argument("defaultAdmin", "address"))
            c.add_constructor_code("_grantRole(DEFAULT_ADMIN_ROLE, defaultAdmin);")
        c.add_override(parents["AccessControl"], supports_interface)

    elif access == "managed":
        if c.add_parent(parents["AccessManaged"], [Lit("initialAuthority")]):
            c.add_constructor_argument(Argument("initialAuthority", "address"))


def require_access_control(c: SolidityContractBuilder, fn: BaseFunction, access: Access,
                           role_id_prefix: str, role_owner: Optional[str] = None) -> None:
    """Enables access control for the contract and restricts the given function with it"""
    if access is False:
        access = "ownable"
    set_access_control(c, access)

    if access == "ownable":
        c.add_modifier("onlyOwner", fn)

    elif access == "roles":
        role_id = role_id_prefix + "_ROLE"
        added = c.add_variable(f'bytes32 public constant {role_id} = keccak256("{role_id}");')
        if role_owner and added:
            c.add_constructor_argument(Argument(role_owner, "address"))
            c.add_constructor_code(f"_grantRole({role_id}, {role_owner});")
        c.add_modifier(f"onlyRole({role_id})", fn)

    elif access == "managed":
        c.add_modifier("restricted", fn)
