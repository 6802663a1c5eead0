"""
Cairo access control: Ownable or role based AccessControl
"""

from typing import Optional

from ...core.contract import CairoContractBuilder
from ...core.models import Argument, BaseFunction, BaseImplementedTrait, Event, Impl, Lit, Substorage, Variable
from ..common import Access, define_components
from .common import add_src5_component

DEFAULT_ACCESS_CONTROL = "ownable"


def set_access_control(c: CairoContractBuilder, access: Access) -> None:
    """Sets access control for the contract by adding the matching component"""
    if access == "ownable":
        c.add_component(components["OwnableComponent"], [Lit("owner")])
        c.add_use_clause("starknet", "ContractAddress")
        c.add_constructor_argument(Argument("owner", "ContractAddress"))

    elif access == "roles":
        if not c.add_component(components["AccessControlComponent"]):
            return

        unit = components["AccessControlComponent"]
        if c.has_interface_flag("ISRC5"):
            c.add_impl_to_component(unit, Impl(
                "AccessControlImpl", "AccessControlComponent::AccessControlImpl<ContractState>"
            ))
            c.add_impl_to_component(unit, Impl(
                "AccessControlCamelImpl", "AccessControlComponent::AccessControlCamelImpl<ContractState>"
            ))
        else:
            c.add_impl_to_component(unit, Impl(
                "AccessControlMixinImpl", "AccessControlComponent::AccessControlMixinImpl<ContractState>"
            ))
            c.add_interface_flag("ISRC5")
        add_src5_component(c)

        c.add_use_clause("starknet", "ContractAddress")
        c.add_constructor_argument(Argument("default_admin", "ContractAddress"))

        c.add_use_clause("openzeppelin::access::accesscontrol", "DEFAULT_ADMIN_ROLE")
        c.add_constructor_code("self.accesscontrol._grant_role(DEFAULT_ADMIN_ROLE, default_admin)")


def require_access_control(c: CairoContractBuilder, trait: BaseImplementedTrait, fn: BaseFunction,
                           access: Access, role_id_prefix: str, role_owner: Optional[str] = None) -> None:
    """
    Enables access control for the contract and restricts the given function with it.

    Without an explicit access option, Ownable is used.
    """
    if access is False:
        access = DEFAULT_ACCESS_CONTROL
    set_access_control(c, access)

    if access == "ownable":
        c.add_function_code_before(trait, fn, "self.ownable.assert_only_owner()")

    elif access == "roles":
        role_id = role_id_prefix + "_ROLE"
        added = c.add_super_variable(Variable(role_id, "felt252", f'selector!("{role_id}")'))
        if role_owner is not None:
            c.add_use_clause("starknet", "ContractAddress")
            c.add_constructor_argument(Argument(role_owner, "ContractAddress"))
            if added:
                c.add_constructor_code(f"self.accesscontrol._grant_role({role_id}, {role_owner})")

        c.add_function_code_before(trait, fn, f"self.accesscontrol.assert_only_role({role_id})")


components = define_components(
    OwnableComponent=dict(
        path="openzeppelin::access::ownable",
        substorage=Substorage("ownable", "OwnableComponent::Storage"),
        event=Event("OwnableEvent", "OwnableComponent::Event"),
        impls=[
            Impl("OwnableMixinImpl", "OwnableComponent::OwnableMixinImpl<ContractState>"),
            Impl("OwnableInternalImpl", "OwnableComponent::InternalImpl<ContractState>", embed=False),
        ],
    ),
    AccessControlComponent=dict(
        path="openzeppelin::access::accesscontrol",
        substorage=Substorage("accesscontrol", "AccessControlComponent::Storage"),
        event=Event("AccessControlEvent", "AccessControlComponent::Event"),
        impls=[
            Impl("AccessControlInternalImpl", "AccessControlComponent::InternalImpl<ContractState>", embed=False),
        ],
    ),
)
