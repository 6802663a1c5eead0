"""
Pieces shared by the Cairo feature modules
"""

from typing import Optional

from ...core.contract import CairoContractBuilder
from ...core.models import Argument, BaseImplementedTrait, Impl, Substorage, Event
from ..common import define_components

ACCESS_OPTIONS = (False, "ownable", "roles")

EXTERNAL_TRAIT = BaseImplementedTrait(
    name="ExternalImpl",
    of="ExternalTrait",
    tags=["generate_trait", "abi(per_item)"],
    per_item_tag="external(v0)",
)


def get_self_arg(scope: str = "external") -> Argument:
    """`ref self` for external functions, a snapshot for views"""
    if scope == "view":
        return Argument("self", "@ContractState")
    return Argument("ref self", "ContractState")


components = define_components(
    SRC5Component=dict(
        path="openzeppelin::introspection::src5",
        substorage=Substorage("src5", "SRC5Component::Storage"),
        event=Event("SRC5Event", "SRC5Component::Event"),
        impls=[],
    ),
)


def add_src5_component(c: CairoContractBuilder, section: Optional[str] = None) -> None:
    c.add_component(components["SRC5Component"], initializable=False)

    if not c.has_interface_flag("ISRC5"):
        c.add_impl_to_component(
            components["SRC5Component"],
            Impl("SRC5Impl", "SRC5Component::SRC5Impl<ContractState>", section=section),
        )
        c.add_interface_flag("ISRC5")
