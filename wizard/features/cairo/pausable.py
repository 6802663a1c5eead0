"""
Cairo pausable feature
"""

from ...core.contract import CairoContractBuilder
from ...core.models import Event, Impl, Substorage
from ..common import Access, define_components, define_functions
from .access_control import require_access_control
from .common import EXTERNAL_TRAIT, get_self_arg


def add_pausable(c: CairoContractBuilder, access: Access) -> None:
    c.add_component(components["PausableComponent"], initializable=False)

    c.add_function(EXTERNAL_TRAIT, functions["pause"])
    c.add_function(EXTERNAL_TRAIT, functions["unpause"])
    require_access_control(c, EXTERNAL_TRAIT, functions["pause"], access, "PAUSER", "pauser")
    require_access_control(c, EXTERNAL_TRAIT, functions["unpause"], access, "PAUSER", "pauser")


components = define_components(
    PausableComponent=dict(
        path="openzeppelin::security::pausable",
        substorage=Substorage("pausable", "PausableComponent::Storage"),
        event=Event("PausableEvent", "PausableComponent::Event"),
        impls=[
            Impl("PausableImpl", "PausableComponent::PausableImpl<ContractState>"),
            Impl("PausableInternalImpl", "PausableComponent::InternalImpl<ContractState>", embed=False),
        ],
    ),
)

functions = define_functions(
    pause=dict(args=[get_self_arg()], code=["self.pausable.pause()"]),
    unpause=dict(args=[get_self_arg()], code=["self.pausable.unpause()"]),
)
