"""
Cairo upgradeability through the Upgradeable component
"""

from typing import Optional

from ...core.contract import CairoContractBuilder
from ...core.models import Argument, BaseImplementedTrait, Event, Impl, Substorage
from ..common import Access, define_components, define_functions
from .access_control import require_access_control
from .common import get_self_arg

UPGRADEABLE_TRAIT = BaseImplementedTrait(
    name="UpgradeableImpl",
    of="IUpgradeable<ContractState>",
    section="Upgradeable",
    tags=["abi(embed_v0)"],
)


def _set_upgradeable_base(c: CairoContractBuilder, upgradeable: bool) -> Optional[BaseImplementedTrait]:
    if not upgradeable:
        return None

    c.upgradeable = True
    c.add_component(components["UpgradeableComponent"], initializable=False)

    c.add_use_clause("openzeppelin::upgrades::interface", "IUpgradeable")
    c.add_use_clause("starknet", "ClassHash")

    c.add_implemented_trait(UPGRADEABLE_TRAIT)
    return UPGRADEABLE_TRAIT


def set_upgradeable(c: CairoContractBuilder, upgradeable: bool, access: Access) -> None:
    trait = _set_upgradeable_base(c, upgradeable)
    if trait is not None:
        require_access_control(c, trait, functions["upgrade"], access, "UPGRADER", "upgrader")


def set_account_upgradeable(c: CairoContractBuilder, upgradeable: bool, account_type: str) -> None:
    """Upgrades of an account contract may only be made by the account itself"""
    trait = _set_upgradeable_base(c, upgradeable)
    if trait is None:
        return

    substorage = "eth_account" if account_type == "eth" else "account"
    c.add_function_code_before(trait, functions["upgrade"], f"self.{substorage}.assert_only_self()")


components = define_components(
    UpgradeableComponent=dict(
        path="openzeppelin::upgrades",
        substorage=Substorage("upgradeable", "UpgradeableComponent::Storage"),
        event=Event("UpgradeableEvent", "UpgradeableComponent::Event"),
        impls=[
            Impl("UpgradeableInternalImpl", "UpgradeableComponent::InternalImpl<ContractState>", embed=False),
        ],
    ),
)

functions = define_functions(
    upgrade=dict(
        args=[get_self_arg(), Argument("new_class_hash", "ClassHash")],
        code=["self.upgradeable.upgrade(new_class_hash)"],
    ),
)
