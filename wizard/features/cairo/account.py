"""
Cairo account contracts, validating either Starknet or Ethereum signatures
"""

from dataclasses import dataclass, field
from typing import Optional

from ...core.contract import CairoContractBuilder
from ...core.errors import OptionsError
from ...core.models import Argument, Event, Impl, Lit, Substorage
from ...generators.cairo import print_contract
from ..common import Info, define_components, set_info
from .common import add_src5_component
from .upgradeable import set_account_upgradeable

ACCOUNT_TYPES = ("stark", "eth")


@dataclass
class AccountOptions:
    name: str = "MyAccount"
    type: str = "stark"
    declare: bool = True
    deploy: bool = True
    pubkey: bool = True
    outside_execution: bool = True
    upgradeable: bool = True
    info: Info = field(default_factory=Info)


def print_account(opts: Optional[AccountOptions] = None) -> str:
    return print_contract(build_account(opts or AccountOptions()))


def build_account(opts: AccountOptions) -> CairoContractBuilder:
    if opts.type not in ACCOUNT_TYPES:
        raise OptionsError({"type": "Invalid account type"})

    c = CairoContractBuilder(opts.name, account=True)

    base = _add_base(c, opts.type)

    if opts.declare and opts.deploy and opts.pubkey:
        mixin = "AccountMixinImpl" if opts.type == "stark" else "EthAccountMixinImpl"
        c.add_impl_to_component(components[base], Impl(mixin, f"{base}::{mixin}<ContractState>"))
        c.add_interface_flag("ISRC5")
        add_src5_component(c)
    else:
        _add_split_impls(c, opts, base)

    if opts.outside_execution:
        c.add_component(components["SRC9Component"], [])

    set_account_upgradeable(c, opts.upgradeable, opts.type)
    set_info(c, opts.info)

    return c


def _add_base(c: CairoContractBuilder, account_type: str) -> str:
    if account_type == "stark":
        c.add_constructor_argument(Argument("public_key", "felt252"))
        base = "AccountComponent"
    else:
        c.add_use_clause("openzeppelin::account::interface", "EthPublicKey")
        c.add_constructor_argument(Argument("public_key", "EthPublicKey"))
        base = "EthAccountComponent"

    c.add_component(components[base], [Lit("public_key")])
    return base


def _add_split_impls(c: CairoContractBuilder, opts: AccountOptions, base: str) -> None:
    """Embed only the account interfaces that were asked for"""
    def embed(name: str) -> None:
        c.add_impl_to_component(components[base], Impl(name, f"{base}::{name}<ContractState>"))

    embed("SRC6Impl")
    embed("SRC6CamelOnlyImpl")
    add_src5_component(c)

    if opts.declare:
        embed("DeclarerImpl")
    if opts.deploy:
        embed("DeployableImpl")
    if opts.pubkey:
        embed("PublicKeyImpl")
        embed("PublicKeyCamelImpl")


components = define_components(
    AccountComponent=dict(
        path="openzeppelin::account",
        substorage=Substorage("account", "AccountComponent::Storage"),
        event=Event("AccountEvent", "AccountComponent::Event"),
        impls=[
            Impl("AccountInternalImpl", "AccountComponent::InternalImpl<ContractState>", embed=False),
        ],
    ),
    EthAccountComponent=dict(
        path="openzeppelin::account::eth_account",
        substorage=Substorage("eth_account", "EthAccountComponent::Storage"),
        event=Event("EthAccountEvent", "EthAccountComponent::Event"),
        impls=[
            Impl("EthAccountInternalImpl", "EthAccountComponent::InternalImpl<ContractState>", embed=False),
        ],
    ),
    SRC9Component=dict(
        path="openzeppelin::account::extensions",
        substorage=Substorage("src9", "SRC9Component::Storage"),
        event=Event("SRC9Event", "SRC9Component::Event"),
        impls=[
            Impl("OutsideExecutionV2Impl", "SRC9Component::OutsideExecutionV2Impl<ContractState>"),
            Impl("OutsideExecutionInternalImpl", "SRC9Component::InternalImpl<ContractState>", embed=False),
        ],
    ),
)
