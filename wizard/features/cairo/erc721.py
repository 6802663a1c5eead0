"""
Cairo ERC721 token
"""

from dataclasses import dataclass, field
from typing import Optional

from ...core.contract import CairoContractBuilder
from ...core.models import Argument, BaseFunction, BaseImplementedTrait, Event, Impl, Substorage
from ...generators.cairo import print_contract
from ...utils.identifiers import to_byte_array
from ..common import Access, Info, check_access, define_components, define_functions, set_info
from .access_control import require_access_control, set_access_control
from .common import ACCESS_OPTIONS, EXTERNAL_TRAIT, add_src5_component, get_self_arg
from .pausable import add_pausable
from .upgradeable import set_upgradeable

HOOKS_TRAIT = BaseImplementedTrait(
    name="ERC721HooksImpl",
    of="ERC721Component::ERC721HooksTrait<ContractState>",
    tags=[],
    priority=0,
)


@dataclass
class ERC721Options:
    name: str = "MyToken"
    symbol: str = "MTK"
    base_uri: str = ""
    burnable: bool = False
    pausable: bool = False
    mintable: bool = False
    enumerable: bool = False
    access: Access = False
    upgradeable: bool = True
    info: Info = field(default_factory=Info)


def is_access_control_required(opts: ERC721Options) -> bool:
    return opts.mintable or opts.pausable or opts.upgradeable


def print_erc721(opts: Optional[ERC721Options] = None) -> str:
    return print_contract(build_erc721(opts or ERC721Options()))


def build_erc721(opts: ERC721Options) -> CairoContractBuilder:
    check_access(opts.access, ACCESS_OPTIONS)
    c = CairoContractBuilder(opts.name)

    c.add_component(
        components["ERC721Component"],
        [to_byte_array(opts.name), to_byte_array(opts.symbol), to_byte_array(opts.base_uri)],
    )
    c.add_impl_to_component(
        components["ERC721Component"],
        Impl("ERC721MixinImpl", "ERC721Component::ERC721MixinImpl<ContractState>"),
    )
    c.add_interface_flag("ISRC5")
    add_src5_component(c)

    if opts.pausable:
        add_pausable(c, opts.access)

    if opts.burnable:
        c.add_use_clause("core::num::traits", "Zero")
        c.add_use_clause("starknet", "get_caller_address")
        c.add_function(EXTERNAL_TRAIT, functions["burn"])

    if opts.mintable:
        c.add_use_clause("starknet", "ContractAddress")
        require_access_control(c, EXTERNAL_TRAIT, functions["safe_mint"], opts.access, "MINTER", "minter")
        c.add_function(EXTERNAL_TRAIT, functions["safeMint"])

    if opts.enumerable:
        c.add_component(components["ERC721EnumerableComponent"], [])

    set_access_control(c, opts.access)
    set_upgradeable(c, opts.upgradeable, opts.access)
    set_info(c, opts.info)

    _add_hooks(c, opts)

    return c


def _add_hooks(c: CairoContractBuilder, opts: ERC721Options) -> None:
    if not (opts.pausable or opts.enumerable):
        c.add_use_clause("openzeppelin::token::erc721", "ERC721HooksEmptyImpl")
        return

    c.add_use_clause("starknet", "ContractAddress")
    c.add_implemented_trait(HOOKS_TRAIT)

    # Enumerable bookkeeping writes to storage
    if opts.enumerable:
        code = ["let mut contract_state = self.get_contract_mut()"]
    else:
        code = ["let contract_state = self.get_contract()"]
    if opts.pausable:
        code.append("contract_state.pausable.assert_not_paused()")
    if opts.enumerable:
        code.append("contract_state.erc721_enumerable.before_update(to, token_id)")

    before_update = BaseFunction(
        name="before_update",
        args=[
            Argument("ref self", "ERC721Component::ComponentState<ContractState>"),
            Argument("to", "ContractAddress"),
            Argument("token_id", "u256"),
            Argument("auth", "ContractAddress"),
        ],
        code=code,
    )
    c.add_function(HOOKS_TRAIT, before_update)


components = define_components(
    ERC721Component=dict(
        path="openzeppelin::token::erc721",
        substorage=Substorage("erc721", "ERC721Component::Storage"),
        event=Event("ERC721Event", "ERC721Component::Event"),
        impls=[
            Impl("ERC721InternalImpl", "ERC721Component::InternalImpl<ContractState>", embed=False),
        ],
    ),
    ERC721EnumerableComponent=dict(
        path="openzeppelin::token::erc721::extensions",
        substorage=Substorage("erc721_enumerable", "ERC721EnumerableComponent::Storage"),
        event=Event("ERC721EnumerableEvent", "ERC721EnumerableComponent::Event"),
        impls=[
            Impl("ERC721EnumerableImpl", "ERC721EnumerableComponent::ERC721EnumerableImpl<ContractState>"),
            Impl(
                "ERC721EnumerableInternalImpl",
                "ERC721EnumerableComponent::InternalImpl<ContractState>",
                embed=False,
            ),
        ],
    ),
)

functions = define_functions(
    burn=dict(
        args=[get_self_arg(), Argument("token_id", "u256")],
        code=["self.erc721.update(Zero::zero(), token_id, get_caller_address());"],
    ),
    safe_mint=dict(
        args=[
            get_self_arg(),
            Argument("recipient", "ContractAddress"),
            Argument("token_id", "u256"),
            Argument("data", "Span<felt252>"),
        ],
        code=["self.erc721.safe_mint(recipient, token_id, data);"],
    ),
    safeMint=dict(
        args=[
            get_self_arg(),
            Argument("recipient", "ContractAddress"),
            Argument("tokenId", "u256"),
            Argument("data", "Span<felt252>"),
        ],
        code=["self.safe_mint(recipient, tokenId, data);"],
    ),
)
