"""
Solidity ERC721 token
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from ...core.contract import SolidityContractBuilder
from ...core.models import Argument, BaseFunction, Component
from ...generators.solidity import print_contract
from ...utils.identifiers import stringify_unicode_safe
from ..common import Access, Info, check_access, define_functions, set_info
from .access_control import require_access_control, set_access_control
from .clock_mode import resolve_clock_mode, set_clock_mode
from .common import ACCESS_OPTIONS, supports_interface
from .pausable import add_pause_functions
from .upgradeable import set_upgradeable

parents = {
    "ERC721": Component("ERC721", "@openzeppelin/contracts/token/ERC721/ERC721.sol"),
    "ERC721Enumerable": Component(
        "ERC721Enumerable", "@openzeppelin/contracts/token/ERC721/extensions/ERC721Enumerable.sol"
    ),
    "ERC721URIStorage": Component(
        "ERC721URIStorage", "@openzeppelin/contracts/token/ERC721/extensions/ERC721URIStorage.sol"
    ),
    "ERC721Pausable": Component(
        "ERC721Pausable", "@openzeppelin/contracts/token/ERC721/extensions/ERC721Pausable.sol"
    ),
    "ERC721Burnable": Component(
        "ERC721Burnable", "@openzeppelin/contracts/token/ERC721/extensions/ERC721Burnable.sol"
    ),
    "ERC721Votes": Component(
        "ERC721Votes", "@openzeppelin/contracts/token/ERC721/extensions/ERC721Votes.sol"
    ),
    "EIP712": Component("EIP712", "@openzeppelin/contracts/utils/cryptography/EIP712.sol"),
}


@dataclass
class ERC721Options:
    name: str = "MyToken"
    symbol: str = "MTK"
    base_uri: str = ""
    enumerable: bool = False
    uri_storage: bool = False
    burnable: bool = False
    pausable: bool = False
    mintable: bool = False
    incremental: bool = False
    votes: Union[bool, str] = False
    access: Access = False
    upgradeable: Union[bool, str] = False
    info: Info = field(default_factory=Info)


def is_access_control_required(opts: ERC721Options) -> bool:
    return opts.mintable or opts.pausable or opts.upgradeable == "uups"


def print_erc721(opts: Optional[ERC721Options] = None) -> str:
    return print_contract(build_erc721(opts or ERC721Options()))


def build_erc721(opts: ERC721Options) -> SolidityContractBuilder:
    check_access(opts.access, ACCESS_OPTIONS)
    clock_mode = resolve_clock_mode(opts.votes) if opts.votes else None
    c = SolidityContractBuilder(opts.name)

    _add_base(c, opts.name, opts.symbol)

    if opts.base_uri:
        c.add_override(parents["ERC721"], functions["_baseURI"])
        c.set_function_body([f"return {stringify_unicode_safe(opts.base_uri)};"], functions["_baseURI"])

    if opts.enumerable:
        _add_extension(c, "ERC721Enumerable", functions["_update"], functions["_increaseBalance"],
                       supports_interface)

    if opts.uri_storage:
        _add_extension(c, "ERC721URIStorage", functions["tokenURI"], supports_interface)

    if opts.pausable:
        _add_extension(c, "ERC721Pausable", functions["_update"])
        add_pause_functions(c, opts.access)

    if opts.burnable:
        c.add_parent(parents["ERC721Burnable"])

    if opts.mintable:
        _add_mintable(c, opts.access, opts.incremental, opts.uri_storage)

    if clock_mode is not None:
        c.add_parent(parents["EIP712"], [opts.name, "1"])
        _add_extension(c, "ERC721Votes", functions["_update"], functions["_increaseBalance"])
        set_clock_mode(c, parents["ERC721Votes"], clock_mode)

    set_access_control(c, opts.access)
    set_upgradeable(c, opts.upgradeable, opts.access)
    set_info(c, opts.info)

    return c


def _add_base(c: SolidityContractBuilder, name: str, symbol: str) -> None:
    c.add_parent(parents["ERC721"], [name, symbol])
    for fn in (functions["_update"], functions["_increaseBalance"], functions["tokenURI"], supports_interface):
        c.add_override(parents["ERC721"], fn)


def _add_extension(c: SolidityContractBuilder, name: str, *overrides: BaseFunction) -> None:
    c.add_parent(parents[name])
    for fn in overrides:
        c.add_override(parents[name], fn)


def _add_mintable(c: SolidityContractBuilder, access: Access, incremental: bool, uri_storage: bool) -> None:
    fn = get_mint_function(incremental, uri_storage)
    require_access_control(c, fn, access, "MINTER", "minter")

    if incremental:
        c.add_variable("uint256 private _nextTokenId;")
        c.add_function_code("uint256 tokenId = _nextTokenId++;", fn)
    c.add_function_code("_safeMint(to, tokenId);", fn)

    if uri_storage:
        c.add_function_code("_setTokenURI(tokenId, uri);", fn)


def get_mint_function(incremental: bool, uri_storage: bool) -> BaseFunction:
    """`safeMint` takes a token id unless ids are assigned incrementally"""
    args = [Argument("to", "address")]
    if not incremental:
        args.append(Argument("tokenId", "uint256"))
    if uri_storage:
        args.append(Argument("uri", "string memory"))
    return BaseFunction(name="safeMint", args=args, kind="public")


functions = define_functions(
    _update=dict(
        kind="internal",
        args=[
            Argument("to", "address"),
            Argument("tokenId", "uint256"),
            Argument("auth", "address"),
        ],
        returns="address",
    ),
    tokenURI=dict(
        kind="public",
        args=[Argument("tokenId", "uint256")],
        returns="string memory",
        mutability="view",
    ),
    _baseURI=dict(kind="internal", args=[], returns="string memory", mutability="pure"),
    _increaseBalance=dict(
        kind="internal",
        args=[Argument("account", "address"), Argument("value", "uint128")],
    ),
)
