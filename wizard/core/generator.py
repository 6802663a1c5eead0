"""
Main generation pipeline
"""

from dataclasses import asdict, is_dataclass
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Type, Union

from .config import TARGETS
from .contract import ContractBuilder
from .errors import UnknownContractKind
from ..features.common import options_from_dict
from ..features.cairo import account as cairo_account
from ..features.cairo import custom as cairo_custom
from ..features.cairo import erc20 as cairo_erc20
from ..features.cairo import erc721 as cairo_erc721
from ..features.solidity import custom as solidity_custom
from ..features.solidity import erc20 as solidity_erc20
from ..features.solidity import erc721 as solidity_erc721
from ..generators import cairo, solidity
from ..utils.files import write_sources
from ..utils.hashing import ContentHasher


class ContractKind(NamedTuple):
    """A buildable contract kind and its options type"""
    build: Callable[[Any], ContractBuilder]
    options: Type


KINDS: Dict[str, Dict[str, ContractKind]] = {
    "cairo": {
        "erc20": ContractKind(cairo_erc20.build_erc20, cairo_erc20.ERC20Options),
        "erc721": ContractKind(cairo_erc721.build_erc721, cairo_erc721.ERC721Options),
        "custom": ContractKind(cairo_custom.build_custom, cairo_custom.CustomOptions),
        "account": ContractKind(cairo_account.build_account, cairo_account.AccountOptions),
    },
    "solidity": {
        "erc20": ContractKind(solidity_erc20.build_erc20, solidity_erc20.ERC20Options),
        "erc721": ContractKind(solidity_erc721.build_erc721, solidity_erc721.ERC721Options),
        "custom": ContractKind(solidity_custom.build_custom, solidity_custom.CustomOptions),
    },
}

PRINTERS: Dict[str, Callable[[Any], str]] = {
    "cairo": cairo.print_contract,
    "solidity": solidity.print_contract,
}


def get_kind(language: str, kind: str) -> ContractKind:
    try:
        return KINDS[language][kind]
    except KeyError:
        raise UnknownContractKind(language, kind) from None


def default_options(language: str, kind: str) -> Dict[str, Any]:
    return asdict(get_kind(language, kind).options())


def resolve_options(language: str, kind: str, options: Union[Dict[str, Any], Any, None] = None) -> Any:
    """Options dataclass for a contract kind, built from a dict when needed"""
    if is_dataclass(options):
        return options
    return options_from_dict(get_kind(language, kind).options, options)


def build(language: str, kind: str, options: Union[Dict[str, Any], Any, None] = None) -> ContractBuilder:
    """Run the feature module for a contract kind and return the filled builder"""
    return get_kind(language, kind).build(resolve_options(language, kind, options))


def generate(language: str,
             kind: str,
             options: Union[Dict[str, Any], Any, None] = None,
             save: bool = False,
             output_dir: Optional[str] = None) -> Dict:
    """
    Generate one contract.

    Args:
        language: "cairo" or "solidity"
        kind: Contract kind, e.g. "erc20"
        options: Options dataclass, or a dict of option values
        save: Write the source and its manifest to output_dir
        output_dir: Output directory, defaults to WIZARD_OUTPUT_DIR

    Returns:
        Dict with:
            - name: Sanitized contract name
            - language, kind
            - source: Contract source text
            - source_hash: SHA-256 of the source
            - file: Written path (if save=True, else None)

    Raises:
        UnknownContractKind: If no builder exists for language/kind
        OptionsError: If the options are invalid
    """
    resolved = resolve_options(language, kind, options)
    contract = build(language, kind, resolved).freeze()
    source = PRINTERS[language](contract)

    path = None
    if save:
        file_name = contract.name + TARGETS[language].file_extension
        entry = (file_name, source, kind, asdict(resolved))
        path = write_sources([entry], output_dir, language=language)[0]

    return {
        "name": contract.name,
        "language": language,
        "kind": kind,
        "source": source,
        "source_hash": ContentHasher.hash_string(source),
        "file": path,
    }


def generate_all(language: str, output_dir: Optional[str] = None, logs_enabled: bool = False) -> List[str]:
    """Write every kind of a language with default options, plus a manifest"""
    if language not in KINDS:
        raise UnknownContractKind(language, "*")

    sources = []
    for kind in KINDS[language]:
        options = resolve_options(language, kind)
        contract = build(language, kind, options).freeze()
        file_name = f"{kind}{TARGETS[language].file_extension}"
        sources.append((file_name, PRINTERS[language](contract), kind, asdict(options)))

    return write_sources(sources, output_dir, language=language, logs_enabled=logs_enabled)
