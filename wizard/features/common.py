"""
Options and catalog helpers shared by every feature module
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union

from ..core.contract import ContractBuilder
from ..core.errors import OptionsError
from ..core.models import BaseFunction, Component

# False disables access control
Access = Union[bool, str]

T = TypeVar("T")


@dataclass
class Info:
    """License and contact information printed in the contract header"""
    license: str = "MIT"
    security_contact: str = ""


def set_info(c: ContractBuilder, info: Optional[Info]) -> None:
    if info is None:
        return
    if info.security_contact:
        c.add_natspec_tag("@custom:security-contact", info.security_contact)
    if info.license:
        c.license = info.license


def check_access(access: Access, allowed: Tuple[Any, ...]) -> Access:
    if access not in allowed:
        raise OptionsError({"access": f"Invalid access option: {access}"})
    return access


def options_from_dict(cls: Type[T], data: Optional[Dict[str, Any]]) -> T:
    """
    Build an options dataclass from plain data, as received from JSON or the CLI.

    Raises:
        OptionsError: On unknown option names
    """
    data = dict(data or {})
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise OptionsError({name: "Unknown option" for name in unknown})
    if isinstance(data.get("info"), dict):
        data["info"] = Info(**data["info"])
    return cls(**data)


def define_components(**definitions: Dict[str, Any]) -> Dict[str, Component]:
    """Catalog of components keyed by name; the key becomes the component name"""
    return {name: Component(name=name, **attrs) for name, attrs in definitions.items()}


def define_functions(**definitions: Dict[str, Any]) -> Dict[str, BaseFunction]:
    """Catalog of function templates keyed by name"""
    return {name: BaseFunction(name=name, **attrs) for name, attrs in definitions.items()}
