"""
Identifier sanitizing and literal conversion for user-supplied strings
"""

import json
import re
import unicodedata
from typing import Union

from ..core.errors import EmptyIdentifier, OptionsError

_LEADING_INVALID = re.compile(r"^[^a-zA-Z_]+")
_INVALID_RUN = re.compile(r"[^\w]+(.?)", flags=re.ASCII)
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E]+")

UINT_MAX_VALUES = {
    f"u{bits}": (1 << bits) - 1
    for bits in (8, 16, 32, 64, 128, 256)
}


def strip_accents(text: str) -> str:
    """Decompose and drop combining marks"""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def to_identifier(raw: str, capitalize: bool = False) -> str:
    """
    Convert an arbitrary name into a valid contract identifier.

    Accents are removed, leading characters that cannot start an identifier
    are dropped, and every run of other invalid characters is removed while
    upcasing the character that follows it.

    Args:
        raw: User-supplied name
        capitalize: Upcase the first character

    Returns:
        Sanitized identifier

    Raises:
        EmptyIdentifier: If no valid characters remain
    """
    result = _LEADING_INVALID.sub("", strip_accents(raw))
    if capitalize and result:
        result = result[0].upper() + result[1:]
    result = _INVALID_RUN.sub(lambda m: m.group(1).upper(), result)

    if not result:
        raise EmptyIdentifier()
    return result


def to_byte_array(text: str) -> str:
    """Convert to the body of a Cairo ByteArray string literal"""
    result = _NON_PRINTABLE.sub("", strip_accents(text))
    return re.sub(r'(\\|")', r"\\\1", result)


def to_felt252(text: str, field: str) -> str:
    """Convert to the body of a Cairo short string (at most 31 characters)"""
    result = _NON_PRINTABLE.sub("", strip_accents(text))
    result = re.sub(r"(\\|')", r"\\\1", result)
    if len(result) > 31:
        raise OptionsError({field: "String is longer than 31 characters"})
    return result


def to_uint(value: Union[int, str], field: str, type: str) -> int:
    """Check that value is a decimal unsigned integer fitting the given uint type"""
    text = str(value)
    if not re.fullmatch(r"\d+", text):
        raise OptionsError({field: "Not a valid number"})
    number = int(text)
    if number > UINT_MAX_VALUES[type]:
        raise OptionsError({field: f"Value is greater than {type} max value"})
    return number


def stringify_unicode_safe(text: str) -> str:
    """Quote a Solidity string literal, using unicode"..." when needed"""
    quoted = json.dumps(text, ensure_ascii=False)
    if any(ord(c) > 0x7F for c in text):
        return "unicode" + quoted
    return quoted
