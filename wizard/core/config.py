"""
Target-language configuration and shared constants
"""

import os
import re
from dataclasses import dataclass
from typing import Callable

from ..utils.identifiers import stringify_unicode_safe

# Library versions advertised in the generated headers
CAIRO_CONTRACTS_VERSION = "2.0.0"
SOLIDITY_CONTRACTS_VERSION = "^5.4.0"
SOLIDITY_PRAGMA_VERSION = "0.8.27"

DEFAULT_LICENSE = "MIT"

# Layout limits
MAX_USE_CLAUSE_LINE_LENGTH = 90
MAX_CAIRO_ARGS_LENGTH = 80
MAX_SOLIDITY_HEADING_LENGTH = 72

# Section names
DEFAULT_SECTION = "1. with no section"
EXTERNAL_SECTION = "External"
INTERNAL_SECTION = "Internal"

# Largest integer a numeric literal may carry (2^53 - 1)
MAX_SAFE_INTEGER = 9007199254740991

NATSPEC_KEY_PATTERN = re.compile(r"^(@custom:)?[a-z][a-z\-]*$")


# Environment
def output_dir() -> str:
    return os.getenv("WIZARD_OUTPUT_DIR", "./wizard_out")


def server_host() -> str:
    return os.getenv("WIZARD_HOST", "127.0.0.1")


def server_port() -> int:
    return int(os.getenv("WIZARD_PORT", "8000"))


def quote_cairo_string(value: str) -> str:
    """ByteArray literals are escaped by the feature modules, only quote here"""
    return f'"{value}"'


@dataclass(frozen=True)
class TargetConfig:
    """Per-language knobs shared by the printers"""
    name: str
    file_extension: str
    path_separator: str
    keep_value_notes: bool
    quote_string: Callable[[str], str]
    single_import: str
    group_import: str
    spaces_per_indent: int = 4
    max_import_line_length: int = MAX_USE_CLAUSE_LINE_LENGTH


CAIRO = TargetConfig(
    name="cairo",
    file_extension=".cairo",
    path_separator="::",
    # TODO: print `/* note */` once the Cairo language server accepts comments in call arguments
    keep_value_notes=False,
    quote_string=quote_cairo_string,
    single_import="use {path}::{name};",
    group_import="use {path}::{{{names}}};",
)

SOLIDITY = TargetConfig(
    name="solidity",
    file_extension=".sol",
    path_separator="/",
    keep_value_notes=True,
    quote_string=stringify_unicode_safe,
    single_import='import {{{name}}} from "{path}";',
    group_import='import {{{names}}} from "{path}";',
)

TARGETS = {
    CAIRO.name: CAIRO,
    SOLIDITY.name: SOLIDITY,
}
