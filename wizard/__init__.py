"""
Contract Wizard: Cairo and Solidity smart contract source generator
"""

from .core.contract import CairoContractBuilder, ContractBuilder, SolidityContractBuilder
from .core.errors import OptionsError, WizardError
from .core.generator import build, generate, generate_all
from .generators.cairo import print_contract as print_cairo
from .generators.solidity import print_contract as print_solidity

__version__ = "0.1.0"
__all__ = [
    "generate",
    "generate_all",
    "build",
    "print_cairo",
    "print_solidity",
    "ContractBuilder",
    "CairoContractBuilder",
    "SolidityContractBuilder",
    "WizardError",
    "OptionsError"
]
