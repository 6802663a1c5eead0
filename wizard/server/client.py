"""
Contract Wizard client - unified local interface for generating contracts
"""
from typing import Optional, Dict, Any, List

from wizard.api_models import GenerationResult, Language, WriteSummary
from wizard.core.config import output_dir as default_output_dir
from wizard.core.generator import KINDS, default_options, generate, generate_all


class WizardClient:
    """
    Unified API for contract generation.

    Example usage:
        client = WizardClient()

        # Print a contract
        source = client.print_contract("cairo", "erc20", {"name": "Coin", "mintable": True})

        # Generate and save
        result = client.generate("solidity", "erc20", {"premint": "1000"}, save=True)

        # Write every kind with defaults
        summary = client.write_all("solidity", "./out")
    """

    def __init__(self, output_dir: Optional[str] = None):
        """
        Initialize the client.

        Args:
            output_dir: Where saved contracts go (uses WIZARD_OUTPUT_DIR if not provided)
        """
        self.output_dir = output_dir or default_output_dir()

    def languages(self) -> List[str]:
        return [language.value for language in Language]

    def kinds(self, language: str) -> List[str]:
        return list(KINDS.get(language, {}))

    def defaults(self, language: str, kind: str) -> Dict[str, Any]:
        return default_options(language, kind)

    def print_contract(self, language: str, kind: str, options: Optional[Dict[str, Any]] = None) -> str:
        return self.generate(language, kind, options).source

    def generate(self,
                 language: str,
                 kind: str,
                 options: Optional[Dict[str, Any]] = None,
                 save: bool = False) -> GenerationResult:
        """
        Generate a contract.

        Args:
            language: "cairo" or "solidity"
            kind: Contract kind, e.g. "erc20"
            options: Option values; missing ones take their defaults
            save: Write the source under output_dir

        Returns:
            GenerationResult
        """
        result = generate(language, kind, options, save=save, output_dir=self.output_dir)
        return GenerationResult.from_dict(result)

    def write_all(self, language: str, directory: Optional[str] = None,
                  logs_enabled: bool = False) -> WriteSummary:
        """Write every contract kind of a language with default options"""
        directory = directory or self.output_dir
        files = generate_all(language, directory, logs_enabled=logs_enabled)
        return WriteSummary(Language(language), directory, files)
