"""
JSON manifest formatter for written contract sources.
Lists every generated file with its integrity hash.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from wizard.utils.hashing import ContentHasher


class ManifestJSONFormatter:
    """
    Formats a batch of generated contracts as a JSON manifest.
    """

    SCHEMA_VERSION = "1.0.0"

    def __init__(self, language: Optional[str] = None, generator_version: str = "0.1.0"):
        """
        Initialize formatter.

        Args:
            language: Target language of the batch, if it has a single one
            generator_version: Version recorded in the metadata block
        """
        self.language = language
        self.generator_version = generator_version
        self.contracts: List[Dict[str, Any]] = []

    def add_contract(self,
                     file_name: str,
                     source: str,
                     kind: Optional[str] = None,
                     options: Optional[Dict[str, Any]] = None) -> None:
        """
        Add one written contract.

        Args:
            file_name: File name relative to the output directory
            source: Contract source text
            kind: Contract kind, e.g. "erc20"
            options: Options the contract was generated from
        """
        entry = {
            "file": file_name,
            "source_hash": ContentHasher.hash_string(source),
            "source_length": len(source),
        }
        if kind:
            entry["kind"] = kind
        if options is not None:
            entry["options_id"] = ContentHasher.options_id(options)

        self.contracts.append(entry)

    def generate(self) -> Dict[str, Any]:
        """
        Generate the complete manifest structure.

        Returns:
            Dictionary representing the JSON structure
        """
        return {
            "schema_version": self.SCHEMA_VERSION,
            "metadata": {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "generator_version": f"contract-wizard-{self.generator_version}",
                "language": self.language,
            },
            "summary": {
                "total_contracts": len(self.contracts),
                "total_bytes": sum(c["source_length"] for c in self.contracts),
            },
            "contracts": self.contracts,
        }

    def to_json_string(self, indent: int = 2) -> str:
        return json.dumps(self.generate(), indent=indent)

    def save_to_file(self, output_path: str, indent: int = 2) -> None:
        """
        Save the manifest to a file, creating parent directories.

        Args:
            output_path: Path to output JSON file
            indent: Number of spaces for indentation
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.generate(), f, indent=indent)
