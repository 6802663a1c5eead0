"""
Hashing utilities for generated contract sources.
Used for manifest integrity checks and stable option identifiers.
"""

import hashlib
import json
import os
from typing import Any, Dict, Optional


class ContentHasher:
    """
    Computes hashes for generated sources and the options that produced them.
    """

    @staticmethod
    def hash_string(content: str) -> str:
        """
        Compute SHA-256 hash of a string.

        Args:
            content: String to hash

        Returns:
            Hexadecimal hash string
        """
        return hashlib.sha256(content.encode("utf-8")).hexdigest()

    @staticmethod
    def hash_file(file_path: str) -> Optional[str]:
        """
        Compute SHA-256 hash of a file.

        Returns:
            Hexadecimal hash string, or None if the file doesn't exist
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError:
            return None
        return ContentHasher.hash_string(content)

    @staticmethod
    def options_id(options: Dict[str, Any]) -> str:
        """Short SHA-1 id of the canonical JSON form of an options dict"""
        canonical = json.dumps(options, sort_keys=True, separators=(",", ":"), default=str)
        return hashlib.sha1(canonical.encode("utf-8")).hexdigest()[:12]

    @staticmethod
    def verify_manifest(manifest: Dict[str, Any], directory: str) -> Dict[str, bool]:
        """
        Check every manifest entry against the file on disk.

        Returns:
            Mapping of file name to whether its hash still matches
        """
        results = {}
        for entry in manifest.get("contracts", []):
            actual = ContentHasher.hash_file(os.path.join(directory, entry["file"]))
            results[entry["file"]] = actual == entry["source_hash"]
        return results
