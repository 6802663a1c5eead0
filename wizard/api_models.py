"""
Data models for the Contract Wizard API
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum


class Language(str, Enum):
    """Supported target languages"""
    CAIRO = "cairo"
    SOLIDITY = "solidity"


@dataclass
class GenerationResult:
    """One generated contract"""
    name: str
    language: Language
    kind: str
    source: str
    source_hash: str
    file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationResult":
        return cls(
            name=data["name"],
            language=Language(data["language"]),
            kind=data["kind"],
            source=data["source"],
            source_hash=data["source_hash"],
            file=data.get("file"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "language": self.language.value,
            "kind": self.kind,
            "source": self.source,
            "source_hash": self.source_hash,
            "file": self.file
        }


@dataclass
class WriteSummary:
    """Files written for one language"""
    language: Language
    directory: str
    files: List[str] = field(default_factory=list)

    @property
    def manifest(self) -> Optional[str]:
        for path in self.files:
            if path.endswith("manifest.json"):
                return path
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language.value,
            "directory": self.directory,
            "files": self.files,
            "manifest": self.manifest
        }
