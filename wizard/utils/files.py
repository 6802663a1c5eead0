"""
File I/O utilities
"""

import os
from typing import Iterable, List, Optional, Tuple

from ..core.config import output_dir
from ..output.json_formatter import ManifestJSONFormatter

MANIFEST_NAME = "manifest.json"


def write_sources(sources: Iterable[Tuple],
                  directory: Optional[str] = None,
                  manifest: bool = True,
                  language: Optional[str] = None,
                  logs_enabled: bool = False) -> List[str]:
    """
    Write generated contract sources to disk.

    Args:
        sources: (file name, source text) pairs, optionally followed by the
            contract kind and the options it was generated from
        directory: Output directory, defaults to WIZARD_OUTPUT_DIR
        manifest: Also write manifest.json with the hash of every file
        language: Recorded in the manifest metadata
        logs_enabled: Print a line per written file

    Returns:
        Paths of the written files, manifest last when written
    """
    directory = directory or output_dir()
    os.makedirs(directory, exist_ok=True)

    formatter = ManifestJSONFormatter(language)
    paths = []
    for file_name, source, *meta in sources:
        path = os.path.join(directory, file_name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        formatter.add_contract(file_name, source, *meta)
        paths.append(path)
        if logs_enabled:
            print(f"[Writer] {path} ({len(source)} bytes)")

    if manifest:
        manifest_path = os.path.join(directory, MANIFEST_NAME)
        formatter.save_to_file(manifest_path)
        paths.append(manifest_path)
        if logs_enabled:
            print(f"[Writer] {manifest_path} ({len(formatter.contracts)} contracts)")

    return paths


def save_source(source: str, file_name: str, directory: Optional[str] = None) -> str:
    """Write a single contract without a manifest"""
    return write_sources([(file_name, source)], directory, manifest=False)[0]
