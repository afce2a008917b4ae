"""
Loading of the static American/British lookup tables from YAML.

Each table lives in its own file with a single top-level ``terms`` mapping:

    terms:
      parking lot: car park
      trashcan: bin
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import DialectTables


logger = logging.getLogger("dialect-translator")

DEFAULT_TABLES_DIR = Path(__file__).parent / "data"

# DialectTables field -> file name
TABLE_FILES: dict[str, str] = {
    "american_only": "american_only.yaml",
    "american_to_british_spelling": "american_to_british_spelling.yaml",
    "american_to_british_titles": "american_to_british_titles.yaml",
    "british_only": "british_only.yaml",
}


class TableLoadError(Exception):
    """Error loading or validating a lookup table."""
    pass


def load_table(path: Path | str) -> dict[str, str]:
    """Load a single lookup table.

    Args:
        path: Path to a YAML file with a top-level ``terms`` mapping

    Returns:
        The mapping, in file order

    Raises:
        TableLoadError: If the file is missing, unparsable, or not a
            mapping of strings to strings
    """
    path = Path(path)
    if not path.exists():
        raise TableLoadError(f"Table file not found: {path}")

    try:
        raw_content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TableLoadError(f"Failed to read table {path}: {e}") from e

    try:
        data: Any = yaml.safe_load(raw_content)
    except yaml.YAMLError as e:
        raise TableLoadError(f"Failed to parse table {path}: {e}") from e

    if not isinstance(data, dict) or "terms" not in data:
        raise TableLoadError(f"Table {path} must contain a 'terms' key")

    terms = data["terms"] or {}
    if not isinstance(terms, dict):
        raise TableLoadError(f"'terms' in {path} must be a mapping")

    for key, value in terms.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise TableLoadError(
                f"Entries in {path} must map text to text, got {key!r}: {value!r}"
            )

    logger.info(f"Loaded table {path.name} ({len(terms)} entries)")
    return terms


def load_tables(directory: Path | str) -> DialectTables:
    """Load all four lookup tables from a directory.

    Raises:
        TableLoadError: If any table is missing or invalid
    """
    directory = Path(directory)
    tables = {field: load_table(directory / filename) for field, filename in TABLE_FILES.items()}

    try:
        return DialectTables(**tables)
    except ValidationError as e:
        raise TableLoadError(f"Invalid tables in {directory}: {e}") from e


def default_tables() -> DialectTables:
    """Load the tables shipped with the package."""
    return load_tables(DEFAULT_TABLES_DIR)
