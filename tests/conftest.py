"""
Pytest configuration and fixtures for dialect-translator tests.
"""

import sys
from pathlib import Path

import pytest
import yaml

# Add src directory to Python path to allow importing dialect_translator
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dialect_translator import DialectTables, Translator, default_tables  # noqa: E402
from dialect_translator.tables import TABLE_FILES  # noqa: E402


@pytest.fixture(scope="session")
def packaged_tables() -> DialectTables:
    """The tables shipped with the package."""
    return default_tables()


@pytest.fixture(scope="session")
def translator(packaged_tables: DialectTables) -> Translator:
    """A translator over the packaged tables."""
    return Translator(packaged_tables)


@pytest.fixture
def write_tables(tmp_path: Path):
    """Write a set of YAML tables into a temporary directory.

    Tables not given are written empty.
    """
    def _write(**tables: dict[str, str]) -> Path:
        for field, filename in TABLE_FILES.items():
            with open(tmp_path / filename, "w", encoding="utf-8") as f:
                yaml.dump({"terms": tables.get(field, {})}, f, allow_unicode=True, sort_keys=False)
        return tmp_path

    return _write
