"""
Dialect Translator - American <-> British English translation by table lookup.

Substitutes words, phrases, honorific titles and time notations and reports
every substitution made.
"""

from .config import Settings, load_settings
from .models import (
    NO_CHANGES_MESSAGE,
    DialectTables,
    Locale,
    Substitution,
    TranslationErrorKind,
    TranslationResult,
)
from .rules import Highlighter, PhraseRule, SubstitutionRule, TimeRule, TitleRule, run_pipeline
from .tables import TableLoadError, default_tables, load_table, load_tables
from .translator import Translator

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("dialect-translator")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "NO_CHANGES_MESSAGE",
    "DialectTables",
    "Highlighter",
    "Locale",
    "PhraseRule",
    "Settings",
    "Substitution",
    "SubstitutionRule",
    "TableLoadError",
    "TimeRule",
    "TitleRule",
    "TranslationErrorKind",
    "TranslationResult",
    "Translator",
    "default_tables",
    "load_settings",
    "load_table",
    "load_tables",
    "run_pipeline",
]
