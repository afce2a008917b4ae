"""
American <-> British English translator.

Validates a request, runs the directional pipeline of substitution rules,
and composes the result. Tables are injected so alternate dictionaries can
be used in place of the packaged ones.
"""

import logging
from typing import Optional

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
from .tables import default_tables, load_tables


logger = logging.getLogger("dialect-translator")


class Translator:
    """Translates text between American and British usage.

    Each direction runs four passes in order: titles, one-dialect-only
    terms, spelling variants, then time notation. Every pass works on the
    output of the previous one, so a replacement made early can be
    matched again by a later pass.

    Example:
        >>> translator = Translator.default()
        >>> result = translator.translate("Lunch is at 12:15 today.", "american-to-british")
        >>> result.translation
        'Lunch is at <span class="highlight">12.15</span> today.'
        >>> translator.translate("The cat sat.", "american-to-british").translation
        'Everything looks good to me!'
    """

    def __init__(self, tables: DialectTables, highlighter: Optional[Highlighter] = None) -> None:
        self.tables = tables
        self.highlighter = highlighter or Highlighter()

        self._american_to_british: list[SubstitutionRule] = [
            TitleRule(tables.american_to_british_titles, self.highlighter),
            PhraseRule(tables.american_only, self.highlighter),
            PhraseRule(tables.american_to_british_spelling, self.highlighter),
            TimeRule(":", ".", self.highlighter),
        ]
        self._british_to_american: list[SubstitutionRule] = [
            TitleRule(tables.british_to_american_titles(), self.highlighter),
            PhraseRule(tables.british_only, self.highlighter),
            PhraseRule(tables.british_to_american_spelling(), self.highlighter),
            TimeRule(".", ":", self.highlighter),
        ]

    @classmethod
    def default(cls, settings: Optional[Settings] = None) -> "Translator":
        """Build a translator from configured or packaged tables.

        Args:
            settings: Settings to use; read from the environment when omitted
        """
        settings = settings or load_settings()

        if settings.tables_dir is None:
            tables = default_tables()
        elif not settings.tables_dir.is_dir():
            logger.warning(
                f"Tables directory {settings.tables_dir} does not exist, using packaged tables"
            )
            tables = default_tables()
        else:
            tables = load_tables(settings.tables_dir)

        return cls(tables, Highlighter(settings.highlight_class))

    def american_to_british(self, text: str) -> tuple[str, list[Substitution]]:
        """Run the American -> British passes over text."""
        return run_pipeline(text, self._american_to_british)

    def british_to_american(self, text: str) -> tuple[str, list[Substitution]]:
        """Run the British -> American passes over text."""
        return run_pipeline(text, self._british_to_american)

    def translate(self, text: Optional[str], locale: Locale | str | None) -> TranslationResult:
        """Translate text in the given direction.

        Validation failures are returned as results, checked in this order:
        missing text or locale, empty text, unknown locale.

        Args:
            text: Text to translate
            locale: "american-to-british" or "british-to-american"

        Returns:
            TranslationResult with either ``error`` or ``text``/``translation``
        """
        if text is None or not locale:
            return TranslationResult.failure(TranslationErrorKind.MISSING_FIELDS)

        if text == "":
            return TranslationResult.failure(TranslationErrorKind.NO_TEXT)

        try:
            locale = Locale(locale)
        except ValueError:
            return TranslationResult.failure(TranslationErrorKind.INVALID_LOCALE)

        if locale is Locale.AMERICAN_TO_BRITISH:
            rendered, substitutions = self.american_to_british(text)
        else:
            rendered, substitutions = self.british_to_american(text)

        logger.debug(f"Translated {len(text)} chars {locale.value}: {len(substitutions)} substitution(s)")

        if not substitutions:
            return TranslationResult(text=text, translation=NO_CHANGES_MESSAGE)

        return TranslationResult(text=text, translation=rendered, substitutions=substitutions)
