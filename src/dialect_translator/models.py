"""
Data models for American/British dialect translation.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


NO_CHANGES_MESSAGE = "Everything looks good to me!"


class Locale(str, Enum):
    """Supported translation directions."""
    AMERICAN_TO_BRITISH = "american-to-british"
    BRITISH_TO_AMERICAN = "british-to-american"


class TranslationErrorKind(str, Enum):
    """
    Input validation failures, in precedence order.

    The values are the literal messages returned to callers.
    """
    MISSING_FIELDS = "Required field(s) missing"
    NO_TEXT = "No text to translate"
    INVALID_LOCALE = "Invalid value for locale field"


class DialectTables(BaseModel):
    """The four static lookup tables used by the translator.

    Keys and values are stored in display case. Titles keep their
    trailing period on the American side (e.g. "Mr." -> "Mr").

    Attributes:
        american_only: Terms used only in American English
        american_to_british_spelling: Words spelled differently in each dialect
        american_to_british_titles: Honorific titles
        british_only: Terms used only in British English
    """
    model_config = ConfigDict(frozen=True)

    american_only: dict[str, str] = Field(default_factory=dict)
    american_to_british_spelling: dict[str, str] = Field(default_factory=dict)
    american_to_british_titles: dict[str, str] = Field(default_factory=dict)
    british_only: dict[str, str] = Field(default_factory=dict)

    @field_validator(
        "american_only",
        "american_to_british_spelling",
        "american_to_british_titles",
        "british_only",
    )
    @classmethod
    def _no_blank_entries(cls, value: dict[str, str]) -> dict[str, str]:
        for key, counterpart in value.items():
            if not key.strip():
                raise ValueError("dictionary keys must not be blank")
            if not counterpart.strip():
                raise ValueError(f"counterpart for {key!r} must not be blank")
        return value

    def british_to_american_spelling(self) -> dict[str, str]:
        """Return the spelling table inverted (British -> American).

        When several American spellings share one British spelling, the
        first one listed wins.
        """
        inverted: dict[str, str] = {}
        for american, british in self.american_to_british_spelling.items():
            inverted.setdefault(british, american)
        return inverted

    def british_to_american_titles(self) -> dict[str, str]:
        """Return the title table inverted (British -> American)."""
        inverted: dict[str, str] = {}
        for american, british in self.american_to_british_titles.items():
            inverted.setdefault(british, american)
        return inverted


class Substitution(BaseModel):
    """A single replacement made during translation.

    Attributes:
        original: The matched text as it appeared in the input
        translated: The replacement, in dictionary case
    """
    model_config = ConfigDict(frozen=True)

    original: str
    translated: str


class TranslationResult(BaseModel):
    """Outcome of a translate() call.

    Either ``error`` is set, or ``text`` and ``translation`` are.
    """
    text: Optional[str] = None
    translation: Optional[str] = None
    error: Optional[TranslationErrorKind] = None
    substitutions: list[Substitution] = Field(default_factory=list)

    @classmethod
    def failure(cls, kind: TranslationErrorKind) -> "TranslationResult":
        return cls(error=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def changed(self) -> bool:
        return bool(self.substitutions)

    def to_response(self) -> dict[str, str]:
        """Render the result in its external response shape."""
        if self.error is not None:
            return {"error": self.error.value}
        return {"text": self.text, "translation": self.translation}
