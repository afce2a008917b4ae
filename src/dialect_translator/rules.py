"""
Substitution rules for dialect translation.

Each rule is a pure transformation ``apply(text) -> (text, substitutions)``.
A translation is an ordered pipeline of rules; every rule runs on the
output of the previous one and the substitutions are accumulated in the
order they were made.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from .models import Substitution


# Lookarounds rather than \b so that terms starting or ending with
# punctuation still require a non-word neighbour.
_WORD_START = r"(?<!\w)"
_WORD_END = r"(?!\w)"


class Highlighter:
    """Wraps replaced text in a highlight span.

    Example:
        >>> Highlighter().wrap("favourite")
        '<span class="highlight">favourite</span>'
    """

    def __init__(self, css_class: str = "highlight") -> None:
        self.css_class = css_class

    def wrap(self, text: str) -> str:
        return f'<span class="{self.css_class}">{text}</span>'


class SubstitutionRule(ABC):
    """Base class for a single translation pass."""

    def __init__(self, highlighter: Highlighter | None = None) -> None:
        self.highlighter = highlighter or Highlighter()

    @abstractmethod
    def apply(self, text: str) -> tuple[str, list[Substitution]]:
        """Return the rewritten text and the substitutions made, in order."""


class _PatternRule(SubstitutionRule):
    """A rule made of compiled (pattern, replacement) pairs applied in sequence."""

    def __init__(self, highlighter: Highlighter | None = None) -> None:
        super().__init__(highlighter)
        self._patterns: list[tuple[re.Pattern[str], str]] = []

    def __len__(self) -> int:
        return len(self._patterns)

    def apply(self, text: str) -> tuple[str, list[Substitution]]:
        substitutions: list[Substitution] = []

        for pattern, replacement in self._patterns:
            def _replace(match: re.Match[str], replacement: str = replacement) -> str:
                substitutions.append(Substitution(original=match.group(0), translated=replacement))
                return self.highlighter.wrap(replacement)

            text = pattern.sub(_replace, text)

        return text, substitutions


class TitleRule(_PatternRule):
    """Replaces honorific titles.

    A title matches case-insensitively when it starts a word and is
    followed by whitespace. The whitespace is not consumed, and a period
    inside the title is matched literally.

    Example:
        >>> rule = TitleRule({"Dr.": "Dr"})
        >>> rule.apply("Dr. Grosh will see you now.")[0]
        '<span class="highlight">Dr</span> Grosh will see you now.'
    """

    def __init__(self, titles: Mapping[str, str], highlighter: Highlighter | None = None) -> None:
        super().__init__(highlighter)
        for source, target in titles.items():
            pattern = re.compile(_WORD_START + re.escape(source) + r"(?=\s)", re.IGNORECASE)
            self._patterns.append((pattern, target))


class PhraseRule(_PatternRule):
    """Replaces whole words and multi-word phrases.

    Terms are tried longest first so that a phrase such as "parking lot"
    is replaced before any shorter term it contains. Terms of equal length
    keep their table order.

    Example:
        >>> rule = PhraseRule({"mom": "mum"})
        >>> rule.apply("Wait a moment, mom.")[0]
        'Wait a moment, <span class="highlight">mum</span>.'
    """

    def __init__(self, terms: Mapping[str, str], highlighter: Highlighter | None = None) -> None:
        super().__init__(highlighter)
        for source in sorted(terms, key=len, reverse=True):
            pattern = re.compile(_WORD_START + re.escape(source) + _WORD_END, re.IGNORECASE)
            self._patterns.append((pattern, terms[source]))


class TimeRule(SubstitutionRule):
    """Rewrites the separator of H:MM / HH:MM style times.

    Example:
        >>> TimeRule(":", ".").apply("Lunch is at 12:15 today.")[0]
        'Lunch is at <span class="highlight">12.15</span> today.'
    """

    def __init__(
        self,
        source_separator: str,
        target_separator: str,
        highlighter: Highlighter | None = None,
    ) -> None:
        super().__init__(highlighter)
        self.target_separator = target_separator
        self._pattern = re.compile(
            _WORD_START + r"([0-9]{1,2})" + re.escape(source_separator) + r"([0-9]{2})" + _WORD_END
        )

    def apply(self, text: str) -> tuple[str, list[Substitution]]:
        substitutions: list[Substitution] = []

        def _replace(match: re.Match[str]) -> str:
            hours, minutes = match.groups()
            translated = f"{hours}{self.target_separator}{minutes}"
            substitutions.append(Substitution(original=match.group(0), translated=translated))
            return self.highlighter.wrap(translated)

        return self._pattern.sub(_replace, text), substitutions


def run_pipeline(text: str, rules: Iterable[SubstitutionRule]) -> tuple[str, list[Substitution]]:
    """Apply each rule in turn to the output of the previous one.

    Returns:
        The final text and every substitution, in the order made
    """
    substitutions: list[Substitution] = []
    for rule in rules:
        text, made = rule.apply(text)
        substitutions.extend(made)
    return text, substitutions
