"""
Unit tests for the individual substitution rules.
"""

from dialect_translator.models import Substitution
from dialect_translator.rules import (
    Highlighter,
    PhraseRule,
    TimeRule,
    TitleRule,
    run_pipeline,
)


def H(text: str) -> str:
    return f'<span class="highlight">{text}</span>'


class TestHighlighter:
    """Test the highlight span."""

    def test_default_class(self) -> None:
        assert Highlighter().wrap("flat") == '<span class="highlight">flat</span>'

    def test_custom_class(self) -> None:
        assert Highlighter("diff").wrap("flat") == '<span class="diff">flat</span>'


class TestTitleRule:
    """Test honorific title matching."""

    def test_replaces_title_before_space(self) -> None:
        text, subs = TitleRule({"Dr.": "Dr"}).apply("Dr. Grosh will see you now.")
        assert text == f"{H('Dr')} Grosh will see you now."
        assert subs == [Substitution(original="Dr.", translated="Dr")]

    def test_period_is_literal(self) -> None:
        text, subs = TitleRule({"Dr.": "Dr"}).apply("Drx Grosh")
        assert text == "Drx Grosh"
        assert subs == []

    def test_needs_whitespace_after(self) -> None:
        text, subs = TitleRule({"Mr": "Mr."}).apply("Mrs Smith and Mr, Jones")
        assert subs == []

    def test_any_whitespace_after(self) -> None:
        text, _ = TitleRule({"Mr": "Mr."}).apply("Dear Mr\nSmith")
        assert text == f"Dear {H('Mr.')}\nSmith"

    def test_not_inside_word(self) -> None:
        _, subs = TitleRule({"Dr.": "Dr"}).apply("Ask Mdr. Fox")
        assert subs == []

    def test_case_insensitive_keeps_table_case(self) -> None:
        text, subs = TitleRule({"Prof": "Prof."}).apply("PROF Joyner")
        assert text == f"{H('Prof.')} Joyner"
        assert subs[0].original == "PROF"

    def test_len(self) -> None:
        assert len(TitleRule({"Mr.": "Mr", "Mrs.": "Mrs"})) == 2


class TestPhraseRule:
    """Test word and phrase matching."""

    def test_whole_word_only(self) -> None:
        text, subs = PhraseRule({"mom": "mum"}).apply("A moment for mom and mommy.")
        assert text == f"A moment for {H('mum')} and mommy."
        assert len(subs) == 1

    def test_longest_first(self) -> None:
        rule = PhraseRule({"lot": "plot", "parking lot": "car park"})
        text, subs = rule.apply("The parking lot has a lot of cars.")
        assert text == f"The {H('car park')} has a {H('plot')} of cars."
        assert [s.original for s in subs] == ["parking lot", "lot"]

    def test_phrase_across_original_case(self) -> None:
        text, subs = PhraseRule({"Rube Goldberg machine": "Heath Robinson device"}).apply(
            "a RUBE goldberg Machine"
        )
        assert text == f"a {H('Heath Robinson device')}"
        assert subs[0].original == "RUBE goldberg Machine"

    def test_unicode_letters_are_word_characters(self) -> None:
        _, subs = PhraseRule({"cafe": "caff"}).apply("un cafeé cafe")
        assert [s.original for s in subs] == ["cafe"]

    def test_pattern_syntax_is_escaped(self) -> None:
        rule = PhraseRule({"(x|y)": "z", "a+": "b"})
        assert rule.apply("x y aa") == ("x y aa", [])
        text, _ = rule.apply("got (x|y) and a+ here")
        assert text == f"got {H('z')} and {H('b')} here"

    def test_empty_table(self) -> None:
        assert PhraseRule({}).apply("anything") == ("anything", [])


class TestTimeRule:
    """Test time separator rewriting."""

    def test_colon_to_period(self) -> None:
        text, subs = TimeRule(":", ".").apply("Lunch is at 12:15 today.")
        assert text == f"Lunch is at {H('12.15')} today."
        assert subs == [Substitution(original="12:15", translated="12.15")]

    def test_period_to_colon(self) -> None:
        text, _ = TimeRule(".", ":").apply("around 4 or 4.30.")
        assert text == f"around 4 or {H('4:30')}."

    def test_single_digit_minutes_ignored(self) -> None:
        assert TimeRule(":", ".").apply("at 4:3") == ("at 4:3", [])

    def test_multiple_times(self) -> None:
        _, subs = TimeRule(":", ".").apply("9:00 to 17:30")
        assert [s.translated for s in subs] == ["9.00", "17.30"]


class TestRunPipeline:
    """Test chaining rules."""

    def test_threads_text_and_accumulates(self) -> None:
        rules = [PhraseRule({"trashcan": "bin"}), TimeRule(":", ".")]
        text, subs = run_pipeline("trashcan out at 7:45", rules)
        assert text == f"{H('bin')} out at {H('7.45')}"
        assert [s.translated for s in subs] == ["bin", "7.45"]

    def test_no_rules(self) -> None:
        assert run_pipeline("unchanged", []) == ("unchanged", [])
