"""Tests for runtime/engine.py translate()."""

from datetime import date
from typing import Any

import pytest
from hypothesis import assume, given

from glossengine import Glossary, translate
from glossengine.core import resolve_path
from glossengine.diagnostics import (
    DiagnosticCode,
    InvalidFormatIssue,
    MissingParamIssue,
    UnknownKeyIssue,
)
from glossengine.enums import IssueKind
from glossengine.runtime import TranslationResult
from tests.strategies import arguments, glossary_documents, keys, leaf_paths, non_numeric_strings

# 2025-01-01T00:00:00Z in epoch milliseconds
NEW_YEAR_2025_MS = 1735689600000


def _glossary(translations: dict[str, Any], locale: str = "en-US") -> Glossary:
    return Glossary.from_data({"$locale": locale, "$translations": translations})


class TestUnknownKey:
    """Absent keys and non-translation entries."""

    def test_absent_key(self, glossary: Glossary) -> None:
        """The key itself is returned with one unknown-key issue."""
        result = translate(glossary, "does.not.exist")
        assert result == TranslationResult("does.not.exist", (UnknownKeyIssue("does.not.exist"),))

    def test_map_node_is_unknown(self, glossary: Glossary) -> None:
        """A key addressing a map node is indistinguishable from a missing key."""
        result = translate(glossary, "user")
        assert result.result == "user"
        assert result.issues == (UnknownKeyIssue("user"),)

    def test_path_below_leaf(self, glossary: Glossary) -> None:
        """Descending below a translation is absent."""
        assert translate(glossary, "greeting.extra").issues == (UnknownKeyIssue("greeting.extra"),)

    def test_issue_kind(self, glossary: Glossary) -> None:
        """Issues carry their kind tag."""
        issues = translate(glossary, "nope").issues
        assert issues is not None
        assert issues[0].kind is IssueKind.UNKNOWN_KEY
        assert issues[0].kind == "unknown-key"

    @given(document=glossary_documents(), key=keys())
    def test_absent_keys_echo(self, document: dict, key: str) -> None:
        """For any key absent from the tree the result is the key."""
        assume(resolve_path(document["$translations"], key) is None)
        result = translate(Glossary.from_data(document), key)
        assert result.result == key
        assert result.issues == (UnknownKeyIssue(key),)


class TestReservedNames:
    """Only $-prefixed names carry template and parameter fields."""

    def test_template_named_children_are_a_map(self) -> None:
        """A map with "template" and "params" children is not a translation."""
        g = _glossary({"editor": {"template": "Choose a template", "params": "Parameters"}})
        assert translate(g, "editor") == TranslationResult("editor", (UnknownKeyIssue("editor"),))
        assert translate(g, "editor.template").result == "Choose a template"
        assert translate(g, "editor.params").result == "Parameters"

    def test_unprefixed_default_is_ignored(self) -> None:
        """{"default": ...} does not act as $default."""
        g = _glossary({"t": {"$template": "Hi {name}", "$params": {"name": {"default": "User"}}}})
        result = translate(g, "t")
        assert result.result == "Hi name"
        assert result.issues == (MissingParamIssue("t", "name"),)

    def test_unprefixed_alias_is_ignored(self) -> None:
        """{"alias": ...} does not redirect the argument lookup."""
        g = _glossary({"t": {"$template": "Hi {name}", "$params": {"name": {"alias": "who"}}}})
        assert translate(g, "t", {"who": "Ann"}).issues == (MissingParamIssue("t", "name"),)
        assert translate(g, "t", {"name": "Ann"}).result == "Hi Ann"

    def test_unprefixed_format_is_ignored(self) -> None:
        """A bare "format" key does not select a format."""
        g = _glossary({"t": {"$template": "{n}", "$params": {"n": {"format": {"$format": "number"}}}}})
        assert translate(g, "t", {"n": 1234}).result == "1234"


class TestPlainStrings:
    """Plain-string translations."""

    def test_plain(self, glossary: Glossary) -> None:
        """Strings are returned as-is without issues."""
        assert translate(glossary, "greeting") == TranslationResult("Hello, world!")

    def test_args_ignored(self, glossary: Glossary) -> None:
        """Arguments never change plain strings."""
        assert translate(glossary, "greeting", {"greeting": "x", "name": 1}).result == "Hello, world!"

    def test_reserved_looking_key(self, glossary: Glossary) -> None:
        """Keys named like reserved fields are ordinary keys."""
        assert translate(glossary, "version").result == "Translation named like a reserved field"

    def test_numeric_segments(self, glossary: Glossary) -> None:
        """Digit segments address numeric identifiers."""
        assert translate(glossary, "menu.0").result == "First"
        assert translate(glossary, "menu.1").result == "Second"

    def test_tokens_in_plain_strings_are_literal(self) -> None:
        """Only templates substitute tokens."""
        g = _glossary({"raw": "Hello {name}"})
        assert translate(g, "raw", {"name": "Ann"}) == TranslationResult("Hello {name}")

    @given(document=glossary_documents(), args=arguments())
    def test_leaves_ignore_args(self, document: dict, args: dict) -> None:
        """Every plain leaf renders verbatim for any arguments."""
        g = Glossary.from_data(document)
        for key, leaf in leaf_paths(document["$translations"]):
            assert translate(g, key, args) == TranslationResult(leaf)


class TestMissingParams:
    """Parameters without an argument."""

    def test_placeholder_and_issue(self, glossary: Glossary) -> None:
        """The parameter name is substituted and reported."""
        result = translate(glossary, "bare", {})
        assert result.result == "x"
        assert result.issues == (MissingParamIssue("bare", "x"),)

    def test_args_default_to_empty(self, glossary: Glossary) -> None:
        """Omitted args behave like an empty mapping."""
        assert translate(glossary, "bare") == translate(glossary, "bare", {})

    def test_none_is_missing(self, glossary: Glossary) -> None:
        """A None argument counts as missing."""
        assert translate(glossary, "bare", {"x": None}).issues == (MissingParamIssue("bare", "x"),)

    def test_each_occurrence_reported(self) -> None:
        """Repeated tokens are resolved independently."""
        g = _glossary({"twice": {"$template": "{a}-{a}"}})
        result = translate(g, "twice")
        assert result.result == "a-a"
        assert result.issues == (MissingParamIssue("twice", "a"), MissingParamIssue("twice", "a"))

    def test_falsy_values_are_present(self, glossary: Glossary) -> None:
        """0, '' and False are values, not missing arguments."""
        assert translate(glossary, "bare", {"x": 0}) == TranslationResult("0")
        assert translate(glossary, "bare", {"x": ""}) == TranslationResult("")
        assert translate(glossary, "bare", {"x": False}) == TranslationResult("False")


class TestDefaults:
    """$default substitution."""

    def test_default_used(self, glossary: Glossary) -> None:
        """A missing argument takes the default silently."""
        assert translate(glossary, "user.welcome") == TranslationResult("Hello User, welcome back!")

    def test_argument_wins(self, glossary: Glossary) -> None:
        """A provided argument overrides the default."""
        assert translate(glossary, "user.welcome", {"name": "Ann"}).result == "Hello Ann, welcome back!"

    def test_default_is_verbatim(self) -> None:
        """Defaults are neither trimmed nor expanded."""
        g = _glossary({"t": {"$template": "[{p}]", "$params": {"p": {"$default": " {q} "}}}})
        assert translate(g, "t").result == "[ {q} ]"

    def test_default_skips_formatting(self) -> None:
        """Defaults bypass the declared format."""
        g = _glossary({"t": {"$template": "{n}", "$params": {"n": {"$format": "number", "$default": "n/a"}}}})
        assert translate(g, "t") == TranslationResult("n/a")


class TestAliases:
    """$alias argument lookup."""

    def test_alias_reads_other_argument(self, glossary: Glossary) -> None:
        """The alias names the argument to read."""
        assert translate(glossary, "profile", {"username": "ann"}).result == "Signed in as ann"

    def test_param_name_not_used_with_alias(self, glossary: Glossary) -> None:
        """With an alias the parameter name itself is not read."""
        result = translate(glossary, "profile", {"display": "ignored"})
        assert result.result == "Signed in as display"
        assert result.issues == (MissingParamIssue("profile", "display"),)

    def test_dotted_alias_is_exact_name(self) -> None:
        """Dotted aliases are looked up as a single argument name."""
        g = _glossary({"t": {"$template": "{n}", "$params": {"n": {"$alias": "user.name"}}}})
        assert translate(g, "t", {"user.name": "Ann"}).result == "Ann"


class TestFormatting:
    """Parameters with a declared format."""

    def test_number(self, glossary: Glossary) -> None:
        """Numbers are locale formatted."""
        assert translate(glossary, "balance", {"amount": 1234.56}) == TranslationResult("$1,234.56")

    def test_number_invalid(self, glossary: Glossary) -> None:
        """Non-numeric strings fall back to str(value) with an issue."""
        result = translate(glossary, "balance", {"amount": "lots"})
        assert result.result == "lots"
        assert result.issues is not None
        (issue,) = result.issues
        assert isinstance(issue, InvalidFormatIssue)
        assert issue.key == "balance"
        assert issue.param == "amount"
        assert issue.value == "lots"
        assert issue.error[0].code is DiagnosticCode.FORMAT_INPUT_INVALID

    @given(value=non_numeric_strings())
    def test_number_invalid_property(self, value: str) -> None:
        """Any non-numeric string is substituted verbatim."""
        g = _glossary({"t": {"$template": "<{n}>", "$params": {"n": {"$format": "number"}}}})
        result = translate(g, "t", {"n": value})
        assert result.result == f"<{value}>"
        assert result.issues is not None
        assert [i.kind for i in result.issues] == [IssueKind.INVALID_FORMAT]

    def test_list_and_date(self, glossary: Glossary) -> None:
        """Disjunctive list and full date in one template."""
        result = translate(glossary, "greetings", {"names": ["John", "Jane"], "today": date(2025, 1, 1)})
        assert result == TranslationResult("Hello John or Jane, today is Wednesday, January 1, 2025!")

    def test_date_from_timestamp(self, glossary: Glossary) -> None:
        """Epoch milliseconds are accepted for date-time."""
        result = translate(glossary, "greetings", {"names": ["John"], "today": NEW_YEAR_2025_MS})
        assert result.result == "Hello John, today is Wednesday, January 1, 2025!"

    def test_list(self, glossary: Glossary) -> None:
        """Conjunction list."""
        result = translate(glossary, "shopping", {"items": ["Alice", "Bob", "Charlie"]})
        assert result.result == "You have Alice, Bob, and Charlie in your list."

    def test_list_invalid(self, glossary: Glossary) -> None:
        """A bare string is not a list."""
        result = translate(glossary, "shopping", {"items": "Alice"})
        assert result.result == "You have Alice in your list."
        assert result.issues is not None
        assert result.issues[0].kind is IssueKind.INVALID_FORMAT

    def test_relative_time(self, glossary: Glossary) -> None:
        """Relative time from {value, unit}."""
        result = translate(glossary, "last_seen", {"when": {"value": -1, "unit": "day"}})
        assert result.result in ("Last seen yesterday", "Last seen 1 day ago")
        assert result.issues is None

    def test_primitive_failure_is_invalid_format(self) -> None:
        """Option errors on valid input are reported as invalid-format."""
        g = _glossary(
            {"t": {"$template": "{n}", "$params": {"n": {"$format": "number", "$options": {"style": "currency"}}}}}
        )
        result = translate(g, "t", {"n": 5})
        assert result.result == "5"
        assert result.issues is not None
        assert result.issues[0].kind is IssueKind.INVALID_FORMAT

    def test_locale_from_glossary(self) -> None:
        """Formatting uses the glossary locale."""
        g = _glossary({"t": {"$template": "{n}", "$params": {"n": {"$format": "number"}}}}, locale="de-DE")
        assert translate(g, "t", {"n": 1234.5}).result == "1.234,5"

    def test_unknown_locale_formats_as_en_us(self) -> None:
        """Locales unknown to CLDR still format."""
        g = _glossary({"t": {"$template": "{n}", "$params": {"n": {"$format": "number"}}}}, locale="xx-XX")
        assert translate(g, "t", {"n": 1234.5}).result == "1,234.5"


class TestPlural:
    """Plural mapping end to end."""

    def test_one(self, glossary: Glossary) -> None:
        """Count 1 selects the one literal."""
        assert translate(glossary, "user.notifications", {"count": 1}) == TranslationResult(
            "You have 1 notification."
        )

    def test_other(self, glossary: Glossary) -> None:
        """Count 5 selects the other literal with the number filled in."""
        result = translate(glossary, "user.notifications", {"count": 5})
        assert result == TranslationResult("You have 5 notifications.")

    def test_unmapped_category_name(self) -> None:
        """Unmapped categories render as their name."""
        g = _glossary(
            {"t": {"$template": "{n}", "$params": {"n": {"$format": "plural", "$plural": {"one": "single"}}}}}
        )
        assert translate(g, "t", {"n": 2}).result == "other"
        assert translate(g, "t", {"n": 1}).result == "single"

    def test_plural_rejects_string(self, glossary: Glossary) -> None:
        """Plural input must be numeric."""
        result = translate(glossary, "user.notifications", {"count": "5"})
        assert result.result == "5"
        assert result.issues is not None
        assert result.issues[0].kind is IssueKind.INVALID_FORMAT


class TestSubstitution:
    """Token scanning and substitution."""

    def test_not_recursive(self) -> None:
        """Substituted text is never rescanned."""
        g = _glossary({"t": {"$template": "{a} {b}"}})
        assert translate(g, "t", {"a": "{b}", "b": "B"}).result == "{b} B"

    @pytest.mark.parametrize("text", ["{ name }", "{}", "{na-me}", "{{", "}{", "{1a}"])
    def test_non_tokens_untouched(self, text: str) -> None:
        """Brace sequences that are not tokens stay literal."""
        g = _glossary({"t": {"$template": text}})
        assert translate(g, "t", {"name": "x"}) == TranslationResult(text)

    def test_numeric_token(self) -> None:
        """Digit-only identifiers are tokens."""
        g = _glossary({"t": {"$template": "{0} and {1}"}})
        assert translate(g, "t", {"0": "a", "1": "b"}).result == "a and b"

    def test_undeclared_params_are_unformatted(self) -> None:
        """Tokens without a $params entry use str()."""
        g = _glossary({"t": {"$template": "{n}", "$params": {"other": {"$format": "number"}}}})
        assert translate(g, "t", {"n": 1234.5}).result == "1234.5"

    def test_mixed_issues_in_template_order(self, glossary: Glossary) -> None:
        """Issues are collected left to right."""
        result = translate(glossary, "greetings", {"today": "tomorrow"})
        assert result.result == "Hello names, today is tomorrow!"
        assert result.issues is not None
        assert [i.kind for i in result.issues] == [IssueKind.MISSING_PARAM, IssueKind.INVALID_FORMAT]

    def test_clean_result_has_no_issues(self, glossary: Glossary) -> None:
        """issues is None, not an empty tuple, when clean."""
        result = translate(glossary, "user.welcome", {"name": "Ann"})
        assert result.issues is None
        assert result.ok


class TestDeterminism:
    """translate() is a pure function."""

    @given(document=glossary_documents(), key=keys(), args=arguments())
    def test_repeatable(self, document: dict, key: str, args: dict) -> None:
        """Identical inputs give identical results."""
        g = Glossary.from_data(document)
        assert translate(g, key, args) == translate(g, key, args)

    def test_repeatable_with_formatting(self, glossary: Glossary) -> None:
        """Formatting is deterministic too."""
        args = {"names": ["A", "B"], "today": NEW_YEAR_2025_MS}
        assert translate(glossary, "greetings", args) == translate(glossary, "greetings", args)

    def test_args_not_mutated(self, glossary: Glossary) -> None:
        """Arguments are read-only."""
        args = {"names": ["A", "B"], "today": NEW_YEAR_2025_MS}
        snapshot = {"names": ["A", "B"], "today": NEW_YEAR_2025_MS}
        translate(glossary, "greetings", args)
        assert args == snapshot
