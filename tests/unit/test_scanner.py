"""Tests for template scanning.

Covers placeholder detection around comments, strings and casts, positions,
malformed markers and the parser lifecycle.
"""

import pytest

from sqlbind.core.scanner import TemplateParser, normalize_placeholder_name, scan_template
from sqlbind.exceptions import EmptyPlaceholderMarkerError, MissingBindValueError
from sqlbind.types import Occurrence

TEMPLATE_WITH_COMMENTS = """-- comment :var
		/* comment :var */
		SELECT field1, field2
		FROM table
		WHERE key1 = :var1 AND key2 = :var2 -- comment"""


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("SELECT :a", [":a"]),
        ("SELECT * FROM t WHERE a=:x AND b::int=:y", [":x", ":y"]),
        ("SELECT ':a', :b", [":b"]),
        ("SELECT 'it''s :a', :b", [":b"]),
        ("SELECT 1 -- :a\n, :b", [":b"]),
        ("SELECT /* :a */ :b", [":b"]),
        ("SELECT /* multi\nline :a\n*/ :b", [":b"]),
        ("SELECT '--', :a", [":a"]),
        ("SELECT '/*', :a, '*/'", [":a"]),
        ("SELECT ':a", []),
        ("SELECT /* :a", []),
        ("SELECT 1 -- :a", []),
        ("SELECT :a::int", [":a"]),
        ("SELECT :a--:b", [":a"]),
        ("VALUES (:a,:b)", [":a", ":b"]),
        ("SELECT :a + :a", [":a", ":a"]),
        ("SELECT :a'x'", [":a"]),
        ("SELECT ':' || :a", [":a"]),
        ("SELECT '10:30'::time, :a", [":a"]),
        ("SELECT :Name", [":Name"]),
        ("SELECT :user_id_2", [":user_id_2"]),
        ("SELECT 1", []),
        ("", []),
        (TEMPLATE_WITH_COMMENTS, [":var1", ":var2"]),
    ],
    ids=[
        "single",
        "cast_between_placeholders",
        "inside_string",
        "doubled_quote_keeps_string_open",
        "line_comment",
        "block_comment",
        "multiline_block_comment",
        "line_comment_marker_in_string",
        "block_comment_marker_in_string",
        "unterminated_string",
        "unterminated_block_comment",
        "line_comment_to_end_of_input",
        "cast_after_placeholder",
        "line_comment_after_placeholder",
        "comma_separated",
        "repeated_name",
        "quote_closes_placeholder",
        "colon_in_string",
        "time_literal_with_cast",
        "case_preserved",
        "underscores_and_digits",
        "no_placeholders",
        "empty_template",
        "comment_header",
    ],
)
def test_scan_template_names(template: str, expected: list[str]) -> None:
    """Placeholders are reported in template order, repeats included."""
    assert [occurrence.name for occurrence in scan_template(template)] == expected


def test_scan_template_positions() -> None:
    """Positions point at the leading ':' of each placeholder."""
    occurrences = scan_template("SELECT * FROM t WHERE a=:x AND b::int=:y")

    assert occurrences == [Occurrence(":x", 24), Occurrence(":y", 38)]


def test_positions_strictly_increasing_and_non_overlapping() -> None:
    template = "INSERT INTO t VALUES (:a, :bb, :a, :ccc)"
    occurrences = scan_template(template)

    for previous, current in zip(occurrences, occurrences[1:]):
        assert previous.end <= current.position
    for occurrence in occurrences:
        assert template[occurrence.position : occurrence.end] == occurrence.name


def test_placeholder_at_end_of_template_includes_last_character() -> None:
    template = "SELECT * FROM t WHERE id = :identifier"
    occurrences = scan_template(template)

    assert occurrences == [Occurrence(":identifier", len(template) - len(":identifier"))]


@pytest.mark.parametrize(
    ("template", "position"),
    [
        ("SELECT :", 7),
        ("SELECT : , :a", 7),
        ("SELECT :a, :)", 11),
        ("SELECT :-1", 7),
    ],
    ids=["end_of_input", "followed_by_space", "followed_by_paren", "followed_by_minus"],
)
def test_empty_placeholder_marker(template: str, position: int) -> None:
    with pytest.raises(EmptyPlaceholderMarkerError) as exc_info:
        scan_template(template)

    assert exc_info.value.position == position
    assert exc_info.value.template == template


@pytest.mark.parametrize(
    ("name", "expected"), [("id", ":id"), (":id", ":id"), ("Id", ":Id")], ids=["bare", "prefixed", "mixed_case"]
)
def test_normalize_placeholder_name(name: str, expected: str) -> None:
    assert normalize_placeholder_name(name) == expected


class TestTemplateParser:
    """Test the TemplateParser lifecycle."""

    def test_new_parser_is_unscanned(self) -> None:
        parser = TemplateParser("SELECT :a")

        assert not parser.is_scanned
        assert parser.occurrences == ()
        assert parser.placeholders() == []

    def test_scan_is_idempotent(self) -> None:
        parser = TemplateParser("SELECT :a, :b")

        assert parser.scan() is parser
        first = parser.occurrences
        parser.scan()

        assert parser.is_scanned
        assert parser.occurrences is first
        assert parser.placeholders() == [":a", ":b"]

    def test_failed_scan_discards_partial_results(self) -> None:
        parser = TemplateParser("SELECT :a, :b, :")

        with pytest.raises(EmptyPlaceholderMarkerError):
            parser.scan()

        assert not parser.is_scanned
        assert parser.occurrences == ()
        assert not parser.has_placeholder(":a")

        with pytest.raises(EmptyPlaceholderMarkerError):
            parser.scan()

    def test_has_placeholder_accepts_bare_names(self) -> None:
        parser = TemplateParser("SELECT :user_id").scan()

        assert parser.has_placeholder(":user_id")
        assert parser.has_placeholder("user_id")
        assert not parser.has_placeholder("other")

    def test_has_placeholder_lowercases_its_argument(self) -> None:
        parser = TemplateParser("SELECT :user_id, :UserName").scan()

        assert parser.has_placeholder("USER_ID")
        assert not parser.has_placeholder(":UserName")
        assert parser.get_occurrence(":UserName") == Occurrence(":UserName", 17)

    def test_calculate_substitutes_rendered_literals(self) -> None:
        parser = TemplateParser(TEMPLATE_WITH_COMMENTS)

        sql = parser.calculate({":var1": "123", ":var2": "456"})

        assert sql == TEMPLATE_WITH_COMMENTS.replace(":var1", "123").replace(":var2", "456")
        assert sql.startswith("-- comment :var")
        assert parser.is_scanned

    def test_calculate_missing_value(self) -> None:
        parser = TemplateParser("SELECT :a, :b")

        with pytest.raises(MissingBindValueError) as exc_info:
            parser.calculate({":a": "1"})

        assert exc_info.value.name == ":b"
