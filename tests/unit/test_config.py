import pytest

from sqlbind.config import JSON_PATH_LITERAL, SQL_LITERAL, SQL_STANDARD_LITERAL, LiteralConfig


def test_presets() -> None:
    assert SQL_LITERAL == LiteralConfig()
    assert SQL_STANDARD_LITERAL.extended_strings is False
    assert JSON_PATH_LITERAL.quote == ""
    assert JSON_PATH_LITERAL.json_path is True


def test_json_path_disables_extended_strings() -> None:
    assert LiteralConfig(extended_strings=True, json_path=True).extended_strings is False


@pytest.mark.parametrize(
    ("config", "null", "true", "false"),
    [(SQL_LITERAL, "NULL", "TRUE", "FALSE"), (JSON_PATH_LITERAL, "null", "true", "false")],
    ids=["sql", "json_path"],
)
def test_keywords(config: LiteralConfig, null: str, true: str, false: str) -> None:
    assert config.null == null
    assert config.boolean(True) == true
    assert config.boolean(False) == false


def test_replace_json_path_drops_quote() -> None:
    config = SQL_LITERAL.replace(json_path=True)

    assert config == JSON_PATH_LITERAL
    assert SQL_LITERAL.replace(json_path=True, quote='"').quote == '"'


def test_replace_keeps_unset_fields() -> None:
    config = LiteralConfig(quote='"').replace(extended_strings=False)

    assert config.quote == '"'
    assert config.extended_strings is False
    assert config.json_path is False


def test_hash_and_repr() -> None:
    assert hash(LiteralConfig()) == hash(SQL_LITERAL)
    assert len({SQL_LITERAL, LiteralConfig(), SQL_STANDARD_LITERAL}) == 2
    assert repr(SQL_STANDARD_LITERAL) == "LiteralConfig(quote=\"'\", extended_strings=False, json_path=False)"
