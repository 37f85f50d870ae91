"""
Tests for config validation against a schema.
"""

from kvschema.config.parser import Config
from kvschema.config.schema import Schema, ValueType
from kvschema.config.validator import (
    MissingKey,
    TypeMismatch,
    UnknownKey,
    ValidationResult,
    validate,
)


FULL_SCHEMA = """\
endpoint = string
debug = bool
log.file = string
log.name = string
"""


def check(config_text: str, schema_text: str) -> list:
    return validate(Config.parse(config_text), Schema.parse(schema_text))


def test_matching_config_passes() -> None:
    errors = check(
        "endpoint = localhost:3000\nretry = 3",
        "endpoint = string\nretry = integer",
    )

    assert errors == []


def test_integer_type_mismatch() -> None:
    errors = check("retry = abc", "retry = integer")

    assert errors == [TypeMismatch("retry", ValueType.INTEGER, "abc")]


def test_bool_is_case_sensitive() -> None:
    errors = check("debug = TRUE", "debug = bool")

    assert errors == [TypeMismatch("debug", ValueType.BOOL, "TRUE")]


def test_unknown_and_missing_keys() -> None:
    errors = check("foo = 1", "bar = string")

    assert errors == [UnknownKey("foo"), MissingKey("bar")]


def test_ignore_error_suppresses_type_mismatch() -> None:
    errors = check("-retry = abc", "retry = integer")

    assert errors == []


def test_ignore_error_suppresses_unknown_key() -> None:
    errors = check("retry = 1\n-extra = x", "retry = integer")

    assert errors == []


def test_ignore_error_does_not_suppress_missing_key() -> None:
    errors = check("-extra = x", "retry = integer")

    assert errors == [MissingKey("retry")]


def test_unknown_key_reported() -> None:
    errors = check("retry = 1\nextra = x", "retry = integer")

    assert errors == [UnknownKey("extra")]


def test_missing_key_detected() -> None:
    config = "endpoint = localhost:3000\ndebug = true\nlog.file = /var/log/console.log"

    errors = check(config, FULL_SCHEMA)

    assert errors == [MissingKey("log.name")]


def test_commented_out_key_is_missing() -> None:
    config = (
        "endpoint = localhost:3000\n"
        "# debug = true\n"
        "log.file = /var/log/console.log\n"
        "log.name = default.log"
    )

    errors = check(config, FULL_SCHEMA)

    assert errors == [MissingKey("debug")]


def test_all_errors_collected_in_order() -> None:
    config = "zeta = 1\nretry = x\nalpha = 2\ndebug = yes"
    schema = "debug = bool\nretry = integer\nname = string\nport = integer"

    errors = check(config, schema)

    assert errors == [
        UnknownKey("zeta"),
        TypeMismatch("retry", ValueType.INTEGER, "x"),
        UnknownKey("alpha"),
        TypeMismatch("debug", ValueType.BOOL, "yes"),
        MissingKey("name"),
        MissingKey("port"),
    ]


def test_duplicate_entries_checked_independently() -> None:
    errors = check("retry = 1\n-retry = abc\nretry = xyz", "retry = integer")

    assert errors == [TypeMismatch("retry", ValueType.INTEGER, "xyz")]


def test_duplicate_unknown_keys_reported_each_time() -> None:
    errors = check("foo = 1\nfoo = 2", "")

    assert errors == [UnknownKey("foo"), UnknownKey("foo")]


def test_empty_config_and_schema() -> None:
    assert check("", "") == []


def test_validate_does_not_modify_inputs() -> None:
    config = Config.parse("retry = abc\nextra = 1")
    schema = Schema.parse("retry = integer\nname = string")

    validate(config, schema)

    assert len(config) == 2
    assert dict(schema.items()) == {"retry": ValueType.INTEGER, "name": ValueType.STRING}


def test_error_rendering() -> None:
    assert str(TypeMismatch("retry", ValueType.INTEGER, "abc")) == "'retry': expected integer, got 'abc'"
    assert str(UnknownKey("foo")) == "'foo': unknown key (not in schema)"
    assert str(MissingKey("bar")) == "'bar': missing (required by schema)"


def test_validation_result_truthiness() -> None:
    assert ValidationResult()
    assert ValidationResult().valid is True
    assert not ValidationResult(errors=[MissingKey("bar")])
