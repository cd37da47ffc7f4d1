from __future__ import annotations

import pytest

from defenv.errors import RANGE, SYNTAX, EnvParseError, EnvRangeError, EnvSyntaxError


def test_errors_are_value_errors() -> None:
    assert issubclass(EnvSyntaxError, EnvParseError)
    assert issubclass(EnvRangeError, EnvParseError)
    assert issubclass(EnvParseError, ValueError)
    with pytest.raises(ValueError):
        raise EnvRangeError("int64", "99999999999999999999")


def test_message_carries_text_and_category() -> None:
    err = EnvSyntaxError("duration", "30", "missing unit in duration")
    assert err.category == SYNTAX
    assert str(err) == "parsing '30' as duration: invalid syntax (missing unit in duration)"

    err = EnvRangeError("uint64", "18446744073709551616")
    assert err.category == RANGE
    assert str(err) == "parsing '18446744073709551616' as uint64: value out of range"


def test_for_variable_keeps_kind_and_adds_name() -> None:
    base = EnvRangeError("int", "1e99")
    named = base.for_variable("WORKER_NUMBER")

    assert type(named) is EnvRangeError
    assert named is not base
    assert base.name is None
    assert named.name == "WORKER_NUMBER"
    assert (named.type_name, named.text) == ("int", "1e99")
    assert str(named) == "WORKER_NUMBER: parsing '1e99' as int: value out of range"
