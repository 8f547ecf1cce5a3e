import pytest

from argkit.errors import ArgparseCode, ArgparseError


def test_ok_is_zero():
    assert ArgparseCode(0) is ArgparseCode.OK
    assert int(ArgparseCode(0)) == 0


def test_code_order_matches_declaration():
    names = [ArgparseCode(value).name for value in range(8)]
    assert names == [
        "OK",
        "PASSED_NULL",
        "EMPTY_OPTION",
        "FALSE_RETURN",
        "ARG_REQUIRED",
        "ARGS_EXIST",
        "ARGS_EMPTY",
        "NO_MATCH_FOUND",
    ]


def test_codes_are_consecutive():
    looked_up = [ArgparseCode(value) for value in range(len(ArgparseCode))]
    assert looked_up == list(ArgparseCode)


def test_error_carries_code_and_message():
    err = ArgparseError(ArgparseCode.ARG_REQUIRED, "missing value for -c")
    assert err.code is ArgparseCode.ARG_REQUIRED
    assert err.message == "missing value for -c"
    assert str(err) == "missing value for -c"


def test_error_default_message_is_code_description():
    err = ArgparseError(ArgparseCode.EMPTY_OPTION)
    assert err.message == ArgparseCode.EMPTY_OPTION.description
    assert str(err) == err.message


def test_error_accepts_plain_integer_code():
    err = ArgparseError(7, "x")
    assert err.code is ArgparseCode.NO_MATCH_FOUND


def test_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        ArgparseError(99, "x")


def test_error_exception_args_hold_message():
    err = ArgparseError(ArgparseCode.PASSED_NULL, "null passed")
    assert err.args[0] == "null passed"
    assert str(err) == "null passed"
    assert err.code is ArgparseCode.PASSED_NULL