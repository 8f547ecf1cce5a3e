import io

import pytest

from argkit.args import Args
from argkit.errors import ArgparseCode, ArgparseError
from argkit.operand import Operand
from argkit.option import Option


@pytest.fixture
def args():
    return Args()


def test_args_empty(args):
    assert args.options == []
    assert args.operands == []


def test_add_option_passed_null(args):
    with pytest.raises(ArgparseError) as info:
        args.add_option(None)
    assert info.value.code is ArgparseCode.PASSED_NULL


def test_empty_option_fail(args):
    with pytest.raises(ArgparseError) as info:
        args.add_option(Option("", "", ""))
    assert info.value.code is ArgparseCode.EMPTY_OPTION
    assert args.options == []


def test_add_operand_passed_null(args):
    with pytest.raises(ArgparseError) as info:
        args.add_operand(None)
    assert info.value.code is ArgparseCode.PASSED_NULL


def test_add_option_keeps_order(args):
    first = Option("c", "create", "creation")
    second = Option("d", "destroy", "destruction")
    args.add_option(first)
    args.add_option(second)
    assert args.options == [first, second]


def test_add_option_long_only(args):
    opt = Option("", "long", "only long")
    args.add_option(opt)
    assert args.find("long") is opt


def test_add_operand_single_and_many(args):
    args.add_operand(Operand("test"))
    args.add_operand([Operand("1"), Operand("x")])
    assert args.operands == [Operand("test"), Operand("1"), Operand("x")]


def test_find(args):
    create = Option("c", "create", "creation")
    destroy = Option("d", "destroy", "destruction")
    args.add_option(create)
    args.add_option(destroy)
    assert args.find("destroy") is destroy
    assert args.find("c") is create
    assert args.find("x") is None


def test_parse_delegates(args):
    opt = Option("n", "", "no newline")
    args.add_option(opt)
    args.parse(["-n", "word"])
    assert opt.present == 1
    assert args.operands == [Operand("word")]


def test_parse_none_raises(args):
    with pytest.raises(ArgparseError) as info:
        args.parse(None)
    assert info.value.code is ArgparseCode.PASSED_NULL


def test_max_pad_empty(args):
    assert args.max_pad() == 0


def test_max_pad(args):
    args.add_option(Option("c", "create", "creation"))
    args.add_option(Option("d", "destroy", "destruction"))
    assert args.max_pad() == 12


def test_help_single_option(args):
    args.add_option(Option("f", "feature", "description of feature"))
    stream = io.StringIO()
    args.help(stream)
    assert stream.getvalue() == "  -f --feature  description of feature\n"


def test_help_aligns_descriptions(args):
    args.add_option(Option("c", "create", "creation"))
    args.add_option(Option("d", "destroy", "destruction"))
    stream = io.StringIO()
    args.help(stream)
    assert stream.getvalue() == (
        "  -c --create   creation\n"
        "  -d --destroy  destruction\n"
    )


def test_help_long_option_on_new_line(args):
    args.add_option(Option("l", "averyverylongoption", "long one"))
    stream = io.StringIO()
    args.help(stream)
    assert stream.getvalue() == (
        "  -l --averyverylongoption\n" + " " * 24 + "long one\n"
    )


def test_help_empty_writes_nothing(args):
    stream = io.StringIO()
    args.help(stream)
    assert stream.getvalue() == ""