"""Tests for the block nesting limit and the overall nesting bound."""
import pytest

from newblang.exceptions import DepthExceededException, ErrorCategory, SyntaxException
from newblang.checker import CheckResult, check_source
from newblang.parser import MAX_NESTED_DEPTH, MAX_NESTING
from newblang.tests.utils import nested_blocks, parse_source


def test_default_limit_is_fifty():
    assert MAX_NESTED_DEPTH == 50


def test_fifty_nested_blocks_are_accepted():
    parser = parse_source(nested_blocks(50))
    assert parser.depth == 0


def test_fifty_one_nested_blocks_exceed_depth():
    with pytest.raises(DepthExceededException) as exc_info:
        parse_source(nested_blocks(51))
    err = exc_info.value
    assert not isinstance(err, SyntaxException)
    assert err.category is ErrorCategory.DEPTH_EXCEEDED
    assert err.line == 51
    assert err.lexeme == "newb"
    assert str(err) == "Exceeded maximum nested block depth of 50 at line 51"


def test_depth_is_checked_before_later_syntax_errors():
    source = "newb " * 60 + "this is not valid"
    with pytest.raises(DepthExceededException):
        parse_source(source)


def test_custom_limit():
    parse_source(nested_blocks(3), max_depth=3)
    with pytest.raises(DepthExceededException) as exc_info:
        parse_source(nested_blocks(4), max_depth=3)
    assert exc_info.value.max_depth == 3


def test_sibling_blocks_do_not_accumulate_depth():
    siblings = "\n".join(["newb endb;"] * 100)
    parse_source(f"newb\n{siblings}\nendb\nexit", max_depth=2)


def test_function_bodies_count_from_the_top():
    source = "function f;\nnewb newb endb; endb;\nnewb endb\nexit"
    parse_source(source, max_depth=2)
    with pytest.raises(DepthExceededException):
        parse_source(source, max_depth=1)


def test_while_and_if_blocks_count_towards_depth():
    source = "newb\nwhile (a < b) newb if (a > b) newb endb; endb;\nendb\nexit"
    parse_source(source, max_depth=3)
    with pytest.raises(DepthExceededException):
        parse_source(source, max_depth=2)


def nested_parens(count: int) -> str:
    return "newb x := " + "(" * count + "a" + ")" * count + "; endb exit"


def chained_ifs(count: int) -> str:
    return "newb\n" + "if (a < b) " * count + "x := 1;\nendb\nexit"


def nested_repeats(count: int) -> str:
    return "newb\n" + "repeat " * count + "x := 1;" + " until a = b;" * count + "\nendb\nexit"


def test_default_nesting_bound():
    assert MAX_NESTING == 100


@pytest.mark.parametrize("source", [nested_parens(40), chained_ifs(40), nested_repeats(40)])
def test_moderate_nesting_is_accepted(source):
    parser = parse_source(source)
    assert parser.nesting == 0
    assert check_source(source).ok


def test_deeply_nested_parentheses_are_reported():
    result = check_source(nested_parens(400))
    assert isinstance(result, CheckResult)
    assert result.category is ErrorCategory.DEPTH_EXCEEDED
    assert result.message == "Exceeded maximum nesting depth of 100 at line 1"
    assert result.lexeme == "("
    # The block takes one level, so the hundredth parenthesis is too deep.
    assert result.column == len("newb x := ") + 99


def test_chained_ifs_are_reported():
    result = check_source(chained_ifs(400))
    assert isinstance(result, CheckResult)
    assert result.category is ErrorCategory.DEPTH_EXCEEDED
    assert result.line == 2
    assert result.lexeme == "if"
    assert result.column == 99 * len("if (a < b) ")


def test_nested_repeats_are_reported():
    result = check_source(nested_repeats(400))
    assert isinstance(result, CheckResult)
    assert result.category is ErrorCategory.DEPTH_EXCEEDED
    assert result.line == 2
    assert result.lexeme == "repeat"
    assert result.column == 99 * len("repeat ")


def test_parentheses_in_conditions_count():
    source = "newb while " + "(" * 200 + "a" + ")" * 200 + " newb endb; endb exit"
    result = check_source(source)
    assert result.category is ErrorCategory.DEPTH_EXCEEDED
    assert result.message.startswith("Exceeded maximum nesting depth of 100")


def test_nesting_error_carries_construct():
    with pytest.raises(DepthExceededException) as exc_info:
        parse_source(nested_parens(5), max_nesting=3)
    err = exc_info.value
    assert err.construct == "nesting"
    assert err.max_depth == 3
    assert str(err) == "Exceeded maximum nesting depth of 3 at line 1"


def test_block_limit_is_reported_before_nesting_bound():
    with pytest.raises(DepthExceededException) as exc_info:
        parse_source(nested_blocks(51))
    assert exc_info.value.construct == "block"


def test_mixed_nesting_shares_one_bound():
    source = "newb if (a < b) repeat x := (1); until (a); endb exit"
    parse_source(source, max_nesting=4)
    with pytest.raises(DepthExceededException):
        parse_source(source, max_nesting=3)
