"""
Tests for program structure and declarations in NEWB
"""
import pytest

from newblang.exceptions import ErrorCategory, SyntaxException
from newblang.tests.utils import SAMPLE_PROGRAM, parse_source


def syntax_error(source: str) -> SyntaxException:
    with pytest.raises(SyntaxException) as exc_info:
        parse_source(source)
    return exc_info.value


def test_minimal_program():
    parse_source("const int x = 1; var int y; newb cin >> y; cout << y; endb exit;")


def test_sample_program():
    parser = parse_source(SAMPLE_PROGRAM)
    assert parser.at_end()
    assert parser.depth == 0


def test_exit_semicolon_is_optional():
    parse_source("newb endb exit")
    parse_source("newb\nendb\nexit;\n")


def test_multiple_names_in_var_declaration():
    parse_source("var int a, b, c; var float d; newb endb exit")


def test_function_with_local_declarations():
    source = (
        "function f;\n"
        "const int k = 2;\n"
        "var int a;\n"
        "newb a := k; endb;\n"
        "function g;\n"
        "newb call f; endb;\n"
        "newb call g; endb\n"
        "exit\n"
    )
    parse_source(source)


def test_const_after_var_is_rejected():
    err = syntax_error("var int y;\nconst int x = 1;\nnewb endb exit")
    assert err.category is ErrorCategory.SYNTAX
    assert err.reason == "'const' declarations must appear before 'var' declarations"
    assert err.lexeme == "const"
    assert err.line == 2


def test_include_after_const_is_rejected():
    err = syntax_error("const int x = 1;\n#include <stdio>;\nnewb endb exit")
    assert err.reason == "'#include' declarations must appear before 'const' declarations"
    assert err.line == 2


def test_var_after_function_is_rejected():
    err = syntax_error("function f; newb endb;\nvar int a;\nnewb endb exit")
    assert err.reason == "'var' declarations must appear before 'function' declarations"


def test_const_after_var_inside_function_is_rejected():
    err = syntax_error("function f;\nvar int a;\nconst int b = 1;\nnewb endb;\nnewb endb exit")
    assert err.reason == "'const' declarations must appear before 'var' declarations"
    assert err.line == 3


@pytest.mark.parametrize("source, reason, lexeme", [
    ("#include stdio;\nnewb endb exit", "Expected '<' after #include", "stdio"),
    ("#include <5>;\nnewb endb exit", "Expected library name after '<'", "5"),
    ("#include <stdio>\nnewb endb exit", "Expected ';' after library declaration", "newb"),
    ("const x = 1; newb endb exit", "Expected constant name after type", "="),
    ("const int x 1; newb endb exit", "Expected '=' after constant name", "1"),
    ("const int x = ; newb endb exit", "Expected constant value after '='", ";"),
    ("const int x = y; newb endb exit", "Expected constant value after '='", "y"),
    ("const int x = 1 newb endb exit", "Expected ';' at the end of constant declaration", "newb"),
    ("var int; newb endb exit", "Expected variable name", ";"),
    ("var int a, ; newb endb exit", "Expected variable name after ','", ";"),
    ("var int a b; newb endb exit", "Expected ';' at the end of variable declaration", "b"),
    ("function; newb endb; newb endb exit", "Expected function name", ";"),
    ("function f newb endb; newb endb exit", "Expected ';' after function declaration", "newb"),
    ("function f; newb endb newb endb exit", "Expected ';' after function body", "newb"),
    ("const int x = 1; exit;", "Expected 'newb' to start a block", "exit"),
    ("newb endb; exit", "Expected 'exit' at the end of the program", ";"),
    ("newb endb exit; x", "Unexpected token after 'exit'", "x"),
    ("newb endb exit exit", "Unexpected token after 'exit'", "exit"),
])
def test_declaration_errors(source, reason, lexeme):
    err = syntax_error(source)
    assert err.reason == reason
    assert err.lexeme == lexeme


def test_missing_exit_reports_end_of_input():
    err = syntax_error("newb\nendb\n")
    assert err.reason == "Expected 'exit' at the end of the program (reached end of input)"
    assert err.lexeme is None
    assert err.line == 2


def test_empty_program_is_rejected():
    err = syntax_error("")
    assert err.reason.startswith("Expected 'newb' to start a block")
