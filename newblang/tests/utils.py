"""
Utility functions shared across NEWB checker tests.
"""
from newblang.lexer import tokenize
from newblang.parser import MAX_NESTED_DEPTH, MAX_NESTING, Parser


SAMPLE_PROGRAM = """\
#include <stdio>;
#include <math>;
const int max = 10;
const float pi = 3.14;
var int a, b, c;
var float r;
function show;
var int t;
newb
    cout << t;
endb;
newb
    cin >> a;
    b := a + 1 * (c - 2) mod 3 div 4 / 5;
    if (a > b) cout << a else cout << b;
    while (a =< max) newb a := a + 1; endb;
    repeat a := a - 1; call show; until a = 0;
    call show;
    newb newb endb; endb;
endb
exit;
"""


def parse_source(source: str, max_depth: int = MAX_NESTED_DEPTH,
                 max_nesting: int = MAX_NESTING) -> Parser:
    """
    Tokenize and parse source code, returning the parser after success.
    """
    parser = Parser(
        tokenize(source.splitlines()), "<test>", max_depth=max_depth, max_nesting=max_nesting
    )
    parser.parse()
    return parser


def nested_blocks(depth: int) -> str:
    """
    Build a program whose main block nests ``depth`` blocks, one per line.
    """
    lines = ["newb"] * depth + ["endb;"] * (depth - 1) + ["endb", "exit"]
    return "\n".join(lines)
