#!/usr/bin/env python3
"""
Test the scanner: one token per character, unknown characters ignored.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bftree.lexer import Token, tokenize


def test_symbol_mapping():
    tokens = tokenize("><+-[],.")
    assert tokens == [
        Token.MOVE_RIGHT,
        Token.MOVE_LEFT,
        Token.INCREMENT,
        Token.DECREMENT,
        Token.LOOP_START,
        Token.LOOP_END,
        Token.ZERO,
        Token.OUTPUT,
    ]


def test_one_token_per_character():
    source = "a+b\n[ é ]\t."
    tokens = tokenize(source)
    assert len(tokens) == len(source)
    assert tokens[1] is Token.INCREMENT
    assert tokens[4] is Token.LOOP_START
    assert tokens[8] is Token.LOOP_END
    assert tokens[-1] is Token.OUTPUT
    assert tokens.count(Token.IGNORE) == len(source) - 4


def test_empty_and_comment_only():
    assert tokenize("") == []
    assert set(tokenize("hello world")) == {Token.IGNORE}


def main():
    print("=== Scanner Tests ===\n")
    for test in (test_symbol_mapping, test_one_token_per_character, test_empty_and_comment_only):
        test()
        print(f"✓ {test.__name__}")


if __name__ == "__main__":
    main()
