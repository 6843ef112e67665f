# src/pess/core/tokenize.py
"""
Raw text → tokens.

Words are delimited by whitespace; a period ends the sentence. A word
starting with a double quote is read verbatim up to the matching quote
(spaces and periods included), so "n:canada goose" stays one token.
Quotes are kept in the token text.
"""

from dataclasses import dataclass

from pess.core.lexicon import Literal


@dataclass
class Token:
    text: str
    position: int  # character offset in original


class TokenizeError(Exception):
    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"Column {position}: {message}")


def read_sentences(text: str) -> list[list[Token]]:
    """Split text into sentences at periods, tokenizing each. Empty sentences are skipped."""
    sentences = []
    current: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch == ".":
            if current:
                sentences.append(current)
            current = []
            i += 1
        elif ch.isspace():
            i += 1
        elif ch == '"':
            end = text.find('"', i + 1)
            if end == -1:
                raise TokenizeError("unterminated quoted word", i)
            current.append(Token(text[i:end + 1], i))
            i = end + 1
        else:
            start = i
            while i < n and not text[i].isspace() and text[i] != ".":
                i += 1
            current.append(Token(text[start:i], start))

    if current:
        sentences.append(current)

    return sentences


def tokenize(text: str) -> list[Token]:
    """Tokenize text, dropping sentence-ending periods."""
    return [t for sentence in read_sentences(text) for t in sentence]


def words_of(tokens) -> tuple:
    """
    Normalize parser input to a tuple of words (str) and Literals.

    Accepts raw text, Tokens, plain strings, or Literal objects.
    """
    if isinstance(tokens, str):
        tokens = tokenize(tokens)

    words = []
    for t in tokens:
        if isinstance(t, Token):
            words.append(t.text)
        elif isinstance(t, (str, Literal)):
            words.append(t)
        else:
            raise TypeError(f"Expected a token, got {type(t).__name__}")
    return tuple(words)
