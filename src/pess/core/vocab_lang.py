# src/pess/core/vocab_lang.py
"""
Vocabulary declarations: sentences that teach the lexicon new words.

Syntax:
  <word> [is] [a|an] <noun|verb|adjective|adverb>

Several declarations may be chained, with or without "and":
  zorbs is a verb and zorby is an adjective
  heron noun egret noun
"""

import logging
from typing import Iterator

from pess.core.grammar import ParseFailure
from pess.core.lexicon import Category, CATEGORY_KEYWORDS, Lexicon, default_lexicon
from pess.core.tokenize import words_of


logger = logging.getLogger(__name__)


PARTS_OF_SPEECH = {keyword: category for category, keyword in CATEGORY_KEYWORDS.items()}

Declaration = tuple[str, Category]


def _optional(words: tuple, i: int, options: tuple[str, ...]) -> Iterator[int]:
    if i < len(words) and words[i] in options:
        yield i + 1
    yield i


def _declaration(words: tuple, i: int) -> Iterator[tuple[Declaration, int]]:
    if i >= len(words) or not isinstance(words[i], str):
        return
    word = words[i]

    for j in _optional(words, i + 1, ("is",)):
        for k in _optional(words, j, ("a", "an")):
            if k < len(words) and words[k] in PARTS_OF_SPEECH:
                yield (word, PARTS_OF_SPEECH[words[k]]), k + 1


def _declarations(words: tuple, i: int) -> Iterator[tuple[list[Declaration], int]]:
    for first, j in _declaration(words, i):
        yield [first], j
        for k in _optional(words, j, ("and",)):
            for rest, m in _declarations(words, k):
                yield [first] + rest, m


def parse_declarations(tokens) -> list[Declaration]:
    """Parse a declaration sentence into (word, category) pairs."""
    words = words_of(tokens)
    for declarations, end in _declarations(words, 0):
        if end == len(words):
            return declarations
    raise ParseFailure(f"Not a vocabulary declaration: {' '.join(map(str, words))}", words)


def declare_vocabulary(tokens, lexicon: Lexicon | None = None) -> bool:
    """
    Register every word a declaration sentence names.

    All or nothing: the lexicon is only touched once the whole sentence
    has parsed. Returns False if it is not a declaration. Re-declaring a
    known word is a successful registration that changes nothing, so a
    declaration of only known words still returns True.
    """
    try:
        declarations = parse_declarations(tokens)
    except ParseFailure as e:
        logger.debug("%s", e)
        return False

    lexicon = lexicon or default_lexicon()
    added = sum(lexicon.register(word, category) for word, category in declarations)
    logger.info("declared %d word(s), %d new", len(declarations), added)
    return True
