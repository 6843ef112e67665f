# src/pess/core/grammar.py
"""
Sentence grammar: English → rules.

Grammar (alternatives in the order they are tried):

  rule      ::= if S+ then S+  |  S if S+  |  S
  S+        ::= S and S+  |  S
  S         ::= "it" VP  |  NP VP            (NP VP is canonicalized)
  VP        ::= has NP+  |  is ADJP+  |  is NP+
              | ADVS* verb NP*  |  verb ADVS+
  NP        ::= "it"  |  det? ADJP* noun  |  det? ADJP* noun that VP
  ADJP      ::= adv* adj
  ADVS      ::= adv+                         (folded, last adverb outermost)

X+ is one or more X joined by "and"; X* allows none.

Sentences with a real subject are rewritten to the canonical "it" form:
"its talons are sharp" → "it has talons that are sharp".

The grammar is ambiguous. Every production is a generator of
(attributes, next position) pairs, so the search backtracks lazily;
parse() takes the first derivation that consumes every word and
parse_all() yields each distinct one. The recursive productions are
memoized per start position, so nested relative clauses are searched
once rather than once per enclosing alternative.
"""

import functools
import logging
from typing import Iterator

from pess.core.attributes import (
    Attr, Rule, attach, fold_adverbs, to_has_a, build_rules,
)
from pess.core.lexicon import (
    Category, Lexicon, LexiconSnapshot, Literal, parse_literal, is_quoted,
    default_lexicon,
)
from pess.core.tokenize import words_of


logger = logging.getLogger(__name__)


POSSESSION_VERBS = ("has", "have", "contain", "contains")
COPULAS = ("is", "are")
DETERMINERS = ("its", "the", "a", "an")

KEYWORDS = frozenset(
    ("if", "then", "and", "it", "that")
    + POSSESSION_VERBS + COPULAS + DETERMINERS
)


class ParseFailure(Exception):
    """No derivation consumes the whole sentence."""

    def __init__(self, message: str, words=()):
        self.words = tuple(words)
        super().__init__(message)


class UnknownWord(ParseFailure):
    """A word that is no keyword, no lexicon entry, and no literal."""

    def __init__(self, word: str, position: int, words=(), message: str | None = None):
        self.word = word
        self.position = position
        super().__init__(message or f"Unknown word {word!r} at position {position}", words)


class MalformedLiteral(UnknownWord):
    """A quoted word that does not have the form "<n|adj|adv|v>:<text>"."""

    def __init__(self, word: str, position: int, words=()):
        message = (f"Malformed literal {word!r} at position {position} "
                   f"(expected \"<n|adj|adv|v>:<text>\")")
        super().__init__(word, position, words, message)


Derivations = Iterator[tuple[list[Attr], int]]


class Replay:
    """
    Derivations of one production at one position, computed once.

    Values are pulled from the underlying generator on demand and kept,
    so every later caller replays them without searching again.
    """

    def __init__(self, derivations):
        self._source = derivations
        self._cache = []
        self._done = False

    def __iter__(self):
        i = 0
        while True:
            if i < len(self._cache):
                yield self._cache[i]
            elif self._done:
                return
            else:
                try:
                    item = next(self._source)
                except StopIteration:
                    self._done = True
                    return
                self._cache.append(item)
                yield item
            i += 1


def memoized(production):
    """Packrat memo keyed on (production, arguments), kept per SentenceGrammar."""

    @functools.wraps(production)
    def wrapper(self, *args):
        key = (production.__name__,) + args
        replay = self._memo.get(key)
        if replay is None:
            replay = self._memo[key] = Replay(production(self, *args))
        return iter(replay)

    return wrapper


class SentenceGrammar:
    """Recursive-descent productions over one sentence."""

    def __init__(self, words: tuple, lexicon: LexiconSnapshot):
        self.words = words
        self.lexicon = lexicon
        self._memo: dict[tuple, Replay] = {}

    # === Terminals ===

    def keyword(self, i: int, *options: str) -> bool:
        return i < len(self.words) and self.words[i] in options

    def word_of(self, category: Category, i: int) -> Derivations:
        """A lexicon word of this category, or a literal tagged with it."""
        if i >= len(self.words):
            return
        word = self.words[i]

        if isinstance(word, Literal):
            if word.category is category:
                yield [Attr(category.kind, word.text)], i + 1
            return

        if self.lexicon.lookup(word, category):
            yield [Attr(category.kind, word)], i + 1

        literal = parse_literal(word)
        if literal is not None and literal.category is category:
            yield [Attr(category.kind, literal.text)], i + 1

    def noun(self, i: int) -> Derivations:
        return self.word_of(Category.NOUN, i)

    def adjective(self, i: int) -> Derivations:
        return self.word_of(Category.ADJECTIVE, i)

    def adverb(self, i: int) -> Derivations:
        return self.word_of(Category.ADVERB, i)

    def verb(self, i: int) -> Derivations:
        return self.word_of(Category.VERB, i)

    # === Combinators ===

    @memoized
    def conj_plus(self, item, i: int) -> Derivations:
        """One or more items joined by "and", flattened into siblings."""
        for first, j in item(i):
            if self.keyword(j, "and"):
                for rest, k in self.conj_plus(item, j + 1):
                    yield first + rest, k
        for first, j in item(i):
            yield first, j

    def conj(self, item, i: int) -> Derivations:
        """Zero or more items joined by "and"."""
        yield from self.conj_plus(item, i)
        yield [], i

    # === Rules and sentences ===

    def rule(self, i: int) -> Iterator[tuple[list[Rule], int]]:
        # if S+ then S+
        if self.keyword(i, "if"):
            for body, j in self.conj_plus(self.sentence, i + 1):
                if self.keyword(j, "then"):
                    for heads, k in self.conj_plus(self.sentence, j + 1):
                        yield build_rules(body, heads), k

        # S if S+
        for heads, j in self.sentence(i):
            if self.keyword(j, "if"):
                for body, k in self.conj_plus(self.sentence, j + 1):
                    yield build_rules(body, heads), k

        # S (a fact)
        for heads, j in self.sentence(i):
            yield build_rules([], heads), j

    @memoized
    def sentence(self, i: int) -> Derivations:
        # "it" (or nothing meaningful) as subject: the verb phrase is the sentence.
        for subject, j in self.noun_phrase(i):
            if not subject:
                yield from self.verb_phrase(j)

        # A real subject: "its talons are sharp" → "it has talons that are sharp".
        for subject, j in self.noun_phrase(i):
            if subject:
                for predicate, k in self.verb_phrase(j):
                    yield attach(to_has_a(subject), predicate), k

    @memoized
    def verb_phrase(self, i: int) -> Derivations:
        # has/contains + nouns; objects of possession are has_a
        if self.keyword(i, *POSSESSION_VERBS):
            for objects, j in self.conj_plus(self.noun_phrase, i + 1):
                yield to_has_a(objects), j

        # is + adjectives, then is + nouns
        if self.keyword(i, *COPULAS):
            yield from self.conj_plus(self.adjective_phrase, i + 1)
            yield from self.conj_plus(self.noun_phrase, i + 1)

        # advs verb nouns: everything attaches to the verb, adverbs first
        for adverbs, j in self.conj(self.adverb_group, i):
            for verb, k in self.verb(j):
                for objects, m in self.conj(self.noun_phrase, k):
                    yield attach(verb, adverbs + objects), m

        # verb advs: "it eats slowly"
        for verb, j in self.verb(i):
            for adverbs, k in self.conj_plus(self.adverb_group, j):
                yield attach(verb, adverbs), k

    # === Phrases ===

    @memoized
    def noun_phrase(self, i: int) -> Derivations:
        if self.keyword(i, "it"):
            yield [], i + 1
            return

        for j in self.determiner(i):
            for adjectives, k in self.adjective_phrases(j):
                for noun, m in self.noun(k):
                    phrase = attach(noun, adjectives)
                    yield phrase, m
                    for clause, r in self.relative_clause(m):
                        yield attach(phrase, clause), r

    def relative_clause(self, i: int) -> Derivations:
        """that VP: "talons that are sharp", "a bird that eats insects"."""
        if self.keyword(i, "that"):
            yield from self.verb_phrase(i + 1)

    def determiner(self, i: int) -> Iterator[int]:
        # Determiners have no effect and are ignored.
        yield i
        if self.keyword(i, *DETERMINERS):
            yield i + 1

    @memoized
    def adjective_phrases(self, i: int) -> Derivations:
        """Zero or more adjective phrases juxtaposed before a noun."""
        for first, j in self.adjective_phrase(i):
            for rest, k in self.adjective_phrases(j):
                yield first + rest, k
        yield [], i

    def adjective_phrase(self, i: int) -> Derivations:
        for adverbs, j in self.adverbs_opt(i):
            for adjective, k in self.adjective(j):
                yield attach(adjective, adverbs), k

    def adverbs_opt(self, i: int) -> Derivations:
        yield from self.adverb_group(i)
        yield [], i

    def adverb_group(self, i: int) -> Derivations:
        """Juxtaposed adverbs, nested so the last one in the text is outermost."""
        for run, j in self.adverb_run(i):
            yield fold_adverbs(run), j

    @memoized
    def adverb_run(self, i: int) -> Derivations:
        # Collected flat, nested afterwards; a left-recursive
        # "adverbs then adverb" rule would never terminate.
        for first, j in self.adverb(i):
            for rest, k in self.adverb_run(j):
                yield first + rest, k
            yield first, j


# === Entry points ===

def _snapshot(lexicon: Lexicon | None) -> LexiconSnapshot:
    return (lexicon or default_lexicon()).snapshot()


def check_words(words: tuple, lexicon: LexiconSnapshot) -> None:
    """Raise UnknownWord for the first word no derivation could consume."""
    for i, word in enumerate(words):
        if isinstance(word, Literal):
            continue
        if word in KEYWORDS or lexicon.knows(word):
            continue
        if parse_literal(word) is not None:
            continue
        if is_quoted(word):
            raise MalformedLiteral(word, i, words)
        raise UnknownWord(word, i, words)


def parse_all(tokens, lexicon: Lexicon | None = None) -> Iterator[list[Rule]]:
    """
    Lazily yield every distinct parse of a sentence.

    Each parse is a list of rules, one per head conjunct. Yields nothing
    if the sentence does not parse.
    """
    words = words_of(tokens)
    snapshot = _snapshot(lexicon)
    check_words(words, snapshot)

    grammar = SentenceGrammar(words, snapshot)
    seen = set()
    for rules, end in grammar.rule(0):
        if end != len(words) or not rules:
            continue
        key = tuple(rules)
        if key in seen:
            continue
        seen.add(key)
        yield rules


def parse(tokens, lexicon: Lexicon | None = None) -> list[Rule]:
    """
    Parse one sentence (no trailing period) into rules.

    Returns the first derivation in grammar order. Raises UnknownWord for
    unrecognizable words and ParseFailure when nothing derives the input.
    """
    words = words_of(tokens)
    if not words:
        raise ParseFailure("Empty sentence", words)

    for rules in parse_all(words, lexicon):
        logger.debug("parsed %r into %d rule(s)", " ".join(map(_display, words)), len(rules))
        return rules

    logger.debug("no parse for %r", words)
    raise ParseFailure(f"Could not parse: {' '.join(map(_display, words))}", words)


def _display(word) -> str:
    if isinstance(word, Literal):
        return f'"{word.category.value}:{word.text}"'
    return word
