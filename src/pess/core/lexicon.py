# src/pess/core/lexicon.py
"""
Lexicon: known words per part of speech.

  n    noun         -> is_a
  adj  adjective    -> is_like
  adv  adverb       -> is_how
  v    doing verb   -> does

Words can also be "defined" in place as quoted literals tagged with a
category, e.g. "adj:rowdy" or "n:canada goose". Literals bypass the
lexicon and are never stored.

Two stores share one interface: an in-memory Lexicon (lock-guarded) and
a RedisLexicon keeping each category as a Redis set.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum

import redis

from pess.core.attributes import Kind
from pess.core import vocabulary


logger = logging.getLogger(__name__)


class Category(str, Enum):
    NOUN = "n"
    ADJECTIVE = "adj"
    ADVERB = "adv"
    VERB = "v"

    @property
    def kind(self) -> Kind:
        return CATEGORY_KINDS[self]

    @property
    def keyword(self) -> str:
        """The word naming this category in a vocabulary declaration."""
        return CATEGORY_KEYWORDS[self]

    @classmethod
    def from_tag(cls, tag: str) -> "Category | None":
        try:
            return cls(tag)
        except ValueError:
            return None


CATEGORY_KINDS = {
    Category.NOUN: Kind.IS_A,
    Category.ADJECTIVE: Kind.IS_LIKE,
    Category.ADVERB: Kind.IS_HOW,
    Category.VERB: Kind.DOES,
}

CATEGORY_KEYWORDS = {
    Category.NOUN: "noun",
    Category.ADJECTIVE: "adjective",
    Category.ADVERB: "adverb",
    Category.VERB: "verb",
}


# === Literal words ===

@dataclass(frozen=True)
class Literal:
    category: Category
    text: str


def parse_literal(word: str) -> Literal | None:
    """
    Recognize a quoted literal: "<tag>:<text>".

    Splits on the first colon. Both sides must be non-empty and the tag
    must name a category; otherwise this is not a literal.
    """
    if len(word) < 2 or word[0] != '"' or word[-1] != '"':
        return None

    tag, sep, text = word[1:-1].partition(":")
    if not sep or not tag or not text:
        return None

    category = Category.from_tag(tag)
    if category is None:
        return None
    return Literal(category, text)


def is_quoted(word: str) -> bool:
    return len(word) >= 2 and word[0] == '"' and word[-1] == '"'


# === Stores ===

@dataclass(frozen=True)
class LexiconSnapshot:
    """Immutable view of a lexicon, read by one parse."""
    entries: dict[Category, frozenset[str]]

    def lookup(self, word: str, category: Category) -> bool:
        return word in self.entries.get(category, frozenset())

    def knows(self, word: str) -> bool:
        return any(word in words for words in self.entries.values())


class Lexicon:
    """In-memory lexicon. Safe to register from one thread while others parse."""

    def __init__(self, entries: dict[Category, set[str]] | None = None):
        self._lock = threading.RLock()
        self._entries: dict[Category, set[str]] = {c: set() for c in Category}
        for category, words in (entries or {}).items():
            self._entries[Category(category)].update(words)

    @classmethod
    def default(cls) -> "Lexicon":
        """A fresh lexicon holding the built-in vocabulary."""
        lexicon = cls()
        lexicon.seed()
        return lexicon

    # Storage primitives, overridden by RedisLexicon.

    def _contains(self, word: str, category: Category) -> bool:
        with self._lock:
            return word in self._entries[category]

    def _add(self, word: str, category: Category) -> bool:
        with self._lock:
            if word in self._entries[category]:
                return False
            self._entries[category].add(word)
            return True

    def _members(self, category: Category) -> set[str]:
        with self._lock:
            return set(self._entries[category])

    # Public interface.

    def lookup(self, word: str, category: Category) -> bool:
        return self._contains(word, Category(category))

    def register(self, word: str, category: Category) -> bool:
        """Add a word. Returns False if it was already known (not an error)."""
        category = Category(category)
        added = self._add(word, category)
        if added:
            logger.debug("registered %r as %s", word, category.keyword)
        return added

    def knows(self, word: str) -> bool:
        return any(self._contains(word, c) for c in Category)

    def categories_of(self, word: str) -> list[Category]:
        return [c for c in Category if self._contains(word, c)]

    def words(self, category: Category) -> list[str]:
        return sorted(self._members(Category(category)))

    def snapshot(self) -> LexiconSnapshot:
        with self._lock:
            return LexiconSnapshot({c: frozenset(self._members(c)) for c in Category})

    def seed(self) -> int:
        """Register the built-in vocabulary. Returns how many words were new."""
        builtin = {
            Category.NOUN: vocabulary.NOUNS,
            Category.ADJECTIVE: vocabulary.ADJECTIVES,
            Category.ADVERB: vocabulary.ADVERBS,
            Category.VERB: vocabulary.VERBS,
        }
        added = 0
        for category, words in builtin.items():
            for word in words:
                added += self._add(word, category)
        return added


class RedisLexicon(Lexicon):
    """Lexicon stored in Redis, one set per category: {prefix}:{tag}."""

    def __init__(self, client: redis.Redis, prefix: str = "lex"):
        super().__init__()
        self.client = client
        self.prefix = prefix

    def _key(self, category: Category) -> str:
        return f"{self.prefix}:{category.value}"

    def _contains(self, word: str, category: Category) -> bool:
        return bool(self.client.sismember(self._key(category), word))

    def _add(self, word: str, category: Category) -> bool:
        return self.client.sadd(self._key(category), word) == 1

    def _members(self, category: Category) -> set[str]:
        return {w.decode() for w in self.client.smembers(self._key(category))}

    def snapshot(self) -> LexiconSnapshot:
        return LexiconSnapshot({c: frozenset(self._members(c)) for c in Category})

    def is_empty(self) -> bool:
        return not any(self.client.exists(self._key(c)) for c in Category)

    def clear(self) -> None:
        """Clear all lexicon data. Useful for tests."""
        for key in self.client.scan_iter(f"{self.prefix}:*"):
            self.client.delete(key)


def open_lexicon(db: int | None = None, host: str = "localhost", port: int = 6379) -> Lexicon:
    """The process-wide lexicon, or a seeded RedisLexicon when db is given."""
    if db is None:
        return default_lexicon()

    lexicon = RedisLexicon(redis.Redis(host=host, port=port, db=db))
    if lexicon.is_empty():
        added = lexicon.seed()
        logger.info("seeded redis lexicon db=%d with %d words", db, added)
    return lexicon


_default: Lexicon | None = None
_default_lock = threading.Lock()


def default_lexicon() -> Lexicon:
    """The process-wide lexicon, created on first use with the built-in vocabulary."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Lexicon.default()
        return _default
