"""Tests for the lexicon and literal words."""

import pytest
import redis

from pess.core.attributes import Kind
from pess.core.lexicon import (
    Category, Lexicon, RedisLexicon, Literal, parse_literal, default_lexicon,
)


@pytest.fixture
def lexicon():
    return Lexicon.default()


# === Literal words ===

def test_parse_literal():
    assert parse_literal('"adj:rowdy"') == Literal(Category.ADJECTIVE, "rowdy")
    assert parse_literal('"n:game"') == Literal(Category.NOUN, "game")
    assert parse_literal('"adv:noisily"') == Literal(Category.ADVERB, "noisily")
    assert parse_literal('"v:honks"') == Literal(Category.VERB, "honks")


def test_parse_literal_splits_on_first_colon():
    assert parse_literal('"n:ratio 1:2"') == Literal(Category.NOUN, "ratio 1:2")


def test_parse_literal_keeps_spaces():
    assert parse_literal('"n:canada goose"') == Literal(Category.NOUN, "canada goose")


@pytest.mark.parametrize("word", [
    '"x:rowdy"',        # unknown tag
    '"noun:rowdy"',     # tags are n/adj/adv/v
    '":rowdy"',         # empty tag
    '"adj:"',           # empty text
    '"adjrowdy"',       # no colon
    'adj:rowdy',        # not quoted
    '"',
    '""',
])
def test_parse_literal_rejects(word):
    assert parse_literal(word) is None


def test_category_kinds():
    assert Category.NOUN.kind is Kind.IS_A
    assert Category.ADJECTIVE.kind is Kind.IS_LIKE
    assert Category.ADVERB.kind is Kind.IS_HOW
    assert Category.VERB.kind is Kind.DOES


def test_category_keywords():
    assert [c.keyword for c in Category] == ["noun", "adjective", "adverb", "verb"]


# === In-memory lexicon ===

def test_default_vocabulary(lexicon):
    assert lexicon.lookup("bird", Category.NOUN)
    assert lexicon.lookup("sharp", Category.ADJECTIVE)
    assert lexicon.lookup("slowly", Category.ADVERB)
    assert lexicon.lookup("flies", Category.VERB)


def test_lookup_is_per_category(lexicon):
    assert not lexicon.lookup("bird", Category.VERB)
    assert lexicon.categories_of("bird") == [Category.NOUN]


def test_lookup_has_no_stemming(lexicon):
    assert lexicon.lookup("eats", Category.VERB)
    assert not lexicon.lookup("eat", Category.VERB)


def test_lookup_by_tag(lexicon):
    assert lexicon.lookup("bird", "n")


def test_register(lexicon):
    assert not lexicon.knows("heron")

    assert lexicon.register("heron", Category.NOUN)

    assert lexicon.lookup("heron", Category.NOUN)
    assert lexicon.knows("heron")
    assert "heron" in lexicon.words(Category.NOUN)


def test_register_is_idempotent(lexicon):
    before = len(lexicon.words(Category.NOUN))

    assert not lexicon.register("bird", Category.NOUN)

    assert len(lexicon.words(Category.NOUN)) == before


def test_register_same_word_in_two_categories(lexicon):
    lexicon.register("quack", Category.VERB)

    assert lexicon.categories_of("quack") == [Category.NOUN, Category.VERB]


def test_empty_lexicon():
    lexicon = Lexicon()

    assert not lexicon.knows("bird")
    assert lexicon.words(Category.NOUN) == []


def test_lexicon_from_entries():
    lexicon = Lexicon({Category.NOUN: {"heron"}, "v": {"wades"}})

    assert lexicon.lookup("heron", Category.NOUN)
    assert lexicon.lookup("wades", Category.VERB)


def test_snapshot_is_isolated(lexicon):
    snapshot = lexicon.snapshot()
    lexicon.register("heron", Category.NOUN)

    assert not snapshot.lookup("heron", Category.NOUN)
    assert not snapshot.knows("heron")
    assert snapshot.lookup("bird", Category.NOUN)


def test_default_lexicon_is_shared():
    assert default_lexicon() is default_lexicon()
    assert default_lexicon().lookup("bird", Category.NOUN)


# === Redis lexicon (requires redis) ===

@pytest.fixture
def client():
    r = redis.Redis(host="localhost", port=6379, db=15)  # db=15 for tests
    try:
        r.ping()
    except redis.ConnectionError:
        pytest.skip("redis not available")
    yield r
    for key in r.scan_iter("testlex:*"):
        r.delete(key)


@pytest.fixture
def redis_lexicon(client):
    return RedisLexicon(client, prefix="testlex")


def test_redis_register_and_lookup(redis_lexicon):
    assert redis_lexicon.is_empty()

    assert redis_lexicon.register("heron", Category.NOUN)
    assert not redis_lexicon.register("heron", Category.NOUN)

    assert redis_lexicon.lookup("heron", Category.NOUN)
    assert not redis_lexicon.lookup("heron", Category.VERB)
    assert redis_lexicon.words(Category.NOUN) == ["heron"]


def test_redis_seed(redis_lexicon):
    added = redis_lexicon.seed()

    assert added > 0
    assert redis_lexicon.lookup("bird", Category.NOUN)
    assert redis_lexicon.seed() == 0


def test_redis_snapshot(redis_lexicon):
    redis_lexicon.register("heron", Category.NOUN)
    snapshot = redis_lexicon.snapshot()

    assert snapshot.lookup("heron", Category.NOUN)
    assert not snapshot.lookup("egret", Category.NOUN)


def test_redis_clear(redis_lexicon):
    redis_lexicon.register("heron", Category.NOUN)
    redis_lexicon.clear()

    assert redis_lexicon.is_empty()
