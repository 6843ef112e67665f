# src/pess/core/gloss.py
"""
Glossing: rules → English.

The inverse of the sentence grammar. Top-level attributes become whole
sentences ("it has sharp talons"); attached attributes become modifiers
or subordinate clauses ("sharp", "that slowly eats insects").

Modifiers print before the word they modify, so the most important
adverb comes last: attr(is_how, slowly, [attr(is_how, very, [])]) glosses
as "very slowly". Lists of two or more get "and" between every pair,
since there is no punctuation. Number is not accounted for.

Anything that is not a rule or an attribute glosses as itself.
"""

import logging
from typing import Any

from pess.core.attributes import Attr, Kind, Rule, split_attrs


logger = logging.getLogger(__name__)


MODIFIERS = (Kind.IS_LIKE, Kind.IS_HOW)


class _Unglossable(Exception):
    pass


def gloss(item: Any) -> list[str] | Any:
    """
    Gloss a rule, an attribute, or a list of them into words.

    Returns the input unchanged if it is not glossable.
    """
    items = item if isinstance(item, (list, tuple)) else [item]
    try:
        return top_gloss_all_and(items)
    except _Unglossable as e:
        logger.debug("glossing %r as itself: %s", item, e)
        return item


def gloss_text(item: Any) -> str:
    """Gloss to a single space-separated string."""
    words = gloss(item)
    if isinstance(words, list) and all(isinstance(w, str) for w in words):
        return " ".join(words)
    return str(words)


# === Lists ===

def _and_joined(items, gloss_one) -> list[str]:
    words: list[str] = []
    for i, item in enumerate(items):
        if i > 0:
            words.append("and")
        words.extend(gloss_one(item))
    return words


def top_gloss_all_and(items) -> list[str]:
    return _and_joined(items, top_gloss)


def gloss_all_and(attrs) -> list[str]:
    return _and_joined(attrs, sub_gloss)


def gloss_all(attrs) -> list[str]:
    """Juxtaposed, no "and": any number of small simple adjectives."""
    words: list[str] = []
    for a in attrs:
        words.extend(sub_gloss(a))
    return words


def gloss_that_is_and(attrs) -> list[str]:
    """'that is' + the nouns, for subordinate is-clauses."""
    if not attrs:
        return []
    return ["that", "is"] + gloss_all_and(attrs)


def gloss_clauses(attrs) -> list[str]:
    """Clauses following a noun: 'that is ...' for nouns, then the rest."""
    nouns, others = split_attrs(attrs, Kind.IS_A)
    return gloss_that_is_and(nouns) + gloss_all_and(others)


def _check(item) -> Attr:
    if not isinstance(item, Attr) or not isinstance(item.kind, Kind) or not isinstance(item.value, str):
        raise _Unglossable(f"not an attribute: {item!r}")
    if not isinstance(item.children, (tuple, list)) or not all(isinstance(c, Attr) for c in item.children):
        raise _Unglossable(f"malformed children in {item!r}")
    return item


# === Sentences ===

def top_gloss(item) -> list[str]:
    """Gloss a rule or an outermost attribute, which controls the verb form."""
    if isinstance(item, Rule):
        if not isinstance(item.head, Attr) or not isinstance(item.body, (tuple, list)):
            raise _Unglossable(f"malformed rule {item!r}")
        if item.is_fact:
            return top_gloss(item.head)
        return ["if"] + top_gloss_all_and(item.body) + ["then"] + top_gloss(item.head)

    attr = _check(item)

    if attr.kind is Kind.DOES:
        # it slowly eats insects
        advs, others = split_attrs(attr.children, Kind.IS_HOW)
        return ["it"] + gloss_all_and(advs) + [attr.value] + gloss_all_and(others)

    if attr.kind is Kind.HAS_A:
        # it has two feet that are sharp claws
        adjs, rest = split_attrs(attr.children, Kind.IS_LIKE)
        return ["it", "has"] + gloss_all(adjs) + [attr.value] + gloss_clauses(rest)

    if attr.kind is Kind.IS_A:
        # it is a small beetle
        adjs, others = split_attrs(attr.children, Kind.IS_LIKE)
        return ["it", "is"] + gloss_all(adjs) + [attr.value] + gloss_all_and(others)

    if attr.kind is Kind.IS_LIKE:
        # it is slightly yellow
        advs, others = split_attrs(attr.children, Kind.IS_HOW)
        return ["it", "is"] + gloss_all_and(advs) + [attr.value] + gloss_all_and(others)

    raise _Unglossable(f"no sentence form for {attr.kind.value}")


# === Attached attributes ===

def sub_gloss(item) -> list[str]:
    """Gloss an attached attribute as a modifier or a subordinate clause."""
    attr = _check(item)

    if attr.kind is Kind.IS_A:
        mods, clauses = split_attrs(attr.children, *MODIFIERS)
        return gloss_all(mods) + [attr.value] + gloss_clauses(clauses)

    if attr.kind is Kind.DOES:
        # a sub-clause: "a bird that slowly eats insects and worms"
        advs, others = split_attrs(attr.children, Kind.IS_HOW)
        return ["that"] + gloss_all_and(advs) + [attr.value] + gloss_all_and(others)

    if attr.kind is Kind.HAS_A:
        # "that has many toes"
        mods, clauses = split_attrs(attr.children, *MODIFIERS)
        return ["that", "has"] + gloss_all_and(mods) + [attr.value] + gloss_clauses(clauses)

    if attr.kind in MODIFIERS:
        # attached adverbs go first, so the outermost one is last
        return gloss_all(attr.children) + [attr.value]

    raise _Unglossable(f"unknown kind {attr.kind.value}")
