# src/pess/core/attributes.py
"""
Attribute trees and rules.

An attribute is attr(Kind, Value, Children):
  is_a     noun / identity
  has_a    possession / containment
  is_like  adjective / description
  is_how   adverb / manner
  does     doing verb

Children are "attached" attributes describing this one, in surface order.

A rule is head ← body[0] ∧ body[1] ∧ ... ; an empty body is a fact.

For example: its very sharp claws slowly tear the paper
  attr(has_a, claws,
    [attr(is_like, sharp, [attr(is_how, very, [])]),
     attr(does, tear, [attr(is_how, slowly, []), attr(is_a, paper, [])])])
"""

from dataclasses import dataclass
from enum import Enum


class Kind(str, Enum):
    IS_A = "is_a"
    HAS_A = "has_a"
    IS_LIKE = "is_like"
    IS_HOW = "is_how"
    DOES = "does"


@dataclass(frozen=True)
class Attr:
    kind: Kind
    value: str
    children: tuple["Attr", ...] = ()

    def with_children(self, children) -> "Attr":
        return Attr(self.kind, self.value, tuple(children))

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "value": self.value,
            "children": [c.to_dict() for c in self.children],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Attr":
        children = tuple(cls.from_dict(c) for c in d.get("children", []))
        return cls(Kind(d["kind"]), d["value"], children)


@dataclass(frozen=True)
class Rule:
    head: Attr
    body: tuple[Attr, ...] = ()

    @property
    def is_fact(self) -> bool:
        """A fact has no body (always true)."""
        return len(self.body) == 0

    def to_dict(self) -> dict:
        return {
            "head": self.head.to_dict(),
            "body": [a.to_dict() for a in self.body],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Rule":
        head = Attr.from_dict(d["head"])
        body = tuple(Attr.from_dict(a) for a in d.get("body", []))
        return cls(head, body)


# === Tree building ===

def attach(bases: list[Attr], attrs: list[Attr]) -> list[Attr]:
    """Copy each base with attrs appended to its own children."""
    return [b.with_children(b.children + tuple(attrs)) for b in bases]


def fold_adverbs(adverbs: list[Attr]) -> list[Attr]:
    """
    Nest a run of juxtaposed adverbs, last one outermost.

    [very, slowly] -> [attr(is_how, slowly, [attr(is_how, very, [])])]

    Embedded glossing prints children before the word, so the chain
    renders back in its original order.
    """
    nested: list[Attr] = []
    for adv in adverbs:
        nested = [adv.with_children(adv.children + tuple(nested))]
    return nested


def to_has_a(attrs: list[Attr]) -> list[Attr]:
    """Rewrite is_a attributes as has_a, keeping value and children."""
    converted = []
    for a in attrs:
        if a.kind is Kind.IS_A:
            a = Attr(Kind.HAS_A, a.value, a.children)
        converted.append(a)
    return converted


def build_rules(body: list[Attr], heads: list[Attr]) -> list[Rule]:
    """Break a conjunctive head into one rule per conjunct, sharing the body."""
    shared = tuple(body)
    return [Rule(head, shared) for head in heads]


def split_attrs(attrs, *kinds: Kind) -> tuple[list[Attr], list[Attr]]:
    """Partition attrs into (matching kinds, the rest), preserving order."""
    hits, misses = [], []
    for a in attrs:
        (hits if a.kind in kinds else misses).append(a)
    return hits, misses


# === Display ===

def format_attr(attr: Attr) -> str:
    children = ", ".join(format_attr(c) for c in attr.children)
    return f"attr({attr.kind.value}, {attr.value}, [{children}])"


def format_rule(rule: Rule) -> str:
    body = ", ".join(format_attr(a) for a in rule.body)
    return f"rule({format_attr(rule.head)}, [{body}])"
