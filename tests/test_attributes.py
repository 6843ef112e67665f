"""Tests for attribute trees and rules."""

from pess.core.attributes import (
    Attr, Kind, Rule, attach, fold_adverbs, to_has_a, build_rules, split_attrs,
    format_attr, format_rule,
)


def is_a(value, *children):
    return Attr(Kind.IS_A, value, tuple(children))


def is_how(value, *children):
    return Attr(Kind.IS_HOW, value, tuple(children))


# === Attributes ===

def test_attr_defaults():
    attr = Attr(Kind.IS_A, "bird")

    assert attr.children == ()
    assert attr == is_a("bird")


def test_kind_values():
    assert Kind("is_a") is Kind.IS_A
    assert Kind.HAS_A.value == "has_a"


def test_with_children():
    attr = Attr(Kind.DOES, "eats")
    attached = attr.with_children([is_a("insects")])

    assert attached.children == (is_a("insects"),)
    assert attr.children == ()


def test_attr_dict_roundtrip():
    attr = Attr(Kind.HAS_A, "talons", (Attr(Kind.IS_LIKE, "sharp", (is_how("very"),)),))
    d = attr.to_dict()

    assert d["kind"] == "has_a"
    assert d["children"][0]["children"][0] == {"kind": "is_how", "value": "very", "children": []}
    assert Attr.from_dict(d) == attr


def test_attr_from_dict_without_children():
    assert Attr.from_dict({"kind": "does", "value": "flies"}) == Attr(Kind.DOES, "flies")


# === Rules ===

def test_fact():
    rule = Rule(is_a("bird"))

    assert rule.is_fact
    assert not Rule(is_a("bird"), (Attr(Kind.DOES, "flies"),)).is_fact


def test_rule_dict_roundtrip():
    rule = Rule(is_a("bird"), (Attr(Kind.DOES, "flies"),))

    assert Rule.from_dict(rule.to_dict()) == rule
    assert Rule.from_dict({"head": is_a("bird").to_dict()}) == Rule(is_a("bird"))


def test_rules_are_hashable():
    a = Rule(is_a("bird"), (Attr(Kind.DOES, "flies"),))
    b = Rule(is_a("bird"), (Attr(Kind.DOES, "flies"),))

    assert len({a, b}) == 1


# === Tree building ===

def test_attach_appends_to_each_base():
    bases = [Attr(Kind.HAS_A, "talons"), Attr(Kind.HAS_A, "feet")]
    sharp = Attr(Kind.IS_LIKE, "sharp")

    attached = attach(bases, [sharp])

    assert attached == [
        Attr(Kind.HAS_A, "talons", (sharp,)),
        Attr(Kind.HAS_A, "feet", (sharp,)),
    ]


def test_attach_keeps_existing_children():
    base = Attr(Kind.HAS_A, "talons", (Attr(Kind.IS_LIKE, "long"),))

    [attached] = attach([base], [Attr(Kind.IS_LIKE, "sharp")])

    assert [c.value for c in attached.children] == ["long", "sharp"]


def test_fold_adverbs():
    folded = fold_adverbs([is_how("very"), is_how("slowly")])

    assert folded == [is_how("slowly", is_how("very"))]


def test_fold_three_adverbs():
    folded = fold_adverbs([is_how("very"), is_how("very"), is_how("slowly")])

    assert folded == [is_how("slowly", is_how("very", is_how("very")))]


def test_fold_adverbs_edge_cases():
    assert fold_adverbs([]) == []
    assert fold_adverbs([is_how("slowly")]) == [is_how("slowly")]


def test_to_has_a():
    sharp = Attr(Kind.IS_LIKE, "sharp")
    converted = to_has_a([is_a("talons", sharp), Attr(Kind.DOES, "flies")])

    assert converted == [Attr(Kind.HAS_A, "talons", (sharp,)), Attr(Kind.DOES, "flies")]


def test_build_rules_shares_body():
    body = [Attr(Kind.DOES, "flies")]
    rules = build_rules(body, [is_a("bird"), Attr(Kind.HAS_A, "wings")])

    assert len(rules) == 2
    assert rules[0].body == rules[1].body == (Attr(Kind.DOES, "flies"),)
    assert rules[1].head == Attr(Kind.HAS_A, "wings")


def test_split_attrs_preserves_order():
    attrs = [is_how("slowly"), is_a("insects"), is_how("carefully")]

    hits, misses = split_attrs(attrs, Kind.IS_HOW)

    assert [a.value for a in hits] == ["slowly", "carefully"]
    assert misses == [is_a("insects")]


# === Display ===

def test_format_attr():
    attr = Attr(Kind.DOES, "eats", (is_how("slowly"),))

    assert format_attr(attr) == "attr(does, eats, [attr(is_how, slowly, [])])"


def test_format_rule():
    rule = Rule(is_a("bird"), (Attr(Kind.DOES, "flies"),))

    assert format_rule(rule) == "rule(attr(is_a, bird, []), [attr(does, flies, [])])"
    assert format_rule(Rule(is_a("bird"))) == "rule(attr(is_a, bird, []), [])"
