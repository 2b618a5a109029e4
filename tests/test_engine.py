from itertools import permutations

import pytest
from oneaway.engine import (
    OneAwayGuess, analyze_guesses, derive_deductions, possible_groupings,
    possible_triplets, validate_guess,
)
from oneaway.engine.deductions import definitely_together
from oneaway.engine.scenarios import compatible, merge, scenario_key

WORDS = list("ABCDEFGHIJKLMNOP")


def G(s: str, gid: str = "") -> OneAwayGuess:
    return OneAwayGuess(id=gid or s, words=tuple(s))


def as_sets(groups):
    return {frozenset(g) for g in groups}


def deduction_set(deductions):
    return {(d.kind, frozenset(d.words)) for d in deductions}


# --- constraint model ---

def test_possible_triplets_fixed_order():
    assert possible_triplets(G("ABCD")) == [
        ("A", "B", "C"), ("A", "B", "D"), ("A", "C", "D"), ("B", "C", "D"),
    ]


@pytest.mark.parametrize("words", [
    ("BASS", "PIKE", "SOLE", "PUMP"),
    ("w", "x", "y", "z"),
    ("ice cream", "Ice Cream", "ICE", "cream"),
])
def test_possible_triplets_each_drops_one_distinct_word(words):
    trips = possible_triplets(OneAwayGuess(id="g", words=words))
    assert len(trips) == 4
    dropped = []
    for t in trips:
        assert len(t) == 3 and set(t) <= set(words)
        dropped.extend(set(words) - set(t))
    assert sorted(dropped) == sorted(words)


def test_possible_triplets_accepts_plain_sequence():
    assert possible_triplets(["a", "b", "c", "d"])[3] == ("b", "c", "d")


@pytest.mark.parametrize("words", [
    ("A", "B", "C"),
    ("A", "B", "C", "D", "E"),
    ("A", "B", "C", "C"),
    ("A", "B", "C", 4),
])
def test_guess_rejects_malformed_words(words):
    with pytest.raises(ValueError):
        OneAwayGuess(id="bad", words=words)


def test_guess_freezes_list_input():
    g = OneAwayGuess(id="g1", words=["A", "B", "C", "D"])
    assert g.words == ("A", "B", "C", "D")
    assert OneAwayGuess.of(["A", "B", "C", "D"]).id


# --- scenario propagation ---

def test_compatible_and_merge():
    assert compatible(("A", "B", "C"), ("A", "B", "D"))
    assert not compatible(("A", "B", "C"), ("A", "D", "E"))
    assert merge(("A", "B", "C"), ("A", "B", "D")) == frozenset("ABCD")
    assert scenario_key({"C", "A", "B"}) == "A,B,C"


def test_no_guesses_no_groupings():
    assert possible_groupings([]) == []


def test_single_guess_groupings_are_its_triplets():
    groups = possible_groupings([G("ABCD")])
    assert as_sets(groups) == {frozenset(t) for t in possible_triplets(G("ABCD"))}


def test_three_shared_words_stay_together_in_every_grouping():
    groups = possible_groupings([G("ABCD"), G("ABCE")])
    assert groups
    assert all(set("ABC") <= g for g in groups)
    assert as_sets(groups) == {frozenset("ABC"), frozenset("ABCD"), frozenset("ABCE")}


def test_disjoint_guesses_leave_no_grouping():
    assert possible_groupings([G("ABCD"), G("EFGH")]) == []


def test_two_shared_words_keep_four_groupings():
    groups = possible_groupings([G("ABCD"), G("ABEF")])
    assert as_sets(groups) == {
        frozenset("ABCE"), frozenset("ABCF"), frozenset("ABDE"), frozenset("ABDF"),
    }


def test_groupings_never_exceed_group_size():
    groups = possible_groupings([G("ABCD"), G("ABEF"), G("ACEG")])
    assert all(len(g) <= 4 for g in groups)


def test_groupings_deduplicated():
    groups = possible_groupings([G("ABCD", "g1"), G("ABCD", "g2")])
    keys = [scenario_key(g) for g in groups]
    assert len(keys) == len(set(keys))


def test_repeated_guess_never_claims_its_own_words():
    guesses = [G("ABCD", "g1"), G("ABCD", "g2")]
    groups = possible_groupings(guesses)
    assert as_sets(groups) == {frozenset(t) for t in possible_triplets(G("ABCD"))} | {frozenset("ABCD")}

    r = analyze_guesses(WORDS, guesses)
    assert not any(i.startswith("Found the group") for i in r.insights)
    assert not any(i.startswith("Definitely together") for i in r.insights)


# --- deductions ---

def test_exactly_three_per_guess_in_order():
    deds = derive_deductions([G("ABCD"), G("EFGH")])
    assert [d.kind for d in deds] == ["exactly_three", "exactly_three"]
    assert deds[0].words == tuple("ABCD") and deds[1].words == tuple("EFGH")


def test_must_be_together_from_three_shared_words():
    deds = derive_deductions([G("ABCD"), G("ECBA")])
    together = [d for d in deds if d.kind == "must_be_together"]
    assert len(together) == 1
    assert together[0].words == ("A", "B", "C")


@pytest.mark.parametrize("second", ["ABEF", "AEFG", "EFGH"])
def test_two_or_fewer_shared_words_are_not_certain(second):
    deds = derive_deductions([G("ABCD"), G(second)])
    assert not any(d.kind == "must_be_together" for d in deds)


def test_cannot_be_together_is_never_emitted():
    deds = derive_deductions([G("ABCD"), G("ABCE"), G("EFGH"), G("ABEF")])
    assert all(d.kind != "cannot_be_together" for d in deds)


def test_definitely_together_intersection():
    assert definitely_together([frozenset("ABCE"), frozenset("ABDF")]) == ["A", "B"]
    assert definitely_together([]) == []


# --- analysis ---

def test_analyze_no_guesses():
    r = analyze_guesses(WORDS, [])
    assert r.deductions == [] and r.possible_groups == []
    assert r.insights == ["Log a one-away guess to start deducing!"]


def test_analyze_single_guess():
    r = analyze_guesses(WORDS, [G("ABCD")])
    assert len(r.possible_groups) == 4
    assert [d.kind for d in r.deductions] == ["exactly_three"]
    assert r.insights == [
        "One of these 4 words doesn't belong with the other 3: A, B, C, D",
        "Narrowed down to 4 possible groupings",
    ]


def test_analyze_three_shared_words():
    r = analyze_guesses(WORDS, [G("ABCD"), G("ABCE")])
    assert ("must_be_together", frozenset("ABC")) in deduction_set(r.deductions)
    assert all(set("ABC") <= g for g in r.possible_groups)
    assert "Narrowed down to 3 possible groupings" in r.insights
    assert "Definitely together: A, B, C" in r.insights


def test_analyze_scenario_intersection_beyond_pairwise_rule():
    r = analyze_guesses(WORDS, [G("ABCD"), G("ABEF")])
    assert not any(d.kind == "must_be_together" for d in r.deductions)
    assert r.insights == ["Narrowed down to 4 possible groupings", "Definitely together: A, B"]


def test_analyze_finds_the_group():
    r = analyze_guesses(WORDS, [G("ABCD"), G("ABEF"), G("ACEG")])
    assert as_sets(r.possible_groups) == {frozenset("ABCE")}
    assert r.insights == ["Found the group: A, B, C, E", "Definitely together: A, B, C, E"]


def test_analyze_disjoint_guesses():
    r = analyze_guesses(WORDS, [G("ABCD"), G("EFGH")])
    assert r.possible_groups == []
    assert not any(d.kind == "must_be_together" for d in r.deductions)
    assert len(r.insights) == 1 and "different categories" in r.insights[0]


def test_analyze_is_idempotent_and_does_not_mutate_input():
    guesses = [G("ABCD"), G("ABCE"), G("ABEF")]
    before = list(guesses)
    assert analyze_guesses(WORDS, guesses) == analyze_guesses(WORDS, guesses)
    assert guesses == before


def test_analyze_order_independent():
    guesses = [G("ABCD"), G("ABEF"), G("ACEG")]
    base = analyze_guesses(WORDS, guesses)
    for perm in permutations(guesses):
        r = analyze_guesses(WORDS, list(perm))
        assert as_sets(r.possible_groups) == as_sets(base.possible_groups)
        assert deduction_set(r.deductions) == deduction_set(base.deductions)


def test_analyze_to_dict_shape():
    d = analyze_guesses(WORDS, [G("ABCD"), G("ABCE")]).to_dict()
    assert set(d) == {"deductions", "possibleGroups", "insights"}
    assert d["deductions"][0] == {
        "type": "exactly_three", "words": ["A", "B", "C", "D"],
        "reason": "Exactly 3 of these 4 words are in the same group",
    }
    assert ["A", "B", "C"] in d["possibleGroups"]


# --- validation ---

def test_validate_guess():
    assert validate_guess(["A", "B", "C", "D"], WORDS) is True
    assert validate_guess(["A", "B", "C", "Z"], WORDS) is False
    assert validate_guess(["A", "B", "C", "C"], WORDS) is False
    assert validate_guess(["A", "B", "C"], WORDS) is False
    assert validate_guess("ABCD", WORDS) is False
    assert validate_guess(["w", "x", "y", "z"]) is True
