import itertools
import random

import pytest

from semaver import (
    MalformedVersion,
    Ordering,
    SemanticVersionComparator,
    Version,
    compare,
    compare_identifiers,
    equal,
    greater,
    greater_equal,
    less,
    less_equal,
    not_equal,
    parse,
    sort_versions,
)

# Ordered example from semver.org, section 11
PRECEDENCE_CHAIN = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "1.0.1-0",
    "1.0.1",
    "1.1.0",
    "2.0.0",
    "2.1.0",
    "2.1.1",
]


def v(major=0, minor=1, patch=0, prerelease="", build=""):
    return Version(major, minor, patch, prerelease, build)


@pytest.mark.parametrize("lhs, rhs", [
    (v(0, 0, 0), v(0, 0, 1)),
    (v(0, 0, 0), v(0, 1, 0)),
    (v(0, 0, 0), v(1, 0, 0)),
    (v(1, 9, 9), v(2, 0, 0)),
    (v(1, 2, 9), v(1, 3, 0)),
    (v(9, 0, 0), v(10, 0, 0)),
])
def test_core_compared_numerically(lhs, rhs):
    assert compare(lhs, rhs) is Ordering.LESS
    assert compare(rhs, lhs) is Ordering.GREATER
    assert compare(lhs, lhs) is Ordering.EQUAL


def test_release_beats_prerelease():
    assert compare(v(1, 0, 0), v(1, 0, 0, "alpha")) is Ordering.GREATER
    assert compare(v(1, 0, 0, "alpha"), v(1, 0, 0)) is Ordering.LESS
    assert v(1, 0, 0) > v(1, 0, 0, "alpha")


def test_empty_prerelease_beats_zero_prerelease():
    assert compare(v(1, 2, 3), v(1, 2, 3, "0")) is Ordering.GREATER


def test_prerelease_cannot_outrank_higher_core():
    assert compare(v(1, 0, 1, "alpha"), v(1, 0, 0)) is Ordering.GREATER


@pytest.mark.parametrize("lhs, rhs", [
    ("0", "1"),
    ("a", "b"),
    ("0", "a"),
    ("1", "alpha"),
    ("alpha", "alpha.1"),
    ("alpha.1", "alpha.beta"),
    ("beta.2", "beta.11"),
    ("0.a.0a", "1.a.0a"),
    ("0.a.0a", "0.b.0a"),
    ("0.a.0a", "0.a.0b"),
    ("999", "a"),
    ("A", "a"),
    ("-", "0a"),
    ("alpha.1", "alpha.1.0"),
])
def test_prerelease_precedence(lhs, rhs):
    assert compare(v(1, 0, 0, lhs), v(1, 0, 0, rhs)) is Ordering.LESS
    assert compare(v(1, 0, 0, rhs), v(1, 0, 0, lhs)) is Ordering.GREATER


def test_equal_prereleases():
    assert compare(v(prerelease="0.a.0a"), v(prerelease="0.a.0a")) is Ordering.EQUAL


def test_build_metadata_ignored():
    assert compare(v(build="abc"), v(build="xyz")) is Ordering.EQUAL
    assert compare(v(1, 0, 0, "rc.1", "A"), v(1, 0, 0, "rc.1", "B")) is Ordering.EQUAL
    assert v(build="abc") == v(build="xyz")
    assert v(build="abc").as_tuple() != v(build="xyz").as_tuple()


@pytest.mark.parametrize("lhs, rhs, expected", [
    ("1", "2", Ordering.LESS),
    ("10", "9", Ordering.GREATER),
    ("7", "7", Ordering.EQUAL),
    ("1", "a", Ordering.LESS),
    ("a", "1", Ordering.GREATER),
    ("alpha", "beta", Ordering.LESS),
    ("rc", "rc", Ordering.EQUAL),
    ("1a", "1", Ordering.GREATER),
])
def test_compare_identifiers(lhs, rhs, expected):
    assert compare_identifiers(lhs, rhs) is expected


def test_large_numeric_identifiers():
    big = "18446744073709551616"
    assert compare(v(prerelease=big), v(prerelease=big + "0")) is Ordering.LESS


def test_precedence_chain():
    versions = [parse(text) for text in PRECEDENCE_CHAIN]
    for lhs, rhs in zip(versions, versions[1:]):
        assert compare(lhs, rhs) is Ordering.LESS, (lhs, rhs)


def test_total_order_properties():
    versions = [parse(text) for text in PRECEDENCE_CHAIN] + [parse("1.0.0+build"), parse("1.0.0-beta+exp.sha")]

    for a in versions:
        assert compare(a, a) is Ordering.EQUAL

    for a, b in itertools.product(versions, repeat=2):
        assert compare(a, b).value == -compare(b, a).value

    for a, b, c in itertools.product(versions, repeat=3):
        if compare(a, b) is not Ordering.GREATER and compare(b, c) is not Ordering.GREATER:
            assert compare(a, c) is not Ordering.GREATER


def test_predicates():
    low, high = v(1, 0, 0, "alpha"), v(1, 0, 0)

    assert less(low, high) and less_equal(low, high) and not_equal(low, high)
    assert greater(high, low) and greater_equal(high, low)
    assert not equal(low, high)
    assert equal(high, v(1, 0, 0, build="x"))
    assert less_equal(high, high) and greater_equal(high, high)


def test_operators():
    low, high = v(1, 0, 0, "alpha"), v(1, 0, 0)

    assert low < high
    assert low <= high
    assert high > low
    assert high >= low
    assert low != high
    assert not (low == high)
    assert (v() == "0.1.0") is False


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        v() < "1.0.0"


def test_sort_versions():
    shuffled = [parse(text) for text in PRECEDENCE_CHAIN]
    random.Random(42).shuffle(shuffled)

    ordered = sort_versions(shuffled)
    assert [str(version) for version in ordered] == PRECEDENCE_CHAIN

    ordered = sort_versions(shuffled, reverse=True)
    assert [str(version) for version in ordered] == PRECEDENCE_CHAIN[::-1]


def test_sort_is_stable_for_equal_precedence():
    versions = [v(1, 0, 0, build="b"), v(0, 1, 0), v(1, 0, 0, build="a")]

    assert [version.build for version in sort_versions(versions)] == ["", "b", "a"]
    assert [version.build for version in sort_versions(versions, reverse=True)] == ["b", "a", ""]


class TestSemanticVersionComparator:

    def setup_method(self):
        self.comparator = SemanticVersionComparator()

    def test_compare_versions(self):
        assert self.comparator.compare_versions("1.0.0", "2.0.0") == -1
        assert self.comparator.compare_versions("1.0.0+a", "1.0.0+b") == 0
        assert self.comparator.compare_versions("1.0.0", "1.0.0-rc.1") == 1
        assert self.comparator.compare_versions("v1.0.0", "1.0.0") == 0

    def test_compare_versions_rejects_malformed(self):
        with pytest.raises(MalformedVersion):
            self.comparator.compare_versions("1.0", "1.0.0")

    def test_strict_comparator(self):
        strict = SemanticVersionComparator(allow_prefix=False)
        assert not strict.is_valid_version("v1.0.0")
        assert strict.is_valid_version("1.0.0")
        with pytest.raises(MalformedVersion):
            strict.compare_versions("v1.0.0", "1.0.0")

    def test_is_valid_version(self):
        assert self.comparator.is_valid_version("1.0.0-alpha.1")
        assert not self.comparator.is_valid_version("1.0.0-alpha.01")

    def test_sort_versions_keeps_original_strings(self):
        result = self.comparator.sort_versions(["v2.0.0", "1.0.0", "1.0.0-rc.1"])
        assert result == ["1.0.0-rc.1", "1.0.0", "v2.0.0"]

    def test_sort_versions_invalid(self):
        with pytest.raises(MalformedVersion):
            self.comparator.sort_versions(["1.0.0", "bogus"])

        result = self.comparator.sort_versions(["1.0.0", "bogus", "0.9.0"], reverse=True, skip_invalid=True)
        assert result == ["1.0.0", "0.9.0"]

    def test_get_latest_version(self, caplog):
        with caplog.at_level("WARNING", logger="semaver"):
            latest = self.comparator.get_latest_version(["1.0.0", "not-a-version", "2.0.0-rc.1", "1.9.9"])

        assert latest == "2.0.0-rc.1"
        assert "Skipping invalid version: not-a-version" in caplog.text

    def test_get_latest_version_first_of_equals_wins(self):
        assert self.comparator.get_latest_version(["1.0.0+a", "1.0.0+b"]) == "1.0.0+a"

    def test_get_latest_version_none(self):
        assert self.comparator.get_latest_version([]) is None
        assert self.comparator.get_latest_version(["x", "1.2"]) is None


def test_very_long_numeric_identifiers():
    huge = v(1, 0, 0, "1" * 5000)

    assert compare(huge, v(1, 0, 0, "2")) is Ordering.GREATER
    assert compare(v(1, 0, 0, "2"), huge) is Ordering.LESS
    assert compare(huge, v(1, 0, 0, "1" * 5000)) is Ordering.EQUAL
    assert compare(huge, v(1, 0, 0, "1" * 4999 + "2")) is Ordering.LESS
    assert compare(huge, v(1, 0, 0, "alpha")) is Ordering.LESS


def test_numeric_identifiers_with_hand_set_leading_zeros():
    assert compare_identifiers("007", "7") is Ordering.EQUAL
    assert compare_identifiers("010", "9") is Ordering.GREATER
    assert compare_identifiers("0", "00") is Ordering.EQUAL
