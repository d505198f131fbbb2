# SPDX-License-Identifier: MIT
"""Property-based tests for labeled versions.

These tests verify that:
- Rendering and parsing agree for every integer triple
- Equality and hashing are consistent
- The ordering predicates are a strict total order over triples
"""

from __future__ import annotations

from hypothesis import assume, given, settings, strategies as st

from labeled_version import Version, compare_versions, parse_version, version_key


# =============================================================================
# Strategies for generating test data
# =============================================================================

labels = st.text(max_size=20)

components = st.integers(min_value=-(2**31), max_value=2**31 - 1)

small_components = st.integers(min_value=0, max_value=3)


@st.composite
def versions(draw, component_strategy=components):
    """Generate a Version with an arbitrary label and triple."""
    return Version(
        draw(labels),
        draw(component_strategy),
        draw(component_strategy),
        draw(component_strategy),
    )


# =============================================================================
# Property-Based Tests
# =============================================================================


class TestRenderingProperties:
    """Rendering and parsing round trips."""

    @given(v=versions())
    @settings(max_examples=100)
    def test_full_version_roundtrip(self, v):
        """Parsing the full version reconstructs an equal instance."""
        assert parse_version(v.label, v.full_version) == v

    @given(v=versions())
    @settings(max_examples=100)
    def test_short_version_roundtrip(self, v):
        """Parsing the short version keeps major/minor and zeroes the patch."""
        parsed = parse_version(v.label, v.short_version)
        assert parsed.triple == (v.major, v.minor, 0)

    @given(v=versions())
    @settings(max_examples=100)
    def test_display_string_format(self, v):
        """The display string is the label, a dash and the full version."""
        assert str(v) == v.label + "-" + v.full_version
        assert v.full_version == f"{v.major}.{v.minor}.{v.patch}"
        assert v.short_version == f"{v.major}.{v.minor}"


class TestEqualityProperties:
    """Equality and hashing consistency."""

    @given(v=versions())
    @settings(max_examples=100)
    def test_reflexive(self, v):
        """Every version equals itself and a copy of itself."""
        copy = Version(v.label, v.major, v.minor, v.patch)
        assert v == v
        assert v == copy
        assert hash(v) == hash(copy)

    @given(a=versions(small_components), b=versions(small_components))
    @settings(max_examples=100)
    def test_symmetric(self, a, b):
        """Equality is symmetric."""
        assert (a == b) == (b == a)

    @given(label=labels, major=components, minor=components, patch=components)
    @settings(max_examples=100)
    def test_transitive_and_hash_consistent(self, label, major, minor, patch):
        """Equal instances built three ways are all equal and hash alike."""
        a = Version(label, major, minor, patch)
        b = parse_version(label, f"{major}.{minor}.{patch}")
        c = Version(label, *b.triple)
        assert a == b and b == c and a == c
        assert hash(a) == hash(b) == hash(c) == hash(str(a))

    @given(v=versions(), other_label=labels)
    @settings(max_examples=100)
    def test_label_participates_in_equality(self, v, other_label):
        """Changing only the label breaks equality but not ordering."""
        assume(other_label != v.label)
        other = Version(other_label, *v.triple)
        assert v != other
        assert not v.is_newer_than(other)
        assert not v.is_older_than(other)


class TestOrderingProperties:
    """Ordering predicates over triples."""

    @given(a=versions(small_components), b=versions(small_components))
    @settings(max_examples=100)
    def test_trichotomy(self, a, b):
        """Exactly one of newer, older or equal-by-triple holds."""
        outcomes = [a.is_newer_than(b), a.is_older_than(b), a.triple == b.triple]
        assert outcomes.count(True) == 1

    @given(a=versions(), b=versions())
    @settings(max_examples=100)
    def test_antisymmetry(self, a, b):
        """a newer than b exactly when b is older than a."""
        assert a.is_newer_than(b) == b.is_older_than(a)

    @given(a=versions(small_components), b=versions(small_components))
    @settings(max_examples=100)
    def test_matches_tuple_ordering(self, a, b):
        """The predicates agree with lexicographic tuple ordering."""
        assert a.is_newer_than(b) == (a.triple > b.triple)
        assert a.is_older_than(b.major, b.minor, b.patch) == (a.triple < b.triple)
        assert compare_versions(a, b) == (a.triple > b.triple) - (a.triple < b.triple)

    @given(a=versions(small_components), b=versions(small_components))
    @settings(max_examples=100)
    def test_pair_form_ignores_patch(self, a, b):
        """The two-component form orders by (major, minor) only."""
        assert a.is_newer_than(b.major, b.minor) == (a.triple[:2] > b.triple[:2])
        assert a.is_older_than(b.major, b.minor) == (a.triple[:2] < b.triple[:2])

    @given(vs=st.lists(versions(small_components), max_size=10))
    @settings(max_examples=100)
    def test_sorted_is_non_decreasing(self, vs):
        """Sorting by version_key never leaves a newer version before an older one."""
        ordered = sorted(vs, key=version_key)
        for earlier, later in zip(ordered, ordered[1:]):
            assert not earlier.is_newer_than(later)
