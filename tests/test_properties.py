# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering and constraint evaluation.

These tests verify that:
- Version text round-trips through parsing unchanged
- Missing segments compare as zero, and hashing agrees with equality
- Version comparison is a total order
- Hyphen ranges evaluate like their explicit >=/<= form
- Caret and tilde ranges match exactly the half-open interval they describe
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from nsemver import Version, parse_constraint_set, parse_version


# =============================================================================
# Strategies for generating test data
# =============================================================================

# Small segment values so that generated versions often collide
segment_values = st.integers(min_value=0, max_value=5)

release_parts = st.lists(segment_values, min_size=1, max_size=4).map(tuple)

# Numeric identifiers without leading zeros, or alphanumeric identifiers
prerelease_identifiers = st.one_of(
    st.integers(min_value=0, max_value=20).map(str),
    st.from_regex(r"[A-Za-z-][0-9A-Za-z-]{0,7}", fullmatch=True),
)

metadata_identifiers = st.from_regex(r"[0-9A-Za-z-]{1,8}", fullmatch=True)


@st.composite
def version_texts(draw):
    """Generate valid version text, optionally with a v prefix."""
    parts = draw(st.lists(st.integers(min_value=0, max_value=10**6), min_size=1, max_size=5))
    text = ".".join(str(part) for part in parts)
    if draw(st.booleans()):
        text += "-" + ".".join(draw(st.lists(prerelease_identifiers, min_size=1, max_size=3)))
    if draw(st.booleans()):
        text += "+" + ".".join(draw(st.lists(metadata_identifiers, min_size=1, max_size=3)))
    if draw(st.booleans()):
        text = "v" + text
    return text


@st.composite
def versions(draw):
    """Generate versions with small segments and occasional pre-releases."""
    parts = draw(release_parts)
    prerelease = ""
    if draw(st.booleans()):
        prerelease = ".".join(draw(st.lists(prerelease_identifiers, min_size=1, max_size=2)))
    return Version(parts, prerelease=prerelease)


release_versions = release_parts.map(Version)


# =============================================================================
# Parsing
# =============================================================================


class TestRoundTrip:
    """Version text survives parsing unchanged."""

    @given(text=version_texts())
    @settings(max_examples=200)
    def test_original_round_trip(self, text: str):
        """Parsing keeps the exact source text."""
        version = parse_version(text)
        assert version.original == text
        assert str(version) == text.removeprefix("v")

    @given(text=version_texts())
    def test_str_reparses_equal(self, text: str):
        """The string form parses to an equal version."""
        version = parse_version(text)
        assert parse_version(str(version)) == version


# =============================================================================
# Ordering
# =============================================================================


class TestOrdering:
    """Comparison is a total order consistent with hashing."""

    @given(parts=release_parts, padding=st.integers(min_value=1, max_value=3))
    def test_zero_padding(self, parts: tuple[int, ...], padding: int):
        """Trailing zero segments do not change a version."""
        short = Version(parts)
        padded = Version(parts + (0,) * padding)
        assert short.compare(padded) == 0
        assert hash(short) == hash(padded)

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_antisymmetry(self, a: Version, b: Version):
        """Swapping the operands negates the result."""
        assert a.compare(b) == -b.compare(a)

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_hash_agrees_with_equality(self, a: Version, b: Version):
        """Equal versions hash equal."""
        if a == b:
            assert hash(a) == hash(b)

    @given(a=versions(), b=versions(), c=versions())
    @settings(max_examples=200)
    def test_transitivity(self, a: Version, b: Version, c: Version):
        """Ordering is transitive."""
        low, mid, high = sorted([a, b, c])
        assert low <= mid <= high
        assert low <= high

    @given(parts=release_parts, prerelease=prerelease_identifiers)
    def test_release_above_prerelease(self, parts: tuple[int, ...], prerelease: str):
        """A release sorts above any pre-release of the same core."""
        assert Version(parts) > Version(parts, prerelease=prerelease)


# =============================================================================
# Constraints
# =============================================================================


class TestConstraintProperties:
    """Range operators match the intervals they describe."""

    @given(lower=release_versions, upper=release_versions, version=versions())
    @settings(max_examples=200)
    def test_hyphen_range_equivalence(self, lower: Version, upper: Version, version: Version):
        """A - B evaluates exactly like >=A, <=B."""
        ranged = parse_constraint_set(f"{lower} - {upper}")
        explicit = parse_constraint_set(f">={lower}, <={upper}")
        assert ranged.check(version) == explicit.check(version)

    @given(reference=release_versions, version=release_versions)
    @settings(max_examples=300)
    def test_caret_interval(self, reference: Version, version: Version):
        """^R holds for R <= V < R with its first non-zero segment bumped."""
        zeros = next((i for i, part in enumerate(reference.parts) if part), None)
        if zeros is None:
            return
        upper = reference.increment_part(zeros + 1)
        expected = reference <= version < upper
        assert parse_constraint_set(f"^{reference}").check(version) == expected

    @given(reference=release_versions, version=release_versions)
    @settings(max_examples=300)
    def test_tilde_interval(self, reference: Version, version: Version):
        """~R holds for R <= V < R with its second to last segment bumped."""
        constraint = parse_constraint_set(f"~{reference}")
        if reference.parts_count == 1:
            assert constraint.check(version) == (version >= reference)
            return
        upper = reference.increment_part(reference.parts_count - 1)
        assert constraint.check(version) == (reference <= version < upper)

    @given(prefix=release_parts, version=release_versions)
    @settings(max_examples=300)
    def test_wildcard_matches_prefix(self, prefix: tuple[int, ...], version: Version):
        """1.2.x holds exactly for versions starting with 1.2."""
        pattern = ".".join(str(part) for part in prefix) + ".x"
        expected = all(version.part(i) == part for i, part in enumerate(prefix, start=1))
        assert parse_constraint_set(pattern).check(version) == expected
        assert parse_constraint_set("!=" + pattern).check(version) == (not expected)

    @given(
        constraint=st.sampled_from([">1", "<3", ">=1.1", "<=2", "~1.2", "^1", "1.x", "*"]),
        version=versions(),
    )
    def test_release_only(self, constraint: str, version: Version):
        """Release-only comparators never match a pre-release."""
        if version.prerelease:
            assert parse_constraint_set(constraint).check(version) is False
