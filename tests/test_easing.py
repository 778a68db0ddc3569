"""Tests for easing functions."""

import math
import random

import pytest

from tweener.easing import (
    EASING_FAMILIES,
    Easing,
    back_in,
    bounce_in,
    bounce_out,
    circular_in,
    circular_in_out,
    circular_out,
    elastic_in,
    elastic_out,
    exponential_in,
    exponential_out,
    get_easing,
    get_random_easing,
    get_random_easing_family,
    get_random_easing_variant,
    linear,
    quadratic_in,
    quadratic_out,
    sinusoidal_in,
)

ALL_FUNCTIONS = [func for family in EASING_FAMILIES.values() for func in family.values()]


class TestLinearEasing:
    """Test the identity easing."""

    @pytest.mark.parametrize("k", [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0])
    def test_linear_is_identity(self, k):
        """Linear easing should return its input unchanged."""
        assert linear(k) == k

    def test_linear_family_has_single_variant(self):
        """The Linear family only exposes None."""
        assert EASING_FAMILIES["Linear"] == {"None": linear}


class TestEndpoints:
    """Every easing should start at 0 and finish at 1."""

    @pytest.mark.parametrize("family", [f for f in EASING_FAMILIES if f != "Linear"])
    def test_family_variants_hit_endpoints(self, family):
        """In, Out and InOut map 0 to 0 and 1 to 1 within tolerance."""
        variants = EASING_FAMILIES[family]
        assert set(variants) == {"In", "Out", "InOut"}
        for func in variants.values():
            assert func(0.0) == pytest.approx(0.0, abs=1e-9)
            assert func(1.0) == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("family", ["Exponential", "Elastic"])
    def test_exact_endpoints(self, family):
        """Exponential and Elastic endpoints are exact, not approximate."""
        for func in EASING_FAMILIES[family].values():
            assert func(0) == 0
            assert func(1) == 1

    def test_exponential_in_without_guard_would_not_be_zero(self):
        """1024^(0-1) is not zero, so the k=0 guard matters."""
        assert pow(1024, -1) != 0
        assert exponential_in(0) == 0
        assert exponential_out(1) == 1
        assert elastic_in(0) == 0
        assert elastic_out(1) == 1


class TestKnownValues:
    """Spot-check the classic formulas."""

    def test_quadratic(self):
        assert quadratic_in(0.5) == 0.25
        assert quadratic_out(0.5) == 0.75

    def test_sinusoidal_in(self):
        assert sinusoidal_in(0.5) == pytest.approx(0.2928932, abs=1e-6)

    def test_exponential_in_midpoint(self):
        """1024^(0.5 - 1) is 1/32."""
        assert exponential_in(0.5) == pytest.approx(0.03125)

    def test_bounce_out_second_segment(self):
        """0.5 falls in the second bounce segment."""
        assert bounce_out(0.5) == pytest.approx(0.765625)

    def test_bounce_in_mirrors_bounce_out(self):
        for k in (0.1, 0.3, 0.5, 0.8):
            assert bounce_in(k) == pytest.approx(1 - bounce_out(1 - k))

    def test_back_in_pulls_back_below_zero(self):
        """Back easing overshoots below the start before accelerating."""
        assert back_in(0.5) == pytest.approx(-0.0876975, abs=1e-6)

    def test_out_of_range_input_is_not_clamped(self):
        """Easing functions accept values slightly past 1."""
        assert quadratic_in(1.1) == pytest.approx(1.21)
        assert linear(-0.2) == -0.2
        assert math.isnan(circular_in(1.01))
        assert math.isnan(circular_out(-0.01))
        assert math.isnan(circular_in_out(1.6))


class TestGetEasing:
    """Test easing lookup by enum and name."""

    def test_every_enum_member_resolves(self):
        for member in Easing:
            assert get_easing(member) in ALL_FUNCTIONS

    def test_lookup_by_function_name(self):
        assert get_easing("quadratic_out") is quadratic_out

    def test_lookup_by_family_name(self):
        """Family-qualified names are accepted, case-insensitively."""
        assert get_easing("Quadratic.Out") is quadratic_out
        assert get_easing("bounce.in") is bounce_in
        assert get_easing("Linear.None") is linear

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown easing"):
            get_easing("wobbly")


class TestRandomEasing:
    """Test random easing selection."""

    def test_random_easing_is_a_known_function(self):
        rng = random.Random(7)
        for _ in range(50):
            assert get_random_easing(rng) in ALL_FUNCTIONS

    def test_random_family_is_a_known_family(self):
        family = get_random_easing_family(random.Random(3))
        assert family in EASING_FAMILIES.values()

    def test_random_variant_comes_from_family(self):
        family = EASING_FAMILIES["Cubic"]
        assert get_random_easing_variant(family, random.Random(1)) in family.values()

    def test_same_seed_same_pick(self):
        assert get_random_easing(random.Random(42)) is get_random_easing(random.Random(42))

    def test_default_generator(self):
        """Without an rng the module-level random generator is used."""
        assert get_random_easing() in ALL_FUNCTIONS
