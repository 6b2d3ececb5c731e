"""Tests for derived metric calculation."""

import pytest
from pydantic import ValidationError

from super_trunfo.metrics import BILLION, compute_derived
from super_trunfo.models import CityProfile
from conftest import make_profile


def test_new_profile_has_no_derived_metrics():
    profile = CityProfile()
    assert profile.population_density is None
    assert profile.gdp_per_capita is None
    assert not profile.metrics_computed


def test_density_and_per_capita():
    profile = make_profile(population=1_000_000, area_km2=500.0, gdp_billions=10.0)
    derived = compute_derived(profile)

    assert derived.population_density == pytest.approx(2000.0)
    assert derived.gdp_per_capita == pytest.approx(10_000.0)
    assert profile.population_density == derived.population_density
    assert profile.gdp_per_capita == derived.gdp_per_capita
    assert profile.metrics_computed


def test_zero_area_gives_zero_density():
    profile = make_profile(area_km2=0.0)
    compute_derived(profile)
    assert profile.population_density == 0.0


def test_zero_population_gives_zero_per_capita():
    profile = make_profile(population=0, gdp_billions=50.0)
    compute_derived(profile)
    assert profile.gdp_per_capita == 0.0
    assert profile.population_density == 0.0


def test_empty_profile_is_all_zero():
    profile = CityProfile()
    assert tuple(compute_derived(profile)) == (0.0, 0.0)


def test_gdp_is_converted_from_billions():
    profile = make_profile(population=100_000, gdp_billions=5.0)
    compute_derived(profile)
    assert profile.gdp_per_capita == pytest.approx(5.0 * BILLION / 100_000)
    assert profile.gdp_per_capita == pytest.approx(50_000.0)


@pytest.mark.parametrize("field, value", [
    ("population", -1),
    ("area_km2", -0.5),
    ("gdp_billions", -10.0),
    ("tourist_points", -3),
    ("state_code", "Z"),
    ("card_code", "A0001"),
])
def test_invalid_raw_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        make_profile(**{field: value})


@pytest.mark.parametrize("field, value", [
    ("population", 10),
    ("area_km2", 1.0),
    ("gdp_billions", 2.0),
])
def test_changing_a_metric_input_clears_derived_values(field, value):
    profile = make_profile()
    compute_derived(profile)
    setattr(profile, field, value)
    assert profile.population_density is None
    assert profile.gdp_per_capita is None
    assert not profile.metrics_computed


def test_changing_other_fields_keeps_derived_values():
    profile = make_profile()
    compute_derived(profile)
    profile.city_name = "Renamed"
    profile.tourist_points = 99
    assert profile.population_density == pytest.approx(2000.0)
    assert profile.metrics_computed


@pytest.mark.parametrize("field, value", [
    ("population", -5),
    ("area_km2", -1.0),
    ("state_code", "Z"),
])
def test_assignments_are_validated(field, value):
    profile = make_profile()
    with pytest.raises(ValidationError):
        setattr(profile, field, value)


@pytest.mark.parametrize("field", ["area_km2", "gdp_billions"])
@pytest.mark.parametrize("value", [float("inf"), float("nan")])
def test_non_finite_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        make_profile(**{field: value})
