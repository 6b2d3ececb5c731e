"""Shared fixtures for the Super Trunfo test suite."""

import pytest

from super_trunfo.models import CityProfile


def make_profile(**overrides) -> CityProfile:
    """Build a city card with sensible raw values, overridable per test."""
    fields = dict(
        state_code="A",
        card_code="A01",
        city_name="Alpha",
        population=1_000_000,
        area_km2=500.0,
        gdp_billions=10.0,
        tourist_points=20,
    )
    fields.update(overrides)
    return CityProfile(**fields)


@pytest.fixture
def profile_factory():
    return make_profile
