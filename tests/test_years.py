from providers.types import Station
from services.years import YearResolver


def _station(years):
    return Station(id="A1", name="X", uf="SP", years=tuple(years))


def test_options_are_station_years_descending():
    resolver = YearResolver(default_year=2024)
    assert resolver.options_for(_station([2019, 2023, 2021])) == [2023, 2021, 2019]


def test_empty_years_fall_back_to_default():
    resolver = YearResolver(default_year=2024)
    assert resolver.options_for(_station([])) == [2024]
    assert resolver.options_for(None) == [2024]


def test_default_year_prefers_configured_year():
    resolver = YearResolver(default_year=2024)
    assert resolver.default_year_for([2025, 2024, 2023]) == 2024
    assert resolver.default_year_for([2023, 2021]) == 2023


def test_default_is_recomputed_per_station():
    resolver = YearResolver(default_year=2024)
    assert resolver.resolve(_station([2024, 2023])) == 2024
    assert resolver.resolve(_station([2022, 2020])) == 2022


def test_stale_year_is_corrected():
    resolver = YearResolver(default_year=2024)
    station = _station([2021, 2020])

    assert resolver.resolve(station, 2020) == 2020
    assert resolver.resolve(station, "2021") == 2021
    assert resolver.resolve(station, 2024) == 2021
    assert resolver.resolve(station, "abc") == 2021
