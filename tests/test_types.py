import pytest

from providers.types import AnnualSummary, Dataset, MonthlyRecord, Station


def test_station_from_dict_normalizes_fields():
    station = Station.from_dict({"id": 1234, "name": " Recife ", "uf": "pe", "lat": "-8.05", "lon": None, "years": [2024, "2023", 2024, "x"]})

    assert station.id == "1234"
    assert station.name == "Recife"
    assert station.uf == "PE"
    assert station.lat == pytest.approx(-8.05)
    assert station.lon is None
    assert station.alt is None
    assert station.years == (2024, 2023)
    assert not station.has_coords


def test_station_without_id_is_rejected():
    with pytest.raises(ValueError):
        Station.from_dict({"name": "Sem id", "uf": "SP"})


def test_station_is_immutable():
    station = Station.from_dict({"id": "A1", "name": "X", "uf": "SP"})
    with pytest.raises(Exception):
        station.name = "Y"


def test_monthly_record_drops_invalid_months_and_keeps_unknowns():
    assert MonthlyRecord.from_dict({"m": 13, "p": 1.0}) is None
    assert MonthlyRecord.from_dict({"m": "abc"}) is None

    record = MonthlyRecord.from_dict({"m": 3, "tmean": None, "p": float("nan")})
    assert record == MonthlyRecord(m=3, tmean=None, p=None)


def test_annual_summary_tolerates_missing_and_bad_coverage():
    annual = AnnualSummary.from_dict({"tmin": 12.1, "p_total": None, "coverage": 1.7})
    assert annual.tmin == 12.1
    assert annual.p_total is None
    assert annual.coverage is None

    assert AnnualSummary.from_dict(None) == AnnualSummary()


def test_dataset_from_dict_sorts_sparse_months():
    dataset = Dataset.from_dict(
        {"station": "A001", "year": 2024, "annual": {}, "months": [{"m": 5, "p": 1.0}, {"m": 2, "p": 3.0}]}
    )
    assert [rec.m for rec in dataset.months] == [2, 5]
    assert dataset.key == "A001:2024"


def test_dataset_falls_back_to_requested_key():
    dataset = Dataset.from_dict({"months": []}, station_id="A002", year=2020)
    assert (dataset.station, dataset.year) == ("A002", 2020)


def test_dataset_rejects_non_object():
    with pytest.raises(ValueError):
        Dataset.from_dict(["not", "a", "dict"], station_id="A1", year=2024)
