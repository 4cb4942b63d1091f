from providers.types import AnnualSummary, Dataset, MonthlyRecord
from services.climogram import build_chart
from services.export import build_csv, csv_filename


def test_csv_single_month():
    dataset = Dataset(station="A001", year=2024, months=(MonthlyRecord(1, tmean=25.3, p=120.5),))

    assert build_csv(dataset) == "station,year,month,tmean_c,precip_mm\nA001,2024,1,25.3,120.5"
    assert csv_filename(dataset) == "climograma_A001_2024.csv"


def test_csv_missing_values_are_empty_fields():
    dataset = Dataset(
        station="A001",
        year=2024,
        months=(MonthlyRecord(1, tmean=None, p=120.0), MonthlyRecord(2, tmean=24.1, p=None)),
    )
    lines = build_csv(dataset).split("\n")

    assert lines[1] == "A001,2024,1,,120"
    assert lines[2] == "A001,2024,2,24.1,"
    assert "nan" not in build_csv(dataset).lower()


def test_csv_without_months_is_header_only():
    assert build_csv(Dataset(station="A001", year=2024)) == "station,year,month,tmean_c,precip_mm"


def test_chart_contract_follows_month_records():
    dataset = Dataset(
        station="A001",
        year=2024,
        annual=AnnualSummary(tmean=22.0, p_month_mean=None),
        months=(MonthlyRecord(1, 25.0, 200.0), MonthlyRecord(3, None, 150.0)),
    )
    chart = build_chart(dataset)

    assert chart.categories == ("Jan", "Mar")
    assert chart.precip == (200.0, 150.0)
    assert chart.temp == (25.0, None)
    assert [(line.axis, line.value) for line in chart.reference_lines] == [("temp", 22.0)]
    assert chart.filename == "climograma_A001_2024"
    assert not chart.is_empty
