from providers.types import AnnualSummary, Dataset, MonthlyRecord
from components.cards import card, summary_cards
from components.climogram_chart import build_figure, chart_config
from components.station_map import MAP_STYLE, build_deck, map_key, map_points, selected_station_id, station_to_select
from services.climogram import build_chart
from services.insights import summarize


def _dataset():
    return Dataset(
        station="A001",
        year=2024,
        annual=AnnualSummary(tmean=22.0, p_month_mean=100.0),
        months=(MonthlyRecord(1, 25.0, 200.0), MonthlyRecord(2, 24.0, 150.0)),
    )


def test_figure_has_bars_line_and_reference_lines():
    chart = build_chart(_dataset())
    fig = build_figure(chart)

    types = [trace.type for trace in fig.data]
    assert types == ["bar", "scatter", "scatter", "scatter"]
    assert list(fig.data[0].x) == ["Jan", "Fev"]
    assert fig.data[2].yaxis == "y2"
    assert chart_config(chart)["toImageButtonOptions"]["filename"] == "climograma_A001_2024"


def test_cards_escape_and_show_units():
    html = card("T <méd>", "21.0", "°C")
    assert "T &lt;méd&gt;" in html
    assert "<span class='unit'>°C</span>" in html
    assert len(summary_cards(summarize(_dataset()).cards)) == 8


def test_map_points_mark_selected(catalog):
    points = map_points(catalog.stations, selected_id="A001")

    assert "A652" not in [p["station_id"] for p in points]
    radius = {p["station_id"]: p["radius"] for p in points}
    assert radius["A001"] > radius["A101"]


def test_selected_station_id_from_event():
    event = {"selection": {"objects": {"stations-layer": [{"station_id": "A701"}]}}}
    assert selected_station_id(event) == "A701"
    assert selected_station_id({"selection": {}}) is None


def test_map_key_changes_with_each_selection():
    assert map_key(0) == "climo_map_0"
    assert map_key(3) != map_key(4)


def test_station_to_select_ignores_active_station(catalog):
    event = {"selection": {"objects": {"stations-layer": [{"station_id": "A701"}]}}}

    assert station_to_select(event, None) == "A701"
    assert station_to_select(event, catalog.find_by_id("A001")) == "A701"
    assert station_to_select(event, catalog.find_by_id("A701")) is None
    assert station_to_select(None, None) is None
    assert station_to_select({"selection": {}}, None) is None


def test_reselecting_previous_station_from_map(catalog):
    # A → B → A: el clic de vuelta a A vale aunque ya se hubiera clicado antes
    a, b = catalog.find_by_id("A701"), catalog.find_by_id("A001")
    click_a = {"selection": {"objects": {"stations-layer": [{"station_id": "A701"}]}}}

    assert station_to_select(click_a, None) == "A701"
    assert station_to_select(click_a, b) == "A701"
    assert station_to_select(click_a, a) is None


def test_deck_uses_light_basemap(catalog):
    deck = build_deck(map_points(catalog.stations), catalog.find_by_id("A001"))
    assert deck.map_style == MAP_STYLE
    assert "positron" in MAP_STYLE
