import asyncio
import math

import pytest

from providers.types import Station
from services.catalog import StationCatalog
from services.datasets import DatasetLoader
from services.errors import CatalogUnavailable
from services.search import HINT_TYPE_MORE, SearchIndex
from services.session import (
    STATUS_IDLE,
    STATUS_LOADING,
    STATUS_NOT_FOUND,
    STATUS_READY,
    SessionController,
    search_caption,
    station_meta,
    station_title,
)
from services.years import YearResolver


@pytest.fixture
def source(make_source, stations_raw, payload):
    return make_source(
        stations=stations_raw,
        datasets={
            ("A701", 2024): payload("A701", 2024),
            ("A701", 2023): payload("A701", 2023),
            ("A001", 2023): payload("A001", 2023),
            ("A711", 2024): payload("A711", 2024),
        },
    )


@pytest.fixture
def controller(source):
    return SessionController.bootstrap(source, resolver=YearResolver(default_year=2024))


def test_initial_state_is_idle_and_throttled(controller):
    view = controller.view

    assert view.status == STATUS_IDLE
    assert view.selection.station is None
    assert view.search.hint == HINT_TYPE_MORE
    assert view.year_options == (2024,)


def test_bootstrap_propagates_catalog_failure(make_source):
    with pytest.raises(CatalogUnavailable):
        SessionController.bootstrap(make_source(fail_stations=True))


def test_select_station_loads_default_year(controller):
    view = asyncio.run(controller.on_station_selected("A701"))

    assert view.status == STATUS_READY
    assert view.selection.year == 2024
    assert view.year_options == (2024, 2023, 2022)
    assert view.dataset.station == "A701"
    assert view.insights.wettest.month == 1
    assert view.chart.categories == ("Jan", "Fev")


def test_station_without_default_year_uses_most_recent(controller):
    view = asyncio.run(controller.on_station_selected("A001"))
    assert view.selection.year == 2023
    assert view.status == STATUS_READY


def test_unknown_station_is_a_noop(controller):
    before = controller.view
    assert asyncio.run(controller.on_station_selected("ZZZZ")) is before


def test_year_change_without_station_is_a_noop(controller):
    before = controller.view
    assert asyncio.run(controller.on_year_changed(2023)) is before


def test_invalid_year_is_corrected(controller):
    asyncio.run(controller.on_station_selected("A001"))
    view = asyncio.run(controller.on_year_changed(2024))
    assert view.selection.year == 2023


def test_missing_dataset_is_reported_and_retried(controller, source, payload):
    view = asyncio.run(controller.on_station_selected("A101"))

    assert view.status == STATUS_NOT_FOUND
    assert view.missing_url == "assets/data/A101/2024.json"
    assert "assets/data/A101/2024.json" in view.message
    assert view.dataset is None

    source.datasets[("A101", 2024)] = payload("A101", 2024)
    view = asyncio.run(controller.retry())

    assert view.status == STATUS_READY
    assert source.calls.count(("A101", 2024)) == 2


def test_query_keeps_selected_station(controller):
    asyncio.run(controller.on_station_selected("A701"))
    view = controller.on_query_changed("manaus")

    assert [s.id for s in view.search.stations] == ["A101"]
    assert view.selection.query == "manaus"
    assert view.selection.station.id == "A701"
    assert view.status == STATUS_READY


def test_show_all_clears_query(controller):
    controller.on_query_changed("manaus")
    view = controller.on_show_all()

    assert view.selection.query == ""
    assert len(view.search.stations) == 5


def test_listeners_receive_loading_then_ready(controller):
    statuses = []
    unsubscribe = controller.subscribe(lambda view: statuses.append(view.status))

    asyncio.run(controller.on_station_selected("A701"))
    unsubscribe()
    controller.on_query_changed("xx")

    assert statuses == [STATUS_LOADING, STATUS_READY]


def test_stale_response_does_not_clobber_newer_selection(controller, source):
    gate = source.hold("A701", 2024)

    async def scenario():
        slow = asyncio.create_task(controller.on_station_selected("A701"))
        await asyncio.sleep(0)
        fast = await controller.on_station_selected("A711")
        gate.set()
        stale = await slow
        return fast, stale

    fast, stale = asyncio.run(scenario())

    assert fast.dataset.station == "A711"
    assert stale is controller.view
    assert controller.view.selection.station.id == "A711"
    assert controller.view.dataset.station == "A711"
    # La respuesta descartada sí queda en caché para una vuelta posterior
    assert controller.context.loader.is_cached("A701", 2024)


def test_stale_not_found_is_discarded(controller, source):
    gate = source.hold("A101", 2024)

    async def scenario():
        slow = asyncio.create_task(controller.on_station_selected("A101"))
        await asyncio.sleep(0)
        await controller.on_station_selected("A711")
        gate.set()
        return await slow

    asyncio.run(scenario())

    assert controller.view.status == STATUS_READY
    assert controller.view.selection.station.id == "A711"


def test_station_labels(catalog):
    station = catalog.find_by_id("A701")

    assert station_title(station) == "SÃO PAULO - MIRANTE (SP)"
    assert station_meta(station) == "ID A701 • -23.4963, -46.6203 • alt: 785 m"
    assert station_title(None) == "Selecione uma estação"


def test_controller_can_be_built_from_parts(catalog, make_source):
    controller = SessionController(catalog, DatasetLoader(make_source()))
    assert isinstance(controller.context.catalog, StationCatalog)
    assert controller.context.generation == 0


def test_station_meta_hides_non_finite_altitude():
    for alt in (math.inf, -math.inf, math.nan, None):
        station = Station(id="X1", name="Teste", uf="GO", lat=-16.0, lon=-49.0, alt=alt)
        assert station_meta(station) == "ID X1 • -16, -49 • alt: — m"


def test_search_caption_uses_configured_threshold(catalog):
    short = SearchIndex(catalog, min_query=3).apply("sp")
    assert search_caption(short, 3) == "Digite pelo menos 3 caracteres ou use “Mostrar todas”."
    assert search_caption(SearchIndex(catalog).apply("x"), 2).startswith("Digite pelo menos 2 ")
    assert search_caption(SearchIndex(catalog).apply("zzz")) == "Nenhuma estação encontrada."
    assert search_caption(SearchIndex(catalog).apply("sp")) == "2 estações"
