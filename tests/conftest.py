import threading

import pytest

from api import StaticJsonError
from providers.types import Station
from services.catalog import StationCatalog


class FakeSource:
    """Fuente en memoria que cuenta descargas y permite retener una clave."""
    source_id = "fake"

    def __init__(self, stations=None, datasets=None, fail_stations=False):
        self.stations = stations if stations is not None else []
        self.datasets = dict(datasets or {})
        self.fail_stations = fail_stations
        self.calls = []
        self.gates = {}

    def stations_url(self):
        return "assets/stations.json"

    def dataset_url(self, station_id, year):
        return f"assets/data/{station_id}/{year}.json"

    def fetch_stations(self):
        if self.fail_stations:
            raise StaticJsonError("network", url=self.stations_url())
        return self.stations

    def hold(self, station_id, year) -> threading.Event:
        gate = threading.Event()
        self.gates[(station_id, int(year))] = gate
        return gate

    def fetch_dataset(self, station_id, year):
        key = (station_id, int(year))
        self.calls.append(key)
        gate = self.gates.get(key)
        if gate is not None:
            gate.wait(timeout=5)
        if key not in self.datasets:
            raise StaticJsonError("notfound", 404, url=self.dataset_url(station_id, year))
        return self.datasets[key]


def dataset_payload(station_id, year, months=None, annual=None):
    return {
        "station": station_id,
        "year": year,
        "annual": annual if annual is not None else {"tmean": 21.4, "p_month_mean": 110.0},
        "months": months if months is not None else [
            {"m": 1, "tmean": 24.0, "p": 210.0},
            {"m": 2, "tmean": 24.5, "p": 180.0},
        ],
    }


STATIONS_RAW = [
    {"id": "A701", "name": "São Paulo - Mirante", "uf": "SP", "lat": -23.4963, "lon": -46.6203, "alt": 785.0, "years": [2022, 2024, 2023]},
    {"id": "A001", "name": "Brasília", "uf": "DF", "lat": -15.789, "lon": -47.9258, "alt": 1160.0, "years": [2023, 2021]},
    {"id": "A101", "name": "Manaus", "uf": "AM", "lat": -3.1035, "lon": -60.0158, "alt": 61.0, "years": []},
    {"id": "A652", "name": "Rio de Janeiro - Forte de Copacabana", "uf": "RJ", "lat": None, "lon": None, "alt": None, "years": [2024]},
    {"id": "A711", "name": "São Carlos", "uf": "SP", "lat": -21.98, "lon": -47.88, "alt": 859.0, "years": [2024]},
]


@pytest.fixture
def stations_raw():
    return [dict(item) for item in STATIONS_RAW]


@pytest.fixture
def catalog(stations_raw):
    return StationCatalog.from_stations(Station.from_dict(raw) for raw in stations_raw)


@pytest.fixture
def make_source():
    return FakeSource


@pytest.fixture
def payload():
    return dataset_payload
