"""
Fuente HTTP: JSON estáticos publicados (GitHub Pages, CDN, etc.).
"""
from typing import Any, Optional

import requests

from api import fetch_json, join_url
from config import DATA_BASE_URL, DATASET_DIR, DATASET_EXT, HTTP_TIMEOUT_SECONDS, STATIONS_PATH


class HttpDataSource:
    source_id = "http"

    def __init__(
        self,
        base_url: str = DATA_BASE_URL,
        stations_path: str = STATIONS_PATH,
        dataset_dir: str = DATASET_DIR,
        dataset_ext: str = DATASET_EXT,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.stations_path = stations_path
        self.dataset_dir = dataset_dir
        self.dataset_ext = dataset_ext
        self.timeout = timeout
        self.session = session

    def stations_url(self) -> str:
        return join_url(self.base_url, self.stations_path)

    def dataset_url(self, station_id: str, year: int) -> str:
        return join_url(self.base_url, self.dataset_dir, station_id, f"{year}.{self.dataset_ext}")

    def fetch_stations(self) -> Any:
        return fetch_json(self.stations_url(), timeout=self.timeout, session=self.session)

    def fetch_dataset(self, station_id: str, year: int) -> Any:
        return fetch_json(self.dataset_url(station_id, year), timeout=self.timeout, session=self.session)
