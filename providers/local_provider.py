"""
Fuente local: misma estructura de carpetas servida desde disco
(útil para desarrollo con el repositorio de datos clonado).
"""
import json
from pathlib import Path
from typing import Any

from config import DATASET_DIR, DATASET_EXT, LOCAL_DATA_ROOT, STATIONS_PATH


class LocalDirectoryDataSource:
    source_id = "local"

    def __init__(
        self,
        root: str = LOCAL_DATA_ROOT,
        stations_path: str = STATIONS_PATH,
        dataset_dir: str = DATASET_DIR,
        dataset_ext: str = DATASET_EXT,
    ):
        self.root = Path(root)
        self.stations_path = stations_path
        self.dataset_dir = dataset_dir
        self.dataset_ext = dataset_ext

    def stations_url(self) -> str:
        return str(self.root / self.stations_path)

    def dataset_url(self, station_id: str, year: int) -> str:
        return str(self.root / self.dataset_dir / str(station_id) / f"{year}.{self.dataset_ext}")

    def _read(self, path: str) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def fetch_stations(self) -> Any:
        return self._read(self.stations_url())

    def fetch_dataset(self, station_id: str, year: int) -> Any:
        return self._read(self.dataset_url(station_id, year))
