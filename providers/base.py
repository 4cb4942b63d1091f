"""
Contrato base para fuentes de datos climáticos estáticos.
"""
from typing import Any, Protocol


class ClimateDataSource(Protocol):
    """Interfaz común: catálogo de estaciones y dataset por (estación, año)."""
    source_id: str

    def stations_url(self) -> str:
        """Ruta/URL del catálogo (para mensajes de error)."""
        ...

    def dataset_url(self, station_id: str, year: int) -> str:
        """Ruta/URL determinista del dataset `{base}/{station}/{year}.{ext}`."""
        ...

    def fetch_stations(self) -> Any:
        """Devuelve el JSON crudo del catálogo. Lanza excepción si falla."""
        ...

    def fetch_dataset(self, station_id: str, year: int) -> Any:
        """Devuelve el JSON crudo del dataset. Lanza excepción si falla."""
        ...
