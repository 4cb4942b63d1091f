"""
Catálogo de estaciones: carga única al arrancar, orden canónico (UF, nombre)
e índice por id.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from providers.base import ClimateDataSource
from providers.types import Station
from utils.helpers import fold_accents
from .errors import CatalogUnavailable

logger = logging.getLogger(__name__)


def canonical_key(station: Station) -> Tuple[str, str, str, str, str]:
    """
    Clave de orden canónico: UF y nombre sin distinguir mayúsculas ni acentos.
    Los valores crudos y el id desempatan para que el orden sea determinista.
    """
    return (fold_accents(station.uf), fold_accents(station.name), station.uf, station.name, station.id)


def sort_canonical(stations: Iterable[Station]) -> List[Station]:
    return sorted(stations, key=canonical_key)


class StationCatalog:
    def __init__(self, source: ClimateDataSource):
        self.source = source
        self._stations: Tuple[Station, ...] = ()
        self._by_id: Dict[str, Station] = {}

    @classmethod
    def from_stations(cls, stations: Iterable[Station], source: Optional[ClimateDataSource] = None) -> "StationCatalog":
        """Construye un catálogo ya cargado (pruebas, datos en memoria)."""
        catalog = cls(source)
        catalog._index(stations)
        return catalog

    def load(self) -> "StationCatalog":
        """
        Descarga y ordena el catálogo.

        Raises:
            CatalogUnavailable: fallo de transporte, JSON inválido o ninguna estación válida
        """
        url = self.source.stations_url()
        try:
            payload = self.source.fetch_stations()
        except Exception as e:
            logger.error(f"Catálogo no disponible en {url}: {e}")
            raise CatalogUnavailable(url, str(e)) from e

        if not isinstance(payload, list):
            raise CatalogUnavailable(url, "el catálogo no es una lista JSON")

        stations = []
        for raw in payload:
            try:
                stations.append(Station.from_dict(raw))
            except ValueError as e:
                logger.warning(f"Estación ignorada en {url}: {e}")

        if not stations:
            raise CatalogUnavailable(url, "el catálogo no tiene estaciones válidas")

        self._index(stations)
        logger.info(f"Catálogo cargado: {len(self._stations)} estaciones")
        return self

    def _index(self, stations: Iterable[Station]) -> None:
        ordered = sort_canonical(stations)
        self._stations = tuple(ordered)
        self._by_id = {}
        for station in ordered:
            # Id duplicado: gana el primero en orden canónico
            self._by_id.setdefault(station.id, station)

    @property
    def stations(self) -> Tuple[Station, ...]:
        return self._stations

    def find_by_id(self, station_id) -> Optional[Station]:
        if station_id is None:
            return None
        return self._by_id.get(str(station_id))

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[Station]:
        return iter(self._stations)
