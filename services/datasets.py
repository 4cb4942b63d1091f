"""
Carga de datasets (estación, año) con caché de sesión.

Política de caché (explícita, configurable en config.py):
- sin TTL ni expulsión: un año cerrado no cambia;
- nunca se cachean fallos: el siguiente intento vuelve a la red;
- peticiones concurrentes de la misma clave comparten una sola descarga.
"""
import asyncio
import logging
from typing import Dict, List, Optional

from config import DATASET_CACHE_NEGATIVE, DATASET_CACHE_TTL_SECONDS
from providers.base import ClimateDataSource
from providers.types import Dataset
from .errors import DatasetNotFound

logger = logging.getLogger(__name__)

KEY_SEPARATOR = ":"


def cache_key(station_id, year) -> str:
    """`{stationId}:{year}`; los ids de estación no contienen ':'"""
    return f"{station_id}{KEY_SEPARATOR}{int(year)}"


class DatasetCache:
    """Almacén clave → Dataset, solo de inserción."""

    def __init__(
        self,
        ttl_seconds: Optional[float] = DATASET_CACHE_TTL_SECONDS,
        cache_negative: bool = DATASET_CACHE_NEGATIVE,
    ):
        if ttl_seconds is not None or cache_negative:
            raise ValueError("DatasetCache solo admite ttl_seconds=None y cache_negative=False")
        self.ttl_seconds = ttl_seconds
        self.cache_negative = cache_negative
        self._entries: Dict[str, Dataset] = {}

    def get(self, key: str) -> Optional[Dataset]:
        return self._entries.get(key)

    def put(self, key: str, dataset: Dataset) -> Dataset:
        """Guarda si la clave es nueva; devuelve siempre el valor vigente de la clave."""
        return self._entries.setdefault(key, dataset)

    def keys(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class DatasetLoader:
    def __init__(self, source: ClimateDataSource, cache: Optional[DatasetCache] = None):
        self.source = source
        self.cache = cache if cache is not None else DatasetCache()
        self._in_flight: Dict[str, asyncio.Task] = {}

    def url_for(self, station_id: str, year: int) -> str:
        return self.source.dataset_url(station_id, int(year))

    def is_cached(self, station_id: str, year: int) -> bool:
        return cache_key(station_id, year) in self.cache

    def in_flight(self) -> List[str]:
        return list(self._in_flight)

    async def load(self, station_id: str, year: int) -> Dataset:
        """
        Resuelve (estación, año) a Dataset.

        Raises:
            DatasetNotFound: red, HTTP no-2xx o JSON inválido. No se cachea.
        """
        station_id = str(station_id)
        year = int(year)
        key = cache_key(station_id, year)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit {key}")
            return cached

        task = self._in_flight.get(key)
        if task is None:
            logger.info(f"Cache miss {key}, descargando")
            task = asyncio.ensure_future(self._fetch_and_store(station_id, year, key))
            self._in_flight[key] = task
            task.add_done_callback(lambda t, k=key: self._forget(k, t))
        else:
            logger.debug(f"Descarga en curso para {key}, esperando")

        # shield: cancelar a un llamante no cancela la descarga compartida
        return await asyncio.shield(task)

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]

    async def _fetch_and_store(self, station_id: str, year: int, key: str) -> Dataset:
        url = self.url_for(station_id, year)
        try:
            raw = await asyncio.to_thread(self.source.fetch_dataset, station_id, year)
            dataset = Dataset.from_dict(raw, station_id=station_id, year=year)
        except Exception as e:
            logger.warning(f"Sin datos para {key} ({url}): {e}")
            raise DatasetNotFound(station_id, year, url, reason=str(e)) from e
        return self.cache.put(key, dataset)
