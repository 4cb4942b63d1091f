"""
Errores del dominio de climogramas.
"""
from typing import Optional


class ClimogramError(Exception):
    """Base de los errores de la aplicación."""


class CatalogUnavailable(ClimogramError):
    """Sin catálogo de estaciones la interfaz no puede funcionar (fatal)."""

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"No se pudo cargar el catálogo de estaciones ({url}){detail}")


class DatasetNotFound(ClimogramError):
    """No hay dataset publicado (o no es legible) para estación/año. Recuperable."""

    def __init__(self, station_id: str, year: int, url: str, reason: Optional[str] = None):
        self.station_id = station_id
        self.year = year
        self.url = url
        self.reason = reason
        super().__init__(f"Sin datos para {station_id}/{year} ({url})")


class InvalidSelection(ClimogramError):
    """Estación desconocida o año fuera del conjunto de la estación."""

    def __init__(self, station_id: Optional[str] = None, year: Optional[int] = None):
        self.station_id = station_id
        self.year = year
        super().__init__(f"Selección inválida: estación={station_id!r} año={year!r}")
