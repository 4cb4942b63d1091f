"""
Registro de fuentes de datos.
"""
from typing import Dict, Optional

from config import DATA_SOURCE
from .base import ClimateDataSource
from .http_provider import HttpDataSource
from .local_provider import LocalDirectoryDataSource


def get_sources() -> Dict[str, ClimateDataSource]:
    """Devuelve las fuentes disponibles con su configuración por defecto."""
    sources = [HttpDataSource(), LocalDirectoryDataSource()]
    return {s.source_id: s for s in sources}


def get_source(source_id: Optional[str] = None) -> ClimateDataSource:
    """Fuente configurada en config.DATA_SOURCE (o la indicada)."""
    wanted = (source_id or DATA_SOURCE).strip().lower()
    sources = get_sources()
    if wanted not in sources:
        raise ValueError(f"Fuente de datos desconocida: {wanted!r}")
    return sources[wanted]
