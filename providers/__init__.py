"""
Capa de acceso a las fuentes de datos climáticos.
"""
from .types import AnnualSummary, Dataset, MonthlyRecord, Station
from .http_provider import HttpDataSource
from .local_provider import LocalDirectoryDataSource
from .registry import get_source, get_sources

__all__ = [
    "AnnualSummary",
    "Dataset",
    "MonthlyRecord",
    "Station",
    "HttpDataSource",
    "LocalDirectoryDataSource",
    "get_source",
    "get_sources",
]
