"""
Módulo de servicios: catálogo, búsqueda, años, carga de datasets e insights
"""
from .errors import (
    ClimogramError,
    CatalogUnavailable,
    DatasetNotFound,
    InvalidSelection,
)
from .catalog import StationCatalog, canonical_key, sort_canonical
from .search import SearchIndex, SearchResult
from .years import YearResolver
from .datasets import DatasetCache, DatasetLoader, cache_key
from .insights import Insights, MonthExtreme, SummaryCard, summarize, build_extremes_table
from .climogram import ChartSpec, ReferenceLine, build_chart
from .export import build_csv, csv_filename
from .session import SessionController, ViewState, Selection

__all__ = [
    'ClimogramError',
    'CatalogUnavailable',
    'DatasetNotFound',
    'InvalidSelection',
    'StationCatalog',
    'canonical_key',
    'sort_canonical',
    'SearchIndex',
    'SearchResult',
    'YearResolver',
    'DatasetCache',
    'DatasetLoader',
    'cache_key',
    'Insights',
    'MonthExtreme',
    'SummaryCard',
    'summarize',
    'build_extremes_table',
    'ChartSpec',
    'ReferenceLine',
    'build_chart',
    'build_csv',
    'csv_filename',
    'SessionController',
    'ViewState',
    'Selection',
]
