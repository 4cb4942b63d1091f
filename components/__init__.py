"""
Módulo de componentes visuales
"""
from .cards import card, summary_cards, section_title, render_grid
from .climogram_chart import build_figure, chart_config
from .station_map import map_points, build_deck, map_key, selected_station_id, station_to_select

__all__ = [
    'card',
    'summary_cards',
    'section_title',
    'render_grid',
    'build_figure',
    'chart_config',
    'map_points',
    'build_deck',
    'map_key',
    'selected_station_id',
    'station_to_select',
]
