"""
Mapa de estaciones (pydeck) a partir de la lista filtrada.
"""
from typing import Dict, List, Optional, Sequence

import pydeck as pdk

from providers.types import Station
from utils.helpers import safe_upper

BRAZIL_CENTER = (-14.2, -55.9)
MAP_STYLE = "https://basemaps.cartocdn.com/gl/positron-gl-style/style.json"


def map_points(stations: Sequence[Station], selected_id: Optional[str] = None) -> List[Dict]:
    points = []
    for st in stations:
        if not st.has_coords:
            continue
        is_selected = st.id == selected_id
        points.append({
            "station_id": st.id,
            "name": safe_upper(st.name),
            "uf": st.uf,
            "lat": st.lat,
            "lon": st.lon,
            "years_txt": str(len(st.years)),
            "radius": 7000 if is_selected else 4000,
            "color": [220, 38, 38, 230] if is_selected else [37, 99, 235, 170],
        })
    return points


def build_deck(points: List[Dict], selected: Optional[Station] = None) -> pdk.Deck:
    if selected is not None and selected.has_coords:
        latitude, longitude, zoom = selected.lat, selected.lon, 7
    else:
        latitude, longitude = BRAZIL_CENTER
        zoom = 3.3

    layer = pdk.Layer(
        "ScatterplotLayer",
        id="stations-layer",
        data=points,
        pickable=True,
        auto_highlight=True,
        filled=True,
        stroked=True,
        get_position="[lon, lat]",
        get_fill_color="color",
        get_line_color=[16, 20, 28, 140],
        line_width_min_pixels=1,
        get_radius="radius",
        radius_min_pixels=3,
        radius_max_pixels=14,
    )

    return pdk.Deck(
        map_style=MAP_STYLE,
        initial_view_state=pdk.ViewState(latitude=latitude, longitude=longitude, zoom=zoom, pitch=0),
        layers=[layer],
        tooltip={
            "html": "<b>{name} ({uf})</b><br/>ID {station_id}<br/>anos: {years_txt}",
            "style": {"backgroundColor": "rgba(18, 18, 18, 0.92)", "color": "white", "fontSize": "12px"},
        },
    )


def selected_station_id(deck_event) -> Optional[str]:
    """Extrae el id de la estación clicada del evento de st.pydeck_chart."""
    selection_state = {}
    if hasattr(deck_event, "get"):
        selection_state = deck_event.get("selection", {}) or {}
    elif hasattr(deck_event, "selection"):
        selection_state = getattr(deck_event, "selection", {}) or {}

    objects = selection_state.get("objects", {}) if hasattr(selection_state, "get") else {}
    if not isinstance(objects, dict):
        return None
    picked = objects.get("stations-layer", [])
    if isinstance(picked, list) and picked and isinstance(picked[0], dict):
        station_id = picked[0].get("station_id")
        return str(station_id) if station_id else None
    return None


def map_key(generation: int) -> str:
    """Clave del widget: cambia con cada selección y así se vacía la selección persistida del mapa."""
    return f"climo_map_{generation}"


def station_to_select(deck_event, selected: Optional[Station] = None) -> Optional[str]:
    """Id clicado en el mapa si hay que seleccionarlo (None si ya es la estación activa)."""
    if deck_event is None:
        return None
    clicked_id = selected_station_id(deck_event)
    if clicked_id and (selected is None or clicked_id != selected.id):
        return clicked_id
    return None
