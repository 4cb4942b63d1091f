"""
Climogramas do Brasil - Panel de climogramas por estación (INMET)
Aplicación principal
"""
import streamlit as st
st.set_page_config(
    page_title="Climogramas do Brasil",
    layout="wide",
    initial_sidebar_state="expanded",
)
import asyncio
import inspect
import logging
from typing import Optional

from providers import get_source
from services import (
    CatalogUnavailable,
    DatasetLoader,
    SessionController,
    StationCatalog,
    build_csv,
    build_extremes_table,
    csv_filename,
)
from services.search import HINT_REFINE
from services.session import (
    STATUS_LOADING,
    STATUS_NOT_FOUND,
    STATUS_READY,
    search_caption,
    station_list_meta,
    station_meta,
    station_title,
)
from components import (
    build_deck,
    build_figure,
    chart_config,
    map_points,
    render_grid,
    map_key,
    section_title,
    station_to_select,
    summary_cards,
)
from utils.helpers import safe_upper

# Configurar logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

LIST_KEY = "climo_station_btn"


def _plotly_chart_stretch(fig, key: str, config: Optional[dict] = None):
    """Renderiza Plotly con compatibilidad entre APIs antiguas/nuevas de Streamlit."""
    cfg = config if isinstance(config, dict) else {}
    params = inspect.signature(st.plotly_chart).parameters
    if "width" in params:
        st.plotly_chart(fig, width="stretch", key=key, config=cfg)
    else:
        st.plotly_chart(fig, use_container_width=True, key=key, config=cfg)


def _pydeck_chart_stretch(deck, key: str, height: int = 520):
    """Renderiza pydeck de forma compatible entre versiones de Streamlit."""
    params = inspect.signature(st.pydeck_chart).parameters
    kwargs = {"height": int(height), "key": key}
    if "on_select" in params:
        kwargs["on_select"] = "rerun"
    if "selection_mode" in params:
        kwargs["selection_mode"] = "single-object"

    if "use_container_width" in params:
        return st.pydeck_chart(deck, use_container_width=True, **kwargs)
    return st.pydeck_chart(deck, **kwargs)


@st.cache_resource(show_spinner="Carregando estações...")
def _load_catalog() -> StationCatalog:
    # Catálogo inmutable: compartido entre sesiones
    return StationCatalog(get_source()).load()


def _controller() -> SessionController:
    controller = st.session_state.get("climo_controller")
    if controller is None:
        controller = SessionController(_load_catalog(), DatasetLoader(get_source()))
        st.session_state["climo_controller"] = controller
    return controller


# ============================================================
# CALLBACKS
# ============================================================

def _on_query_changed():
    _controller().on_query_changed(st.session_state.get("climo_query", ""))


def _on_show_all():
    st.session_state["climo_query"] = ""
    _controller().on_show_all()


def _on_station_clicked(station_id: str):
    asyncio.run(_controller().on_station_selected(station_id))


def _on_year_changed(widget_key: str):
    asyncio.run(_controller().on_year_changed(st.session_state.get(widget_key)))


def _on_retry():
    asyncio.run(_controller().retry())


# ============================================================
# BOOTSTRAP
# ============================================================

try:
    controller = _controller()
except CatalogUnavailable as e:
    logger.error(str(e))
    st.error(f"Não foi possível carregar a lista de estações ({e.url}).")
    st.stop()

view = controller.view
selected = view.selection.station

# ============================================================
# PANEL IZQUIERDO: BÚSQUEDA Y LISTA
# ============================================================

with st.sidebar:
    st.markdown("### Estações")
    st.text_input(
        "Buscar por nome, UF ou ID",
        key="climo_query",
        on_change=_on_query_changed,
        placeholder="ex.: BRASILIA, SP, A001",
    )
    st.button("Mostrar todas", on_click=_on_show_all)

    result = view.search
    st.caption(search_caption(result, controller.context.search_index.min_query))
    if result.hint == HINT_REFINE:
        st.info(f"Mostrando {len(result.stations)}; refine a busca ({result.omitted} ocultas).")

    for st_item in result.stations:
        label = f"{safe_upper(st_item.name)} ({st_item.uf})"
        st.button(
            label,
            key=f"{LIST_KEY}_{st_item.id}",
            help=station_list_meta(st_item),
            on_click=_on_station_clicked,
            args=(st_item.id,),
            type="primary" if selected is not None and selected.id == st_item.id else "secondary",
        )

# ============================================================
# MAPA
# ============================================================

points = map_points(
    controller.context.search_index.map_points(view.search.stations),
    selected_id=selected.id if selected is not None else None,
)
deck_event = None
try:
    deck_event = _pydeck_chart_stretch(build_deck(points, selected), key=map_key(view.generation))
except Exception as map_err:
    st.warning(f"Não foi possível renderizar o mapa ({map_err}).")

clicked_id = station_to_select(deck_event, selected)
if clicked_id:
    asyncio.run(controller.on_station_selected(clicked_id))
    st.rerun()

# ============================================================
# PANEL DERECHO: CLIMOGRAMA
# ============================================================

st.markdown(f"## {station_title(selected)}")
st.caption(station_meta(selected))

if selected is not None:
    options = list(view.year_options)
    index = options.index(view.selection.year) if view.selection.year in options else 0
    # Clave por generación: el widget se recrea con el año que resolvió el controlador
    year_key = f"climo_year_{selected.id}_{view.generation}"
    st.selectbox(
        "Ano",
        options,
        index=index,
        key=year_key,
        on_change=_on_year_changed,
        args=(year_key,),
    )

if view.status == STATUS_LOADING:
    st.info("Carregando dados...")
elif view.status == STATUS_NOT_FOUND:
    st.error(view.message)
    st.button("Tentar novamente", on_click=_on_retry)
elif view.status == STATUS_READY and view.dataset is not None:
    section_title("Resumo anual")
    render_grid(summary_cards(view.insights.cards), cols=4)

    _plotly_chart_stretch(
        build_figure(view.chart),
        key=f"climo_chart_{view.dataset.station}_{view.dataset.year}",
        config=chart_config(view.chart),
    )

    if view.insights.narrative:
        section_title("Destaques")
        for line in view.insights.narrative:
            st.markdown(f"- {line}")
        st.dataframe(build_extremes_table(view.insights), hide_index=True)

    st.download_button(
        "Exportar CSV",
        data=build_csv(view.dataset),
        file_name=csv_filename(view.dataset),
        mime="text/csv",
    )
else:
    st.info("Selecione uma estação na lista ou no mapa para ver o climograma.")
