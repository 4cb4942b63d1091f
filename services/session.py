"""
Controlador de sesión: estado de selección + despacho de comandos.

Toda la sesión vive en un SessionContext explícito (catálogo, filtro,
selección, vista y contador de generación). Cada carga se etiqueta con la
generación vigente al iniciarse; si al terminar la generación ya cambió
(el usuario eligió otra estación/año), el resultado se descarta.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple

from config import MIN_QUERY, MISSING_PLACEHOLDER
from providers.base import ClimateDataSource
from providers.registry import get_source
from providers.types import Dataset, Station
from utils.helpers import is_finite_number, nice_coord, plain_number, safe_upper
from .catalog import StationCatalog
from .climogram import ChartSpec, build_chart
from .datasets import DatasetLoader
from .errors import DatasetNotFound, InvalidSelection
from .insights import Insights, summarize
from .search import HINT_NO_RESULTS, HINT_TYPE_MORE, SearchIndex, SearchResult
from .years import YearResolver

logger = logging.getLogger(__name__)

STATUS_IDLE = "idle"
STATUS_LOADING = "loading"
STATUS_READY = "ready"
STATUS_NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Selection:
    station: Optional[Station] = None
    year: Optional[int] = None
    query: str = ""


@dataclass(frozen=True)
class ViewState:
    selection: Selection
    search: SearchResult
    year_options: Tuple[int, ...]
    status: str = STATUS_IDLE
    dataset: Optional[Dataset] = None
    insights: Optional[Insights] = None
    chart: Optional[ChartSpec] = None
    message: str = ""
    missing_url: Optional[str] = None
    generation: int = 0


@dataclass
class SessionContext:
    catalog: StationCatalog
    search_index: SearchIndex
    resolver: YearResolver
    loader: DatasetLoader
    view: Optional[ViewState] = None
    generation: int = 0
    listeners: List[Callable[[ViewState], None]] = field(default_factory=list)


def station_title(station: Optional[Station]) -> str:
    if station is None:
        return "Selecione uma estação"
    return f"{safe_upper(station.name)} ({station.uf})"


def station_meta(station: Optional[Station]) -> str:
    if station is None:
        return MISSING_PLACEHOLDER
    alt = plain_number(station.alt) if is_finite_number(station.alt) else MISSING_PLACEHOLDER
    return f"ID {station.id} • {nice_coord(station.lat)}, {nice_coord(station.lon)} • alt: {alt} m"


def station_list_meta(station: Station) -> str:
    return f"ID {station.id} • {nice_coord(station.lat)}, {nice_coord(station.lon)} • anos: {len(station.years)}"


def search_caption(result: SearchResult, min_query: int = MIN_QUERY) -> str:
    """Leyenda bajo el buscador según la pista del resultado."""
    if result.hint == HINT_TYPE_MORE:
        return f"Digite pelo menos {min_query} caracteres ou use “Mostrar todas”."
    if result.hint == HINT_NO_RESULTS:
        return "Nenhuma estação encontrada."
    return f"{result.total_matches} estações"


def not_found_message(error: DatasetNotFound) -> str:
    return (
        f"Não encontrei dados para esta estação/ano ({error.station_id}/{error.year}). "
        f"Verifique se existe: {error.url}"
    )


class SessionController:
    def __init__(
        self,
        catalog: StationCatalog,
        loader: DatasetLoader,
        search_index: Optional[SearchIndex] = None,
        resolver: Optional[YearResolver] = None,
    ):
        self.context = SessionContext(
            catalog=catalog,
            search_index=search_index if search_index is not None else SearchIndex(catalog),
            resolver=resolver if resolver is not None else YearResolver(),
            loader=loader,
        )
        ctx = self.context
        self.context.view = ViewState(
            selection=Selection(year=ctx.resolver.default_year),
            search=ctx.search_index.apply(""),
            year_options=tuple(ctx.resolver.options_for(None)),
        )

    @classmethod
    def bootstrap(cls, source: Optional[ClimateDataSource] = None, **kwargs) -> "SessionController":
        """
        Carga el catálogo y arma el controlador.

        Raises:
            CatalogUnavailable: sin catálogo no hay sesión posible
        """
        source = source if source is not None else get_source()
        catalog = StationCatalog(source).load()
        return cls(catalog, DatasetLoader(source), **kwargs)

    # ------------------------------------------------------------------
    # Estado y suscripción
    # ------------------------------------------------------------------
    @property
    def view(self) -> ViewState:
        return self.context.view

    @property
    def selection(self) -> Selection:
        return self.context.view.selection

    def subscribe(self, listener: Callable[[ViewState], None]) -> Callable[[], None]:
        self.context.listeners.append(listener)

        def unsubscribe():
            if listener in self.context.listeners:
                self.context.listeners.remove(listener)

        return unsubscribe

    def _publish(self, view: ViewState) -> ViewState:
        self.context.view = view
        for listener in list(self.context.listeners):
            listener(view)
        return view

    # ------------------------------------------------------------------
    # Comandos
    # ------------------------------------------------------------------
    def on_query_changed(self, query) -> ViewState:
        """Refiltra la lista; la estación seleccionada se mantiene aunque quede fuera."""
        result = self.context.search_index.apply(query)
        view = self.context.view
        return self._publish(replace(view, search=result, selection=replace(view.selection, query=result.query)))

    def on_show_all(self) -> ViewState:
        result = self.context.search_index.show_all()
        view = self.context.view
        return self._publish(replace(view, search=result, selection=replace(view.selection, query="")))

    async def on_station_selected(self, station_id) -> ViewState:
        """Id desconocido: no-op. El año por defecto se recalcula para cada estación."""
        try:
            station = self._require_station(station_id)
        except InvalidSelection as e:
            logger.debug(f"Selección ignorada: {e}")
            return self.context.view
        year = self.context.resolver.resolve(station, None)
        return await self._select(station, year)

    async def on_year_changed(self, year) -> ViewState:
        """Sin estación: no-op. Año fuera de las opciones: se corrige al año por defecto."""
        station = self.context.view.selection.station
        if station is None:
            return self.context.view
        resolved = self.context.resolver.resolve(station, year)
        if str(resolved) != str(year):
            logger.debug(f"Año {year!r} no válido para {station.id}, usando {resolved}")
        return await self._select(station, resolved)

    async def retry(self) -> ViewState:
        """Reintenta la selección actual (los fallos nunca quedan en caché)."""
        selection = self.context.view.selection
        if selection.station is None:
            return self.context.view
        year = self.context.resolver.resolve(selection.station, selection.year)
        return await self._select(selection.station, year)

    def _require_station(self, station_id) -> Station:
        station = self.context.catalog.find_by_id(station_id)
        if station is None:
            raise InvalidSelection(station_id=station_id)
        return station

    # ------------------------------------------------------------------
    # Carga con descarte de respuestas obsoletas
    # ------------------------------------------------------------------
    async def _select(self, station: Station, year: int) -> ViewState:
        ctx = self.context
        ctx.generation += 1
        generation = ctx.generation

        view = ctx.view
        self._publish(
            replace(
                view,
                selection=replace(view.selection, station=station, year=year),
                year_options=tuple(ctx.resolver.options_for(station)),
                status=STATUS_LOADING,
                dataset=None,
                insights=None,
                chart=None,
                message="",
                missing_url=None,
                generation=generation,
            )
        )

        try:
            dataset = await ctx.loader.load(station.id, year)
        except DatasetNotFound as e:
            if generation != ctx.generation:
                logger.info(f"Descartado 404 obsoleto de {station.id}/{year} (gen {generation})")
                return ctx.view
            return self._publish(
                replace(ctx.view, status=STATUS_NOT_FOUND, message=not_found_message(e), missing_url=e.url)
            )

        if generation != ctx.generation:
            logger.warning(f"Descartada respuesta obsoleta de {station.id}/{year} (gen {generation} != {ctx.generation})")
            return ctx.view

        return self._publish(
            replace(
                ctx.view,
                status=STATUS_READY,
                dataset=dataset,
                insights=summarize(dataset),
                chart=build_chart(dataset),
            )
        )
