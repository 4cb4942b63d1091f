"""
Filtro/búsqueda de estaciones.

Búsqueda por substring sobre "id nombre UF" en minúsculas. No pliega acentos
salvo que se active SEARCH_FOLD_ACCENTS ("sao" no encuentra "SÃO" por defecto).
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from config import MAP_MAX_POINTS, MAX_RESULTS, MIN_QUERY, SEARCH_FOLD_ACCENTS
from providers.types import Station
from utils.helpers import fold_accents, normalize_text_input
from .catalog import StationCatalog, sort_canonical

HINT_TYPE_MORE = "type_more"
HINT_REFINE = "refine"
HINT_NO_RESULTS = "no_results"


@dataclass(frozen=True)
class SearchResult:
    query: str
    stations: Tuple[Station, ...]
    total_matches: int
    omitted: int = 0
    hint: Optional[str] = None

    @property
    def truncated(self) -> bool:
        return self.omitted > 0


class SearchIndex:
    def __init__(
        self,
        catalog: StationCatalog,
        min_query: int = MIN_QUERY,
        max_results: Optional[int] = MAX_RESULTS,
        fold_accents: bool = SEARCH_FOLD_ACCENTS,
        map_max_points: int = MAP_MAX_POINTS,
    ):
        self.catalog = catalog
        self.min_query = max(0, int(min_query))
        self.max_results = max_results
        self.fold_accents = fold_accents
        self.map_max_points = map_max_points

    def normalize(self, query) -> str:
        text = normalize_text_input(query).strip()
        if self.fold_accents:
            return fold_accents(text)
        return text.lower()

    def _haystack(self, station: Station) -> str:
        text = f"{station.id} {station.name} {station.uf}"
        if self.fold_accents:
            return fold_accents(text)
        return text.lower()

    def apply(self, query, stations: Optional[Iterable[Station]] = None) -> SearchResult:
        """
        Filtra el catálogo (o `stations`, subconjunto previo) por `query`.

        Por debajo de `min_query` devuelve lista vacía con pista "type_more":
        nunca el catálogo completo. Sin throttling (`min_query=0`) la búsqueda
        vacía equivale a "Mostrar todas" y no se recorta a `max_results`.
        """
        q = self.normalize(query)
        if not q and self.min_query == 0 and stations is None:
            return self.show_all()
        if len(q) < self.min_query:
            return SearchResult(query=q, stations=(), total_matches=0, hint=HINT_TYPE_MORE)

        pool = self.catalog.stations if stations is None else stations
        matches = sort_canonical(st for st in pool if q in self._haystack(st))
        total = len(matches)

        if total == 0:
            return SearchResult(query=q, stations=(), total_matches=0, hint=HINT_NO_RESULTS)

        if self.max_results is not None and total > self.max_results:
            kept = matches[: self.max_results]
            return SearchResult(
                query=q,
                stations=tuple(kept),
                total_matches=total,
                omitted=total - len(kept),
                hint=HINT_REFINE,
            )
        return SearchResult(query=q, stations=tuple(matches), total_matches=total)

    def show_all(self) -> SearchResult:
        """Catálogo completo en orden canónico, sin límite y con la búsqueda vacía."""
        stations = self.catalog.stations
        return SearchResult(query="", stations=tuple(stations), total_matches=len(stations))

    def map_points(self, stations: Sequence[Station]) -> Tuple[Station, ...]:
        """Estaciones con coordenadas, limitadas a `map_max_points`."""
        with_coords = [st for st in stations if st.has_coords]
        return tuple(with_coords[: self.map_max_points])
