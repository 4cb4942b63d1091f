"""
Resolución de años seleccionables por estación.
"""
from typing import List, Optional, Sequence

from config import DEFAULT_YEAR
from providers.types import Station


class YearResolver:
    def __init__(self, default_year: int = DEFAULT_YEAR):
        self.default_year = int(default_year)

    def options_for(self, station: Optional[Station]) -> List[int]:
        """
        Años de la estación en orden descendente.
        Sin años: [DEFAULT_YEAR], aunque luego pueda dar 404.
        """
        years = sorted(set(station.years), reverse=True) if station is not None else []
        if not years:
            return [self.default_year]
        return years

    def default_year_for(self, options: Sequence[int]) -> int:
        if self.default_year in options:
            return self.default_year
        return options[0] if options else self.default_year

    def resolve(self, station: Optional[Station], requested: Optional[int] = None) -> int:
        """Año pedido si es válido para la estación; si no, el año por defecto de esa estación."""
        options = self.options_for(station)
        if requested is not None:
            try:
                wanted = int(requested)
            except (TypeError, ValueError):
                wanted = None
            if wanted in options:
                return wanted
        return self.default_year_for(options)
