"""
Tipos de dominio: estaciones y datasets climáticos mensuales.

Los objetos se construyen una vez a partir del JSON y no se mutan después.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from utils.helpers import normalize_text_input, safe_float


def _safe_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class Station:
    """Estación meteorológica del catálogo."""
    id: str
    name: str
    uf: str
    lat: Optional[float] = None
    lon: Optional[float] = None
    alt: Optional[float] = None
    years: Tuple[int, ...] = ()

    @property
    def has_coords(self) -> bool:
        return self.lat is not None and self.lon is not None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Station":
        if not isinstance(raw, dict):
            raise ValueError(f"estación inválida: {raw!r}")
        station_id = normalize_text_input(raw.get("id")).strip()
        if not station_id:
            raise ValueError("estación sin id")

        years = []
        raw_years = raw.get("years")
        if isinstance(raw_years, (list, tuple)):
            for value in raw_years:
                year = _safe_int(value)
                if year is not None and year not in years:
                    years.append(year)

        return cls(
            id=station_id,
            name=normalize_text_input(raw.get("name")).strip(),
            uf=normalize_text_input(raw.get("uf")).strip().upper(),
            lat=safe_float(raw.get("lat")),
            lon=safe_float(raw.get("lon")),
            alt=safe_float(raw.get("alt")),
            years=tuple(years),
        )


@dataclass(frozen=True)
class MonthlyRecord:
    m: int
    tmean: Optional[float] = None
    p: Optional[float] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> Optional["MonthlyRecord"]:
        """Devuelve None si el mes no es un entero 1..12"""
        if not isinstance(raw, dict):
            return None
        month = _safe_int(raw.get("m"))
        if month is None or not 1 <= month <= 12:
            return None
        return cls(m=month, tmean=safe_float(raw.get("tmean")), p=safe_float(raw.get("p")))


ANNUAL_FIELDS = ("tmin", "tmean", "tmax", "p_total", "p_month_min", "p_month_mean", "p_month_max", "coverage")


@dataclass(frozen=True)
class AnnualSummary:
    """Agregados anuales precalculados aguas arriba (°C, mm, cobertura 0..1)."""
    tmin: Optional[float] = None
    tmean: Optional[float] = None
    tmax: Optional[float] = None
    p_total: Optional[float] = None
    p_month_min: Optional[float] = None
    p_month_mean: Optional[float] = None
    p_month_max: Optional[float] = None
    coverage: Optional[float] = None

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "AnnualSummary":
        if not isinstance(raw, dict):
            return cls()
        values = {name: safe_float(raw.get(name)) for name in ANNUAL_FIELDS}
        coverage = values["coverage"]
        if coverage is not None and not 0.0 <= coverage <= 1.0:
            values["coverage"] = None
        return cls(**values)


@dataclass(frozen=True)
class Dataset:
    station: str
    year: int
    annual: AnnualSummary = field(default_factory=AnnualSummary)
    months: Tuple[MonthlyRecord, ...] = ()

    @property
    def key(self) -> str:
        return f"{self.station}:{self.year}"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], station_id: str = "", year: Optional[int] = None) -> "Dataset":
        """
        Construye el dataset desde el JSON publicado.

        `station_id` y `year` (los de la petición) rellenan el payload si no los trae.
        """
        if not isinstance(raw, dict):
            raise ValueError("dataset no es un objeto JSON")

        station = normalize_text_input(raw.get("station")).strip() or normalize_text_input(station_id)
        parsed_year = _safe_int(raw.get("year"))
        if parsed_year is None:
            parsed_year = year
        if not station or parsed_year is None:
            raise ValueError("dataset sin estación o año")

        raw_months = raw.get("months")
        months = []
        if isinstance(raw_months, list):
            for item in raw_months:
                record = MonthlyRecord.from_dict(item)
                if record is not None:
                    months.append(record)
        months.sort(key=lambda rec: rec.m)

        return cls(
            station=station,
            year=parsed_year,
            annual=AnnualSummary.from_dict(raw.get("annual")),
            months=tuple(months),
        )
