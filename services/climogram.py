"""
Contrato del climograma: lo que la capa de presentación necesita para
dibujar barras de precipitación + línea de temperatura.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from config import MONTH_SHORT_PT
from providers.types import Dataset
from utils.helpers import is_finite_number


@dataclass(frozen=True)
class ReferenceLine:
    name: str
    value: float
    axis: str  # "precip" | "temp"


@dataclass(frozen=True)
class ChartSpec:
    categories: Tuple[str, ...]
    precip: Tuple[Optional[float], ...]
    temp: Tuple[Optional[float], ...]
    reference_lines: Tuple[ReferenceLine, ...]
    filename: str

    @property
    def is_empty(self) -> bool:
        return not self.categories


def chart_filename(dataset: Dataset) -> str:
    return f"climograma_{dataset.station}_{dataset.year}"


def _finite_or_none(value) -> Optional[float]:
    return float(value) if is_finite_number(value) else None


def build_chart(dataset: Dataset) -> ChartSpec:
    """Eje de meses en orden, series y líneas de media anual (solo si existen)."""
    categories = tuple(MONTH_SHORT_PT[rec.m - 1] for rec in dataset.months)
    precip = tuple(_finite_or_none(rec.p) for rec in dataset.months)
    temp = tuple(_finite_or_none(rec.tmean) for rec in dataset.months)

    lines: List[ReferenceLine] = []
    p_mean = _finite_or_none(dataset.annual.p_month_mean)
    if p_mean is not None:
        lines.append(ReferenceLine("Precipitação média mensal (ano)", p_mean, "precip"))
    t_mean = _finite_or_none(dataset.annual.tmean)
    if t_mean is not None:
        lines.append(ReferenceLine("Temp. média anual (°C)", t_mean, "temp"))

    return ChartSpec(
        categories=categories,
        precip=precip,
        temp=temp,
        reference_lines=tuple(lines),
        filename=chart_filename(dataset),
    )
