"""
Estadísticas de resumen e insights narrativos de un dataset anual.

Nada se recalcula del resumen anual (viene agregado aguas arriba): solo se
formatea. Los extremos mensuales se derivan de la serie de meses.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Tuple

import numpy as np
import pandas as pd

from config import MISSING_PLACEHOLDER, MONTH_NAMES_PT, MONTH_SHORT_PT
from providers.types import Dataset
from utils.helpers import fmt


@dataclass(frozen=True)
class SummaryCard:
    key: str
    label: str
    value: str
    unit: str = ""


@dataclass(frozen=True)
class MonthExtreme:
    month: int
    value: float

    @property
    def name(self) -> str:
        return MONTH_NAMES_PT[self.month - 1]

    @property
    def short(self) -> str:
        return MONTH_SHORT_PT[self.month - 1]


@dataclass(frozen=True)
class Insights:
    station: str
    year: int
    cards: Tuple[SummaryCard, ...]
    wettest: Optional[MonthExtreme] = None
    driest: Optional[MonthExtreme] = None
    hottest: Optional[MonthExtreme] = None
    coolest: Optional[MonthExtreme] = None
    amplitude: Optional[float] = None
    narrative: Tuple[str, ...] = ()

    @property
    def extremes(self) -> Dict[str, MonthExtreme]:
        """Solo los extremos definidos."""
        found = {
            "wettest": self.wettest,
            "driest": self.driest,
            "hottest": self.hottest,
            "coolest": self.coolest,
        }
        return {name: value for name, value in found.items() if value is not None}


# (clave, etiqueta, unidad)
CARD_DEFINITIONS = [
    ("tmin", "T mín (ano)", "°C"),
    ("tmean", "T méd (ano)", "°C"),
    ("tmax", "T máx (ano)", "°C"),
    ("p_total", "Chuva total", "mm"),
    ("p_month_min", "Chuva mín (mês)", "mm"),
    ("p_month_mean", "Chuva méd (mês)", "mm"),
    ("p_month_max", "Chuva máx (mês)", "mm"),
]


def _months_frame(dataset: Dataset) -> pd.DataFrame:
    rows = [{"m": rec.m, "tmean": rec.tmean, "p": rec.p} for rec in dataset.months]
    return pd.DataFrame(rows, columns=["m", "tmean", "p"])


def _extract_extreme(frame: pd.DataFrame, metric: str, mode: Literal["max", "min"]) -> Optional[MonthExtreme]:
    if frame.empty:
        return None
    series = pd.to_numeric(frame[metric], errors="coerce").replace([np.inf, -np.inf], np.nan)
    valid = series.dropna()
    if valid.empty:
        return None
    # idxmax/idxmin devuelven la primera aparición: empate → primer mes
    index = valid.idxmax() if mode == "max" else valid.idxmin()
    return MonthExtreme(month=int(frame.loc[index, "m"]), value=float(valid.loc[index]))


def _build_cards(dataset: Dataset) -> Tuple[SummaryCard, ...]:
    annual = dataset.annual
    cards = [SummaryCard(key, label, fmt(getattr(annual, key), 1), unit) for key, label, unit in CARD_DEFINITIONS]
    coverage = annual.coverage
    coverage_txt = fmt(coverage * 100.0, 0) if coverage is not None else MISSING_PLACEHOLDER
    cards.append(SummaryCard("coverage", "Cobertura", coverage_txt, "%"))
    return tuple(cards)


def _narrative(
    wettest: Optional[MonthExtreme],
    driest: Optional[MonthExtreme],
    hottest: Optional[MonthExtreme],
    coolest: Optional[MonthExtreme],
    amplitude: Optional[float],
) -> Tuple[str, ...]:
    lines: List[str] = []
    if wettest is not None:
        lines.append(f"Mês mais chuvoso: {wettest.name} ({fmt(wettest.value)} mm).")
    if driest is not None:
        lines.append(f"Mês mais seco: {driest.name} ({fmt(driest.value)} mm).")
    if amplitude is not None:
        lines.append(f"Amplitude sazonal da chuva: {fmt(amplitude)} mm.")
    if hottest is not None:
        lines.append(f"Mês mais quente: {hottest.name} ({fmt(hottest.value)} °C).")
    if coolest is not None:
        lines.append(f"Mês mais ameno: {coolest.name} ({fmt(coolest.value)} °C).")
    return tuple(lines)


def summarize(dataset: Dataset) -> Insights:
    """Resumen e insights de un dataset. Función pura; meses vacíos → sin extremos."""
    frame = _months_frame(dataset)

    wettest = _extract_extreme(frame, "p", "max")
    driest = _extract_extreme(frame, "p", "min")
    hottest = _extract_extreme(frame, "tmean", "max")
    coolest = _extract_extreme(frame, "tmean", "min")

    amplitude = None
    if wettest is not None and driest is not None:
        amplitude = wettest.value - driest.value

    return Insights(
        station=dataset.station,
        year=dataset.year,
        cards=_build_cards(dataset),
        wettest=wettest,
        driest=driest,
        hottest=hottest,
        coolest=coolest,
        amplitude=amplitude,
        narrative=_narrative(wettest, driest, hottest, coolest, amplitude),
    )


EXTREME_TITLES = [
    ("wettest", "Mês mais chuvoso", "mm"),
    ("driest", "Mês mais seco", "mm"),
    ("hottest", "Mês mais quente", "°C"),
    ("coolest", "Mês mais ameno", "°C"),
]


def build_extremes_table(insights: Insights) -> pd.DataFrame:
    """Tabla Métrica/Valor/Mês con los extremos definidos y la amplitud."""
    rows = []
    found = insights.extremes
    for name, title, unit in EXTREME_TITLES:
        extreme = found.get(name)
        if extreme is None:
            continue
        rows.append({"Métrica": title, "Valor": f"{fmt(extreme.value)} {unit}", "Mês": extreme.name})
    if insights.amplitude is not None:
        rows.append({"Métrica": "Amplitude sazonal (chuva)", "Valor": f"{fmt(insights.amplitude)} mm", "Mês": MISSING_PLACEHOLDER})
    return pd.DataFrame(rows, columns=["Métrica", "Valor", "Mês"])
