"""
Componentes de tarjetas y grillas para el resumen anual
"""
from html import escape
from typing import Iterable

import streamlit as st

from services.insights import SummaryCard
from utils.helpers import html_clean


CARD_HELP = {
    "tmin": "Temperatura mínima do ano (agregado publicado pelo INMET).",
    "tmean": "Temperatura média anual.",
    "tmax": "Temperatura máxima do ano.",
    "p_total": "Precipitação acumulada no ano.",
    "p_month_min": "Precipitação do mês mais seco.",
    "p_month_mean": "Média mensal da precipitação no ano.",
    "p_month_max": "Precipitação do mês mais chuvoso.",
    "coverage": "Fração de dias com observação válida no ano.",
}

CARD_CSS = """
<style>
.grid { display:grid; gap:0.6rem; }
.grid-4 { grid-template-columns: repeat(4, minmax(0, 1fr)); }
.card { border:1px solid rgba(15,23,42,0.10); border-radius:12px; padding:0.6rem 0.8rem; }
.card .k { font-size:0.78rem; color:#64748b; font-weight:700; }
.card .v { font-size:1.25rem; font-weight:800; }
.card .v .unit { font-size:0.8rem; font-weight:600; margin-left:0.2rem; color:#475569; }
@media (max-width: 900px) { .grid-4 { grid-template-columns: repeat(2, minmax(0, 1fr)); } }
</style>
"""


def card(title: str, value: str, unit: str = "", help_text: str = "") -> str:
    """
    Genera HTML de una tarjeta de dato.
    """
    unit_html = f"<span class='unit'>{escape(unit)}</span>" if unit else ""
    title_attr = f" title=\"{escape(help_text)}\"" if help_text else ""
    return html_clean(
        f"""
  <div class="card"{title_attr}>
    <div class="k">{escape(title)}</div>
    <div class="v">{escape(value)}{unit_html}</div>
  </div>
"""
    )


def summary_cards(cards: Iterable[SummaryCard]) -> list:
    return [card(c.label, c.value, c.unit, CARD_HELP.get(c.key, "")) for c in cards]


def section_title(text: str):
    """
    Renderiza un titulo de seccion.
    """
    st.markdown(f"<div class='section-title'>{escape(text)}</div>", unsafe_allow_html=True)


def render_grid(cards: list, cols: int = 4, extra_class: str = ""):
    """
    Renderiza una grilla de tarjetas.
    """
    cards_html = "".join(cards)
    html = f"{CARD_CSS}<div class='grid grid-{cols} {extra_class}'>{cards_html}</div>"
    st.markdown(html, unsafe_allow_html=True)
