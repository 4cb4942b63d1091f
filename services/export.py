"""
Exportación CSV del dataset cargado.
"""
import pandas as pd

from providers.types import Dataset
from utils.helpers import is_finite_number, plain_number

CSV_COLUMNS = ["station", "year", "month", "tmean_c", "precip_mm"]


def _csv_number(value) -> str:
    """Número tal cual (25.3, 120); ausente → campo vacío, nunca 'nan' ni 'None'"""
    if not is_finite_number(value):
        return ""
    return plain_number(value)


def build_csv_table(dataset: Dataset) -> pd.DataFrame:
    rows = [
        {
            "station": dataset.station,
            "year": str(dataset.year),
            "month": str(rec.m),
            "tmean_c": _csv_number(rec.tmean),
            "precip_mm": _csv_number(rec.p),
        }
        for rec in dataset.months
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS, dtype=str)


def build_csv(dataset: Dataset) -> str:
    """Cabecera + una fila por mes, separadas por '\\n' y sin salto final."""
    csv_text = build_csv_table(dataset).to_csv(index=False, lineterminator="\n")
    return csv_text.rstrip("\n")


def csv_filename(dataset: Dataset) -> str:
    return f"climograma_{dataset.station}_{dataset.year}.csv"
