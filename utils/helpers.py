"""
Funciones auxiliares generales
"""
import math
import textwrap
import unicodedata

from config import MISSING_PLACEHOLDER


def html_clean(s: str) -> str:
    """Limpia y dedenta HTML"""
    return textwrap.dedent(s).strip()


def is_nan(x):
    """Verifica si un valor es NaN (None cuenta como NaN)"""
    if x is None:
        return True
    return x != x


def safe_float(val, default=None):
    """Convierte a float; None, NaN o texto no numérico devuelven `default`"""
    if val is None or isinstance(val, bool):
        return default
    try:
        number = float(val)
    except (ValueError, TypeError):
        return default
    if is_nan(number):
        return default
    return number


def is_finite_number(x) -> bool:
    if x is None or isinstance(x, bool):
        return False
    try:
        return math.isfinite(float(x))
    except (TypeError, ValueError):
        return False


def normalize_text_input(value) -> str:
    """Normaliza entrada de texto a string"""
    if value is None:
        return ""
    return str(value)


def fold_accents(text: str) -> str:
    """Quita diacríticos (NFKD) y pasa a minúsculas con casefold"""
    normalized = unicodedata.normalize("NFKD", normalize_text_input(text))
    normalized = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    return normalized.casefold()


def fmt(x, decimals=1):
    """Formatea un número; ausente o NaN devuelve el placeholder, nunca '0' ni 'nan'"""
    if not is_finite_number(x):
        return MISSING_PLACEHOLDER
    return f"{float(x):.{decimals}f}"


def plain_number(x) -> str:
    """Número sin ceros de relleno (785.0 → '785', 25.3 → '25.3')"""
    number = float(x)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def nice_coord(x) -> str:
    """Coordenada redondeada a 4 decimales"""
    if not is_finite_number(x):
        return MISSING_PLACEHOLDER
    return plain_number(round(float(x), 4))


def safe_upper(s) -> str:
    return normalize_text_input(s).upper()
