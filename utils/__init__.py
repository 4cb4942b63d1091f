"""
Módulo de utilidades
"""
from .helpers import (
    html_clean,
    is_nan,
    safe_float,
    is_finite_number,
    normalize_text_input,
    fold_accents,
    fmt,
    plain_number,
    nice_coord,
    safe_upper,
)

__all__ = [
    'html_clean',
    'is_nan',
    'safe_float',
    'is_finite_number',
    'normalize_text_input',
    'fold_accents',
    'fmt',
    'plain_number',
    'nice_coord',
    'safe_upper',
]
