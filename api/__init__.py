"""
Módulo API
"""
from .static_json import (
    StaticJsonError,
    fetch_json,
    join_url,
)

__all__ = [
    'StaticJsonError',
    'fetch_json',
    'join_url',
]
