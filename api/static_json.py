"""
Cliente HTTP para los JSON estáticos (catálogo de estaciones y datasets anuales).

Se desactiva explícitamente la caché HTTP: la única fuente de verdad para
accesos repetidos es la caché de la aplicación (services.datasets).
"""
import logging
from typing import Any, Optional

import requests

from config import HTTP_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

NO_STORE_HEADERS = {
    "Cache-Control": "no-cache, no-store, max-age=0",
    "Pragma": "no-cache",
    "Accept": "application/json",
}


class StaticJsonError(Exception):
    def __init__(self, kind: str, status_code: Optional[int] = None, url: str = ""):
        self.kind = kind
        self.status_code = status_code
        self.url = url
        super().__init__(f"{kind} ({status_code})" if status_code else kind)


def join_url(base: str, *parts) -> str:
    """Une base y segmentos con una sola '/' entre ellos"""
    pieces = [str(base).rstrip("/")] if base else []
    pieces.extend(str(part).strip("/") for part in parts if str(part).strip("/"))
    return "/".join(pieces)


def fetch_json(url: str, timeout: float = HTTP_TIMEOUT_SECONDS, session: Optional[requests.Session] = None) -> Any:
    """
    Descarga y decodifica un recurso JSON.

    Raises:
        StaticJsonError: timeout, red, estado HTTP no-2xx o JSON inválido
    """
    getter = session.get if session is not None else requests.get
    logger.info(f"GET {url}")

    try:
        r = getter(url, headers=NO_STORE_HEADERS, timeout=timeout)
    except requests.Timeout:
        raise StaticJsonError("timeout", url=url)
    except requests.RequestException:
        raise StaticJsonError("network", url=url)

    if r.status_code == 404:
        raise StaticJsonError("notfound", 404, url=url)
    if r.status_code >= 400 or r.status_code < 200:
        raise StaticJsonError("http", r.status_code, url=url)

    try:
        return r.json()
    except ValueError:
        raise StaticJsonError("badjson", r.status_code, url=url)
