"""
Configuración global de Climogramas do Brasil
"""

# ============================================================
# ORIGEN DE DATOS
# ============================================================
DATA_SOURCE = "http"  # "http" | "local"
DATA_BASE_URL = "https://climogramas.github.io"
LOCAL_DATA_ROOT = "."  # Raíz usada por DATA_SOURCE = "local"
STATIONS_PATH = "assets/stations.json"
DATASET_DIR = "assets/data"
DATASET_EXT = "json"
HTTP_TIMEOUT_SECONDS = 15

# ============================================================
# AÑOS
# ============================================================
DEFAULT_YEAR = 2024  # Año preferido si la estación lo tiene

# ============================================================
# BÚSQUEDA Y MAPA
# ============================================================
MIN_QUERY = 2  # Longitud mínima de búsqueda (0 = sin throttling)
MAX_RESULTS = 60  # Máximo de estaciones en la lista filtrada
MAP_MAX_POINTS = 600  # Máximo de marcadores en el mapa
SEARCH_FOLD_ACCENTS = False  # Búsqueda por substring simple, sin plegar acentos

# ============================================================
# CACHE DE DATASETS
# ============================================================
DATASET_CACHE_TTL_SECONDS = None  # Sin caducidad: un año cerrado no cambia
DATASET_CACHE_NEGATIVE = False  # Nunca cachear 404: se reintenta siempre

# ============================================================
# PRESENTACIÓN
# ============================================================
MISSING_PLACEHOLDER = "—"
MONTH_SHORT_PT = ["Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"]
MONTH_NAMES_PT = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]
