from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

TMDB_BEARER_TOKEN = os.getenv("TMDB_BEARER_TOKEN")
TMDB_API_KEY      = os.getenv("TMDB_API_KEY")
TMDB_BASE_URL     = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
TMDB_IMAGE_BASE   = os.getenv("TMDB_IMAGE_BASE", "https://image.tmdb.org/t/p")

# Network
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "20"))

# File / folder paths
DATABASE_PATH = Path(os.getenv("DATABASE_PATH", BASE_DIR / "movie_feed.sqlite"))
LOG_PATH      = Path(os.getenv("LOG_PATH", BASE_DIR / "movie_feed_debug.log"))

# Pagination / search behaviour
BATCH_SIZE          = int(os.getenv("BATCH_SIZE", "2"))
LOOKAHEAD_THRESHOLD = int(os.getenv("LOOKAHEAD_THRESHOLD", "5"))
SEARCH_MIN_CHARS    = int(os.getenv("SEARCH_MIN_CHARS", "3"))
SEARCH_DEBOUNCE_MS  = int(os.getenv("SEARCH_DEBOUNCE_MS", "500"))

# UI constants
ACCENT_COLOR = "#3b82f6"
FAVORITE_COLOR = "#f1c40f"
