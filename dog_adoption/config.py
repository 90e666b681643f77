# /dog_adoption/config.py

import logging
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

# --- Bundled Assets ---
# The dogs document ships inside the package; its location is not configurable.
DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
DOGS_ASSET_NAME = "dogs.json"
DOGS_ASSET_PATH = os.path.join(DATA_DIR, DOGS_ASSET_NAME)

# --- Environment Settings ---
LOG_LEVEL = os.getenv("DOG_ADOPTION_LOG_LEVEL", "INFO").upper()
LOAD_ON_STARTUP = os.getenv("DOG_ADOPTION_LOAD_ON_STARTUP", "true").lower() == "true"


def get_cors_origins() -> List[str]:
    raw = os.getenv("DOG_ADOPTION_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Sets up the root logger once. Later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(getattr(logging, level, logging.INFO))
