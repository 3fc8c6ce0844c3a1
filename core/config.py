# --------------------------------------------------------------
# File: config.py
# Description: Configuración de rutas y registro leída del entorno (.env).
# --------------------------------------------------------------
import logging
import os

from dotenv import load_dotenv

load_dotenv()

APP_VERSION = "1.0.0"
STORAGE_PATH = os.getenv("STORAGE_PATH", "./_data")
SETTINGS_PATH = os.path.join(STORAGE_PATH, "settings.json")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
