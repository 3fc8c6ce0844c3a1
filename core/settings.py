# --------------------------------------------------------------
# File: settings.py
# Description: Persistencia JSON de las preferencias de la aplicación.
# --------------------------------------------------------------
"""Carga y guardado atómico de la configuración de usuario en disco."""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from core import config

__all__ = ["AppSettings", "SettingsError", "load_settings", "save_settings", "settings_path"]

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """No se ha podido escribir el archivo de configuración."""


class AppSettings(BaseModel):
    """Preferencias persistidas entre sesiones.

    Attributes:
        last_used_password (Optional[str]): Solo se guarda si
            ``remember_password`` está activo.
        last_encrypted_text (Optional[str]): Último sobre cifrado producido.
        last_used (datetime): Momento del último guardado (UTC).
        remember_password (bool): Permite persistir la contraseña.
        version (str): Versión de la aplicación que guardó el archivo.

    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    last_used_password: Optional[str] = None
    last_encrypted_text: Optional[str] = None
    last_used: datetime = Field(default_factory=lambda: datetime.now(UTC))
    remember_password: bool = False
    version: str = config.APP_VERSION


def settings_path() -> str:
    return config.SETTINGS_PATH


def load_settings(path: Optional[str] = None) -> AppSettings:
    """Carga la configuración o devuelve los valores por defecto.

    Args:
        path (Optional[str]): Ruta alternativa del archivo JSON.

    Returns:
        AppSettings: Configuración leída, o la predeterminada si el archivo no
        existe o está corrupto.

    """

    path = path or settings_path()
    try:
        with open(path, "r", encoding="utf-8") as handler:
            return AppSettings.model_validate(json.load(handler))
    except FileNotFoundError:
        return AppSettings()
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError, OSError) as exc:
        logger.warning("Configuración corrupta en %s, se usan valores por defecto: %s", path, exc)
        return AppSettings()


def save_settings(settings: AppSettings, path: Optional[str] = None) -> AppSettings:
    """Guarda la configuración con escritura atómica.

    La contraseña se descarta salvo que ``remember_password`` esté activo.

    Args:
        settings (AppSettings): Configuración a persistir.
        path (Optional[str]): Ruta alternativa del archivo JSON.

    Returns:
        AppSettings: Copia efectivamente guardada.

    Raises:
        SettingsError: Si falla la escritura en disco.

    """

    path = path or settings_path()
    stored = settings.model_copy(
        update={
            "last_used": datetime.now(UTC),
            "last_used_password": settings.last_used_password if settings.remember_password else None,
        }
    )

    tmp_path = f"{path}.tmp"
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as handler:
            handler.write(stored.model_dump_json(by_alias=True, indent=2))
        os.replace(tmp_path, path)
    except OSError as exc:
        raise SettingsError(f"No se ha podido guardar la configuración en {path}") from exc

    logger.debug("Configuración guardada en %s", path)
    return stored
