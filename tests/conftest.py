# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar almacenamiento y recargar módulos.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_storage(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla STORAGE_PATH y recarga core.config para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    data_dir = tmp_path / "_data"
    data_dir.mkdir()
    monkeypatch.setenv("STORAGE_PATH", str(data_dir))

    import core.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def settings_file(tmp_path):
    """Ruta del archivo de configuración dentro del almacenamiento aislado."""
    return tmp_path / "_data" / "settings.json"
