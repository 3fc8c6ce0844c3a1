# --------------------------------------------------------------
# File: session.py
# Description: Máquina de estados de la interfaz para operaciones de cifrado.
# --------------------------------------------------------------
"""Estado de una sesión de cifrado/descifrado (Idle → Running → Idle/Error).

Las operaciones del núcleo se ejecutan en un hilo de fondo porque PBKDF2 con
100 000 iteraciones bloquea durante decenas o cientos de milisegundos. No hay
cancelación: quien llama espera a que termine el ``Future``.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Callable, Optional

from api import services
from core.errors import CipherError

logger = logging.getLogger(__name__)

_EXECUTOR = ThreadPoolExecutor(max_workers=2, thread_name_prefix="cipher")


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    ERROR = "error"


class CipherSession:
    """Contenedor del estado visible por la interfaz.

    Attributes:
        text (str): Texto en claro (entrada al cifrar, salida al descifrar).
        password (str): Contraseña de la operación.
        encrypted_text (str): Sobre Base64 (salida al cifrar, entrada al descifrar).
        state (SessionState): Estado actual de la máquina.
        status_message (str): Mensaje para el usuario.

    """

    def __init__(self, text: str = "", password: str = "", encrypted_text: str = "") -> None:
        self.text = text
        self.password = password
        self.encrypted_text = encrypted_text
        self.state = SessionState.IDLE
        self.status_message = ""
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    def can_encrypt(self) -> bool:
        return bool(self.text.strip()) and bool(self.password.strip()) and not self.is_running

    def can_decrypt(self) -> bool:
        return bool(self.encrypted_text.strip()) and bool(self.password.strip()) and not self.is_running

    def _start(self, status: str) -> None:
        with self._lock:
            if self.state is SessionState.RUNNING:
                raise RuntimeError("Ya hay una operación en curso.")
            self.state = SessionState.RUNNING
            self.status_message = status

    def _submit(
        self,
        operation: Callable[[str, str], str],
        source: str,
        on_success: Callable[[str], None],
        labels: tuple[str, str, str],
    ) -> Future:
        running, done, failed = labels
        self._start(running)
        password = self.password

        # El estado se actualiza dentro del hilo de fondo, antes de que el
        # Future quede resuelto.
        def _run() -> Optional[str]:
            try:
                result = operation(source, password)
            except Exception as exc:
                if not isinstance(exc, CipherError):
                    logger.error("Fallo inesperado en la operación: %r", exc)
                with self._lock:
                    self.state = SessionState.ERROR
                    self.status_message = f"{failed}: {exc}"
                return None
            with self._lock:
                on_success(result)
                self.state = SessionState.IDLE
                self.status_message = done
            return result

        return _EXECUTOR.submit(_run)

    def submit_encrypt(self) -> Future:
        """Lanza el cifrado en segundo plano; el ``Future`` devuelve el sobre o ``None``."""

        def _store(result: str) -> None:
            self.encrypted_text = result

        return self._submit(
            services.encrypt,
            self.text,
            _store,
            ("Encrypting...", "Text encrypted successfully!", "Encryption failed"),
        )

    def submit_decrypt(self) -> Future:
        """Lanza el descifrado en segundo plano; el ``Future`` devuelve el texto o ``None``."""

        def _store(result: str) -> None:
            self.text = result

        return self._submit(
            services.decrypt,
            self.encrypted_text,
            _store,
            ("Decrypting...", "Text decrypted successfully!", "Decryption failed"),
        )

    def encrypt(self) -> Optional[str]:
        """Cifra y espera; devuelve el sobre o ``None`` si la operación falló."""

        return self.submit_encrypt().result()

    def decrypt(self) -> Optional[str]:
        """Descifra y espera; devuelve el texto o ``None`` si la operación falló."""

        return self.submit_decrypt().result()

