"""
Gerenciador de sessao RPC.
"""

import base64
import threading
from typing import Dict, Optional

from ..config import SESSION_HEADER


class SessionManager:
    """Guarda credenciais e o token de sessao atual."""

    def __init__(self, username: Optional[str] = None, password: Optional[str] = None):
        self._username = username
        self._password = password
        self._token: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def username(self) -> Optional[str]:
        return self._username

    @property
    def has_credentials(self) -> bool:
        return self._username is not None

    @property
    def token(self) -> Optional[str]:
        with self._lock:
            return self._token

    def _authorization(self) -> str:
        raw = f"{self._username}:{self._password or ''}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    def headers(self) -> Dict[str, str]:
        """
        Headers de autenticacao para uma tentativa.

        Recalculados a cada chamada a partir do estado atual; o snapshot e
        montado sob o lock para nunca misturar tokens de atualizacoes
        diferentes.
        """
        headers = {}
        if self.has_credentials:
            headers["Authorization"] = self._authorization()
        with self._lock:
            if self._token:
                headers[SESSION_HEADER] = self._token
        return headers

    def update_token(self, new_token: str):
        """Substitui o token de sessao."""
        with self._lock:
            self._token = new_token

    def clear_token(self):
        """Esquece o token; a proxima chamada refaz o handshake."""
        with self._lock:
            self._token = None
