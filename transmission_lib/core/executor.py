"""
Execucao de chamadas RPC autenticadas.
"""

import json
from typing import Any, Optional

import requests

from ..config import SESSION_HEADER
from ..exceptions import (
    AuthError, DecodingError, EncodingError, NetworkError, ProtocolViolation,
)
from ..utils import get_logger
from .http_client import TransmissionHttpClient
from .session_manager import SessionManager

# Uma tentativa + no maximo uma renovacao de sessao por chamada
MAX_ATTEMPTS = 2


class RequestExecutor:
    """Envia uma requisicao, faz o handshake de sessao e decodifica a resposta."""

    def __init__(self, http_client: TransmissionHttpClient, session_manager: SessionManager):
        self.client = http_client
        self.session_manager = session_manager
        self.logger = get_logger()

    def execute(self, request: Any, result_type: Optional[type] = None) -> Any:
        """
        Executa uma chamada RPC.

        Args:
            request: valor serializavel para JSON, ou objeto com to_dict()
            result_type: classe com from_dict(); None ou dict devolve o JSON cru

        Raises:
            EncodingError, DecodingError, NetworkError, AuthError,
            ProtocolViolation
        """
        body = self._encode(request)
        self.logger.debug(f"Requisicao RPC: {body[:500]}")

        for attempt in range(MAX_ATTEMPTS):
            response = self.client.post(body, self.session_manager.headers())
            if response.status_code != 409:
                return self._handle(response, result_type)
            if attempt + 1 < MAX_ATTEMPTS:
                self._refresh_session(response)

        self.logger.error("Daemon respondeu 409 novamente apos renovar a sessao")
        raise ProtocolViolation("Daemon respondeu 409 novamente apos renovar a sessao")

    def _encode(self, request: Any) -> str:
        try:
            payload = request.to_dict() if hasattr(request, "to_dict") else request
            return json.dumps(payload, allow_nan=False)
        except Exception as e:
            self.logger.error(f"Requisicao nao serializavel: {e}")
            raise EncodingError(f"Requisicao nao serializavel: {e}") from e

    def _refresh_session(self, response: requests.Response):
        token = response.headers.get(SESSION_HEADER)
        if not token:
            self.logger.error(f"Daemon respondeu 409 sem {SESSION_HEADER}")
            raise ProtocolViolation(f"Daemon respondeu 409 sem {SESSION_HEADER}")
        self.session_manager.update_token(token)
        self.logger.info("Sessao renovada apos 409")
        self.logger.debug(f"{SESSION_HEADER}={token}")

    def _handle(self, response: requests.Response, result_type: Optional[type]) -> Any:
        status = response.status_code
        self.logger.debug(f"Status: {status}")

        if status == 200:
            return self._decode(response, result_type)
        if status == 401:
            self.logger.error("Daemon recusou as credenciais (401)")
            raise AuthError(
                f"Usuario '{self.session_manager.username}' ou senha incorretos"
            )

        self.logger.error(f"Erro na chamada RPC: status {status}")
        self.logger.debug(f"Resposta: {response.text[:500]}")
        raise NetworkError(f"Erro na chamada RPC: status {status}", status_code=status)

    def _decode(self, response: requests.Response, result_type: Optional[type]) -> Any:
        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Resposta nao e JSON valido: {e}")
            raise DecodingError(f"Resposta nao e JSON valido: {e}") from e

        self.logger.debug(f"Resposta: {str(data)[:500]}")

        if result_type is None or result_type is dict:
            if result_type is dict and not isinstance(data, dict):
                raise DecodingError(f"Esperado objeto JSON, recebido {type(data).__name__}")
            return data

        if not isinstance(data, dict):
            raise DecodingError(f"Esperado objeto JSON, recebido {type(data).__name__}")
        try:
            return result_type.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            self.logger.error(f"Resposta fora do formato {result_type.__name__}: {e}")
            raise DecodingError(
                f"Resposta fora do formato {result_type.__name__}: {e}"
            ) from e
