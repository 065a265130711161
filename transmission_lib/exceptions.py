"""
Excecoes do cliente Transmission.

Toda falha de uma chamada RPC chega ao chamador como uma subclasse de
TransmissionError. O primeiro 409 de cada chamada faz parte do handshake
de sessao e nao gera excecao.
"""

from typing import Optional


class TransmissionError(Exception):
    """Erro base do cliente."""


class NetworkError(TransmissionError):
    """Falha de transporte ou status HTTP nao reconhecido."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthError(TransmissionError):
    """Credenciais recusadas pelo daemon (HTTP 401)."""


class PayloadError(TransmissionError):
    """Payload fora do formato esperado."""


class EncodingError(PayloadError):
    """Requisicao nao pode ser serializada para JSON."""


class DecodingError(PayloadError):
    """Resposta do daemon nao pode ser decodificada."""


class ProtocolViolation(TransmissionError):
    """Daemon quebrou o handshake de sessao."""


class ConfigError(TransmissionError):
    """Configuracao invalida (ex.: variavel de ambiente malformada)."""
