"""
Transmission Lib - Cliente RPC para o daemon Transmission.

Uso básico:
    from transmission_lib import TransmissionClient

    with TransmissionClient(username="admin", password="secret") as tc:
        tc.start_all()
        for t in tc.get_all():
            print(t.name, t.status_name)

Uso avançado (requisicoes arbitrarias):
    from transmission_lib import TransmissionClient, TransmissionRequest

    tc = TransmissionClient.from_env()
    dados = tc.execute(TransmissionRequest("session-get"))
"""

from pathlib import Path
from dotenv import load_dotenv

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

from .client import TransmissionClient
from .config import DEFAULT_URL, DEFAULT_TIMEOUT, SESSION_HEADER, TORRENT_FIELDS
from .exceptions import (
    TransmissionError, NetworkError, AuthError,
    PayloadError, EncodingError, DecodingError, ProtocolViolation,
    ConfigError,
)
from .models import (
    TransmissionRequest, TransmissionResponse,
    Torrent, TorrentGetResponse,
    StatsSnapshot, SessionStats, SessionStatsResponse,
)

__version__ = "1.0.0"
__all__ = [
    "TransmissionClient",
    "DEFAULT_URL", "DEFAULT_TIMEOUT", "SESSION_HEADER", "TORRENT_FIELDS",
    "TransmissionError", "NetworkError", "AuthError",
    "PayloadError", "EncodingError", "DecodingError", "ProtocolViolation",
    "ConfigError",
    "TransmissionRequest", "TransmissionResponse",
    "Torrent", "TorrentGetResponse",
    "StatsSnapshot", "SessionStats", "SessionStatsResponse",
]
