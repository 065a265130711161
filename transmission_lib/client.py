"""
Cliente principal do Transmission - Interface unificada.
"""

import os
from pathlib import Path
from typing import Optional, List

from .config import DEFAULT_TIMEOUT, DEFAULT_URL, ENV_URL, ENV_USER, ENV_PASSWORD, ENV_TIMEOUT
from .exceptions import ConfigError
from .core import SessionManager, TransmissionHttpClient, RequestExecutor
from .services import TorrentService, SessionService
from .models import Torrent, SessionStatsResponse
from .utils import encode_metainfo, get_logger


class TransmissionClient:
    """
    Cliente RPC para um daemon Transmission.

    Cada instancia tem sua propria sessao: o token e descoberto na primeira
    chamada (handshake 409) e renovado quando o daemon o invalida.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        log_dir: Optional[str] = None,
        debug: bool = False
    ):
        self.url = url
        self.logger = get_logger("transmission", Path(log_dir) if log_dir else None, debug)

        self._http = TransmissionHttpClient(url, timeout)
        self._session = SessionManager(username, password)
        self._executor = RequestExecutor(self._http, self._session)

        self._torrents = TorrentService(self._executor)
        self._stats = SessionService(self._executor)

        self.logger.debug(f"TransmissionClient inicializado. URL: {url}, usuario: {username}")

    @classmethod
    def from_env(
        cls,
        url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
        **kwargs
    ) -> "TransmissionClient":
        """Cria cliente a partir das variaveis TRANSMISSION_*; argumentos explicitos vencem."""
        if timeout is None:
            env_timeout = os.getenv(ENV_TIMEOUT)
            try:
                timeout = float(env_timeout) if env_timeout else DEFAULT_TIMEOUT
            except ValueError:
                raise ConfigError(f"{ENV_TIMEOUT} invalido: '{env_timeout}'") from None
        return cls(
            url=url or os.getenv(ENV_URL) or DEFAULT_URL,
            username=username or os.getenv(ENV_USER),
            password=password or os.getenv(ENV_PASSWORD),
            timeout=timeout,
            **kwargs
        )

    @property
    def session_id(self) -> Optional[str]:
        return self._session.token

    def execute(self, request, result_type=None):
        """Executa uma requisicao RPC arbitraria."""
        return self._executor.execute(request, result_type)

    def start_all(self) -> bool:
        return self._torrents.start()

    def start(self, ids: List[int]) -> bool:
        return self._torrents.start(ids)

    def stop_all(self) -> bool:
        return self._torrents.stop()

    def stop(self, ids: List[int]) -> bool:
        return self._torrents.stop(ids)

    def add(self, metainfo: str, download_dir: Optional[str] = None, paused: bool = False) -> bool:
        """Adiciona torrent a partir do conteudo .torrent em base64."""
        return self._torrents.add(metainfo=metainfo, download_dir=download_dir, paused=paused)

    def add_file(self, path: str, download_dir: Optional[str] = None, paused: bool = False) -> bool:
        """Adiciona torrent a partir de um arquivo .torrent local."""
        metainfo = encode_metainfo(Path(path))
        self.logger.info(f"Adicionando {path}")
        return self.add(metainfo, download_dir, paused)

    def add_url(self, url: str, download_dir: Optional[str] = None, paused: bool = False) -> bool:
        """Adiciona torrent a partir de URL ou magnet link."""
        return self._torrents.add(filename=url, download_dir=download_dir, paused=paused)

    def remove_all(self, delete_local_data: bool = False) -> bool:
        return self._torrents.remove(None, delete_local_data)

    def remove(self, ids: List[int], delete_local_data: bool = False) -> bool:
        return self._torrents.remove(ids, delete_local_data)

    def get_all(self) -> List[Torrent]:
        return self._torrents.get()

    def get(self, ids: List[int]) -> List[Torrent]:
        return self._torrents.get(ids)

    def session_stats(self) -> SessionStatsResponse:
        return self._stats.stats()

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
