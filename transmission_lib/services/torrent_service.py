"""
Servico de gerenciamento de torrents.
"""

from typing import List, Optional

from ..config import TORRENT_FIELDS
from ..core import RequestExecutor
from ..models import TransmissionRequest, TransmissionResponse, Torrent, TorrentGetResponse
from ..utils import get_logger


def _with_ids(arguments: dict, ids: Optional[List[int]]) -> dict:
    # Sem "ids" o daemon aplica a acao a todos os torrents
    if ids is not None:
        arguments["ids"] = list(ids)
    return arguments


class TorrentService:
    """Servico para iniciar, parar, adicionar, remover e listar torrents."""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor
        self.logger = get_logger()

    def _action(self, method: str, arguments: dict) -> bool:
        request = TransmissionRequest(method, arguments)
        response = self.executor.execute(request, TransmissionResponse)
        if not response.is_success:
            self.logger.warning(f"{method}: {response.result}")
        return response.is_success

    def start(self, ids: Optional[List[int]] = None) -> bool:
        """Inicia os torrents informados (todos se ids for None)."""
        return self._action("torrent-start", _with_ids({}, ids))

    def stop(self, ids: Optional[List[int]] = None) -> bool:
        """Para os torrents informados (todos se ids for None)."""
        return self._action("torrent-stop", _with_ids({}, ids))

    def add(
        self,
        metainfo: Optional[str] = None,
        filename: Optional[str] = None,
        download_dir: Optional[str] = None,
        paused: bool = False
    ) -> bool:
        """
        Adiciona um torrent.

        Args:
            metainfo: conteudo do .torrent em base64
            filename: URL ou magnet link
            download_dir: diretorio de destino no daemon
            paused: adicionar sem iniciar
        """
        if bool(metainfo) == bool(filename):
            raise ValueError("Informe exatamente um entre metainfo e filename")

        arguments = {"paused": paused}
        if metainfo:
            arguments["metainfo"] = metainfo
        else:
            arguments["filename"] = filename
        if download_dir:
            arguments["download-dir"] = download_dir
        return self._action("torrent-add", arguments)

    def remove(self, ids: Optional[List[int]] = None, delete_local_data: bool = False) -> bool:
        """Remove torrents; com delete_local_data apaga tambem os arquivos."""
        arguments = _with_ids({"delete-local-data": delete_local_data}, ids)
        return self._action("torrent-remove", arguments)

    def get(self, ids: Optional[List[int]] = None, fields: Optional[List[str]] = None) -> List[Torrent]:
        """Lista torrents (todos se ids for None)."""
        arguments = _with_ids({"fields": list(fields or TORRENT_FIELDS)}, ids)
        request = TransmissionRequest("torrent-get", arguments)
        response = self.executor.execute(request, TorrentGetResponse)
        self.logger.debug(f"Retornados {len(response.torrents)} torrents")
        return response.torrents
