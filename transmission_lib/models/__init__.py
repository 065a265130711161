"""
Modelos de dados do protocolo RPC do Transmission.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import TORRENT_STATUS


@dataclass
class TransmissionRequest:
    """Uma chamada RPC: metodo + argumentos."""
    method: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    tag: Optional[int] = None

    def to_dict(self) -> dict:
        data = {"method": self.method, "arguments": self.arguments}
        if self.tag is not None:
            data["tag"] = self.tag
        return data


@dataclass
class TransmissionResponse:
    """Resposta generica do daemon."""
    result: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    tag: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.result == "success"

    @classmethod
    def from_dict(cls, data: dict) -> "TransmissionResponse":
        return cls(
            result=data["result"],
            arguments=data.get("arguments") or {},
            tag=data.get("tag")
        )


@dataclass
class Torrent:
    """Torrent retornado por torrent-get."""
    id: int
    name: str = ""
    status: int = 0
    hash_string: str = ""
    percent_done: float = 0.0
    total_size: int = 0
    rate_download: int = 0
    rate_upload: int = 0
    eta: int = -1
    download_dir: str = ""
    error: int = 0
    error_string: str = ""

    @property
    def status_name(self) -> str:
        return TORRENT_STATUS.get(self.status, "unknown")

    @classmethod
    def from_dict(cls, data: dict) -> "Torrent":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            status=data.get("status", 0),
            hash_string=data.get("hashString", ""),
            percent_done=data.get("percentDone", 0.0),
            total_size=data.get("totalSize", 0),
            rate_download=data.get("rateDownload", 0),
            rate_upload=data.get("rateUpload", 0),
            eta=data.get("eta", -1),
            download_dir=data.get("downloadDir", ""),
            error=data.get("error", 0),
            error_string=data.get("errorString", "")
        )


@dataclass
class TorrentGetResponse(TransmissionResponse):
    """Resposta de torrent-get."""
    torrents: List[Torrent] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "TorrentGetResponse":
        arguments = data.get("arguments") or {}
        return cls(
            result=data["result"],
            arguments=arguments,
            tag=data.get("tag"),
            torrents=[Torrent.from_dict(t) for t in arguments.get("torrents", [])]
        )


@dataclass
class StatsSnapshot:
    """Contadores acumulados ou da sessao atual."""
    uploaded_bytes: int = 0
    downloaded_bytes: int = 0
    files_added: int = 0
    session_count: int = 0
    seconds_active: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "StatsSnapshot":
        return cls(
            uploaded_bytes=data.get("uploadedBytes", 0),
            downloaded_bytes=data.get("downloadedBytes", 0),
            files_added=data.get("filesAdded", 0),
            session_count=data.get("sessionCount", 0),
            seconds_active=data.get("secondsActive", 0)
        )


@dataclass
class SessionStats:
    """Estatisticas do daemon (session-stats)."""
    active_torrent_count: int = 0
    paused_torrent_count: int = 0
    torrent_count: int = 0
    download_speed: int = 0
    upload_speed: int = 0
    cumulative: StatsSnapshot = field(default_factory=StatsSnapshot)
    current: StatsSnapshot = field(default_factory=StatsSnapshot)

    @classmethod
    def from_dict(cls, data: dict) -> "SessionStats":
        return cls(
            active_torrent_count=data.get("activeTorrentCount", 0),
            paused_torrent_count=data.get("pausedTorrentCount", 0),
            torrent_count=data.get("torrentCount", 0),
            download_speed=data.get("downloadSpeed", 0),
            upload_speed=data.get("uploadSpeed", 0),
            cumulative=StatsSnapshot.from_dict(data.get("cumulative-stats") or {}),
            current=StatsSnapshot.from_dict(data.get("current-stats") or {})
        )


@dataclass
class SessionStatsResponse(TransmissionResponse):
    """Resposta de session-stats."""
    stats: SessionStats = field(default_factory=SessionStats)

    @classmethod
    def from_dict(cls, data: dict) -> "SessionStatsResponse":
        arguments = data.get("arguments") or {}
        return cls(
            result=data["result"],
            arguments=arguments,
            tag=data.get("tag"),
            stats=SessionStats.from_dict(arguments)
        )
