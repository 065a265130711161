"""Módulo de serviços."""

from .torrent_service import TorrentService
from .session_service import SessionService

__all__ = ["TorrentService", "SessionService"]
