"""Módulo core - componentes fundamentais."""

from .session_manager import SessionManager
from .http_client import TransmissionHttpClient
from .executor import RequestExecutor

__all__ = ["SessionManager", "TransmissionHttpClient", "RequestExecutor"]
