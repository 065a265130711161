"""
Servico de estatisticas da sessao do daemon.
"""

from ..core import RequestExecutor
from ..models import TransmissionRequest, SessionStatsResponse


class SessionService:
    """Consulta session-stats."""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    def stats(self) -> SessionStatsResponse:
        return self.executor.execute(TransmissionRequest("session-stats"), SessionStatsResponse)
