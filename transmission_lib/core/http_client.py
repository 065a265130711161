"""
Cliente HTTP base para comunicacao com o daemon Transmission.
"""

import requests
from typing import Dict, Optional

from ..config import DEFAULT_HEADERS, DEFAULT_TIMEOUT, DEFAULT_URL
from ..exceptions import NetworkError


class TransmissionHttpClient:
    """Cliente HTTP configurado para o endpoint RPC."""

    def __init__(self, url: str = DEFAULT_URL, timeout: float = DEFAULT_TIMEOUT):
        self.url = url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)

    def post(self, body: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """
        POST de um documento JSON ja serializado.

        Falhas de transporte (conexao recusada, DNS, timeout) viram
        NetworkError; o status HTTP fica a cargo do chamador.
        """
        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)
        try:
            return self.session.post(
                self.url,
                data=body.encode("utf-8"),
                headers=request_headers,
                timeout=(self.timeout, self.timeout),
            )
        except requests.Timeout as e:
            raise NetworkError(f"Timeout ao conectar em {self.url}: {e}") from e
        except requests.RequestException as e:
            raise NetworkError(f"Erro de conexao com {self.url}: {e}") from e

    def close(self):
        self.session.close()
