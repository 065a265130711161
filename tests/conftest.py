"""
Fixtures compartilhadas dos testes do transmission_lib.

- make_response: monta requests.Response com status, corpo JSON e headers
- mock_post: substitui requests.Session.post e registra as chamadas
- executor / client: instancias apontando para um endpoint falso
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import patch

import pytest
import requests

from transmission_lib import TransmissionClient
from transmission_lib.core import RequestExecutor, SessionManager, TransmissionHttpClient

RPC_URL = "http://daemon.test:9091/transmission/rpc"
SESSION_HEADER = "X-Transmission-Session-Id"


def make_response(
    status_code: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
    text: Optional[str] = None,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    response.headers.update(headers or {})
    response.url = RPC_URL
    return response


def conflict(token: Optional[str] = "abc123") -> requests.Response:
    headers = {SESSION_HEADER: token} if token is not None else {}
    return make_response(409, text="<h1>409: Conflict</h1>", headers=headers)


def success(arguments: Optional[dict] = None) -> requests.Response:
    return make_response(200, {"result": "success", "arguments": arguments or {}})


def sent_headers(mock_post, index: int = 0) -> Dict[str, str]:
    return mock_post.call_args_list[index].kwargs["headers"]


def sent_body(mock_post, index: int = 0) -> dict:
    return json.loads(mock_post.call_args_list[index].kwargs["data"])


@pytest.fixture
def mock_post():
    with patch.object(requests.Session, "post") as mocked:
        yield mocked


@pytest.fixture
def session_manager():
    return SessionManager("admin", "secret")


@pytest.fixture
def executor(session_manager):
    http = TransmissionHttpClient(RPC_URL, timeout=2.0)
    yield RequestExecutor(http, session_manager)
    http.close()


@pytest.fixture
def client():
    tc = TransmissionClient(RPC_URL, "admin", "secret")
    yield tc
    tc.close()
