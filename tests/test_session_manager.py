"""Testes do SessionManager."""

import base64
import threading

from transmission_lib.core import SessionManager

SESSION_HEADER = "X-Transmission-Session-Id"


def test_headers_without_token_have_only_authorization():
    manager = SessionManager("admin", "secret")
    expected = "Basic " + base64.b64encode(b"admin:secret").decode("ascii")

    assert manager.headers() == {"Authorization": expected}
    assert manager.token is None


def test_headers_are_idempotent_between_updates():
    manager = SessionManager("admin", "secret")
    manager.update_token("tok-1")

    assert manager.headers() == manager.headers()
    assert manager.headers()[SESSION_HEADER] == "tok-1"


def test_update_token_replaces_unconditionally():
    manager = SessionManager("admin", "secret")
    manager.update_token("tok-1")
    manager.update_token("tok-2")

    assert manager.token == "tok-2"
    assert manager.headers()[SESSION_HEADER] == "tok-2"


def test_clear_token_drops_session_header():
    manager = SessionManager("admin", "secret")
    manager.update_token("tok-1")
    manager.clear_token()

    assert manager.token is None
    assert SESSION_HEADER not in manager.headers()


def test_no_credentials_sends_no_authorization():
    manager = SessionManager()
    manager.update_token("tok-1")

    assert manager.headers() == {SESSION_HEADER: "tok-1"}


def test_utf8_credentials_are_encoded():
    manager = SessionManager("usuário", "señha")
    expected = "Basic " + base64.b64encode("usuário:señha".encode("utf-8")).decode("ascii")

    assert manager.headers()["Authorization"] == expected


def test_concurrent_updates_leave_a_consistent_snapshot():
    manager = SessionManager("admin", "secret")
    tokens = [f"tok-{i}" for i in range(50)]

    threads = [threading.Thread(target=manager.update_token, args=(t,)) for t in tokens]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert manager.token in tokens
    assert manager.headers()[SESSION_HEADER] == manager.token
