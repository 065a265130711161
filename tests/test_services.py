"""Testes dos servicos de torrents e estatisticas."""

import pytest

from transmission_lib.config import TORRENT_FIELDS
from transmission_lib.services import TorrentService, SessionService

from tests.conftest import make_response, sent_body, success


@pytest.fixture
def torrents(executor):
    return TorrentService(executor)


class TestTorrentActions:

    def test_start_without_ids_targets_all(self, torrents, mock_post):
        mock_post.return_value = success()

        assert torrents.start() is True
        assert sent_body(mock_post) == {"method": "torrent-start", "arguments": {}}

    def test_stop_with_ids(self, torrents, mock_post):
        mock_post.return_value = success()

        assert torrents.stop([1, 2]) is True
        assert sent_body(mock_post) == {"method": "torrent-stop", "arguments": {"ids": [1, 2]}}

    def test_non_success_result_returns_false(self, torrents, mock_post):
        mock_post.return_value = make_response(200, {"result": "no such torrent"})

        assert torrents.start([99]) is False

    def test_add_metainfo(self, torrents, mock_post):
        mock_post.return_value = success({"torrent-added": {"id": 7}})

        assert torrents.add(metainfo="ZGF0YQ==", download_dir="/data") is True
        assert sent_body(mock_post) == {
            "method": "torrent-add",
            "arguments": {"paused": False, "metainfo": "ZGF0YQ==", "download-dir": "/data"},
        }

    def test_add_filename_paused(self, torrents, mock_post):
        mock_post.return_value = success()

        torrents.add(filename="magnet:?xt=urn:btih:abc", paused=True)

        assert sent_body(mock_post)["arguments"] == {"paused": True, "filename": "magnet:?xt=urn:btih:abc"}

    @pytest.mark.parametrize("kwargs", [{}, {"metainfo": "x", "filename": "y"}])
    def test_add_requires_exactly_one_source(self, torrents, mock_post, kwargs):
        with pytest.raises(ValueError):
            torrents.add(**kwargs)
        mock_post.assert_not_called()

    def test_remove_with_local_data(self, torrents, mock_post):
        mock_post.return_value = success()

        torrents.remove([3], delete_local_data=True)

        assert sent_body(mock_post) == {
            "method": "torrent-remove",
            "arguments": {"delete-local-data": True, "ids": [3]},
        }


class TestTorrentGet:

    def test_get_decodes_torrents(self, torrents, mock_post):
        mock_post.return_value = success({"torrents": [
            {"id": 1, "name": "ubuntu.iso", "status": 4, "percentDone": 0.5, "hashString": "aa"},
            {"id": 2, "name": "debian.iso", "status": 0},
        ]})

        result = torrents.get()

        assert [t.id for t in result] == [1, 2]
        assert result[0].status_name == "download"
        assert result[0].percent_done == 0.5
        assert result[1].status_name == "stopped"
        assert sent_body(mock_post)["arguments"] == {"fields": TORRENT_FIELDS}

    def test_get_with_ids_and_fields(self, torrents, mock_post):
        mock_post.return_value = success({"torrents": []})

        assert torrents.get([5], fields=["id", "name"]) == []
        assert sent_body(mock_post)["arguments"] == {"fields": ["id", "name"], "ids": [5]}


class TestSessionService:

    def test_stats_decodes_counters(self, executor, mock_post):
        mock_post.return_value = success({
            "activeTorrentCount": 2,
            "pausedTorrentCount": 1,
            "torrentCount": 3,
            "downloadSpeed": 1024,
            "uploadSpeed": 512,
            "cumulative-stats": {"downloadedBytes": 10, "uploadedBytes": 20, "sessionCount": 4},
            "current-stats": {"secondsActive": 60},
        })

        response = SessionService(executor).stats()

        assert response.is_success
        assert response.stats.torrent_count == 3
        assert response.stats.download_speed == 1024
        assert response.stats.cumulative.uploaded_bytes == 20
        assert response.stats.cumulative.session_count == 4
        assert response.stats.current.seconds_active == 60
        assert sent_body(mock_post) == {"method": "session-stats", "arguments": {}}
