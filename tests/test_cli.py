"""Tests for the scoreboard-proxy command line."""

import json

import httpx
import pytest

from scoreboard_proxy import cli
from scoreboard_proxy.core.config import Settings


class TestParser:
    def test_serve_defaults(self) -> None:
        args = cli.build_parser().parse_args(["serve"])

        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.reload is False

    def test_info_requires_a_team(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["info"])


class TestInfoCommand:
    def test_prints_info_payload(self, monkeypatch, make_client, upstream, capsys) -> None:
        upstream.scores["bad"] = httpx.Response(500)
        monkeypatch.setattr(cli, "ScoreboardClient", make_client)

        exit_code = cli.main(["info", "17-1234", "bad"])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["json"]["bad"] is None
        assert payload["json"]["17-1234"]["images"][1]["name"] == "Ubuntu 22"


class TestServeCommand:
    def test_runs_uvicorn_with_app(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(cli.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

        exit_code = cli.main(["serve", "--port", "9000"])

        assert exit_code == 0
        (args, kwargs), = calls
        assert args == ("scoreboard_proxy.main:app",)
        assert kwargs["port"] == 9000


class TestSettings:
    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("UPSTREAM_TIMEOUT", "5")
        monkeypatch.setenv("SCORES_URL", "http://localhost/scores.php")

        settings = Settings()

        assert settings.UPSTREAM_TIMEOUT == 5.0
        assert settings.SCORES_URL == "http://localhost/scores.php"
