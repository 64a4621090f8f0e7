"""Shared fixtures: canned scoreboard payloads and a stubbed upstream."""

from typing import Callable, Dict, List

import httpx
import pytest

from scoreboard_proxy.services.scoreboard import ScoreboardClient

SCORES_URL = "https://scoreboard.test/api/image/scores.php"
HISTORY_URL = "https://scoreboard.test/api/image/chart.php"


def scores_payload() -> dict:
    return {
        "data": [
            {
                "image": "Win10_Desktop_HS",
                "duration": "03:58:12",
                "found": 25,
                "remaining": 5,
                "penalties": 1,
                "ccs_score": 87,
                "location": "CA",
                "division": "Open",
                "tier": "Platinum",
            },
            {
                "image": "Ubuntu22_Server",
                "duration": "02:10:00",
                "found": 10,
                "remaining": 8,
                "penalties": 0,
                "ccs_score": 55.5,
                "location": "CA",
                "division": "Open",
                "tier": "Platinum",
            },
        ]
    }


def chart_payload() -> dict:
    return {
        "cols": [
            {"label": "Time", "type": "datetime"},
            {"label": "Win10_Desktop_HS", "type": "number"},
            {"label": "Ubuntu22_Server", "type": "number"},
        ],
        "rows": [
            {"c": [{"v": "2024-11-02 10:00:00"}, {"v": 10}, {"v": 5}]},
            {"c": [{"v": "2024-11-02 10:05:00"}, {"v": 20}]},
            {"c": [{"v": "2024-11-02 10:10:00"}, None, {"v": 30}]},
        ],
    }


class StubUpstream:
    """
    Routes scores/chart requests to per-team canned responses.

    Teams without an entry get the default payloads.
    """

    def __init__(self) -> None:
        self.scores: Dict[str, httpx.Response] = {}
        self.history: Dict[str, httpx.Response] = {}
        self.calls: List[tuple] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        team = request.url.params.get("team")
        if request.url.path.endswith("scores.php"):
            self.calls.append(("scores", team))
            return self.scores.get(team) or httpx.Response(200, json=scores_payload())
        if request.url.path.endswith("chart.php"):
            self.calls.append(("history", team))
            return self.history.get(team) or httpx.Response(200, json=chart_payload())
        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def upstream() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def make_client(upstream: StubUpstream) -> Callable[[], ScoreboardClient]:
    def factory() -> ScoreboardClient:
        return ScoreboardClient(
            scores_url=SCORES_URL,
            history_url=HISTORY_URL,
            transport=upstream.transport(),
        )

    return factory
