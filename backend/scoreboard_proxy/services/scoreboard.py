"""
Scoreboard Client

Async client for the CyberPatriot scoreboard API. Fetches a team's image
summary and score history and reshapes them into a TeamInfoResult.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from scoreboard_proxy.core.config import settings
from scoreboard_proxy.core.errors import (
    ErrorKind,
    ScoreboardError,
    malformed_response,
    not_found,
    upstream_unreachable,
)
from scoreboard_proxy.schemas.team import ImageIssues, TeamImage, TeamInfoResult
from scoreboard_proxy.schemas.upstream import ChartPayload, ScoreRecord, ScoresPayload
from scoreboard_proxy.services.parsing import parse_image_name, parse_raw_history

logger = logging.getLogger(__name__)

# Default headers for requests
DEFAULT_HEADERS = {
    "accept": "application/json",
}


class ScoreboardClient:
    """
    Client for interacting with the scoreboard API.

    Every lookup opens its own HTTP connection pool and closes it when done.
    """

    def __init__(
        self,
        scores_url: Optional[str] = None,
        history_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the scoreboard client.

        Args:
            scores_url: Team summary endpoint (defaults to settings.SCORES_URL)
            history_url: Team history endpoint (defaults to settings.HISTORY_URL)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the upstream in tests
        """
        self.scores_url = scores_url or settings.SCORES_URL
        self.history_url = history_url or settings.HISTORY_URL
        self.timeout = timeout if timeout is not None else settings.UPSTREAM_TIMEOUT
        self.transport = transport

    async def _fetch_both(self, team: str) -> List[Any]:
        """Request summary and history together; both finish before either is checked."""
        params = {"team": team}

        async with httpx.AsyncClient(
            timeout=self.timeout, headers=DEFAULT_HEADERS, transport=self.transport
        ) as client:
            return await asyncio.gather(
                client.get(self.scores_url, params=params),
                client.get(self.history_url, params=params),
                return_exceptions=True,
            )

    async def get_team_info(self, team: str) -> TeamInfoResult:
        """
        Fetch and reshape scoreboard data for one team.

        Args:
            team: Team identifier, e.g. '17-1234'

        Returns:
            Images, ranking, history and metadata for the team

        Raises:
            ScoreboardError: If an upstream call fails, the team is unknown,
                or a payload cannot be parsed
        """
        scores_res, history_res = await self._fetch_both(team)

        _check_response(scores_res, "Could not reach the team API")
        _check_response(history_res, "Could not reach the history API")

        try:
            scores = ScoresPayload.model_validate(scores_res.json())
            chart = ChartPayload.model_validate(history_res.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Invalid scoreboard payload for team {team}: {e}")
            raise malformed_response("Invalid response from the scoreboard API")

        if not scores.data:
            raise not_found()

        try:
            history = parse_raw_history(chart.cols, chart.rows)
        except ValidationError as e:
            logger.warning(f"Invalid history values for team {team}: {e}")
            raise malformed_response("Invalid history from the scoreboard API")

        first = scores.data[0]
        return TeamInfoResult(
            images=[build_team_image(record) for record in scores.data],
            history=history,
            updated=datetime.now(timezone.utc),
            location=first.location,
            division=first.division,
            tier=first.tier,
            runtime=first.duration,
        )

    async def get_teams(self, teams: List[str]) -> Dict[str, Optional[TeamInfoResult]]:
        """
        Look up several teams concurrently.

        A failed lookup is logged and recorded as None for that team only.

        Args:
            teams: Team identifiers; duplicates are looked up once

        Returns:
            Mapping of team identifier to result, in request order
        """
        unique = list(dict.fromkeys(teams))
        results = await asyncio.gather(*(self._get_team_or_none(team) for team in unique))
        return dict(zip(unique, results))

    async def _get_team_or_none(self, team: str) -> Optional[TeamInfoResult]:
        try:
            return await self.get_team_info(team)
        except ScoreboardError as e:
            if e.kind == ErrorKind.NOT_FOUND:
                logger.info(f"Team {team} not found on the scoreboard")
            else:
                logger.warning(
                    f"Lookup failed for team {team}: {e.kind.value} ({e.status}) {e.message}"
                )
            return None
        except Exception:
            logger.exception(f"Unexpected error looking up team {team}")
            return None


def _check_response(result: Any, message: str) -> None:
    """Raise if a gathered request failed at the transport level or with a non-2xx status."""
    if isinstance(result, httpx.RequestError):
        logger.warning(f"{message}: {result!r}")
        raise upstream_unreachable(502, message)
    if isinstance(result, BaseException):
        raise result
    if not result.is_success:
        raise upstream_unreachable(result.status_code, message)


def build_team_image(record: ScoreRecord) -> TeamImage:
    """Map one summary record into the client-facing image shape."""
    return TeamImage(
        name=parse_image_name(record.image),
        runtime=record.duration,
        issues=ImageIssues(found=record.found, remaining=record.remaining),
        penalties=record.penalties,
        score=record.ccs_score,
    )


def build_info_payload(results: Dict[str, Optional[TeamInfoResult]]) -> Dict[str, Any]:
    """Wrap aggregated results as {'json': {team: result-or-None}}."""
    return {
        "json": {
            team: result.model_dump(mode="json") if result is not None else None
            for team, result in results.items()
        }
    }
