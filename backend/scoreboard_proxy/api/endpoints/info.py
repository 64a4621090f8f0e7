"""
Team info endpoint: aggregated scoreboard data for a list of teams.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from scoreboard_proxy.core.errors import ScoreboardError
from scoreboard_proxy.services.scoreboard import ScoreboardClient, build_info_payload

logger = logging.getLogger(__name__)
router = APIRouter()

INFO_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_scoreboard_client() -> ScoreboardClient:
    return ScoreboardClient()


def parse_teams(teams: Optional[str]) -> List[str]:
    """Split the comma-separated teams parameter, dropping blanks and repeats."""
    if not teams:
        return []
    ids = [team.strip() for team in teams.split(",")]
    return list(dict.fromkeys(team for team in ids if team))


def error_response(error: Exception) -> Response:
    """Map a failure that escaped the per-team lookups to a plain-text response."""
    if isinstance(error, ScoreboardError):
        return PlainTextResponse(
            error.message,
            status_code=error.status,
            headers={"access-control-allow-origin": "*"},
        )

    message = str(error)
    return PlainTextResponse(
        f"Internal Error: {message}" if message else "Internal Error",
        status_code=500,
    )


@router.api_route("", methods=INFO_METHODS)
async def get_info(
    teams: Optional[str] = Query(None, description="Comma-separated team ids"),
    client: ScoreboardClient = Depends(get_scoreboard_client),
):
    """Get scoreboard info for every requested team; failed teams map to null."""
    try:
        team_ids = parse_teams(teams)
        results = await client.get_teams(team_ids)
        return JSONResponse(build_info_payload(results))
    except ScoreboardError as e:
        logger.error(f"Scoreboard error for teams={teams!r}: {e!r}")
        return error_response(e)
    except Exception as e:
        logger.exception(f"Error building info for teams={teams!r}")
        return error_response(e)
