# Schemas package
from scoreboard_proxy.schemas.team import (
    HistoryElement,
    ImageIssues,
    Ranking,
    TeamImage,
    TeamInfoResult,
)

__all__ = [
    "HistoryElement",
    "ImageIssues",
    "Ranking",
    "TeamImage",
    "TeamInfoResult",
]
