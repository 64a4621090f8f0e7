"""
Scoreboard API Response Models

Pydantic models for validating the raw scoreboard payloads before they
are reshaped.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel


class ScoreRecord(BaseModel):
    """One image entry from the team summary endpoint."""

    image: str  # e.g. 'Win10_Desktop_HS'
    duration: str  # e.g. '03:58:12'
    found: int
    remaining: int
    penalties: int
    ccs_score: Union[int, float]
    location: Optional[str] = None
    division: Optional[str] = None
    tier: Optional[str] = None


class ScoresPayload(BaseModel):
    """Response from scores.php."""

    data: Optional[List[ScoreRecord]] = None


class ChartColumn(BaseModel):
    label: str = ""
    type: Optional[str] = None


class ChartCell(BaseModel):
    v: Any = None


class ChartRow(BaseModel):
    c: List[Optional[ChartCell]] = []


class ChartPayload(BaseModel):
    """Response from chart.php (chart-style table)."""

    cols: List[ChartColumn] = []
    rows: List[ChartRow] = []
