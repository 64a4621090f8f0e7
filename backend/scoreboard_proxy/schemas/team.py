from datetime import datetime
from datetime import time as dt_time
from typing import Dict, List, Optional, Union

from pydantic import BaseModel


class ImageIssues(BaseModel):
    found: int
    remaining: int


class TeamImage(BaseModel):
    name: str
    runtime: str
    issues: ImageIssues
    penalties: int
    score: Union[int, float]
    # Upstream does not report these yet
    multiple: bool = False
    overtime: bool = False


class Ranking(BaseModel):
    national: int = 1
    state: int = 1


class HistoryElement(BaseModel):
    time: dt_time
    images: Dict[str, Optional[Union[int, float]]]


class TeamInfoResult(BaseModel):
    images: List[TeamImage]
    ranking: Ranking = Ranking()
    history: List[HistoryElement]
    updated: datetime
    location: Optional[str] = None
    division: Optional[str] = None
    tier: Optional[str] = None
    runtime: str
