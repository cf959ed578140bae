from pydantic import BaseModel, Field
from typing import List, Optional

from app.config.settings import settings

class RoundDTO(BaseModel):
    index: int
    groups: List[List[int]] = Field(default_factory=list)
    conflicts: int = 0  # residual conflicts when the round was accepted
    attempts: int = 0
    best_effort: bool = False

    @property
    def sizes(self) -> List[int]:
        return [len(g) for g in self.groups]

    @property
    def members(self) -> List[int]:
        return sorted(m for g in self.groups for m in g)

class GenerateRequest(BaseModel):
    # lower bounds are checked by the group service (HTTP 400)
    members: Optional[int] = Field(None, le=settings.MAX_MEMBERS)
    rounds: Optional[int] = Field(None, le=settings.MAX_ROUNDS)
    seed: Optional[int] = None

class GenerateResponse(BaseModel):
    members: int
    rounds: int
    seed: Optional[int] = None
    results: List[RoundDTO] = Field(default_factory=list)
