from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class PlannerRouteStep(BaseModel):
    type: Optional[str] = None
    job_index: Optional[int] = None
    distance: Optional[float] = None
    time: Optional[float] = None


class PlannerAgentResult(BaseModel):
    agent_index: int = 0
    route: List[PlannerRouteStep] = Field(default_factory=list)
    distance: float = 0.0
    time: float = 0.0


class RoutePlannerResponse(BaseModel):
    """Optimised plan: one entry per agent that was given work."""

    properties: Optional[Dict[str, Any]] = None
    agents: List[PlannerAgentResult] = Field(default_factory=list)
