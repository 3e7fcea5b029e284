from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

# Monthly mode looks up the CDI once per month, so the term is capped.
MAX_TERM_MONTHS = 600


class SimulationMode(str, Enum):
    """How the principal is invested over the term."""
    lump_sum = "lump_sum"   # Whole principal deposited on day one
    monthly = "monthly"     # Principal split into equal monthly deposits


class SimulationRequest(BaseModel):
    """One simulation request. Built per HTTP call, never persisted."""
    principal: float = Field(..., ge=0, allow_inf_nan=False, description="Amount invested (lump sum) or savings goal (monthly)")
    months: int = Field(..., ge=1, le=MAX_TERM_MONTHS, description="Investment term in months")
    accumulated: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Balance already saved toward the goal")


class SimulationResult(BaseModel):
    """Projected net value of each instrument, rounded to cents."""
    fixed_income_value: float
    savings_value: float
