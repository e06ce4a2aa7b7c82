# schemas.py

import math
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from typing import List, Optional, Union

# --- Raw form input, as typed into the page or posted as JSON ---
class CalculationInput(BaseModel):
    amount: Optional[Union[str, float]] = None
    sons: Optional[Union[str, float]] = None
    daughters: Optional[Union[str, float]] = None

# --- Coerced request handed to the calculator ---
class InheritanceRequest(BaseModel):
    amount: Optional[float] = None   # None when the raw amount did not parse
    sons: int = 0
    daughters: int = 0

# --- Per-heir shares ---
class InheritanceResult(BaseModel):
    son_share: float = Field(alias="sonShare")            # amount due to EACH son
    daughter_share: float = Field(alias="daughterShare")  # amount due to EACH daughter
    model_config = ConfigDict(populate_by_name=True)

    @field_serializer("son_share", "daughter_share", when_used="json")
    def _finite_or_null(self, value: float) -> Optional[float]:
        # JSON has no Infinity; write null like JSON.stringify does
        return value if math.isfinite(value) else None

# --- What the page/endpoint renders: either error, or success + result ---
class CalculationState(BaseModel):
    error: Optional[str] = None
    success: Optional[bool] = None
    result: Optional[InheritanceResult] = None

# --- Validation error detail for malformed request bodies ---
class FieldError(BaseModel):
    field: str
    message: str

class InvalidRequestResponse(BaseModel):
    error: str
    details: List[FieldError]
