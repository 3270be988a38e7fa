from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class StepConfig(BaseModel):
    """One step of a FeatureEngineer configuration."""

    name: str
    transformer: str  # MinMaxScaler, StandardScaler, Binarizer
    params: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", "transformer")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v
