"""Base model configuration for value objects."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model with strict field validation."""

    model_config = ConfigDict(frozen=True, extra="forbid")
