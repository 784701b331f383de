"""Base model configuration for immutable value types."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model for frozen, hashable value types."""

    model_config = ConfigDict(frozen=True, extra="forbid")
