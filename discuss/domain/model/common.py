"""Base model for all domain records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Records are immutable; updates go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)
