"""Immutable value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable multi-field value, equal when all its fields are equal."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, such as a source identifier."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
