from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union
from uuid import UUID

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    id: UUID

    @property
    def message(self) -> str:
        return f"Dictionary record not found with id: {self.id}"


Result: TypeAlias = Union[Ok[T], NotFound]
