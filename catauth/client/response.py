"""Response wrapper returned by every AuthClient operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class ApiResponse(Generic[T]):
    """Status code plus either a decoded success body or the raw error body."""

    status_code: int
    body: T | None = None
    error_body: str | None = None

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300

    def parse_error(self, model: type[M]) -> M | None:
        """Decode the raw error body into ``model``; ``None`` when there is no body."""
        if not self.error_body:
            return None
        try:
            return model.model_validate_json(self.error_body)
        except ValidationError as exc:
            raise ValueError(f"error body is not a valid {model.__name__}") from exc
