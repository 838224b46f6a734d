"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ApiModel(BaseModel):
    """Request/response model exchanged with the web frontend.

    Fields are snake_case in Python and camelCase on the wire
    (``address_line1`` <-> ``addressLine1``). Identifiers are exposed as
    ``_id``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
