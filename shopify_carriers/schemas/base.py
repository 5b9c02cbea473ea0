"""
Base schemas with common functionality.
"""
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Type, TypeVar

T = TypeVar('T', bound='BaseSchema')

class BaseSchema(BaseModel):
    """Immutable base schema for Shopify wire payloads"""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True
    )

    @classmethod
    def from_json(cls: Type[T], payload: Any) -> T:
        """Build an instance from a JSON string/bytes or an already decoded dict"""
        if isinstance(payload, (str, bytes, bytearray)):
            return cls.model_validate_json(payload)
        return cls.model_validate(payload)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with unset fields omitted"""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)
