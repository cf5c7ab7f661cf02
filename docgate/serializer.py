"""Object to JSON text conversion."""

import enum
import json
import logging
from typing import Any, Optional, Protocol

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class Serializer(Protocol):
    def serialize(self, obj: Any) -> Optional[str]:
        ...


def _default(obj: Any) -> Any:
    """Fallback for objects ``json`` cannot encode on its own."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True)
    if isinstance(obj, enum.Enum):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JsonSerializer:
    """Serialize models, dicts and scalars to compact JSON.

    Models are dumped with their wire aliases.  Returns ``None`` instead
    of raising when *obj* cannot be encoded.
    """

    def __init__(self, *, ensure_ascii: bool = False) -> None:
        self.ensure_ascii = ensure_ascii

    def serialize(self, obj: Any) -> Optional[str]:
        try:
            if isinstance(obj, BaseModel) and not self.ensure_ascii:
                return obj.model_dump_json(by_alias=True)
            return json.dumps(
                obj,
                default=_default,
                ensure_ascii=self.ensure_ascii,
                separators=(",", ":"),
            )
        except (TypeError, ValueError, ValidationError) as exc:
            logger.error("JSON serialization failed: %s", exc)
            return None
