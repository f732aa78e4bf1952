"""
Shared pydantic base for request and response DTOs.

Python attributes stay snake_case; the JSON wire format is camelCase.
Requests accept either spelling (populate_by_name), responses are emitted
by alias, which FastAPI does by default for response_model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, ClassVar, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from shared.datetime_utils import ensure_utc, parse_wall_clock


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    # Columns that cannot be cleared; an explicit null for these is ignored
    not_nullable: ClassVar[frozenset[str]] = frozenset()

    def to_values(self) -> dict[str, Any]:
        """Fields the client actually sent, keyed by column name."""
        values = self.model_dump(exclude_unset=True)
        return {
            k: v for k, v in values.items() if v is not None or k not in self.not_nullable
        }


def _parse_optional_datetime(value: Any) -> Optional[datetime]:
    # ValueError surfaces as a 400 with the field name
    return parse_wall_clock(value)


def _as_utc(value: Any) -> Any:
    if isinstance(value, datetime):
        return ensure_utc(value)
    return value


# Accepts "2026-10-25", "2026-10-25T10:00:00Z", "" (None) on input. Values
# without an offset stay naive; services pin them to the site time zone.
DateOrDateTime = Annotated[Optional[datetime], BeforeValidator(_parse_optional_datetime)]

# Rows read back from SQLite are naive; always emit an explicit UTC offset
UtcDateTime = Annotated[datetime, BeforeValidator(_as_utc)]
OptionalUtcDateTime = Annotated[Optional[datetime], BeforeValidator(_as_utc)]
