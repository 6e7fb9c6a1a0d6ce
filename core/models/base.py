"""Base record model shared by every in-memory collection.

Provides:
- Record: pydantic base with id and audit timestamps
- utcnow(): the single clock used for created_at/updated_at

Records serialise with camelCase keys (createdAt, updatedAt) so the JSON
shape matches what the front-end reads, while Python code keeps snake_case.
Input accepts either spelling.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


class Record(BaseModel):
    """Base for stored records.

    Adds:
    - id: string key assigned by the repository, never changes
    - created_at: set once on create
    - updated_at: refreshed on every update, never earlier than created_at
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
