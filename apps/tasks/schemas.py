"""
API Schemas for Tasks app.
Ninja schemas for request/response validation. Wire names are camelCase.
"""
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from ninja import Schema


class CamelSchema(Schema):
    """Accepts and emits camelCase keys (isCompleted, createdAt)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Request Schemas
# =============================================================================

class TaskIn(CamelSchema):
    """Schema for creating a task."""
    title: str
    description: str
    is_completed: bool = False


class TaskUpdateIn(CamelSchema):
    """Schema for replacing a task. Every field is required."""
    title: str
    description: str
    is_completed: bool


# =============================================================================
# Response Schemas
# =============================================================================

class TaskOut(CamelSchema):
    id: str
    title: str
    description: str
    is_completed: bool
    created_at: int


class MessageOut(Schema):
    message: str


class ErrorOut(Schema):
    """Error response."""
    error: str
