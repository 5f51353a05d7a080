import time
from dataclasses import dataclass, field


def current_millis() -> int:
    """Current time as integer epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Task:
    """
    Domain Task record.

    Frozen so the store can hand out values without exposing its
    canonical records to mutation.
    """
    id: str
    title: str
    description: str
    is_completed: bool = False
    created_at: int = field(default_factory=current_millis)
