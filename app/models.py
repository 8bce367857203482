from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class FilterMode(str, Enum):
    ALL = "all"
    TODAY = "today"


class Todo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    completed: bool = False
    created_time: Optional[datetime] = None

    def created_on(self, day: date) -> bool:
        if self.created_time is None:
            return False
        created = self.created_time
        if created.tzinfo is not None:
            created = created.astimezone()
        return created.date() == day
