from datetime import datetime
from pathlib import Path
from typing import Optional

from sqlalchemy import DateTime
from sqlalchemy.engine import Engine
from sqlmodel import Field, SQLModel, create_engine

from models import Todo


# --- DB MODELLE ---
# Column order after `key` is the record layout: id, name, completed, created_time.
class TodoRecord(SQLModel, table=True):
    __tablename__ = "todo"

    key: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(index=True)
    name: str
    completed: bool = False
    # Naive local time; the column type is pinned so no UTC-only default applies.
    created_time: Optional[datetime] = Field(default=None, sa_type=DateTime)


def create_store_engine(path: Path) -> Engine:
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)
    return engine


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def record_from_todo(todo: Todo) -> TodoRecord:
    return TodoRecord(
        id=todo.id,
        name=todo.name,
        completed=todo.completed,
        created_time=to_local_naive(todo.created_time),
    )


def apply_todo(record: TodoRecord, todo: Todo) -> None:
    record.id = todo.id
    record.name = todo.name
    record.completed = todo.completed
    record.created_time = to_local_naive(todo.created_time)


def todo_from_record(record: TodoRecord) -> Todo:
    return Todo(
        id=record.id,
        name=record.name,
        completed=bool(record.completed),
        created_time=record.created_time,
    )
