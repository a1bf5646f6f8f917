from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ContainerRecord(BaseModel):
    """
    One row of `ps --format "{{json .}}"` output. Values are kept as the runtime reports them.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(alias="ID", min_length=1)
    image: str = Field(alias="Image")
    command: str = Field(alias="Command")
    created_at: str = Field(alias="CreatedAt")
    status: str = Field(alias="Status")
    ports: str = Field(alias="Ports")
    names: str = Field(alias="Names")


class ActionResult(BaseModel):
    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "ActionResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "ActionResult":
        return cls(ok=False, error=error)


class Command(Enum):
    LIST_RUNNING = "ps"
    LIST_ALL = "ps -a"
    STOP = "stop"
    PRUNE = "prune"

    @property
    def is_listing(self) -> bool:
        return self in (Command.LIST_RUNNING, Command.LIST_ALL)

    @property
    def label(self) -> str:
        return self.value
