"""Core task model for the simple task API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskModel(BaseModel):
    """A single to-do record.

    The on-disk and wire representation uses ``createdAt``; Python code uses
    ``created_at``. Unknown keys found in the task file are kept so that a
    load/save cycle does not drop them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    title: str
    completed: bool = False
    created_at: str = Field(alias="createdAt")

    def to_wire(self) -> dict[str, Any]:
        """Dump using the wire field names."""
        return self.model_dump(by_alias=True)
