# minimal_apis/tasks/schemas.py

"""
Pydantic schemas for the task service API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Body of POST /tarefas and PUT /tarefas/{id}.
# The id is ignored on create and must match the path on update.
class TaskIn(BaseModel):
    id: Optional[int] = Field(None, description="Identifier; must match the path id on update.")
    name: str = Field(..., min_length=1, max_length=255, description="What needs doing.")
    is_completed: bool = Field(False, description="Whether the task is done.")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskResponse(BaseModel):
    id: int
    name: str
    is_completed: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
