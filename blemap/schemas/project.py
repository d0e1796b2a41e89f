# File: blemap/schemas/project.py

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ProjectBase(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None


class ProjectCreate(ProjectBase):
    # Opaque to the project API: image reference, size and device lists
    map_data: Dict[str, Any]


class ProjectUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    map_data: Optional[Dict[str, Any]] = None


class ProjectRead(ProjectBase):
    id: str
    user_id: str
    map_data: Dict[str, Any]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
