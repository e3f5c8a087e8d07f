# app/models/users.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class UserInfo(BaseModel):
    # JSON keys are camelCase: gmtCreate, gmtModified, userName
    id: Optional[int] = None
    gmt_create: Optional[datetime] = None
    gmt_modified: Optional[datetime] = None
    user_name: Optional[str] = None
    password: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class StatusOut(BaseModel):
    status: str


class UploadOut(BaseModel):
    ok: bool
