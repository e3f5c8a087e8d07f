# app/api/users.py

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Query

from app.models.users import StatusOut, UserInfo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

DEFAULT_PASSWORD = "123456"
CREATED_USER_ID = 10
UPDATED_USER_NAME = "update"
UPDATED_PASSWORD = "666666"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("/users", response_model=List[UserInfo])
def list_users(
    name: Optional[str] = Query(
        default=None,
        description="Any non-empty value shortens the list to 3 users",
    ),
) -> List[UserInfo]:
    """
    Return fabricated users: 10 when name is empty or absent, otherwise 3.
    """
    logger.info("name=%r", name)
    logger.info("call userInfos")

    size = 10 if not name else 3

    return [
        UserInfo(
            id=i,
            gmt_create=_now(),
            gmt_modified=_now(),
            user_name=f"Tom{i}",
            password=DEFAULT_PASSWORD,
        )
        for i in range(size)
    ]


@router.post("/userInfo", response_model=UserInfo)
def create_user(user_info: UserInfo) -> UserInfo:
    logger.info("call save")
    user_info.id = CREATED_USER_ID
    logger.info("%r", user_info)
    return user_info


@router.delete("/userInfo/{user_id}", response_model=StatusOut)
def delete_user(user_id: int) -> StatusOut:
    """
    Nothing is stored, so there is nothing to delete; always answers ok.
    """
    logger.info("call delete")
    logger.info("id=%s", user_id)
    return StatusOut(status="ok")


@router.put("/userInfo", response_model=UserInfo)
def update_user(user_info: UserInfo) -> UserInfo:
    """
    Stamp gmtModified and overwrite the credentials; id and gmtCreate pass through.
    """
    logger.info("call update")
    logger.info("%r", user_info)

    user_info.gmt_modified = _now()
    user_info.user_name = UPDATED_USER_NAME
    user_info.password = UPDATED_PASSWORD
    return user_info
