"""
Reporting Endpoints

Read-only reports over the user table.
"""
import logging
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from taskhub.modules.users.api.user_endpoints import UserResponse, get_user_service
from taskhub.modules.users.services.user_service import UserService

logger = logging.getLogger("taskhub.reports")

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/new-users", response_model=List[UserResponse])
async def new_users_report(
    created_from: Optional[datetime] = Query(None, alias="from", description="Inclusive lower bound on creation time"),
    created_to: Optional[datetime] = Query(None, alias="to", description="Inclusive upper bound on creation time"),
    user_service: UserService = Depends(get_user_service)
):
    """Users whose creation timestamp falls within [from, to]."""
    users = await user_service.list_new_users(created_from, created_to)
    logger.debug(f"[report_endpoints.new_users_report] {len(users)} users in window")
    return [user.to_dict() for user in users]
