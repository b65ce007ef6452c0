"""
User Routes
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional

from satlogix.config.database import get_db
from satlogix.models.user import UserRole
from satlogix.schemas.user import UserCreate, UserUpdate, UserResponse
from satlogix.services.user_service import user_service
from satlogix.utils.helpers import error_response
from satlogix.utils.logger import setup_logger

logger = setup_logger()
router = APIRouter()


@router.get("")
async def get_users(
    department: Optional[str] = None,
    role: Optional[UserRole] = None,
    db: Session = Depends(get_db)
):
    """List users, optionally filtered by department or role"""
    try:
        users = user_service.get_users(db, department=department, role=role)
        return {"success": True, "data": [UserResponse.model_validate(u) for u in users]}
    except Exception as e:
        logger.error(f"Failed to fetch users: {str(e)}")
        return error_response("Failed to fetch users")


@router.get("/{user_id}")
async def get_user(user_id: str, db: Session = Depends(get_db)):
    try:
        user = user_service.get_user(db, user_id)
        if not user:
            return error_response("User not found", status.HTTP_404_NOT_FOUND)
        return {"success": True, "data": UserResponse.model_validate(user)}
    except Exception as e:
        logger.error(f"Failed to fetch user {user_id}: {str(e)}")
        return error_response("Failed to fetch user")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create a user. A duplicate email fails like any other error."""
    try:
        user = user_service.create_user(db, user_data)
        return {"success": True, "data": UserResponse.model_validate(user)}
    except Exception as e:
        logger.error(f"Failed to create user: {str(e)}")
        return error_response("Failed to create user")


@router.put("/{user_id}")
async def update_user(user_id: str, user_data: UserUpdate, db: Session = Depends(get_db)):
    try:
        user = user_service.update_user(db, user_id, user_data)
        return {"success": True, "data": UserResponse.model_validate(user)}
    except Exception as e:
        logger.error(f"Failed to update user {user_id}: {str(e)}")
        return error_response("Failed to update user")


@router.delete("/{user_id}")
async def delete_user(user_id: str, db: Session = Depends(get_db)):
    """Delete a user together with everything they own"""
    try:
        deleted_id = user_service.delete_user(db, user_id)
        return {"success": True, "data": {"id": deleted_id}}
    except Exception as e:
        logger.error(f"Failed to delete user {user_id}: {str(e)}")
        return error_response("Failed to delete user")
