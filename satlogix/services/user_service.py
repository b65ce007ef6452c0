"""
User Service
Data access for users
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional

from satlogix.models.user import User, UserRole
from satlogix.schemas.user import UserCreate, UserUpdate
from satlogix.utils.exceptions import RecordNotFoundError
from satlogix.utils.helpers import changed_fields
from satlogix.utils.logger import setup_logger, log_audit

logger = setup_logger()


class UserService:
    """Service for user records"""

    def get_users(
        self,
        db: Session,
        department: Optional[str] = None,
        role: Optional[UserRole] = None
    ) -> List[User]:
        """List users, newest first"""
        query = db.query(User)

        if department:
            query = query.filter(User.department == department)
        if role:
            query = query.filter(User.role == role)

        return query.order_by(User.created_at.desc()).all()

    def get_user(self, db: Session, user_id: str) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def create_user(self, db: Session, data: UserCreate) -> User:
        """
        Create a user

        Raises:
            IntegrityError: If the email is already taken
        """
        user = User(**data.model_dump())

        try:
            db.add(user)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(user)
        log_audit(user.id, "create_user", f"email={user.email} role={user.role.value}")
        logger.info(f"User created: {user.email}")
        return user

    def update_user(self, db: Session, user_id: str, data: UserUpdate) -> User:
        user = self.get_user(db, user_id)
        if not user:
            raise RecordNotFoundError("User", user_id)

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(user, field, value)

        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(user)
        log_audit(user.id, "update_user", changed_fields(changes))
        return user

    def delete_user(self, db: Session, user_id: str) -> str:
        """
        Delete a user

        The database removes the user's bookings, expenses, submitted
        approval requests and locations, and clears approverId on the
        requests they approved.
        """
        user = self.get_user(db, user_id)
        if not user:
            raise RecordNotFoundError("User", user_id)

        email = user.email
        try:
            db.delete(user)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        log_audit(user_id, "delete_user", f"email={email}")
        logger.info(f"User {email} deleted")
        return user_id


# Create singleton instance
user_service = UserService()
