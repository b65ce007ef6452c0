"""
Approval Service
Data access for approval requests
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional

from satlogix.models.approval import ApprovalRequest, ApprovalStatus, ApprovalType
from satlogix.schemas.approval import ApprovalRequestCreate
from satlogix.utils.exceptions import RecordNotFoundError
from satlogix.utils.logger import setup_logger, log_audit

logger = setup_logger()


class ApprovalService:
    """
    Service for approval requests

    Requests are stored as given: requestId is not checked against the
    booking or expense table, and status changes do not touch the
    target record.
    """

    def get_approval_requests(
        self,
        db: Session,
        status: Optional[ApprovalStatus] = None,
        type: Optional[ApprovalType] = None,
        requester_id: Optional[str] = None,
        approver_id: Optional[str] = None
    ) -> List[ApprovalRequest]:
        """List approval requests, newest first"""
        query = db.query(ApprovalRequest)

        if status:
            query = query.filter(ApprovalRequest.status == status)
        if type:
            query = query.filter(ApprovalRequest.type == type)
        if requester_id:
            query = query.filter(ApprovalRequest.requester_id == requester_id)
        if approver_id:
            query = query.filter(ApprovalRequest.approver_id == approver_id)

        return query.order_by(ApprovalRequest.created_at.desc()).all()

    def get_approval_request(self, db: Session, approval_id: str) -> Optional[ApprovalRequest]:
        return db.query(ApprovalRequest).filter(ApprovalRequest.id == approval_id).first()

    def create_approval_request(self, db: Session, data: ApprovalRequestCreate) -> ApprovalRequest:
        approval = ApprovalRequest(**data.model_dump())

        try:
            db.add(approval)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(approval)
        log_audit(
            approval.requester_id,
            "create_approval_request",
            f"approval={approval.id} type={approval.type.value} target={approval.request_id}"
        )
        return approval

    def update_approval_status(
        self,
        db: Session,
        approval_id: str,
        status: ApprovalStatus,
        approver_id: Optional[str] = None,
        comments: Optional[str] = None
    ) -> ApprovalRequest:
        """
        Record a decision on an approval request

        Args:
            db: Database session
            approval_id: Approval request id
            status: New status
            approver_id: User deciding; kept unchanged when omitted
            comments: Decision comments; kept unchanged when omitted
        """
        approval = self.get_approval_request(db, approval_id)
        if not approval:
            raise RecordNotFoundError("ApprovalRequest", approval_id)

        approval.status = status
        if approver_id is not None:
            approval.approver_id = approver_id
        if comments is not None:
            approval.comments = comments

        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(approval)
        log_audit(
            approval.approver_id or approval.requester_id,
            "update_approval_status",
            f"approval={approval.id} status={status.value}"
        )
        logger.info(f"Approval request {approval.id} is now {status.value}")
        return approval

    def delete_approval_request(self, db: Session, approval_id: str) -> str:
        approval = self.get_approval_request(db, approval_id)
        if not approval:
            raise RecordNotFoundError("ApprovalRequest", approval_id)

        requester_id = approval.requester_id
        try:
            db.delete(approval)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        log_audit(requester_id, "delete_approval_request", f"approval={approval_id}")
        return approval_id


# Create singleton instance
approval_service = ApprovalService()
