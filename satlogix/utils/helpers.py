"""
Helper Utilities
Common helper functions
"""

from fastapi.responses import JSONResponse
from typing import Dict, Any
import uuid


def generate_id() -> str:
    """
    Generate a primary key for a new record

    Returns:
        str: Random UUID4 string
    """
    return str(uuid.uuid4())


def changed_fields(data: Dict[str, Any]) -> str:
    """Summarize the fields of an update for the audit log"""
    return ", ".join(sorted(data.keys())) or "nothing"


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    """
    Build the failure envelope returned by every route

    Args:
        message: Fixed, operation specific error message
        status_code: HTTP status code

    Returns:
        JSONResponse: {"success": false, "error": message}
    """
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message}
    )
