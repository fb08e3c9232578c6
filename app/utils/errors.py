# app/utils/errors.py
from typing import Dict, Any, Optional
from fastapi import HTTPException

def create_error_response(
    message: str,
    details: Optional[str] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response

def internal_server_error() -> HTTPException:
    """Generic 500; the cause is logged, never returned to the client"""
    return HTTPException(
        status_code=500,
        detail=create_error_response(
            message="Internal server error",
            example="Please try again or contact support if the problem persists"
        )
    )
