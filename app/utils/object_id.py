# app/utils/object_id.py
from typing import Any
from bson import ObjectId, errors
from fastapi import HTTPException
from app.utils.errors import create_error_response

def parse_object_id(value: str, entity: str = "employee") -> ObjectId:
    """Convert a path parameter to an ObjectId, rejecting malformed ids with a 400"""
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message=f"Invalid {entity} ID format",
                details=f"The provided ID '{value}' is not a valid MongoDB ObjectId",
                example="Expected format: '507f1f77bcf86cd799439011' (24 characters, hexadecimal)"
            )
        )

def stringify_object_ids(value: Any) -> Any:
    """Replace ObjectIds in a stored document, including embedded ones, with strings"""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: stringify_object_ids(v) for k, v in value.items()}
    if isinstance(value, list):
        return [stringify_object_ids(v) for v in value]
    return value
