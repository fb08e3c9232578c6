# app/utils/query.py
import re
from typing import Any, Dict, List, Optional

def split_csv(value: str) -> List[str]:
    return value.split(",")

def build_employee_query(
    employment_status: Optional[str] = None,
    employee_name: Optional[str] = None,
    join_date: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a MongoDB filter from the optional employee search parameters.

    Set fields (employment status, join date) take comma-separated values and
    match when the stored value is one of them. The name matches as a
    case-insensitive substring. Parameters that are missing or empty add no
    constraint, so an empty call matches every employee.
    """
    query: Dict[str, Any] = {}

    if employment_status:
        query["employmentStatus"] = {"$in": split_csv(employment_status)}

    if employee_name:
        query["employeeName"] = {"$regex": re.escape(employee_name), "$options": "i"}

    if join_date:
        query["joinDate"] = {"$in": split_csv(join_date)}

    return query
