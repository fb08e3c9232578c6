# app/routes/employee.py
import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.database import get_database, EMPLOYEE_COLLECTION, DEPARTMENT_COLLECTION
from app.models.employee import EmployeeModel
from app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, EmployeeListOut, EmployeeDetailOut
from app.utils.errors import create_error_response, internal_server_error
from app.utils.object_id import parse_object_id, stringify_object_ids
from app.utils.query import build_employee_query

logger = logging.getLogger(__name__)

router = APIRouter()

def to_employee_out(employee: Dict[str, Any]) -> EmployeeOut:
    return EmployeeOut(**stringify_object_ids(employee))

def employee_not_found(employee_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=create_error_response(
            message="Employee not found",
            details=f"No employee found with ID: {employee_id}",
            example="Please ensure you're using a valid employee ID"
        )
    )

async def resolve_department(db: AsyncIOMotorDatabase, department_name: str) -> Dict[str, Any]:
    """Look up a department by name; an unknown name is a client error"""
    department = await db[DEPARTMENT_COLLECTION].find_one({"departmentName": department_name})
    if not department:
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message="Department not found",
                details=f"No department named '{department_name}'",
                example="Use the name of an existing department, e.g. 'Sales'"
            )
        )
    return department

@router.get("/employeeList", response_model=EmployeeListOut)
async def get_employees(
    employment_status: Optional[str] = Query(None, alias="employmentStatus", description="Comma-separated statuses"),
    employee_name: Optional[str] = Query(None, alias="employeeName", description="Case-insensitive name fragment"),
    join_date: Optional[str] = Query(None, alias="joinDate", description="Comma-separated join dates"),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    try:
        criteria = build_employee_query(
            employment_status=employment_status,
            employee_name=employee_name,
            join_date=join_date,
        )
        logger.debug("Query criteria: %s", criteria)

        employees = await db[EMPLOYEE_COLLECTION].find(criteria).to_list(length=None)
        return EmployeeListOut(employee_list=[to_employee_out(employee) for employee in employees])
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error fetching employee list")
        raise internal_server_error()

@router.get("/employeeList/{employee_id}", response_model=EmployeeDetailOut)
async def get_employee(employee_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        employee_oid = parse_object_id(employee_id)

        employee = await db[EMPLOYEE_COLLECTION].find_one({"_id": employee_oid})
        if employee is None:
            raise employee_not_found(employee_id)

        return EmployeeDetailOut(employee_list=to_employee_out(employee))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error fetching employee %s", employee_id)
        raise internal_server_error()

@router.post("/employeeList", status_code=201)
async def create_employee(employee: EmployeeCreate, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        department = await resolve_department(db, employee.department)

        employee_dict = {**employee.model_dump(), "department": department["departmentName"]}
        document = EmployeeModel(**employee_dict).to_document()

        result = await db[EMPLOYEE_COLLECTION].insert_one(document)
        logger.info("Created employee %s", result.inserted_id)

        return {
            "message": "New employee has been created",
            "employeeId": str(result.inserted_id)
        }
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error creating employee")
        raise internal_server_error()

@router.put("/employeeList/{employee_id}")
async def update_employee(employee_id: str, employee: EmployeeUpdate, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        employee_oid = parse_object_id(employee_id)

        department = await resolve_department(db, employee.department)

        employee_dict = {**employee.model_dump(), "department": department["departmentName"]}
        document = EmployeeModel(**employee_dict).to_document()

        result = await db[EMPLOYEE_COLLECTION].update_one(
            {"_id": employee_oid},
            {"$set": document}
        )

        # No match means no update took place
        if result.matched_count == 0:
            raise employee_not_found(employee_id)

        return {"message": "Employee updated"}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error updating employee %s", employee_id)
        raise internal_server_error()

@router.delete("/employeeList/{employee_id}")
async def delete_employee(employee_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        employee_oid = parse_object_id(employee_id)

        delete_result = await db[EMPLOYEE_COLLECTION].delete_one({"_id": employee_oid})
        if delete_result.deleted_count == 0:
            raise employee_not_found(employee_id)

        return {"message": "Employee has been deleted successfully"}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error deleting employee %s", employee_id)
        raise internal_server_error()
