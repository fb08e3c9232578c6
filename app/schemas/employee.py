# app/schemas/employee.py
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field

class EmployeeBase(BaseModel):
    employee_name: str = Field(..., alias="employeeName", min_length=1)
    age: int = Field(..., gt=0)
    salary: Union[int, float] = Field(..., gt=0)
    join_date: str = Field(..., alias="joinDate", min_length=1)
    department: str = Field(..., min_length=1, description="Department name, resolved against the department collection")
    employment_status: str = Field(..., alias="employmentStatus", min_length=1)

    class Config:
        populate_by_name = True

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(EmployeeBase):
    pass

class EmployeeOut(BaseModel):
    # Stored records are returned as found; only writes are validated
    id: str = Field(..., alias="_id")
    employee_name: Optional[str] = Field(None, alias="employeeName")
    age: Optional[Union[int, float]] = None
    salary: Optional[Union[int, float]] = None
    join_date: Optional[str] = Field(None, alias="joinDate")
    department: Any = Field(None, description="Department name, or the embedded department document on older records")
    employment_status: Optional[str] = Field(None, alias="employmentStatus")

    class Config:
        from_attributes = True
        populate_by_name = True

class EmployeeListOut(BaseModel):
    employee_list: List[EmployeeOut] = Field(..., alias="employeeList")

    class Config:
        populate_by_name = True

class EmployeeDetailOut(BaseModel):
    employee_list: EmployeeOut = Field(..., alias="employeeList")

    class Config:
        populate_by_name = True
