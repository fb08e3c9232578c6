# app/models/employee.py
from typing import Any, Dict, Union
from pydantic import BaseModel, Field

class EmployeeModel(BaseModel):
    id: str = Field(default="", alias="_id")
    employee_name: str = Field(alias="employeeName")
    age: int
    salary: Union[int, float]
    join_date: str = Field(alias="joinDate")
    department: str
    employment_status: str = Field(alias="employmentStatus")

    class Config:
        populate_by_name = True

    def to_document(self) -> Dict[str, Any]:
        """Fields as stored in the employeeList collection, without the id"""
        return self.model_dump(by_alias=True, exclude={"id"})
