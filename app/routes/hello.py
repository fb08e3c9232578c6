# app/routes/hello.py
from typing import Optional
from fastapi import APIRouter, HTTPException
from app.utils.errors import create_error_response

router = APIRouter()

QUOTE_OF_THE_DAY = "The smallest things take up the most room in your heart!"

def parse_number(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message="Invalid number",
                details=f"'{value}' is not a number",
                example="/addTwo/3/4"
            )
        )

def format_number(value: float):
    return int(value) if value.is_integer() else value

@router.get("/")
async def root():
    return {"message": "Hello World!"}

@router.get("/quote-of-the-day")
async def quote_of_the_day():
    return {"quote": QUOTE_OF_THE_DAY}

@router.get("/hello/{name}")
async def hello(name: str):
    return {"message": f"Hello {name}"}

@router.get("/addTwo/{number1}/{number2}")
async def add_two(number1: str, number2: str):
    # URL parameters always arrive as strings
    total = parse_number(number1) + parse_number(number2)
    return {"message": f"The sum is {format_number(total)}"}

@router.get("/employee")
async def echo_employee(employeeName: Optional[str] = None, joinDate: Optional[str] = None):
    return {
        "Employee Name": employeeName,
        "Date of Join": joinDate
    }
