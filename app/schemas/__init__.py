# app/schemas/__init__.py
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, EmployeeListOut, EmployeeDetailOut
from .user import UserCreate, LoginRequest, TokenOut, TokenClaims, ProfileOut
