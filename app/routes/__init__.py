#app/routes/__init__.py

from .hello import router as hello_router
from .employee import router as employee_router
from .user import router as user_router
