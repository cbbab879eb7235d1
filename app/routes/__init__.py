#app/routes/__init__.py

from .employee import router as employee_router
from .admin import router as admin_router
