# app/crud/__init__.py
from . import department, employee, user
