# routers/__init__.py
from .portone import router as portone_router
from .payments import router as payments_router
from .magazines import router as magazines_router

__all__ = [
     "portone_router",
     "payments_router",
     "magazines_router",
]
