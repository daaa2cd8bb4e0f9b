# models/__init__.py
from .base import Base
from .payment import PaymentRecord, PaymentStatus
from .magazine import Magazine

__all__ = [
     "Base",
     "PaymentRecord",
     "PaymentStatus",
     "Magazine",
]
