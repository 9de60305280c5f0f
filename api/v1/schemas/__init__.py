"""Re-export individual schema modules for easy imports."""

from .bmi import BMIOut
from .rec import RecRequest, RecResponse

__all__ = [
    "BMIOut",
    "RecRequest",
    "RecResponse",
]
