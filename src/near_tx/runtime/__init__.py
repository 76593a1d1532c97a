"""Runtime helpers for near-tx"""

from .errors import *
from .errors import __all__ as _errors_all

__all__ = list(_errors_all)
