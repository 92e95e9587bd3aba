"""
Error model shared by the response builders and exception handler
"""

from .codes import ErrorCodes
from .errors import Error, ErrorList

__all__ = [
    'ErrorCodes',
    'Error',
    'ErrorList',
]
