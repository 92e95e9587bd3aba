"""
Error Codes - numeric codes carried by every error in an API response
"""


class ErrorCodes:
    """Well-known error codes shared by the response builders and handlers"""

    VALIDATION_ERROR = 1000
    ACCESS_DENIED = 1001
    NOT_FOUND = 1002
    AUTHENTICATION_REQUIRED = 1003
    BAD_REQUEST = 1004
    INTERNAL_ERROR = 1005
