from minute_events.core.types._exception_types import (
    TRANSPORT_EXCEPTIONS,
    ErrorCode,
    ErrorDomain,
)

__all__ = [
    "ErrorCode",
    "ErrorDomain",
    "TRANSPORT_EXCEPTIONS",
]
