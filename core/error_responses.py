"""
ERROR_RESPONSES.PY - One error envelope for every Sync Six route

Body shape (400 and 500 alike):

    {
        "status": "error",
        "error": "Missing parameters (team or season)",   # what older clients read
        "details": "ConnectError: ...",                   # 500s only
        "errors": [{"code": "MISSING_PARAMETER", "message": "...", "field": "team"}],
        "request_id": "req-3f9a1c0b7d2e",
        "timestamp": "2025-10-26T17:00:00+00:00"
    }

Routes call error_json(); make_error() builds just the dict.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fastapi.responses import JSONResponse

from core.dates import format_as_of
from core.structured_logging import get_request_id


class ErrorCode:
    """Machine-readable codes carried in errors[].code."""

    # 400
    MISSING_PARAMETER = "MISSING_PARAMETER"
    INVALID_DATE = "INVALID_DATE"
    INVALID_PARAMETER = "INVALID_PARAMETER"

    # 500
    API_ERROR = "API_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ErrorDetail:
    code: str
    message: str
    field: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        detail = {"code": self.code, "message": self.message}
        if self.field is not None:
            detail["field"] = self.field
        return detail


@dataclass
class ErrorResponse:
    """Envelope; None members are left out of the JSON."""
    status: str = "error"
    error: Optional[str] = None
    details: Optional[str] = None
    errors: List[ErrorDetail] = field(default_factory=list)
    request_id: Optional[str] = None
    timestamp: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"status": self.status}
        optional = (
            ("error", self.error),
            ("details", self.details),
            ("errors", [e.to_dict() for e in self.errors] or None),
            ("request_id", self.request_id),
            ("timestamp", self.timestamp),
        )
        for key, value in optional:
            if value is not None:
                body[key] = value
        return body


def make_error(
    code: str,
    message: str,
    field: Optional[str] = None,
    details: Optional[str] = None,
    request_id: Optional[str] = None,
    include_timestamp: bool = True,
) -> Dict[str, Any]:
    """
    Build the error body.

    Example:
        >>> make_error(ErrorCode.API_ERROR, "Server error", details="timed out",
        ...            include_timestamp=False)
        {'status': 'error', 'error': 'Server error', 'details': 'timed out', 'errors': [{'code': 'API_ERROR', 'message': 'Server error'}]}
    """
    return ErrorResponse(
        error=message,
        details=details,
        errors=[ErrorDetail(code=code, message=message, field=field)],
        request_id=request_id,
        timestamp=format_as_of() if include_timestamp else None,
    ).to_dict()


def error_json(
    status_code: int,
    code: str,
    message: str,
    field: Optional[str] = None,
    details: Optional[str] = None,
) -> JSONResponse:
    """JSONResponse with the envelope, stamped with the current request id."""
    return JSONResponse(
        status_code=status_code,
        content=make_error(
            code=code,
            message=message,
            field=field,
            details=details,
            request_id=get_request_id(),
        ),
    )


__all__ = [
    'ErrorCode',
    'ErrorDetail',
    'ErrorResponse',
    'make_error',
    'error_json',
]
