"""
Centralized Error Handling and Logging System
Maps service failures and exceptions to the API's ``{"error": ...}`` bodies,
with structured error logs tied to a per-request trace ID.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union
from contextvars import ContextVar

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from services.base_service import ServiceResult
from services.test_data_service import TestDataError
from utils.validation import ValidationError, violations_from_errors

# Context variables for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "Erreur de validation"
SERVER_ERROR = "Erreur serveur"

class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    SANITIZE_SENSITIVE_FIELDS = True
    SENSITIVE_FIELD_PATTERNS = [
        'password', 'token', 'key', 'secret', 'authorization',
        'auth', 'bearer', 'credential', 'apikey'
    ]
    MAX_LOG_VALUE_SIZE = 5000
    LOG_CLIENT_ERRORS = False  # 4xx responses are expected traffic

    @classmethod
    def is_sensitive_field(cls, field_name: str) -> bool:
        field_lower = field_name.lower()
        return any(pattern in field_lower for pattern in cls.SENSITIVE_FIELD_PATTERNS)

    @classmethod
    def sanitize_data(cls, data: Union[Dict, str, Any]) -> Any:
        """Recursively sanitize sensitive data from logs"""
        if not cls.SANITIZE_SENSITIVE_FIELDS:
            return data

        if isinstance(data, dict):
            return {
                key: "***REDACTED***" if cls.is_sensitive_field(str(key)) else cls.sanitize_data(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [cls.sanitize_data(item) for item in data]
        elif isinstance(data, str) and len(data) > cls.MAX_LOG_VALUE_SIZE:
            return data[:cls.MAX_LOG_VALUE_SIZE] + "...[TRUNCATED]"
        else:
            return data

class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log structured error with full context; returns the trace ID"""
        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            headers = dict(request.headers)
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "headers": ErrorHandlingConfig.sanitize_data(headers),
                "client_ip": request.client.host if request.client else None
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception)
            }
            if include_traceback:
                log_entry["exception"]["traceback"] = traceback.format_exc()

        if extra_context:
            log_entry["context"] = ErrorHandlingConfig.sanitize_data(extra_context)

        logger.error(json.dumps(log_entry, indent=2, default=str))
        return trace_id

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware assigning a trace ID to every request and response"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        request.state.trace_id = trace_id

        try:
            response = await call_next(request)
        except Exception as exc:
            # ServerErrorMiddleware sits outside this middleware and would drop the header
            response = await general_exception_handler(request, exc)
        response.headers["X-Trace-ID"] = trace_id
        return response

def _validation_response(details) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": VALIDATION_ERROR,
            "message": "Données invalides",
            "details": [violation.to_dict() for violation in details]
        }
    )

# Global Exception Handlers
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP exceptions as ``{"error": detail}``"""
    if exc.status_code >= 500 or ErrorHandlingConfig.LOG_CLIENT_ERRORS:
        StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            exception=exc,
            include_traceback=False
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )

async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle schema violations raised by the write paths"""
    logger.info(f"Validation failed on {request.method} {request.url.path}: {len(exc.details)} violation(s)")
    return _validation_response(exc.details)

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle unparseable or mistyped request bodies the same way as schema violations"""
    errors = []
    for error in exc.errors():
        # Drop the leading "body"/"path" marker FastAPI adds to locations
        loc = tuple(error.get("loc", ()))[1:]
        errors.append({**error, "loc": loc})
    logger.info(f"Request validation failed on {request.method} {request.url.path}: {len(errors)} error(s)")
    return _validation_response(violations_from_errors(errors))

async def remote_function_error_handler(request: Request, exc: TestDataError) -> JSONResponse:
    StructuredLogger.log_error(
        "remote_function_error",
        f"Remote function {exc.function_name} failed: {exc.message}",
        request=request,
        extra_context={"function": exc.function_name, "status_code": exc.status_code},
        include_traceback=False
    )
    return JSONResponse(status_code=502, content={"error": exc.message})

async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions without exposing internals"""
    StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc,
        include_traceback=True
    )
    return JSONResponse(status_code=500, content={"error": SERVER_ERROR})

def setup_error_handling(app):
    """Setup error handling for the FastAPI app"""
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(TestDataError, remote_function_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling initialized")

def raise_for_result(
    result: ServiceResult,
    not_found: str = "Ressource non trouvée",
    server_error: Optional[str] = None
):
    """
    Raise the HTTPException matching a failed ServiceResult

    RESOURCE_NOT_FOUND -> 404 with ``not_found``; CONFLICT -> 409; anything
    else -> 500 carrying ``server_error`` when given, otherwise the backend
    message verbatim.
    """
    if result.success:
        return
    if result.error_type == "RESOURCE_NOT_FOUND":
        raise HTTPException(status_code=404, detail=not_found)
    if result.error_type == "CONFLICT":
        raise HTTPException(status_code=409, detail=result.error)
    raise HTTPException(status_code=500, detail=server_error or result.error)
