"""
Utility functions for the application.
"""
from typing import Dict
from fastapi.responses import JSONResponse


def format_error(message: str) -> Dict[str, str]:
    """Format error response."""
    return {"error": message}


def error_response(message: str, status_code: int) -> JSONResponse:
    """JSON error payload in the {"error": ...} shape used by the chat endpoint."""
    return JSONResponse(status_code=status_code, content=format_error(message))
