"""
JSend response envelopes: {status, data} for success/fail, {status, message} for error.
"""
from typing import Any, Dict, Optional


def success(data: Any = None) -> Dict[str, Any]:
    return {"status": "success", "data": data}


def fail(data: Any = None) -> Dict[str, Any]:
    return {"status": "fail", "data": data}


def error(message: str, data: Optional[Any] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"status": "error", "message": message}
    if data is not None:
        body["data"] = data
    return body
