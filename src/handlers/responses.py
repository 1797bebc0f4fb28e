"""API Gateway proxy response helpers shared by the HTTP handlers."""

import json
from typing import Any

from core.errors import USER_MESSAGES, ErrorCode

JSON_HEADERS = {"Content-Type": "application/json"}


def json_response(status_code: int, body: str) -> dict[str, Any]:
    return {"statusCode": status_code, "headers": JSON_HEADERS, "body": body}


def error_response(status_code: int, code: ErrorCode) -> dict[str, Any]:
    """Client-facing error: the code and its user message, never internal details."""
    return json_response(status_code, json.dumps({"error": code.value, "message": USER_MESSAGES[code]}))
