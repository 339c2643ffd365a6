"""
Utility helper functions
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from fastapi import Request


def now_rfc3339(offset: Optional[timedelta] = None) -> str:
    """현재 시각을 RFC 3339 문자열로 반환 (로컬 타임존 오프셋 포함)"""
    now = datetime.now().astimezone()
    if offset is not None:
        now = now + offset
    return now.isoformat(timespec="seconds")


async def read_json_object(request: Request) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    """요청 본문을 JSON 객체로 읽기

    Returns:
        tuple: (body, error) - 파싱 실패 시 body는 None, error에 사유
    """
    if not await request.body():
        return None, "request body is empty"
    try:
        body = await request.json()
    except ValueError as e:
        return None, str(e)
    except RecursionError:
        return None, "JSON nesting too deep"
    if not isinstance(body, dict):
        return None, f"expected a JSON object, got {type(body).__name__}"
    return body, None
