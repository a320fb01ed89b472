"""
리소스 핸들러 결과 모델

핸들러가 상태 코드와 메시지를 함께 돌려줄 때 사용합니다.
"""

from typing import Any

from pydantic import BaseModel


class ResourceResult(BaseModel):
    """리소스 실행 결과"""
    status_code: int = 200
    status_message: str = ""
    body_content: Any = None

    @classmethod
    def ok(cls, body: Any = None, status_code: int = 200) -> "ResourceResult":
        return cls(status_code=status_code, status_message="OK", body_content=body)

    @classmethod
    def error(cls, status_code: int, message: str) -> "ResourceResult":
        return cls(status_code=status_code, status_message=message)
