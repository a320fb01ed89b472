"""
요청 데이터 모델 - 프레임워크와 무관한 요청 스냅샷
"""

from dataclasses import dataclass, field


@dataclass
class RequestData:
    """바인딩에 필요한 요청 정보"""
    body: bytes = b""
    query: dict[str, str] = field(default_factory=dict)
    path_params: dict[str, str] = field(default_factory=dict)

    @property
    def params(self) -> dict[str, str]:
        """쿼리 스트링 + 경로 파라미터 (경로 파라미터 우선)"""
        return {**self.query, **self.path_params}
