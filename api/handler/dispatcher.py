"""
리소스 디스패처

리소스 해석 -> 입력 데이터 바인딩 -> 동작 메서드 호출 -> 결과를 상태 코드/본문으로 변환.
"""

import inspect
import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool

from resources.base import RestResource
from resources.binder import bind
from resources.exception import InvalidResultStatusError, ResourceResultError
from resources.model import RequestData, ResourceResult
from resources.resolver import resolve

logger = logging.getLogger(__name__)

# 동작별 기본 상태 코드 (ResourceResult 가 아닌 결과에 적용)
ACTION_STATUS: dict[str, int] = {
    'index': 200,
    'view': 200,
    'create': 201,
    'update': 200,
    'delete': 200,
    'upsert': 200,
}


class ResourceDispatcher:
    """리소스 디스패처"""

    def __init__(self, resource_base: str = "v1"):
        self._resource_base = resource_base

    @property
    def resource_base(self) -> str:
        return self._resource_base

    def init_resource(
        self,
        resource_dir: str | None,
        resource_name: str | None,
        request: RequestData,
    ) -> RestResource:
        """리소스 인스턴스 생성 및 입력 데이터 설정"""
        resource = resolve(self._resource_base, resource_dir, resource_name)
        bind(resource, request)
        return resource

    async def dispatch(
        self,
        action: str,
        resource_dir: str | None,
        resource_name: str | None,
        request: RequestData,
    ) -> tuple[int, Any]:
        """
        동작 실행

        Args:
            action: index, view, create, update, delete, upsert 중 하나
            resource_dir: resourceDir 쿼리 파라미터
            resource_name: resourceName 쿼리 파라미터
            request: 요청 데이터

        Returns:
            (상태 코드, 응답 본문)

        Raises:
            ResourceError: 해석/바인딩 실패 또는 핸들러가 201 초과 상태를 반환한 경우
        """
        if action not in ACTION_STATUS:
            raise ValueError(f"Unknown action: {action}")

        resource = self.init_resource(resource_dir, resource_name, request)

        method = getattr(resource, action)
        if inspect.iscoroutinefunction(method):
            result = await method()
        else:
            # 동기 메서드는 스레드풀에서 실행
            result = await run_in_threadpool(method)

        logger.debug(f"Dispatched {type(resource).__name__}.{action}")
        return self.translate(result, ACTION_STATUS[action])

    @staticmethod
    def translate(result: Any, status_code: int) -> tuple[int, Any]:
        """핸들러 결과를 (상태 코드, 본문)으로 변환"""
        if isinstance(result, ResourceResult):
            if not 100 <= result.status_code <= 599:
                logger.error(f"Resource returned invalid status code: {result.status_code}")
                raise InvalidResultStatusError(result.status_code)
            if result.status_code > 201:
                raise ResourceResultError(result.status_code, result.status_message)
            return result.status_code, result.body_content

        return status_code, result
