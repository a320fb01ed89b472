"""
리소스 리졸버

resourceDir / resourceName 쿼리 파라미터로 레지스트리에서 리소스를 찾아 인스턴스를 만듭니다.
"""

import logging

from resources.base import RestResource, get_resource_class
from resources.exception import (
    ResourceInterfaceError,
    ResourceNameRequiredError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

RESOURCE_SEPARATOR = '.'


def normalize(resource_dir: str | None, resource_name: str | None) -> tuple[str, str]:
    """디렉토리는 소문자, 이름은 첫 글자만 대문자 후 '-' 제거"""
    resource_dir = (resource_dir or '').lower()
    name = (resource_name or '').capitalize()
    return resource_dir, name.replace('-', '')


def get_candidates(base: str, resource_dir: str | None, resource_name: str | None) -> list[str]:
    """
    리소스 이름 후보 생성

    Returns:
        [<base>.<dir>.<Name>, <base>.<dir>.<Name>.<Name>]

    Raises:
        ResourceNameRequiredError: 정규화 후 이름이 비어 있을 때
    """
    resource_dir, name = normalize(resource_dir, resource_name)

    parts = [base] if base else []
    if resource_dir:
        parts.append(resource_dir)
    if not name:
        raise ResourceNameRequiredError()

    parts.append(name)
    qualified = RESOURCE_SEPARATOR.join(parts)

    return [qualified, qualified + RESOURCE_SEPARATOR + name]


def resolve(base: str, resource_dir: str | None, resource_name: str | None) -> RestResource:
    """후보를 순서대로 조회해 처음 등록된 리소스 인스턴스 반환"""
    candidates = get_candidates(base, resource_dir, resource_name)

    for name in candidates:
        cls = get_resource_class(name)
        if cls is not None:
            break
    else:
        logger.warning(f"Resource not found: candidates={candidates}")
        raise ResourceNotFoundError(candidates)

    instance = cls()
    if not isinstance(instance, RestResource):
        logger.warning(f"Resource does not implement RestResource: {name}")
        raise ResourceInterfaceError(name)

    logger.debug(f"Resolved resource: {name} -> {cls.__name__}")
    return instance
