from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from resources.model.request import RequestData
from resources.model.result import ResourceResult

__all__ = [
    'resource', 'input_data', 'input_filler',
    'get_resource_class', 'get_input_data_class', 'get_input_filler_class',
    'get_registered_resources',
    'RestResource', 'BaseResourceModel', 'InputData', 'InputDataFiller',
    'ResourceResult', 'RequestData',
    'INPUT_DATA_FILLER_SUFFIX',
]

INPUT_DATA_FILLER_SUFFIX = 'HttpFiller'

# 레지스트리 (모듈 레벨)
_registry: dict[str, type] = {}
_input_data_registry: dict[str, type["InputData"]] = {}
_filler_registry: dict[str, type] = {}


def resource(name: str):
    """리소스 등록 데코레이터 (예: "v1.shop.Order")"""
    def decorator(cls):
        _registry[name] = cls
        return cls
    return decorator


def input_data(name: str):
    """입력 데이터 클래스 등록 데코레이터"""
    def decorator(cls):
        _input_data_registry[name] = cls
        return cls
    return decorator


def input_filler(input_data_name: str):
    """입력 데이터 커스텀 필러 등록 데코레이터 (이름 + HttpFiller 로 등록)"""
    def decorator(cls):
        _filler_registry[input_data_name + INPUT_DATA_FILLER_SUFFIX] = cls
        return cls
    return decorator


def get_resource_class(name: str) -> type | None:
    return _registry.get(name)


def get_input_data_class(name: str) -> type["InputData"] | None:
    return _input_data_registry.get(name)


def get_input_filler_class(name: str) -> type | None:
    return _filler_registry.get(name)


def get_registered_resources() -> dict[str, type]:
    """등록된 리소스 목록 반환 (테스트용)"""
    return _registry.copy()


@runtime_checkable
class RestResource(Protocol):
    """REST 리소스 프로토콜 (메서드는 동기/비동기 모두 허용)"""

    def create(self) -> Any: ...

    def index(self) -> Any: ...

    def view(self) -> Any: ...

    def update(self) -> Any: ...

    def delete(self) -> Any: ...

    def upsert(self) -> Any: ...


class InputData(BaseModel):
    """입력 데이터 컨테이너 기본 클래스"""
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)


@runtime_checkable
class InputDataFiller(Protocol):
    """입력 데이터 커스텀 필러 프로토콜"""

    def fill(self, container: InputData, request: RequestData) -> None: ...


class BaseResourceModel(ABC):
    """구조화된 입력을 받는 리소스 기본 클래스"""

    def __init__(self):
        self._input_data: InputData | None = None

    @abstractmethod
    def get_input_data_class_name(self) -> str:
        """@input_data 로 등록된 입력 데이터 클래스 이름"""
        pass

    def set_input_data(self, data: InputData) -> None:
        self._input_data = data

    @property
    def input_data(self) -> InputData | None:
        return self._input_data
