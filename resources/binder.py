"""
입력 데이터 바인더

요청 본문(JSON)과 쿼리 스트링으로 리소스의 입력 데이터 컨테이너를 채웁니다.
필드 이름은 대소문자를 구분하지 않으며, 본문 값이 쿼리 값보다 우선합니다.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from resources.base import (
    INPUT_DATA_FILLER_SUFFIX,
    BaseResourceModel,
    InputDataFiller,
    get_input_data_class,
    get_input_filler_class,
)
from resources.exception import (
    InputDataClassNotFoundError,
    InputDataValidationError,
    InvalidBodyError,
)
from resources.model.request import RequestData

logger = logging.getLogger(__name__)


def decode_body(raw_body: bytes | str | None) -> dict[str, Any]:
    """
    요청 본문 디코딩

    Returns:
        dict: 빈 본문이면 빈 dict, 배열 본문은 필드와 매칭될 키가 없으므로 빈 dict

    Raises:
        InvalidBodyError: JSON 파싱 실패 또는 객체/배열이 아닐 때
    """
    if not raw_body:
        return {}

    try:
        result = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        raise InvalidBodyError()

    if isinstance(result, dict):
        return result
    if isinstance(result, list):
        return {}

    raise InvalidBodyError()


def get_input_data_object(resource: BaseResourceModel) -> Any:
    """리소스에 맞는 입력 데이터 인스턴스 생성"""
    name = resource.get_input_data_class_name()
    cls = get_input_data_class(name)

    if cls is None:
        logger.error(f"Input data class not registered: {name}")
        raise InputDataClassNotFoundError(name)

    return cls()


def get_custom_filler(resource: BaseResourceModel) -> InputDataFiller | None:
    """<입력 데이터 이름>HttpFiller 로 등록된 필러가 있으면 인스턴스 반환"""
    name = resource.get_input_data_class_name() + INPUT_DATA_FILLER_SUFFIX
    cls = get_input_filler_class(name)

    if cls is not None:
        filler = cls()
        if isinstance(filler, InputDataFiller):
            return filler
        logger.warning(f"Registered filler does not implement fill(): {name}")

    return None


def _field_names_map(container: Any) -> dict[str, str]:
    """소문자 키 -> 실제 필드 이름 (pydantic alias 포함)"""
    names_map: dict[str, str] = {}

    if isinstance(container, BaseModel):
        for name, info in type(container).model_fields.items():
            names_map[name.lower()] = name
            if info.alias:
                names_map.setdefault(info.alias.lower(), name)
    else:
        for name in vars(container):
            if not name.startswith('_'):
                names_map[name.lower()] = name

    return names_map


def _validation_error(e: ValidationError, field: str) -> InputDataValidationError:
    """pydantic 검증 에러 -> InputDataValidationError (첫 번째 에러 기준)"""
    errors = e.errors()
    if not errors:
        return InputDataValidationError(field, str(e))
    loc = errors[0].get('loc') or (field,)
    return InputDataValidationError(str(loc[0]), errors[0]['msg'])


def _assign(container: Any, name: str, value: Any) -> None:
    try:
        setattr(container, name, value)
    except ValidationError as e:
        raise _validation_error(e, name)


def fill_input_data_container(container: Any, request: RequestData) -> None:
    """기본 바인딩: 본문 -> 쿼리 스트링 순서로 필드 채우기"""
    names_map = _field_names_map(container)
    filled: set[str] = set()

    params = {k.lower(): v for k, v in decode_body(request.body).items()}
    if params:
        for lowercase_name, name in names_map.items():
            if name in filled:
                continue
            if params.get(lowercase_name) is not None:
                _assign(container, name, params[lowercase_name])
                filled.add(name)

    params = {k.lower(): v for k, v in request.params.items()}
    for lowercase_name, name in names_map.items():
        if name in filled:
            continue
        if params.get(lowercase_name) is not None:
            _assign(container, name, params[lowercase_name])
            filled.add(name)

    logger.debug(f"Filled input data {type(container).__name__}: fields={sorted(filled)}")


def bind(resource: Any, request: RequestData) -> None:
    """BaseResourceModel 리소스에 입력 데이터 설정 (필러가 있으면 필러에 위임)"""
    if not isinstance(resource, BaseResourceModel):
        return

    container = get_input_data_object(resource)
    filler = get_custom_filler(resource)

    if filler is None:
        fill_input_data_container(container, request)
    else:
        logger.debug(f"Using custom filler: {type(filler).__name__}")
        try:
            filler.fill(container, request)
        except ValidationError as e:
            raise _validation_error(e, type(container).__name__)

    resource.set_input_data(container)
