"""
리소스 API 로깅 설정

요청 단위 컨텍스트(action, resourceDir, resourceName)를 로그 레코드에 붙여
JSON(ELK/Loki 수집용) 또는 텍스트 포맷으로 출력합니다.
"""

import logging
import sys
from typing import Any

from pythonjsonlogger.json import JsonFormatter

# 요청 컨텍스트로 로그 레코드에 추가되는 필드
CONTEXT_FIELDS = ('action', 'resource_dir', 'resource_name')


def _resource_label(resource_dir: str | None, resource_name: str | None) -> str:
    """로그 표시용 리소스 이름 (dir/name)"""
    if resource_dir:
        return f"{resource_dir}/{resource_name or ''}"
    return resource_name or ''


class RequestContextAdapter(logging.LoggerAdapter):
    """요청 컨텍스트를 extra 로 전달하는 로거 어댑터"""

    def process(self, msg, kwargs):
        kwargs['extra'] = {**self.extra, **kwargs.get('extra', {})}
        return msg, kwargs


def get_request_logger(
    logger: logging.Logger,
    action: str,
    resource_dir: str | None,
    resource_name: str | None,
) -> RequestContextAdapter:
    """디스패치 요청용 로거 반환"""
    return RequestContextAdapter(logger, {
        'action': action,
        'resource_dir': resource_dir or '',
        'resource_name': resource_name or '',
    })


class CustomJsonFormatter(JsonFormatter):
    """JSON 로그 포매터 (요청 컨텍스트는 resource 필드로 묶음)"""

    def add_fields(self, log_record: dict[str, Any], record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = self.formatTime(record)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        if hasattr(record, 'action'):
            log_record['resource'] = _resource_label(
                getattr(record, 'resource_dir', ''),
                getattr(record, 'resource_name', ''),
            )


class ContextTextFormatter(logging.Formatter):
    """텍스트 포매터 - 요청 컨텍스트가 있으면 [action resource] 접두어 추가"""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not hasattr(record, 'action'):
            return text

        label = _resource_label(
            getattr(record, 'resource_dir', ''),
            getattr(record, 'resource_name', ''),
        )
        return f"[{record.action} {label}] {text}"


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_file: str | None = None
) -> None:
    """
    로깅 설정

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: JSON 포맷 사용 여부 (False면 텍스트 포맷)
        log_file: 로그 파일 경로 (None이면 stdout만 사용)
    """
    if json_format:
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
    else:
        formatter = ContextTextFormatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=getattr(logging, level.upper()), handlers=handlers, force=True)

    # uvicorn 접근 로그는 라우터 로그와 중복
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
