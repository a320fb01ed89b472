"""API 핸들러 패키지"""

from api.handler.dispatcher import ResourceDispatcher

__all__ = ['ResourceDispatcher']
