"""API 모델 패키지"""

from api.model.config import ApiConfig, CorsConfig, LoggingConfig

__all__ = ['ApiConfig', 'CorsConfig', 'LoggingConfig']
