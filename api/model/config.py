"""API 설정 모델"""

from pydantic import BaseModel, Field


class CorsConfig(BaseModel):
    """CORS 설정"""
    origins: list[str] = Field(default_factory=lambda: ['*'])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default_factory=lambda: ['*'])
    allow_headers: list[str] = Field(default_factory=lambda: ['*'])


class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: str = "INFO"
    json_format: bool = True
    log_file: str | None = None


class ApiConfig(BaseModel):
    """Resource API 설정"""
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    debug: bool = False
    resource_base: str = Field(default="v1", description="리소스 이름 앞에 붙는 네임스페이스")
    resource_packages: list[str] = Field(default_factory=lambda: ['resources.v1'])
    cors: CorsConfig = Field(default_factory=CorsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
