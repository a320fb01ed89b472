"""Resource API 서버 진입점"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.handler.dispatcher import ResourceDispatcher
from api.model.config import ApiConfig
from api.router.api import router
from resources.base import get_registered_resources
from resources.loader import load_resources

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent.parent / "config"


def load_config(config_dir: Path = CONFIG_DIR) -> ApiConfig:
    """설정 파일 로드 (api.yaml 이 없으면 기본값)"""
    config_path = Path(config_dir) / "api.yaml"
    if not config_path.exists():
        logger.warning(f"Config file not found, using defaults: {config_path}")
        return ApiConfig()

    with open(config_path, 'r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}

    api_config = raw.get('api', {})
    if 'logging' in raw:
        api_config = {**api_config, 'logging': raw['logging']}

    return ApiConfig(**api_config)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    logger.info(
        f"Resource API started: base={app.state.dispatcher.resource_base}, "
        f"resources={len(get_registered_resources())}"
    )
    yield
    logger.info("Resource API stopped")


def create_app(config: ApiConfig | None = None) -> FastAPI:
    """FastAPI 앱 생성"""
    config = config or load_config()

    # @resource 데코레이터 등록
    load_resources(config.resource_packages)

    app = FastAPI(
        title="Resource API",
        description="resourceDir/resourceName 기반 리소스 디스패치 API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.dispatcher = ResourceDispatcher(config.resource_base)

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.origins,
        allow_credentials=config.cors.allow_credentials,
        allow_methods=config.cors.allow_methods,
        allow_headers=config.cors.allow_headers,
    )

    # TODO: 비공개 API로 전환 시 인증 미들웨어 추가
    app.include_router(router)

    return app
