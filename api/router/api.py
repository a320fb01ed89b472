"""Resource API 라우터"""

import logging

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from api.handler.dispatcher import ResourceDispatcher
from common.logging import get_request_logger
from resources.base import get_registered_resources
from resources.exception import ResourceError
from resources.model import RequestData

logger = logging.getLogger(__name__)

router = APIRouter()


async def _dispatch(
    request: Request,
    action: str,
    resource_dir: str | None,
    resource_name: str | None,
) -> JSONResponse:
    """공통 디스패치 (ResourceError -> HTTPException 변환)"""
    dispatcher: ResourceDispatcher = request.app.state.dispatcher
    log = get_request_logger(logger, action, resource_dir, resource_name)
    data = RequestData(
        body=await request.body(),
        query=dict(request.query_params),
        path_params=dict(request.path_params),
    )

    try:
        status_code, body = await dispatcher.dispatch(action, resource_dir, resource_name, data)
    except ResourceError as e:
        if e.status_code >= 500:
            log.error(f"Dispatch failed ({e.status_code}): {e}")
        else:
            log.warning(f"Dispatch rejected ({e.status_code}): {e}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    log.info(f"Dispatched ({status_code})")
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


# ============================================
# RESOURCE API
# ============================================

@router.get("/resource", tags=["Resource"])
async def index(
    request: Request,
    resource_dir: str | None = Query(default=None, alias="resourceDir", description="리소스 디렉토리"),
    resource_name: str | None = Query(default=None, alias="resourceName", description="리소스 이름"),
):
    """리소스 목록 조회"""
    return await _dispatch(request, "index", resource_dir, resource_name)


@router.get("/resource/{id}", tags=["Resource"])
async def view(
    request: Request,
    id: str,
    resource_dir: str | None = Query(default=None, alias="resourceDir"),
    resource_name: str | None = Query(default=None, alias="resourceName"),
):
    """리소스 상세 조회"""
    return await _dispatch(request, "view", resource_dir, resource_name)


@router.post("/resource", status_code=201, tags=["Resource"])
async def create(
    request: Request,
    resource_dir: str | None = Query(default=None, alias="resourceDir"),
    resource_name: str | None = Query(default=None, alias="resourceName"),
):
    """리소스 생성"""
    return await _dispatch(request, "create", resource_dir, resource_name)


@router.patch("/resource", tags=["Resource"])
async def update(
    request: Request,
    resource_dir: str | None = Query(default=None, alias="resourceDir"),
    resource_name: str | None = Query(default=None, alias="resourceName"),
):
    """리소스 수정"""
    return await _dispatch(request, "update", resource_dir, resource_name)


@router.delete("/resource", tags=["Resource"])
async def delete(
    request: Request,
    resource_dir: str | None = Query(default=None, alias="resourceDir"),
    resource_name: str | None = Query(default=None, alias="resourceName"),
):
    """리소스 삭제"""
    return await _dispatch(request, "delete", resource_dir, resource_name)


@router.put("/resource", tags=["Resource"])
async def upsert(
    request: Request,
    resource_dir: str | None = Query(default=None, alias="resourceDir"),
    resource_name: str | None = Query(default=None, alias="resourceName"),
):
    """리소스 생성 또는 교체"""
    return await _dispatch(request, "upsert", resource_dir, resource_name)


# ============================================
# Health Check
# ============================================

@router.get("/health", tags=["Health"])
async def health_check(request: Request):
    """서버 상태 확인 (liveness probe)"""
    return {
        "status": "healthy",
        "resource_base": request.app.state.dispatcher.resource_base,
        "resources": len(get_registered_resources()),
        "version": "1.0.0",
    }
