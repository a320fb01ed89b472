"""
Resource API 테스트

테스트 항목:
1. 동작별 라우팅 (GET/GET id/POST/PATCH/DELETE/PUT)
2. POST 기본 201, ResourceResult 상태 코드 반영
3. 201 초과 상태 -> HTTP 에러 (핸들러 메시지)
4. 빈 resourceName 400, 미등록 리소스 501
5. 잘못된 JSON 본문 400
6. <Name>.<Name> 후보와 커스텀 필러
7. 허용되지 않은 메서드 405

실행: python -m pytest test/api_test.py -v
"""

import logging
import sys
import threading
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# 프로젝트 루트 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.handler.dispatcher import ResourceDispatcher
from api.main import create_app, load_config
from api.model.config import ApiConfig
from resources.base import _registry, resource
from resources.exception import InvalidResultStatusError, ResourceResultError
from resources.model import RequestData, ResourceResult

# 테스트용 로깅 설정
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SHOP_ORDER = {"resourceDir": "shop", "resourceName": "order"}
SHOP_CUSTOMER = {"resourceDir": "shop", "resourceName": "customer"}


@pytest.fixture
def app():
    """테스트용 FastAPI 앱"""
    return create_app(ApiConfig())


@pytest_asyncio.fixture
async def client(app):
    """테스트용 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture(autouse=True)
def clean_store():
    """샘플 리소스 저장소 초기화"""
    from resources.v1.shop.customer import clear_customers
    from resources.v1.shop.order import clear_orders

    clear_orders()
    clear_customers()
    yield
    clear_orders()
    clear_customers()


class TestOrderCRUD:
    """v1.shop.Order 리소스 CRUD 테스트"""

    @pytest.mark.asyncio
    async def test_create_order(self, client):
        """대소문자 다른 키로 생성 -> 201"""
        response = await client.post("/resource", params=SHOP_ORDER, json={"Name": "x", "Qty": 5})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "x"
        assert data["qty"] == 5
        assert data["id"] == 1

    @pytest.mark.asyncio
    async def test_create_uses_query_for_missing_fields(self, client):
        """본문에 없는 필드는 쿼리 스트링에서"""
        response = await client.post(
            "/resource",
            params={**SHOP_ORDER, "qty": "3"},
            json={"name": "from-body"},
        )

        assert response.status_code == 201
        assert response.json()["qty"] == 3

    @pytest.mark.asyncio
    async def test_index(self, client):
        await client.post("/resource", params=SHOP_ORDER, json={"name": "a"})
        await client.post("/resource", params=SHOP_ORDER, json={"name": "b"})

        response = await client.get("/resource", params=SHOP_ORDER)

        assert response.status_code == 200
        assert [o["name"] for o in response.json()] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_view(self, client):
        await client.post("/resource", params=SHOP_ORDER, json={"name": "a"})

        response = await client.get("/resource/1", params=SHOP_ORDER)

        assert response.status_code == 200
        assert response.json()["name"] == "a"

    @pytest.mark.asyncio
    async def test_view_not_found(self, client):
        """핸들러가 404 반환 -> HTTP 404 에러 (핸들러 메시지)"""
        response = await client.get("/resource/99", params=SHOP_ORDER)

        assert response.status_code == 404
        assert response.json()["detail"] == "Order 99 not found"

    @pytest.mark.asyncio
    async def test_update(self, client):
        await client.post("/resource", params=SHOP_ORDER, json={"name": "a", "qty": 1})

        response = await client.patch("/resource", params=SHOP_ORDER, json={"ID": 1, "qty": 4})

        assert response.status_code == 200
        assert response.json()["qty"] == 4
        assert response.json()["name"] == "a"

    @pytest.mark.asyncio
    async def test_delete(self, client):
        await client.post("/resource", params=SHOP_ORDER, json={"name": "a"})

        response = await client.delete("/resource", params={**SHOP_ORDER, "id": "1"})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "deleted": True}

        response = await client.get("/resource/1", params=SHOP_ORDER)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_upsert_creates_then_replaces(self, client):
        """PUT: 없으면 201, 있으면 200"""
        response = await client.put("/resource", params=SHOP_ORDER, json={"id": 10, "name": "a"})
        assert response.status_code == 201

        response = await client.put("/resource", params=SHOP_ORDER, json={"id": 10, "name": "b"})
        assert response.status_code == 200
        assert response.json()["name"] == "b"

    @pytest.mark.asyncio
    async def test_create_validation_error_from_handler(self, client):
        """핸들러가 422 반환 -> HTTP 422 에러"""
        response = await client.post("/resource", params=SHOP_ORDER, json={"qty": 1})

        assert response.status_code == 422
        assert response.json()["detail"] == "Field 'name' is required"

    @pytest.mark.asyncio
    async def test_invalid_field_value(self, client):
        """입력 데이터 검증 실패 -> 400"""
        response = await client.post("/resource", params=SHOP_ORDER, json={"name": "a", "qty": -1})

        assert response.status_code == 400


class TestResolutionErrors:
    """리소스 해석 에러 테스트"""

    @pytest.mark.asyncio
    async def test_missing_resource_name(self, client):
        response = await client.get("/resource", params={"resourceDir": "shop"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Bad Request"

    @pytest.mark.asyncio
    async def test_empty_resource_name(self, client):
        response = await client.get("/resource", params={"resourceDir": "shop", "resourceName": ""})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_resource(self, client):
        response = await client.get("/resource", params={"resourceDir": "shop", "resourceName": "nothing"})

        assert response.status_code == 501
        assert response.json()["detail"] == "Resource is absent."

    @pytest.mark.asyncio
    async def test_resource_without_interface(self, client):
        @resource("v1.broken.Thing")
        class Thing:
            def index(self):
                return []

        try:
            response = await client.get("/resource", params={"resourceDir": "broken", "resourceName": "thing"})

            assert response.status_code == 501
            assert "RestInterface" in response.json()["detail"]
        finally:
            del _registry["v1.broken.Thing"]

    @pytest.mark.asyncio
    async def test_invalid_json_body(self, client):
        response = await client.post(
            "/resource",
            params=SHOP_ORDER,
            content=b"{bad",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid JSON in the body."

    @pytest.mark.asyncio
    async def test_method_not_allowed(self, client):
        response = await client.post("/resource/1", params=SHOP_ORDER)

        assert response.status_code == 405


class TestCustomerResource:
    """<Name>.<Name> 후보 및 커스텀 필러 테스트"""

    @pytest.mark.asyncio
    async def test_create_with_envelope_body(self, client):
        response = await client.post(
            "/resource",
            params=SHOP_CUSTOMER,
            json={"customer": {"id": "c1", "email": "a@b.c", "fullName": "Kim"}},
        )

        assert response.status_code == 201
        assert response.json() == {"id": "c1", "email": "a@b.c", "full_name": "Kim"}

    @pytest.mark.asyncio
    async def test_view_uses_path_id(self, client):
        await client.post(
            "/resource",
            params=SHOP_CUSTOMER,
            json={"customer": {"id": "c1", "email": "a@b.c"}},
        )

        response = await client.get("/resource/c1", params=SHOP_CUSTOMER)

        assert response.status_code == 200
        assert response.json()["email"] == "a@b.c"

    @pytest.mark.asyncio
    async def test_duplicate_create_conflict(self, client):
        body = {"customer": {"id": "c1", "email": "a@b.c"}}
        await client.post("/resource", params=SHOP_CUSTOMER, json=body)

        response = await client.post("/resource", params=SHOP_CUSTOMER, json=body)

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_update_not_allowed(self, client):
        response = await client.patch("/resource", params=SHOP_CUSTOMER, json={})

        assert response.status_code == 405
        assert response.json()["detail"] == "Customers cannot be modified"


class TestRawResult:
    """ResourceResult 가 아닌 결과 테스트 (v1.Ping)"""

    @pytest.mark.asyncio
    async def test_index_returns_raw_value(self, client):
        response = await client.get("/resource", params={"resourceName": "PING"})

        assert response.status_code == 200
        assert response.json()["pong"] is True

    @pytest.mark.asyncio
    async def test_create_defaults_to_201(self, client):
        response = await client.post("/resource", params={"resourceName": "ping"})

        assert response.status_code == 201
        assert response.json() == {"pong": True}

    @pytest.mark.asyncio
    async def test_none_result(self, client):
        response = await client.delete("/resource", params={"resourceName": "ping"})

        assert response.status_code == 200
        assert response.json() is None


class TestDispatcher:
    """ResourceDispatcher 단위 테스트"""

    def test_translate_result_201(self):
        assert ResourceDispatcher.translate(ResourceResult(status_code=201, body_content={"a": 1}), 200) == (201, {"a": 1})

    def test_translate_result_error(self):
        with pytest.raises(ResourceResultError) as exc_info:
            ResourceDispatcher.translate(ResourceResult.error(404, "missing"), 200)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "missing"

    def test_translate_raw_value(self):
        assert ResourceDispatcher.translate([1, 2], 201) == (201, [1, 2])

    @pytest.mark.asyncio
    async def test_unknown_action(self):
        with pytest.raises(ValueError):
            await ResourceDispatcher().dispatch("destroy", None, "ping", RequestData())

    @pytest.mark.asyncio
    async def test_custom_base(self):
        """resource_base 가 후보 이름 앞에 붙음"""
        @resource("v2.Echo")
        class Echo:
            def create(self):
                return "created"

            def index(self):
                return "index"

            def view(self):
                return "view"

            def update(self):
                return "update"

            def delete(self):
                return "delete"

            def upsert(self):
                return "upsert"

        try:
            status_code, body = await ResourceDispatcher("v2").dispatch("upsert", None, "echo", RequestData())
            assert (status_code, body) == (200, "upsert")
        finally:
            del _registry["v2.Echo"]


class TestHealthAndConfig:
    """헬스 체크 / 설정 테스트"""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["resource_base"] == "v1"
        assert data["resources"] >= 3

    def test_load_config(self):
        config = load_config()

        assert config.resource_base == "v1"
        assert "resources.v1" in config.resource_packages
        assert config.logging.level == "INFO"

    def test_load_config_missing_file(self, tmp_path):
        assert load_config(tmp_path) == ApiConfig()


class TestMalformedInput:
    """잘못된 클라이언트 입력 -> 400 테스트"""

    @pytest.mark.asyncio
    async def test_customer_wrong_field_type(self, client):
        """필러가 채운 필드 검증 실패 -> 400"""
        response = await client.post(
            "/resource",
            params=SHOP_CUSTOMER,
            json={"customer": {"id": "c1", "email": 5}},
        )

        assert response.status_code == 400
        assert "email" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_customer_envelope_not_object(self, client):
        response = await client.post("/resource", params=SHOP_CUSTOMER, json={"customer": "x"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid JSON in the body."

    @pytest.mark.asyncio
    async def test_deeply_nested_body(self, client):
        response = await client.post(
            "/resource",
            params=SHOP_ORDER,
            content=b"[" * 100000 + b"]" * 100000,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid JSON in the body."

    @pytest.mark.asyncio
    async def test_update_without_id(self, client):
        response = await client.patch("/resource", params=SHOP_ORDER, json={"qty": 1})

        assert response.status_code == 400
        assert response.json()["detail"] == "Field 'id' is required"

    @pytest.mark.asyncio
    async def test_delete_without_id(self, client):
        response = await client.delete("/resource", params=SHOP_ORDER)

        assert response.status_code == 400
        assert response.json()["detail"] == "Field 'id' is required"


class TestResultStatus:
    """핸들러 결과 상태 코드 / 실행 방식 테스트"""

    @pytest.mark.asyncio
    async def test_invalid_status_code(self, client):
        """100 미만 상태 코드 -> 500"""
        @resource("v1.Zero")
        class Zero:
            def create(self):
                return ResourceResult(status_code=0, body_content={"a": 1})

            def index(self):
                return ResourceResult(status_code=0)

            def view(self):
                return None

            def update(self):
                return None

            def delete(self):
                return None

            def upsert(self):
                return None

        try:
            response = await client.get("/resource", params={"resourceName": "zero"})

            assert response.status_code == 500
            assert response.json()["detail"] == "Invalid HTTP status code: 0"
        finally:
            del _registry["v1.Zero"]

    def test_translate_rejects_out_of_range(self):
        for status_code in (0, 99, 600):
            with pytest.raises(InvalidResultStatusError) as exc_info:
                ResourceDispatcher.translate(ResourceResult(status_code=status_code), 200)

            assert exc_info.value.status_code == 500
            assert exc_info.value.result_status == status_code

    @pytest.mark.asyncio
    async def test_sync_method_runs_in_threadpool(self):
        """동기 메서드는 이벤트 루프 스레드가 아닌 스레드풀에서 실행"""
        loop_thread = threading.get_ident()

        @resource("v1.Threaded")
        class Threaded:
            def index(self):
                return threading.get_ident()

            async def view(self):
                return threading.get_ident()

            def create(self):
                return None

            def update(self):
                return None

            def delete(self):
                return None

            def upsert(self):
                return None

        try:
            dispatcher = ResourceDispatcher()
            _, sync_thread = await dispatcher.dispatch("index", None, "threaded", RequestData())
            _, async_thread = await dispatcher.dispatch("view", None, "threaded", RequestData())

            assert sync_thread != loop_thread
            assert async_thread == loop_thread
        finally:
            del _registry["v1.Threaded"]
