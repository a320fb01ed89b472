"""
Customer 리소스 - 네임스페이스/클래스 중복 형태(v1.shop.Customer.Customer) 예제

입력 데이터는 {"customer": {...}} 봉투 형태의 본문을 받으므로 커스텀 필러로 채웁니다.
"""

import logging

from resources.base import (
    BaseResourceModel,
    InputData,
    RequestData,
    ResourceResult,
    input_data,
    input_filler,
    resource,
)
from resources.binder import decode_body
from resources.exception import InvalidBodyError

logger = logging.getLogger(__name__)

_customers: dict[str, dict] = {}


def clear_customers() -> None:
    """저장소 초기화 (테스트용)"""
    _customers.clear()


@input_data("v1.shop.CustomerInput")
class CustomerInput(InputData):
    """고객 입력 데이터"""
    id: str | None = None
    email: str | None = None
    full_name: str | None = None


@input_filler("v1.shop.CustomerInput")
class CustomerInputHttpFiller:
    """봉투 본문({"customer": {...}})과 경로 id로 CustomerInput 채우기"""

    def fill(self, container: CustomerInput, request: RequestData) -> None:
        body = decode_body(request.body)
        payload = body.get("customer") or {}
        if not isinstance(payload, dict):
            raise InvalidBodyError()

        container.id = request.params.get("id") or payload.get("id")
        container.email = payload.get("email")
        container.full_name = payload.get("fullName")


@resource("v1.shop.Customer.Customer")
class Customer(BaseResourceModel):
    """고객 리소스"""

    def get_input_data_class_name(self) -> str:
        return "v1.shop.CustomerInput"

    async def index(self) -> ResourceResult:
        return ResourceResult.ok(list(_customers.values()))

    async def view(self) -> ResourceResult:
        customer = _customers.get(self.input_data.id)
        if customer is None:
            return ResourceResult.error(404, f"Customer {self.input_data.id} not found")
        return ResourceResult.ok(customer)

    async def create(self) -> ResourceResult:
        data = self.input_data
        if not data.id or not data.email:
            return ResourceResult.error(422, "Fields 'id' and 'email' are required")
        if data.id in _customers:
            return ResourceResult.error(409, f"Customer {data.id} already exists")

        _customers[data.id] = data.model_dump()
        logger.info(f"Created customer: id={data.id}")
        return ResourceResult.ok(_customers[data.id], status_code=201)

    async def update(self) -> ResourceResult:
        return ResourceResult.error(405, "Customers cannot be modified")

    async def delete(self) -> ResourceResult:
        if _customers.pop(self.input_data.id, None) is None:
            return ResourceResult.error(404, f"Customer {self.input_data.id} not found")
        return ResourceResult.ok({"id": self.input_data.id, "deleted": True})

    async def upsert(self) -> ResourceResult:
        return ResourceResult.error(405, "Customers cannot be replaced")
