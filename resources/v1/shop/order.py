"""Order 리소스 - 메모리 저장소 기반 CRUD 예제"""

import logging

from pydantic import Field

from resources.base import BaseResourceModel, InputData, ResourceResult, input_data, resource

logger = logging.getLogger(__name__)

# 프로세스 단위 저장소
_orders: dict[int, dict] = {}
_sequence = 0


def clear_orders() -> None:
    """저장소 초기화 (테스트용)"""
    global _sequence
    _orders.clear()
    _sequence = 0


def _next_id() -> int:
    global _sequence
    _sequence += 1
    # upsert로 직접 지정된 id는 건너뜀
    while _sequence in _orders:
        _sequence += 1
    return _sequence


@input_data("v1.shop.OrderInput")
class OrderInput(InputData):
    """주문 입력 데이터"""
    id: int | None = None
    name: str | None = None
    qty: int | None = Field(default=None, ge=0)
    note: str | None = Field(default=None, alias="comment")


@resource("v1.shop.Order")
class Order(BaseResourceModel):
    """주문 리소스"""

    def get_input_data_class_name(self) -> str:
        return "v1.shop.OrderInput"

    def _lookup_error(self, order_id: int | None) -> ResourceResult | None:
        """id 누락(400) 또는 미존재(404) 에러 결과, 정상이면 None"""
        if order_id is None:
            return ResourceResult.error(400, "Field 'id' is required")
        if order_id not in _orders:
            return ResourceResult.error(404, f"Order {order_id} not found")
        return None

    async def index(self) -> ResourceResult:
        return ResourceResult.ok(list(_orders.values()))

    async def view(self) -> ResourceResult:
        data = self.input_data
        error = self._lookup_error(data.id)
        if error is not None:
            return error
        return ResourceResult.ok(_orders[data.id])

    async def create(self) -> ResourceResult:
        data = self.input_data
        if not data.name:
            return ResourceResult.error(422, "Field 'name' is required")

        order_id = _next_id()
        _orders[order_id] = {
            "id": order_id,
            "name": data.name,
            "qty": data.qty or 0,
            "note": data.note,
        }
        logger.info(f"Created order: id={order_id}")
        return ResourceResult.ok(_orders[order_id], status_code=201)

    async def update(self) -> ResourceResult:
        data = self.input_data
        error = self._lookup_error(data.id)
        if error is not None:
            return error

        order = _orders[data.id]
        changes = data.model_dump(exclude={"id"}, exclude_none=True)
        order.update(changes)
        logger.info(f"Updated order: id={data.id}, fields={sorted(changes)}")
        return ResourceResult.ok(order)

    async def delete(self) -> ResourceResult:
        data = self.input_data
        error = self._lookup_error(data.id)
        if error is not None:
            return error

        del _orders[data.id]
        logger.info(f"Deleted order: id={data.id}")
        return ResourceResult.ok({"id": data.id, "deleted": True})

    async def upsert(self) -> ResourceResult:
        data = self.input_data
        if data.id is None:
            return ResourceResult.error(400, "Field 'id' is required")
        if not data.name:
            return ResourceResult.error(422, "Field 'name' is required")

        created = data.id not in _orders
        _orders[data.id] = {
            "id": data.id,
            "name": data.name,
            "qty": data.qty or 0,
            "note": data.note,
        }
        return ResourceResult.ok(_orders[data.id], status_code=201 if created else 200)
