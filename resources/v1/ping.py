"""Ping 리소스 - 입력 데이터 없이 원시 값을 반환하는 예제"""

from datetime import datetime, timezone

from resources.base import resource


@resource("v1.Ping")
class Ping:
    """헬스 체크용 리소스 (ResourceResult 없이 값 그대로 반환)"""

    def index(self):
        return {"pong": True, "time": datetime.now(timezone.utc).isoformat()}

    def view(self):
        return "pong"

    def create(self):
        return {"pong": True}

    def update(self):
        return None

    def delete(self):
        return None

    def upsert(self):
        return None
