"""
Resource 관련 예외 클래스 정의
"""


class ResourceError(Exception):
    """Resource 기본 예외"""
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ResourceNameRequiredError(ResourceError):
    """resourceName 파라미터 누락"""
    status_code = 400

    def __init__(self):
        super().__init__("Bad Request")


class ResourceNotFoundError(ResourceError):
    """후보 이름 중 등록된 리소스가 없음"""
    status_code = 501

    def __init__(self, candidates: list[str]):
        self.candidates = candidates
        super().__init__("Resource is absent.")


class ResourceInterfaceError(ResourceError):
    """리소스가 RestResource 프로토콜을 구현하지 않음"""
    status_code = 501

    def __init__(self, name: str):
        self.name = name
        super().__init__("Resource doesn't have RestInterface implementation.")


class InvalidBodyError(ResourceError):
    """요청 본문이 JSON 객체/배열이 아님"""
    status_code = 400

    def __init__(self):
        super().__init__("Invalid JSON in the body.")


class InputDataClassNotFoundError(ResourceError):
    """입력 데이터 클래스가 등록되지 않음 (설정 오류)"""
    status_code = 500

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Class '{name}' does not exist.")


class InputDataValidationError(ResourceError):
    """입력 데이터 필드 할당 실패"""
    status_code = 400

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid value for '{field}': {message}")


class ResourceResultError(ResourceError):
    """핸들러가 201 초과 상태 코드를 반환함"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class InvalidResultStatusError(ResourceError):
    """핸들러가 유효하지 않은 HTTP 상태 코드를 반환함 (100~599 밖)"""
    status_code = 500

    def __init__(self, result_status: int):
        self.result_status = result_status
        super().__init__(f"Invalid HTTP status code: {result_status}")
