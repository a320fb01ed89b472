"""Resource 패키지 - 레지스트리, 리졸버, 입력 바인더"""

from resources.base import (
    BaseResourceModel,
    InputData,
    InputDataFiller,
    RestResource,
    input_data,
    input_filler,
    resource,
)
from resources.model import RequestData, ResourceResult

__all__ = [
    'BaseResourceModel',
    'InputData',
    'InputDataFiller',
    'RestResource',
    'RequestData',
    'ResourceResult',
    'input_data',
    'input_filler',
    'resource',
]
