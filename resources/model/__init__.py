"""Resource 모델 패키지"""

from resources.model.request import RequestData
from resources.model.result import ResourceResult

__all__ = ['RequestData', 'ResourceResult']
