"""리소스 모듈 로더"""

import importlib
import logging
import pkgutil

logger = logging.getLogger(__name__)


def load_resources(package_names: list[str]) -> None:
    """리소스 모듈 로드 (데코레이터 등록을 위해, 하위 폴더 재귀 탐색)"""

    def load_recursive(package, prefix: str):
        for _, module_name, is_pkg in pkgutil.iter_modules(package.__path__):
            full_name = f"{prefix}.{module_name}"
            module = importlib.import_module(full_name)
            logger.debug(f"Loaded resource module: {full_name}")
            if is_pkg:
                load_recursive(module, full_name)

    for package_name in package_names:
        package = importlib.import_module(package_name)
        load_recursive(package, package_name)
