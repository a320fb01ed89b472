"""
Resource API 진입점

사용법:
    python main.py                         # config/api.yaml 기준 실행
    python main.py --port 9000             # 포트 변경
    python main.py --config ./other/config # 설정 디렉토리 변경
"""

import argparse
import logging
import sys
import os
from pathlib import Path

# Windows 인코딩 설정 (cp949 -> UTF-8)
if sys.platform == "win32":
    os.environ["PYTHONUTF8"] = "1"

import uvicorn

from api.main import CONFIG_DIR, create_app, load_config
from common.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="resource-api",
        description="resourceDir/resourceName 기반 리소스 디스패치 API 서버"
    )
    parser.add_argument("--config", default=str(CONFIG_DIR), help="설정 디렉토리 (api.yaml)")
    parser.add_argument("--host", default=None, help="바인드 주소")
    parser.add_argument("--port", type=int, default=None, help="바인드 포트")
    args = parser.parse_args()

    config = load_config(Path(args.config))
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port

    setup_logging(
        level=config.logging.level,
        json_format=config.logging.json_format,
        log_file=config.logging.log_file,
    )

    app = create_app(config)
    logger.info(f"Starting Resource API on {config.host}:{config.port}")

    try:
        uvicorn.run(app, host=config.host, port=config.port, log_config=None)
    except KeyboardInterrupt:
        print("\nShutdown requested by user")


if __name__ == "__main__":
    main()
