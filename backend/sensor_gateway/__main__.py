"""
Run the gateway: python -m sensor_gateway

Exits immediately if the configuration is incomplete.
"""

import logging
import sys

import uvicorn

from sensor_gateway.config import Config, ConfigError
from sensor_gateway.main import create_app

logger = logging.getLogger("sensor_gateway")


def main() -> None:
    try:
        config = Config.from_env()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    app = create_app(config)
    logger.info(f"Server is running on port {config.port}")
    uvicorn.run(app, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
