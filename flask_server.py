"""
Task list API server
"""

import logging

from taskboard import create_app
from taskboard.config import Config

logger = logging.getLogger(__name__)


def main():
    config = Config.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(config)
    logger.info("Server is running on http://%s:%s", config.host, config.port)
    # One request at a time; the store is not locked
    app.run(host=config.host, port=config.port, debug=config.debug, threaded=False, use_reloader=False)


if __name__ == '__main__':
    main()
