import logging
import sys

from flask import Flask
from pymongo.errors import PyMongoError

from config.logging_config import setup_logging
from config.ttconfig import get_env_config
from db.common.data.player import Player
from db.dbcontext import init_db_client
from web.player.player import player_bp, get_db_specific_player_adapter, PLAYER_ADAPTER_KEY

logger = logging.getLogger(__name__)


def create_app(player_adapter: Player = None):
    app = Flask(__name__)
    if player_adapter is None:
        player_adapter = get_db_specific_player_adapter()
    app.extensions[PLAYER_ADAPTER_KEY] = player_adapter
    app.register_blueprint(player_bp)
    return app


def main():
    cfg = get_env_config()
    setup_logging(cfg.get('LogLevel') or "INFO", cfg.get('LogFile'))
    logger.info("Initialize runtime environment...")
    try:
        db_client = init_db_client(cfg)
        db_client.verify_connection()
    except (PyMongoError, KeyError, ValueError) as e:
        logger.critical("Could not connect to the database: %s", e)
        sys.exit(1)
    app = create_app()
    app.run(
        host=cfg.get('ServerHost') or "0.0.0.0",
        port=int(cfg.get('ServerPort') or 8080),
        debug=cfg.get('Debug') == "True",
        threaded=True
    )


if __name__ == '__main__':
    main()
