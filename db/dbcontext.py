import logging

from config.ttconfig import get_env_config
from db.mongo.client.mongo_client import TournamentMongoClient

logger = logging.getLogger(__name__)

__db_client = None

dbtype = None


def get_db_type():
    return dbtype


def init_db_client(config=None):
    if config is None:
        config = get_env_config()
    if "DbType" not in config.keys():
        raise KeyError("DbType not in config.ini")
    if config["DbType"] != "mongo":
        raise ValueError(f"Invalid DBType: {config['DbType']}")
    global dbtype, __db_client
    logger.info("Creating new %s client", config["DbType"])
    __db_client = TournamentMongoClient(config)
    dbtype = config["DbType"]
    return __db_client


def get_db_client():
    if dbtype is None:
        init_db_client()
    return __db_client


def close_db_client():
    global dbtype, __db_client
    if __db_client is not None:
        __db_client.close()
    __db_client = None
    dbtype = None
