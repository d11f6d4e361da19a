import logging
from urllib.parse import quote_plus

from pymongo import MongoClient
from db.common.db_client import TournamentDBClient

logger = logging.getLogger(__name__)

REQUIRED_MONGO_ENV_VARS = {
    "MongoEnv": ["local", "atlas"],
    "MongoHost": "*",
    "MongoPort": "*",
    "MongoAppDbName": "*"
}


def validate_mongo_params(config):
    missing_env_vars = []
    invalid_env_var_values = []
    for env_var in REQUIRED_MONGO_ENV_VARS.keys():
        if env_var not in config.keys() or config[env_var] == "":
            missing_env_vars.append(env_var)
        elif type(REQUIRED_MONGO_ENV_VARS[env_var]) == list \
                and config[env_var] not in REQUIRED_MONGO_ENV_VARS[env_var]:
            invalid_env_var_values.append(f"{env_var}: {config[env_var]}")
    if len(missing_env_vars) > 0:
        raise ValueError(f"Config is missing the following required Mongo env vars: {','.join(missing_env_vars)}")
    if len(invalid_env_var_values) > 0:
        raise ValueError(f"The following Mongo env vars have invalid values: {','.join(invalid_env_var_values)}")


def get_mongo_connection_string(config, mask_password=False):
    validate_mongo_params(config)
    username = config.get("MongoUsername") or ""
    password = config.get("MongoPassword") or ""
    credentials = ""
    if username:
        if mask_password:
            credentials = f"{quote_plus(username)}:****@"
        else:
            credentials = f"{quote_plus(username)}:{quote_plus(password)}@"
    host = config["MongoHost"]
    if config["MongoEnv"] == "atlas":
        return f"mongodb+srv://{credentials}{host}/"
    direct_connection = config.get("DirectConnection") or "true"
    return f"mongodb://{credentials}{host}:{config['MongoPort']}/?directConnection={direct_connection}"


class TournamentMongoClient(MongoClient, TournamentDBClient):

    def __init__(self, config, **kwargs):
        self.__config = config
        self.dbtype = "mongo"
        logger.info("Connecting to %s", get_mongo_connection_string(config, mask_password=True))
        MongoClient.__init__(self, get_mongo_connection_string(config), **kwargs)

    def verify_connection(self):
        self.admin.command('ping')
