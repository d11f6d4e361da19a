import configparser
import logging
from os import environ
from pathlib import Path

logger = logging.getLogger(__name__)

__CONFIG_FILE_PATH = "dev/config.ini"
__cfg = None


def __get_env_name():
    return environ.get('TT_PYENV', 'DEFAULT')


def init_env_config(config_path=None):
    cfgfile = configparser.ConfigParser(interpolation=None)
    cfgfile.optionxform = str
    if config_path is None:
        config_path = Path(__file__).parent / __CONFIG_FILE_PATH
    if not cfgfile.read(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")
    env = __get_env_name()
    config_section = cfgfile["DEFAULT"]
    if env in cfgfile.sections():
        config_section = cfgfile[env]
    if 'UseEnvVars' in config_section.keys() and config_section['UseEnvVars'] == "True":
        logger.info("Config file settings will be overridden by env variables")
        for cfkey in config_section.keys():
            if cfkey in environ.keys():
                logger.debug("Overriding config key %s from environment", cfkey)
                config_section[cfkey] = environ[cfkey]
    global __cfg
    __cfg = config_section
    return __cfg


def get_env_config():
    if __cfg is None:
        init_env_config()
    return __cfg
