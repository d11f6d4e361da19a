import logging
from urllib.parse import quote

from flask import Blueprint, current_app, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import BadRequest

from db.common.data.player import Player, PlayerError
from db.dbcontext import get_db_type
from db.mongo.data.player import MongoPlayer

logger = logging.getLogger(__name__)

player_bp = Blueprint('player', __name__)

PLAYER_ADAPTER_KEY = 'player_adapter'


def get_db_specific_player_adapter():
    if get_db_type() == "mongo":
        return MongoPlayer()
    raise ValueError(f"No player adapter for DBType: {get_db_type()}")


def __player_adapter() -> Player:
    return current_app.extensions[PLAYER_ADAPTER_KEY]


def __decode_player():
    player = request.get_json(force=True)
    if not isinstance(player, dict):
        raise PlayerError("Request body must be a JSON object")
    return player


@player_bp.before_request
def log_request_info():
    logger.info(
        "method=%s remote_addr=%s request_uri=%s",
        request.method,
        request.remote_addr,
        request.full_path if request.query_string else request.path
    )


@player_bp.route("/players", methods=['GET'])
def all_players():
    return __player_adapter().find_all(), 200


@player_bp.route("/players", methods=['POST'])
def create_player():
    player_id = __player_adapter().insert(__decode_player())
    return __success_response(), 200, {'Location': f"/players/{quote(player_id, safe='')}"}


@player_bp.route("/players", methods=['PUT'])
def update_player():
    __player_adapter().update(__decode_player())
    return __success_response(), 200


@player_bp.route("/players", methods=['DELETE'])
def delete_player():
    __player_adapter().delete(__decode_player())
    return __success_response(), 200


@player_bp.route("/players/<player_id>", methods=['GET'])
def find_player_by_id(player_id):
    logger.debug("Looking up player %s", player_id)
    return __player_adapter().find_by_id(player_id), 200


@player_bp.errorhandler(BadRequest)
@player_bp.errorhandler(PlayerError)
@player_bp.errorhandler(PyMongoError)
@player_bp.errorhandler(Exception)
def handle_player_error(error):
    logger.error("%s: %s", type(error).__name__, error)
    if isinstance(error, BadRequest):
        return __error_response(error.description, 500)
    return __error_response(str(error), 500)


def __success_response():
    return {"result": "success"}


def __error_response(message, response_code):
    return {"error": message}, response_code
