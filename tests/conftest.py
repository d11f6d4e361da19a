import mongomock
import pytest

from db.mongo.data.player import MongoPlayer
from web.tt_webserver import create_app


@pytest.fixture
def cfg():
    return {
        "DbType": "mongo",
        "MongoEnv": "local",
        "MongoHost": "localhost",
        "MongoPort": "27017",
        "MongoUsername": "",
        "MongoPassword": "",
        "MongoAppDbName": "tournamentturtle_test",
        "MongoPlayerCollectionName": "player",
        "DirectConnection": "true",
    }


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def player_collection(mongo_client, cfg):
    return mongo_client[cfg["MongoAppDbName"]][cfg["MongoPlayerCollectionName"]]


@pytest.fixture
def player_adapter(mongo_client, cfg):
    return MongoPlayer(db_client=mongo_client, cfg=cfg)


@pytest.fixture
def app(player_adapter):
    app = create_app(player_adapter)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
