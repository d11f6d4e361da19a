from db.dbcontext import get_db_client
from db.mongo.client.mongo_client import TournamentMongoClient
from config.ttconfig import get_env_config
from db.common.data.player import Player, PlayerNotFoundError
from bson import json_util, ObjectId
import json

DATABASE_NAME = 'player'
MONGO_ID_FIELD = '_id'


class MongoPlayer(Player):

    def __init__(self, db_client=None, cfg=None):
        super().__init__()
        self.cfg = cfg if cfg is not None else get_env_config()
        self.db_client: TournamentMongoClient = db_client if db_client is not None else get_db_client()
        self.database = self.db_client[self.cfg['MongoAppDbName']]
        self.collection = self.database[self.cfg.get('MongoPlayerCollectionName') or DATABASE_NAME]

    @staticmethod
    def __to_document(player, player_id=None):
        document = {k: v for k, v in player.items() if k not in (Player.ID_FIELD, MONGO_ID_FIELD)}
        if player_id is not None:
            document[MONGO_ID_FIELD] = player_id
        return document

    @staticmethod
    def __transform_player(document):
        player = json.loads(json_util.dumps(document))
        player.pop(MONGO_ID_FIELD, None)
        return {Player.ID_FIELD: str(document[MONGO_ID_FIELD]), **player}

    @staticmethod
    def __id_filter(player_id):
        if ObjectId.is_valid(player_id):
            return {MONGO_ID_FIELD: {'$in': [player_id, ObjectId(player_id)]}}
        return {MONGO_ID_FIELD: {'$eq': player_id}}

    def find_all(self):
        return list(map(MongoPlayer.__transform_player, self.collection.find()))

    def insert(self, player):
        if player.get(Player.ID_FIELD) is None:
            player_id = str(ObjectId())
        else:
            player_id = Player.get_player_id(player)
        self.collection.insert_one(MongoPlayer.__to_document(player, player_id))
        return player_id

    def update(self, player):
        player_id = Player.get_player_id(player)
        result = self.collection.replace_one(
            MongoPlayer.__id_filter(player_id),
            MongoPlayer.__to_document(player)
        )
        if result.matched_count == 0:
            raise PlayerNotFoundError(player_id)

    def delete(self, player):
        player_id = Player.get_player_id(player)
        result = self.collection.delete_one(MongoPlayer.__id_filter(player_id))
        if result.deleted_count == 0:
            raise PlayerNotFoundError(player_id)

    def find_by_id(self, player_id):
        document = self.collection.find_one(MongoPlayer.__id_filter(player_id))
        if document is None:
            raise PlayerNotFoundError(player_id)
        return MongoPlayer.__transform_player(document)
