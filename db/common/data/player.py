from db.common.db_client import TournamentDBClient


class PlayerError(Exception):
    pass


class PlayerNotFoundError(PlayerError, LookupError):

    def __init__(self, player_id):
        super().__init__(f"Player '{player_id}' not found")
        self.player_id = player_id


class Player:
    """Data access for the player collection.

    Players are opaque JSON objects identified by their ``id`` field.
    Subclasses map each operation onto one native call of their database.
    """

    ID_FIELD = 'id'

    def __init__(self):
        self.db_client: TournamentDBClient = None

    def find_all(self):
        raise NotImplementedError

    def insert(self, player):
        raise NotImplementedError

    def update(self, player):
        raise NotImplementedError

    def delete(self, player):
        raise NotImplementedError

    def find_by_id(self, player_id):
        raise NotImplementedError

    @staticmethod
    def get_player_id(player):
        if not isinstance(player, dict):
            raise PlayerError("Player must be a JSON object")
        if player.get(Player.ID_FIELD) is None:
            raise PlayerError(f"Player is missing its '{Player.ID_FIELD}' field")
        return str(player[Player.ID_FIELD])
