class TournamentDBClient:
    """Marker base for the database clients the adapters can be built on."""

    dbtype = None

    def verify_connection(self):
        raise NotImplementedError
