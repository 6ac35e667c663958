from enum import Enum

class Dialect(str, Enum):
    SQLite = "SQLITE"
    PostgreSQL = "POSTGRESQL"
    MySQL = "MYSQL"
    Generic = "GENERIC"

    @staticmethod
    def from_adapter_name(name):
        """
        Maps a connection's adapter name (e.g. "sqlite", "postgresql", "mysql2") to a Dialect.
        Unrecognized or missing names map to Generic.
        """
        adapter = (name or "").lower()

        if "postgres" in adapter:
            return Dialect.PostgreSQL
        elif "sqlite" in adapter:
            return Dialect.SQLite
        elif "mysql" in adapter or adapter in ("trilogy", "mariadb"):
            return Dialect.MySQL
        else:
            return Dialect.Generic
