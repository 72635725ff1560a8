from typing import Any, Dict, List, Mapping, Optional

from . import properties, results
from .cache import RedisCache
from .neo4j_connection import Neo4jHttpConnection
from .query_builder import CypherQueryBuilder
from .transaction import Transaction


class Neo4jConnector:
    """A Connector for a graph database's HTTP transaction API.

    This class holds the database and cache configuration and is responsible
    for creating the transactions and query builders that talk to them.
    """

    @classmethod
    def from_file_data(
        cls,
        url: str,
        username: str = None,
        password: str = None,
        cache_host: str = None,
        cache_port: int = None,
        cache_db: int = None,
        timeout: float = None,
    ):
        """
        Parameters
        ----------
        url : str
            Base URL of the graph database, e.g. ``http://localhost:7474``
        username, password : str, optional
            Basic auth credentials. Requests are unauthenticated without both.
        cache_host, cache_port, cache_db : optional
            Location of the Redis cache. Either all three or none.
        timeout : float, optional
            Total timeout in seconds for each HTTP request
        """
        connection = Neo4jHttpConnection.from_configuration(
            url=url, username=username, password=password, timeout=timeout
        )

        cache_settings = (cache_host, cache_port, cache_db)
        if all(setting is None for setting in cache_settings):
            cache = None
        elif any(setting is None for setting in cache_settings):
            raise ValueError(
                "`cache_host`, `cache_port` and `cache_db` must be specified together."
            )
        else:
            cache = RedisCache.from_configuration(
                host=cache_host, port=cache_port, db=cache_db
            )

        return cls(connection=connection, cache=cache)

    def __init__(
        self,
        connection: Neo4jHttpConnection,
        cache: Optional[RedisCache] = None,
    ) -> None:
        self.connection = connection
        self.cache = cache

    @property
    def url(self) -> str:
        return self.connection.url

    @property
    def auth(self) -> str:
        return self.connection.auth

    def create_transaction(self) -> Transaction:
        return Transaction(connection=self.connection, cache=self.cache)

    def create_query_builder(self) -> CypherQueryBuilder:
        return CypherQueryBuilder()

    def extract_scalar(self, result: List[Dict[str, Any]]) -> Any:
        return results.extract_scalar(result)

    def extract_rows(self, result: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return results.extract_rows(result)

    def properties_to_inline_string(self, obj: Mapping[str, Any]) -> str:
        return properties.properties_to_inline_string(obj)

    def properties_to_parameter_refs(self, name: str, obj: Mapping[str, Any]) -> str:
        return properties.properties_to_parameter_refs(name, obj)

    def properties_to_set_clauses(
        self, variable: str, name: str, obj: Mapping[str, Any]
    ) -> str:
        return properties.properties_to_set_clauses(variable, name, obj)

    async def close(self) -> None:
        if self.cache is not None:
            await self.cache.close()
