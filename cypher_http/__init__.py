from .cache import Cache, CacheError, CacheMissError, CacheUnavailableError, RedisCache
from .errors import (
    CommitFailedError,
    ConfigurationError,
    CypherError,
    CypherHttpError,
    ReuseError,
    TransactionFailedError,
    UnsupportedPropertyTypeError,
)
from .neo4j_connection import Neo4jHttpConnection
from .neo4j_connector import Neo4jConnector
from .query_builder import CypherQueryBuilder
from .results import extract_rows, extract_scalar
from .transaction import Transaction, TransactionState

__all__ = (
    "Cache",
    "CacheError",
    "CacheMissError",
    "CacheUnavailableError",
    "CommitFailedError",
    "ConfigurationError",
    "CypherError",
    "CypherHttpError",
    "CypherQueryBuilder",
    "Neo4jConnector",
    "Neo4jHttpConnection",
    "RedisCache",
    "ReuseError",
    "Transaction",
    "TransactionFailedError",
    "TransactionState",
    "UnsupportedPropertyTypeError",
    "extract_rows",
    "extract_scalar",
)
