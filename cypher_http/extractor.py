from logging import getLogger
from typing import Any, Dict, Optional

from nodestream.pipeline.extractors import Extractor

from .neo4j_connector import Neo4jConnector


class Neo4jHttpExtractor(Extractor):
    @classmethod
    def from_file_data(
        cls,
        query: str,
        parameters: Optional[Dict[str, Any]] = None,
        **connector_args
    ):
        connector = Neo4jConnector.from_file_data(**connector_args)
        return cls(query, connector, parameters)

    def __init__(
        self,
        query: str,
        connector: Neo4jConnector,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.connector = connector
        self.query = query
        self.parameters = parameters or {}
        self.logger = getLogger(self.__class__.__name__)

    async def extract_records(self):
        self.logger.info(
            "Running query on graph database",
            extra=dict(query=self.query, params=self.parameters),
        )

        transaction = self.connector.create_transaction()
        transaction.add_query(self.query, self.parameters)
        result = await transaction.execute()

        for record in self.connector.extract_rows(result):
            yield record
