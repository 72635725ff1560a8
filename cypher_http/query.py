from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List


def convert_unsupported_values(value: Any) -> Any:
    # All parameters travel as JSON, so dates become POSIX timestamps.
    # This also covers pandas.Timestamp, a datetime subclass.
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, dict):
        return {k: convert_unsupported_values(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [convert_unsupported_values(v) for v in value]
    return value


@dataclass(slots=True, frozen=True)
class Statement:
    statement: str
    parameters: Dict[str, Any] = field(default_factory=dict)

    def as_payload(self) -> Dict[str, Any]:
        return {
            "statement": self.statement,
            "parameters": convert_unsupported_values(self.parameters),
        }


@dataclass(slots=True, frozen=True)
class StatementBatch:
    statements: List[Statement]

    def as_payload(self) -> Dict[str, Any]:
        return {"statements": [s.as_payload() for s in self.statements]}


@dataclass(slots=True, frozen=True)
class OpenedTransaction:
    commit_url: str
    results: List[Dict[str, Any]]
