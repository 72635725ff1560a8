from typing import Any, Dict, List, Optional


def _first_result(results: Optional[List[Dict[str, Any]]]) -> Optional[Dict[str, Any]]:
    if not results:
        return None
    result = results[0]
    if not result or not result.get("data"):
        return None
    return result


def _cells(row: Any) -> List[Any]:
    # Older servers return bare lists, newer ones wrap them as {"row": [...]}.
    if isinstance(row, dict):
        return row["row"]
    return row


def extract_scalar(results: Optional[List[Dict[str, Any]]]) -> Any:
    """Return the single value of a one column result, or ``None``.

    Only the first statement's result is inspected. Results with more than
    one column have no scalar value and also give ``None``.
    """
    result = _first_result(results)
    if result is None:
        return None
    if len(result.get("columns", ())) != 1:
        return None
    return _cells(result["data"][0])[0]


def extract_rows(results: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """Return the first statement's rows as dicts keyed by column name."""
    result = _first_result(results)
    if result is None:
        return []
    columns = result.get("columns", [])
    return [dict(zip(columns, _cells(row))) for row in result["data"]]
