import re
from typing import Any, List

WHITESPACE_RUN_REGEX = re.compile(r"\s\s+")
LINE_BREAK_REGEX = re.compile(r"\r\n|\r|\n|\t")


class CypherQueryBuilder:
    """Assembles a single Cypher statement from ordered fragments.

    Fragments are opaque: anything whose ``str()`` is a piece of a statement
    is accepted, which includes fluent builders such as ``cymple``'s.
    """

    def __init__(self) -> None:
        self.fragments: List[str] = []

    def add(self, fragment: Any) -> "CypherQueryBuilder":
        # One level of flattening only.
        if isinstance(fragment, (list, tuple)):
            self.fragments.extend(str(part) for part in fragment)
        else:
            self.fragments.append(str(fragment))
        return self

    def render(self) -> str:
        query = WHITESPACE_RUN_REGEX.sub(" ", " ".join(self.fragments))
        # A line break or tab standing alone is dropped, not turned into a space.
        return LINE_BREAK_REGEX.sub("", query).strip()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<CypherQueryBuilder fragments={len(self.fragments)}>"
