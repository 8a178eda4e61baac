"""
Session model for the tee times application.

A session identifies an authenticated browsing context on the reservation
site. It comes in two forms that differ only in how the identifier is
stored; which one is used is decided by a single ``SessionFormat`` value.
"""

import json
import re
from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from urllib.parse import urlsplit


class SessionFormat(Enum):
    """Supported session representations."""
    ID_PAIR = "id_pair"
    QUERY_STRING = "query_string"

class Session(ABC):
    """Opaque token for an authenticated session."""

    @property
    @abstractmethod
    def query_string(self) -> str:
        """Query string identifying the session, without leading ``?``."""
        ...

    @abstractmethod
    def serialize(self) -> str:
        """Render the session as cache file content."""
        ...

    @classmethod
    @abstractmethod
    def deserialize(cls, content: str) -> "Session":
        """Parse cache file content.

        Raises:
            ValueError: If the content is structurally invalid
        """
        ...

    @classmethod
    @abstractmethod
    def from_url(cls, url: str) -> "Session":
        """Extract the session from a URL carrying it in its query string.

        Raises:
            ValueError: If the URL does not carry a session
        """
        ...

@dataclass(frozen=True)
class IdPairSession(Session):
    """Session identified by the numeric ``sid``/``q`` pair."""
    sid: str
    q: str

    URL_PATTERN = re.compile(r'\?sid=(\d+)&q=(\d+)')

    @property
    def query_string(self) -> str:
        return f"sid={self.sid}&q={self.q}"

    def serialize(self) -> str:
        return json.dumps({'sid': self.sid, 'q': self.q})

    @classmethod
    def deserialize(cls, content: str) -> "IdPairSession":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")

        values = {}
        for key in ('sid', 'q'):
            value = data.get(key)
            if value is None or not str(value).isdigit():
                raise ValueError(f"missing or invalid '{key}'")
            values[key] = str(value)

        return cls(sid=values['sid'], q=values['q'])

    @classmethod
    def from_url(cls, url: str) -> "IdPairSession":
        match = cls.URL_PATTERN.search(url)
        if not match:
            raise ValueError("url format mismatch")
        return cls(sid=match.group(1), q=match.group(2))

@dataclass(frozen=True)
class QueryStringSession(Session):
    """Session identified by a verbatim query string."""
    query: str

    @property
    def query_string(self) -> str:
        return self.query

    def serialize(self) -> str:
        return self.query

    @classmethod
    def deserialize(cls, content: str) -> "QueryStringSession":
        query = content.strip()
        if not query:
            raise ValueError("empty query string")
        return cls(query=query)

    @classmethod
    def from_url(cls, url: str) -> "QueryStringSession":
        query = urlsplit(url).query
        if not query:
            raise ValueError("url has no query string")
        return cls(query=query)

SESSION_TYPES: dict[SessionFormat, type[Session]] = {
    SessionFormat.ID_PAIR: IdPairSession,
    SessionFormat.QUERY_STRING: QueryStringSession,
}

def get_session_type(session_format: SessionFormat) -> type[Session]:
    """Get the session class used for the given format."""
    return SESSION_TYPES[session_format]

@dataclass(frozen=True)
class Credentials:
    """Login name and decoded password for the reservation site."""
    login: str
    password: str = field(repr=False)
