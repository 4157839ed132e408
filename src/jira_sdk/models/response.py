"""Response envelope returned by every connector call."""

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ResponseScheme:
    """The raw HTTP exchange behind a service call.

    Services return it next to the decoded result so callers can inspect
    the status code, the resolved endpoint or the untouched body.
    """

    code: int = 0
    endpoint: str = ""
    method: str = ""
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON, ``None`` when the body is empty."""
        if not self.body:
            return None
        return json.loads(self.body)
