"""Request shapes exchanged with the API client."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict


class Payload(BaseModel):
    """Ordered request body handed to the API client."""

    model_config = ConfigDict(frozen=True)

    content: dict[str, Any]

    def to_json(self) -> str:
        """Compact JSON in field order; equal fields give byte-identical text."""

        return json.dumps(self.content, separators=(",", ":"))


class Request(BaseModel):
    """One API call: HTTP method, path relative to the API base URL, body."""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    body: Payload | None = None
