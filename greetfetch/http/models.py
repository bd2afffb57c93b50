# greetfetch/http/models.py
"""
Data models for the GreetFetch HTTP layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Union


@dataclass(slots=True)
class HttpResponse:
    """Holds the final URL, status, headers and content of a response (text or binary)."""

    url: str
    status: int
    headers: Dict[str, str] = field(default_factory=dict, repr=False)
    content: Union[str, bytes] = field(default="", repr=False)
