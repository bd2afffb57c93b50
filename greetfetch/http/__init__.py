"""greetfetch.http: HTTP client capability and response model."""

from .client import AiohttpClient, HttpClient
from .models import HttpResponse

__all__ = ["AiohttpClient", "HttpClient", "HttpResponse"]
