# greetfetch/__init__.py
"""
GreetFetch package initializer.
Defines package version and exposes the main building blocks.
"""
__version__ = "0.1.0"

from greetfetch.fetcher import Failure, Fetcher, Outcome, Success, load_url
from greetfetch.http import AiohttpClient, HttpClient, HttpResponse

__all__ = [
    "__version__",
    "AiohttpClient",
    "Failure",
    "Fetcher",
    "HttpClient",
    "HttpResponse",
    "Outcome",
    "Success",
    "load_url",
]
