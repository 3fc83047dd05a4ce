"""Operations tools: API client with token login, HTTP fetchers, a DNS resolver library and helpers."""

__version__ = "0.1.0"