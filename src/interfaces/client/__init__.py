"""JML Automation Hub API 的客户端数据层"""

from src.interfaces.client.cache import QueryCache, cache_key, resource_tag
from src.interfaces.client.client import ApiError, JMLHubClient

__all__ = ["ApiError", "JMLHubClient", "QueryCache", "cache_key", "resource_tag"]
