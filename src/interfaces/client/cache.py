"""QueryCache - API 客户端的响应缓存

缓存条目不会自行过期。每个条目带有来源资源的标签（/api 之后的第一段路径），
变更操作会删除带有受影响标签的所有条目：

    cache.set("/api/workflows?status=pending", rows)         # 标签 "workflows"
    cache.invalidate("workflows", "dashboard")               # 更新步骤之后
"""


import threading
from typing import Any
from urllib.parse import urlencode

API_PREFIX = "/api"


def cache_key(path: str, params: dict[str, Any] | None = None) -> str:
    """路径加排序后的查询串；值为 None 的参数忽略"""
    query = {k: v for k, v in (params or {}).items() if v is not None}
    if not query:
        return path
    return f"{path}?{urlencode(sorted(query.items()))}"


def resource_tag(path: str) -> str:
    """/api 之后的第一段路径："/api/workflows/1/steps" -> "workflows"。"""
    path = path.split("?", 1)[0]
    if path.startswith(API_PREFIX + "/"):
        path = path[len(API_PREFIX) :]
    segments = [segment for segment in path.split("/") if segment]
    return segments[0] if segments else ""


class QueryCache:
    """线程安全、按标签失效的 JSON 响应缓存"""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._tags: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._entries.get(key, default)

    def set(self, key: str, value: Any, tag: str | None = None) -> None:
        with self._lock:
            self._entries[key] = value
            self._tags[key] = tag if tag is not None else resource_tag(key)

    def invalidate(self, *tags: str) -> int:
        """删除标签在 tags 中的所有条目，返回删除的条数"""
        wanted = set(tags)
        with self._lock:
            stale = [key for key, tag in self._tags.items() if tag in wanted]
            for key in stale:
                del self._entries[key]
                del self._tags[key]
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._tags.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
