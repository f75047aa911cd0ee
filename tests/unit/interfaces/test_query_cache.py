"""QueryCache 单元测试"""

from src.interfaces.client.cache import QueryCache, cache_key, resource_tag


class TestCacheKey:
    def test_params_are_sorted_and_none_dropped(self):
        key = cache_key(
            "/api/workflows", {"type": "joiner", "status": "pending", "employeeId": None}
        )

        assert key == "/api/workflows?status=pending&type=joiner"

    def test_no_params_is_the_path(self):
        assert cache_key("/api/users") == "/api/users"
        assert cache_key("/api/users", {"q": None}) == "/api/users"


class TestResourceTag:
    def test_first_segment_after_api(self):
        assert resource_tag("/api/workflows/wf-1/steps") == "workflows"
        assert resource_tag("/api/dashboard/stats") == "dashboard"
        assert resource_tag("/api/employees/search?q=jo") == "employees"


class TestQueryCache:
    def test_set_and_get(self):
        cache = QueryCache()
        cache.set("/api/users", [{"id": "u-1"}])

        assert "/api/users" in cache
        assert cache.get("/api/users") == [{"id": "u-1"}]
        assert cache.get("/api/missing", "default") == "default"

    def test_invalidate_drops_only_matching_tags(self):
        cache = QueryCache()
        cache.set("/api/workflows", [])
        cache.set("/api/workflows?status=pending", [])
        cache.set("/api/dashboard/stats", {})
        cache.set("/api/users", [])

        dropped = cache.invalidate("workflows", "dashboard")

        assert dropped == 3
        assert len(cache) == 1
        assert "/api/users" in cache

    def test_explicit_tag_wins_over_path(self):
        cache = QueryCache()
        cache.set("custom-key", 1, tag="reports")

        assert cache.invalidate("reports") == 1

    def test_clear(self):
        cache = QueryCache()
        cache.set("/api/users", [])
        cache.clear()

        assert len(cache) == 0
