"""JMLHubClient - JML Automation Hub REST API 的 Python 客户端

职责：
1. 每个端点一个方法，返回解码后的 JSON（camelCase 键）
2. 把 GET 响应缓存在 QueryCache 中
3. 每次变更后让受影响资源的缓存失效
4. 把错误响应转换为 ApiError

不重试：请求失败立即抛出。

用法：
    >>> with JMLHubClient("http://127.0.0.1:5000") as client:
    ...     client.seed()
    ...     client.list_workflows(status="in_progress")

任何 httpx.Client 都可以作为传输层，包括 FastAPI 的 TestClient：
    >>> client = JMLHubClient(http_client=TestClient(app))
"""


import logging
from typing import Any

import httpx

from src.interfaces.client.cache import QueryCache, cache_key, resource_tag

logger = logging.getLogger(__name__)

# 缓存内容依赖工作流 / 员工 / 任务变更的资源
_COUNTERS = ("dashboard", "reports")


class ApiError(Exception):
    """非 2xx 响应

    属性：
        status_code: HTTP 状态码
        message: 错误响应体中的 "message"（或原始文本）
        errors: 400 响应的字段错误，其他情况为空
    """

    def __init__(
        self, status_code: int, message: str, errors: list[dict[str, Any]] | None = None
    ):
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(f"{status_code}: {message}")


class JMLHubClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:5000",
        http_client: httpx.Client | None = None,
        cache: QueryCache | None = None,
        timeout: float = 30.0,
    ):
        self._owns_client = http_client is None
        self.http = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self.cache = cache or QueryCache()

    def close(self) -> None:
        if self._owns_client:
            self.http.close()

    def __enter__(self) -> "JMLHubClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ==================== Transport ====================

    def _query(self, path: str, params: dict[str, Any] | None = None) -> Any:
        key = cache_key(path, params)
        if key in self.cache:
            return self.cache.get(key)

        query = {k: v for k, v in (params or {}).items() if v is not None}
        data = self._send("GET", path, params=query)
        self.cache.set(key, data, resource_tag(path))
        return data

    def _mutate(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        invalidates: tuple[str, ...] = (),
    ) -> Any:
        data = self._send(method, path, json=body)
        tags = {resource_tag(path), *invalidates}
        dropped = self.cache.invalidate(*tags)
        logger.debug("%s %s 使 %d 条缓存失效 (%s)", method, path, dropped, tags)
        return data

    def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self.http.request(method, path, **kwargs)
        if response.is_error:
            raise self._to_error(response)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _to_error(response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            return ApiError(response.status_code, response.text or response.reason_phrase)
        if not isinstance(body, dict):
            return ApiError(response.status_code, str(body))
        return ApiError(
            response.status_code,
            str(body.get("message") or response.reason_phrase),
            body.get("errors"),
        )

    # ==================== Users ====================

    def list_users(self) -> list[dict[str, Any]]:
        return self._query("/api/users")

    def get_user(self, user_id: str) -> dict[str, Any]:
        return self._query(f"/api/users/{user_id}")

    def create_user(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("POST", "/api/users", data, ("audit-logs",))

    def update_user(self, user_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("PATCH", f"/api/users/{user_id}", data, ("audit-logs",))

    def delete_user(self, user_id: str) -> None:
        self._mutate("DELETE", f"/api/users/{user_id}", invalidates=("audit-logs",))

    # ==================== Departments ====================

    def list_departments(self) -> list[dict[str, Any]]:
        return self._query("/api/departments")

    def get_department(self, department_id: str) -> dict[str, Any]:
        return self._query(f"/api/departments/{department_id}")

    def create_department(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("POST", "/api/departments", data, ("audit-logs",))

    def update_department(self, department_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("PATCH", f"/api/departments/{department_id}", data, ("audit-logs",))

    def delete_department(self, department_id: str) -> None:
        self._mutate("DELETE", f"/api/departments/{department_id}", invalidates=("audit-logs",))

    # ==================== Employees ====================

    def list_employees(
        self, status: str | None = None, department_id: str | None = None
    ) -> list[dict[str, Any]]:
        return self._query("/api/employees", {"status": status, "departmentId": department_id})

    def search_employees(self, q: str) -> list[dict[str, Any]]:
        return self._query("/api/employees/search", {"q": q})

    def get_employee(self, employee_id: str) -> dict[str, Any]:
        return self._query(f"/api/employees/{employee_id}")

    def create_employee(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("POST", "/api/employees", data, ("audit-logs", *_COUNTERS))

    def update_employee(self, employee_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate(
            "PATCH", f"/api/employees/{employee_id}", data, ("audit-logs", *_COUNTERS)
        )

    def delete_employee(self, employee_id: str) -> None:
        self._mutate(
            "DELETE", f"/api/employees/{employee_id}", invalidates=("audit-logs", *_COUNTERS)
        )

    # ==================== Templates ====================

    def list_templates(
        self, type: str | None = None, status: str | None = None
    ) -> list[dict[str, Any]]:
        return self._query("/api/templates", {"type": type, "status": status})

    def get_template(self, template_id: str) -> dict[str, Any]:
        return self._query(f"/api/templates/{template_id}")

    def create_template(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("POST", "/api/templates", data, ("audit-logs",))

    def update_template(self, template_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("PATCH", f"/api/templates/{template_id}", data, ("audit-logs",))

    def delete_template(self, template_id: str) -> None:
        self._mutate("DELETE", f"/api/templates/{template_id}", invalidates=("audit-logs",))

    def list_template_steps(self, template_id: str) -> list[dict[str, Any]]:
        return self._query(f"/api/templates/{template_id}/steps")

    def add_template_step(self, template_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("POST", f"/api/templates/{template_id}/steps", data)

    # ==================== Workflows ====================

    def list_workflows(
        self,
        status: str | None = None,
        type: str | None = None,
        employee_id: str | None = None,
        assigned_to: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._query(
            "/api/workflows",
            {"status": status, "type": type, "employeeId": employee_id, "assignedTo": assigned_to},
        )

    def get_workflow(self, workflow_id: str) -> dict[str, Any]:
        return self._query(f"/api/workflows/{workflow_id}")

    def create_workflow(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("POST", "/api/workflows", data, ("audit-logs", *_COUNTERS))

    def update_workflow(self, workflow_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate(
            "PATCH", f"/api/workflows/{workflow_id}", data, ("audit-logs", *_COUNTERS)
        )

    def delete_workflow(self, workflow_id: str) -> None:
        self._mutate(
            "DELETE", f"/api/workflows/{workflow_id}", invalidates=("audit-logs", *_COUNTERS)
        )

    def list_workflow_steps(self, workflow_id: str) -> list[dict[str, Any]]:
        return self._query(f"/api/workflows/{workflow_id}/steps")

    def update_workflow_step(self, step_id: str, data: dict[str, Any]) -> dict[str, Any]:
        # 步骤完成会改变父工作流的进度
        return self._mutate(
            "PATCH", f"/api/workflow-steps/{step_id}", data, ("workflows", *_COUNTERS)
        )

    # ==================== Tasks ====================

    def list_tasks(
        self,
        workflow_id: str | None = None,
        assignee_id: str | None = None,
        status: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._query(
            "/api/tasks",
            {"workflowId": workflow_id, "assigneeId": assignee_id, "status": status},
        )

    def pending_tasks(self, user_id: str | None = None) -> list[dict[str, Any]]:
        return self._query("/api/tasks/pending", {"userId": user_id})

    def get_task(self, task_id: str) -> dict[str, Any]:
        return self._query(f"/api/tasks/{task_id}")

    def create_task(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("POST", "/api/tasks", data, ("dashboard",))

    def update_task(self, task_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("PATCH", f"/api/tasks/{task_id}", data, ("dashboard",))

    def delete_task(self, task_id: str) -> None:
        self._mutate("DELETE", f"/api/tasks/{task_id}", invalidates=("dashboard",))

    # ==================== Notifications ====================

    def list_notifications(self, user_id: str) -> list[dict[str, Any]]:
        return self._query("/api/notifications", {"userId": user_id})

    def create_notification(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._mutate("POST", "/api/notifications", data)

    def mark_notification_read(self, notification_id: str) -> dict[str, Any]:
        return self._mutate("PATCH", f"/api/notifications/{notification_id}/read")

    def mark_all_notifications_read(self, user_id: str) -> dict[str, Any]:
        return self._mutate("POST", "/api/notifications/mark-all-read", {"userId": user_id})

    # ==================== Audit logs / Reports ====================

    def list_audit_logs(
        self,
        entity_type: str | None = None,
        entity_id: str | None = None,
        user_id: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._query(
            "/api/audit-logs",
            {"entityType": entity_type, "entityId": entity_id, "userId": user_id},
        )

    def dashboard_stats(self) -> dict[str, Any]:
        return self._query("/api/dashboard/stats")

    def workflow_report(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> dict[str, Any]:
        return self._query("/api/reports/workflows", {"startDate": start_date, "endDate": end_date})

    # ==================== Seed ====================

    def seed(self) -> dict[str, Any]:
        data = self._send("POST", "/api/seed")
        self.cache.clear()
        return data
