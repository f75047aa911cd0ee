"""ORM 模型 - JML Hub 的表映射

设计说明：
- SQLAlchemy 2.0 风格（Mapped、mapped_column）
- 主键是 UUID4 字符串（36 位）
- 引用列（department_id、workflow_id 等）只是带索引的 id 列，没有数据库外键：
  删除从不级联，允许出现孤儿记录
- 枚举列以字符串存储，取值范围定义在 src.domain.value_objects

为什么 JSON 列 "metadata" 映射到 `meta` 属性？
- `metadata` 是声明式基类的保留属性名
"""


import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database.base import Base


def generate_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


class TimestampMixin:
    """可变表的 created_at / updated_at 列"""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, comment="创建时间"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
        comment="更新时间",
    )


class UserModel(TimestampMixin, Base):
    """User ORM 模型

    表名：users

    password 列保存 bcrypt 哈希，永远不会被序列化输出。
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False, comment="bcrypt hash")
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="viewer")
    department_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (Index("idx_users_first_name", "first_name"),)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username}, role={self.role})>"


class DepartmentModel(TimestampMixin, Base):
    """Department ORM 模型

    表名：departments
    """

    __tablename__ = "departments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    manager_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    parent_department_id: Mapped[str | None] = mapped_column(String(36), nullable=True)

    def __repr__(self) -> str:
        return f"<DepartmentModel(id={self.id}, name={self.name})>"


class EmployeeModel(TimestampMixin, Base):
    """Employee ORM 模型 - 经历 JML 流程的员工

    表名：employees

    索引：
    - idx_employees_status: 仪表盘计数和列表过滤
    - idx_employees_department_id: 列表过滤
    """

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    employee_number: Mapped[str | None] = mapped_column(String(50), nullable=True, unique=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    personal_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    department_id: Mapped[str] = mapped_column(String(36), nullable=False)
    manager_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="joining")
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    work_type: Mapped[str | None] = mapped_column(String(50), nullable=True, default="full-time")
    meta: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)

    __table_args__ = (
        Index("idx_employees_status", "status"),
        Index("idx_employees_department_id", "department_id"),
        Index("idx_employees_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<EmployeeModel(id={self.id}, name={self.first_name} {self.last_name})>"


class WorkflowTemplateModel(TimestampMixin, Base):
    """WorkflowTemplate ORM 模型 - 可复用的 JML 流程蓝图

    表名：workflow_templates
    """

    __tablename__ = "workflow_templates"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    estimated_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    meta: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)
    created_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    __table_args__ = (
        Index("idx_workflow_templates_type", "type"),
        Index("idx_workflow_templates_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<WorkflowTemplateModel(id={self.id}, name={self.name}, type={self.type})>"


class TemplateStepModel(Base):
    """TemplateStep ORM 模型 - 模板中有序的一个步骤

    表名：template_steps
    """

    __tablename__ = "template_steps"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    template_id: Mapped[str] = mapped_column(String(36), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    step_order: Mapped[int] = mapped_column(Integer, nullable=False)
    assignee_role: Mapped[str | None] = mapped_column(String(20), nullable=True)
    assignee_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    sla_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    automation_config: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    meta: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    __table_args__ = (Index("idx_template_steps_template_id", "template_id"),)

    def __repr__(self) -> str:
        return f"<TemplateStepModel(id={self.id}, name={self.name}, order={self.step_order})>"


class WorkflowModel(TimestampMixin, Base):
    """Workflow ORM 模型 - 为某个员工实例化的模板

    表名：workflows

    progress 是整数百分比，由进度聚合维护。
    """

    __tablename__ = "workflows"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    template_id: Mapped[str] = mapped_column(String(36), nullable=False)
    employee_id: Mapped[str] = mapped_column(String(36), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    initiated_by: Mapped[str] = mapped_column(String(36), nullable=False)
    assigned_to: Mapped[str | None] = mapped_column(String(36), nullable=True)
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    meta: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)

    __table_args__ = (
        Index("idx_workflows_status", "status"),
        Index("idx_workflows_employee_id", "employee_id"),
        Index("idx_workflows_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<WorkflowModel(id={self.id}, status={self.status}, progress={self.progress})>"


class WorkflowStepModel(TimestampMixin, Base):
    """WorkflowStep ORM 模型 - 复制到工作流中的模板步骤

    表名：workflow_steps
    """

    __tablename__ = "workflow_steps"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    workflow_id: Mapped[str] = mapped_column(String(36), nullable=False)
    template_step_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    step_order: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    assignee_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)

    __table_args__ = (Index("idx_workflow_steps_workflow_id", "workflow_id"),)

    def __repr__(self) -> str:
        return f"<WorkflowStepModel(id={self.id}, name={self.name}, status={self.status})>"


class TaskModel(TimestampMixin, Base):
    """Task ORM 模型 - 工作流步骤内的细粒度任务

    表名：tasks
    """

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    workflow_step_id: Mapped[str] = mapped_column(String(36), nullable=False)
    workflow_id: Mapped[str] = mapped_column(String(36), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    assignee_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    priority: Mapped[str | None] = mapped_column(String(20), nullable=True, default="medium")
    due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    meta: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)

    __table_args__ = (
        Index("idx_tasks_workflow_id", "workflow_id"),
        Index("idx_tasks_status", "status"),
        Index("idx_tasks_assignee_id", "assignee_id"),
    )

    def __repr__(self) -> str:
        return f"<TaskModel(id={self.id}, title={self.title}, status={self.status})>"


class AuditLogModel(Base):
    """AuditLog ORM 模型 - 只追加的操作历史

    表名：audit_logs
    """

    __tablename__ = "audit_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    action: Mapped[str] = mapped_column(String(50), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(50), nullable=False)
    entity_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    changes: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    __table_args__ = (
        Index("idx_audit_logs_entity", "entity_type", "entity_id"),
        Index("idx_audit_logs_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<AuditLogModel(action={self.action}, entity={self.entity_type}:{self.entity_id})>"


class NotificationModel(Base):
    """Notification ORM 模型

    表名：notifications
    """

    __tablename__ = "notifications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="info")
    related_entity_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    related_entity_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    __table_args__ = (Index("idx_notifications_user_id", "user_id"),)

    def __repr__(self) -> str:
        return f"<NotificationModel(id={self.id}, user_id={self.user_id}, read={self.is_read})>"
