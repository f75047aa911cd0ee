"""SeedDemoDataUseCase - 写入固定的演示数据

数据集：
- 4 个部门（Human Resources、Information Technology、Sales、Engineering）
- 2 个用户（admin / admin123，hrmanager / hr123）
- 4 名员工，分别处于 joining / active / moving / leaving
- 3 个 active 默认模板：joiner（4 步）、mover（2 步）、leaver（4 步）
- 3 个带克隆步骤的工作流：joiner 25%、mover 待开始、leaver 50%
- 3 个任务

不是幂等的：每次调用都会插入一份新数据；中途失败时已写入的记录保留。
"""


import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from src.domain.ports.crud_repository import CrudRepository, EntityRecord
from src.domain.ports.template_repository import TemplateRepository, TemplateStepRepository
from src.domain.ports.workflow_repository import WorkflowRepository, WorkflowStepRepository

logger = logging.getLogger(__name__)


@dataclass
class SeedDemoDataOutput:
    departments: int = 0
    users: int = 0
    employees: int = 0
    templates: int = 0
    workflows: int = 0
    tasks: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


# (名称, 描述, step_order, 负责角色, SLA 分钟数)
JOINER_STEPS = [
    ("IT Equipment Setup", "Provision laptop, phone, and accounts", 1, "it_admin", 480),
    (
        "HR Documentation",
        "Complete onboarding paperwork and benefits enrollment",
        2,
        "hr_manager",
        240,
    ),
    ("Team Introduction", "Schedule and conduct team introduction meeting", 3, "manager", 480),
    ("Training Enrollment", "Enroll in required training courses", 4, "hr_manager", 120),
]
MOVER_STEPS = [
    ("Update Access Permissions", "Revoke old permissions and grant new ones", 1, "it_admin", 240),
    ("Update HR Records", "Update department and reporting structure", 2, "hr_manager", 120),
]
LEAVER_STEPS = [
    ("Knowledge Transfer", "Document and transfer key responsibilities", 1, "manager", 2400),
    ("Exit Interview", "Conduct exit interview", 2, "hr_manager", 60),
    ("Revoke Access", "Disable accounts and revoke all access", 3, "it_admin", 60),
    ("Equipment Return", "Collect company equipment and assets", 4, "it_admin", 480),
]


class SeedDemoDataUseCase:
    """通过常规 Repository 写入演示数据

    依赖：
    - 每张表一个 Repository
    - hash_password: 把演示密码转换为 bcrypt 哈希
    """

    def __init__(
        self,
        department_repository: CrudRepository[EntityRecord],
        user_repository: CrudRepository[EntityRecord],
        employee_repository: CrudRepository[EntityRecord],
        template_repository: TemplateRepository,
        template_step_repository: TemplateStepRepository,
        workflow_repository: WorkflowRepository,
        workflow_step_repository: WorkflowStepRepository,
        task_repository: CrudRepository[EntityRecord],
        hash_password: Callable[[str], str],
    ):
        self.department_repository = department_repository
        self.user_repository = user_repository
        self.employee_repository = employee_repository
        self.template_repository = template_repository
        self.template_step_repository = template_step_repository
        self.workflow_repository = workflow_repository
        self.workflow_step_repository = workflow_step_repository
        self.task_repository = task_repository
        self.hash_password = hash_password

    async def execute(self, now: datetime | None = None) -> SeedDemoDataOutput:
        now = now or datetime.now(UTC)
        output = SeedDemoDataOutput()

        # 1. 部门
        departments = {}
        for name, description in [
            ("Human Resources", "HR department"),
            ("Information Technology", "IT department"),
            ("Sales", "Sales department"),
            ("Engineering", "Engineering department"),
        ]:
            departments[name] = await self.department_repository.create(
                {"name": name, "description": description}
            )
            output.departments += 1

        # 2. 用户
        admin = await self.user_repository.create(
            {
                "email": "admin@company.com",
                "username": "admin",
                "password": self.hash_password("admin123"),
                "first_name": "System",
                "last_name": "Admin",
                "role": "admin",
                "department_id": departments["Information Technology"].id,
                "is_active": True,
            }
        )
        hr_manager = await self.user_repository.create(
            {
                "email": "hr.manager@company.com",
                "username": "hrmanager",
                "password": self.hash_password("hr123"),
                "first_name": "Jane",
                "last_name": "Smith",
                "role": "hr_manager",
                "department_id": departments["Human Resources"].id,
                "is_active": True,
            }
        )
        output.users = 2

        # 3. 员工
        john = await self._employee(
            "John", "Doe", "Software Engineer", departments["Engineering"].id,
            "joining", now + timedelta(days=7), "New York",
        )
        await self._employee(
            "Alice", "Johnson", "Sales Representative", departments["Sales"].id,
            "active", now - timedelta(days=365), "Chicago",
        )
        bob = await self._employee(
            "Bob", "Williams", "IT Support Specialist", departments["Information Technology"].id,
            "moving", now - timedelta(days=180), "Remote",
        )
        carol = await self._employee(
            "Carol", "Davis", "Marketing Manager", departments["Sales"].id,
            "leaving", now - timedelta(days=730), "Boston",
            end_date=now + timedelta(days=14),
        )
        output.employees = 4

        # 4. 模板
        joiner = await self._template(
            "Standard New Hire Onboarding",
            "Complete onboarding process for new employees",
            "joiner", 5, admin.id, JOINER_STEPS,
        )
        mover = await self._template(
            "Internal Transfer Process",
            "Process for employees moving between departments",
            "mover", 3, admin.id, MOVER_STEPS,
        )
        leaver = await self._template(
            "Employee Offboarding",
            "Complete offboarding process for departing employees",
            "leaver", 5, admin.id, LEAVER_STEPS,
        )
        output.templates = 3

        # 5. 工作流
        onboarding_steps = await self._workflow(
            joiner, john, "Onboarding", "in_progress", 25, hr_manager.id,
            start_date=now, due_date=now + timedelta(days=7), now=now,
            step_state=lambda i: _joiner_step_state(i, now),
        )
        await self._workflow(
            mover, bob, "Transfer", "pending", 0, hr_manager.id,
            start_date=now, due_date=now + timedelta(days=3), now=now,
            step_state=lambda i: {"status": "pending"},
        )
        offboarding_steps = await self._workflow(
            leaver, carol, "Offboarding", "in_progress", 50, hr_manager.id,
            start_date=now - timedelta(days=3), due_date=now + timedelta(days=14), now=now,
            step_state=lambda i: _leaver_step_state(i, now),
        )
        output.workflows = 3

        # 6. 任务
        for step, title, description, status, priority, due_days in [
            (onboarding_steps[1], "Complete I-9 verification",
             "Verify employment eligibility documentation", "pending", "high", 2),
            (onboarding_steps[1], "Enroll in benefits",
             "Complete benefits enrollment for health, dental, vision", "in_progress", "medium", 5),
            (offboarding_steps[2], "Disable Active Directory account",
             "Disable user's AD account and remove from groups", "pending", "high", 1),
        ]:
            await self.task_repository.create(
                {
                    "workflow_step_id": step.id,
                    "workflow_id": step.workflow_id,
                    "title": title,
                    "description": description,
                    "status": status,
                    "priority": priority,
                    "due_date": now + timedelta(days=due_days),
                }
            )
            output.tasks += 1

        logger.info("演示数据已写入: %s", output.to_dict())
        return output

    # ==================== 辅助方法 ====================

    async def _employee(
        self,
        first_name: str,
        last_name: str,
        job_title: str,
        department_id: str,
        status: str,
        start_date: datetime,
        location: str,
        end_date: datetime | None = None,
    ) -> Any:
        return await self.employee_repository.create(
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": f"{first_name.lower()}.{last_name.lower()}@company.com",
                "job_title": job_title,
                "department_id": department_id,
                "status": status,
                "start_date": start_date,
                "end_date": end_date,
                "location": location,
                "work_type": "full-time",
            }
        )

    async def _template(
        self,
        name: str,
        description: str,
        template_type: str,
        estimated_days: int,
        created_by: str,
        steps: list[tuple[str, str, int, str, int]],
    ) -> Any:
        template = await self.template_repository.create(
            {
                "name": name,
                "description": description,
                "type": template_type,
                "status": "active",
                "is_default": True,
                "estimated_days": estimated_days,
                "created_by": created_by,
            }
        )
        for step_name, step_description, order, role, sla in steps:
            await self.template_step_repository.create(
                {
                    "template_id": template.id,
                    "name": step_name,
                    "description": step_description,
                    "step_order": order,
                    "assignee_role": role,
                    "sla_minutes": sla,
                    "is_required": True,
                }
            )
        return template

    async def _workflow(
        self,
        template: Any,
        employee: Any,
        label: str,
        status: str,
        progress: int,
        initiated_by: str,
        start_date: datetime,
        due_date: datetime,
        now: datetime,
        step_state: Callable[[int], dict[str, Any]],
    ) -> list[Any]:
        workflow = await self.workflow_repository.create(
            {
                "template_id": template.id,
                "employee_id": employee.id,
                "name": f"{label}: {employee.first_name} {employee.last_name}",
                "type": template.type,
                "status": status,
                "initiated_by": initiated_by,
                "progress": progress,
                "start_date": start_date,
                "due_date": due_date,
            }
        )

        steps = []
        template_steps = await self.template_step_repository.list_for_template(template.id)
        for index, template_step in enumerate(template_steps):
            steps.append(
                await self.workflow_step_repository.create(
                    {
                        "workflow_id": workflow.id,
                        "template_step_id": template_step.id,
                        "name": template_step.name,
                        "description": template_step.description,
                        "step_order": template_step.step_order,
                        "due_date": now + timedelta(days=template_step.step_order),
                        **step_state(index),
                    }
                )
            )
        return steps


def _joiner_step_state(index: int, now: datetime) -> dict[str, Any]:
    # 第一步已完成，第二步进行中
    if index == 0:
        return {"status": "completed", "started_at": now, "completed_at": now}
    if index == 1:
        return {"status": "in_progress", "started_at": now}
    return {"status": "pending"}


def _leaver_step_state(index: int, now: datetime) -> dict[str, Any]:
    if index < 2:
        return {
            "status": "completed",
            "started_at": now - timedelta(days=4 - index),
            "completed_at": now - timedelta(days=3 - index),
        }
    return {"status": "pending"}
