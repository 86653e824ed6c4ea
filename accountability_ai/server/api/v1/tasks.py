"""
Microsoft To-Do Endpoints.

Create tasks in the user's default To-Do list, list that list, and read the
local mirror of tasks created here.
"""

from typing import List

from fastapi import APIRouter

from accountability_ai.core.models.io import TaskCreate, TaskCreateResult, TaskListResult, TodoTaskRead
from accountability_ai.server.services.deps import CurrentUserDep, TodoServiceDep

router = APIRouter()


@router.post(
    "",
    response_model=TaskCreateResult,
    summary="Create To-Do Task",
    description="Create a task in the default Microsoft To-Do list. Failures are reported with success=false.",
)
async def create_task(data: TaskCreate, user: CurrentUserDep, service: TodoServiceDep) -> TaskCreateResult:
    return await service.create_task(user, data)


@router.get(
    "",
    response_model=TaskListResult,
    summary="List To-Do Tasks",
    description="Tasks of the default Microsoft To-Do list.",
)
async def list_tasks(user: CurrentUserDep, service: TodoServiceDep) -> TaskListResult:
    return await service.list_tasks(user)


@router.get(
    "/local",
    response_model=List[TodoTaskRead],
    summary="List Mirrored Tasks",
    description="Tasks created through the assistant, newest first.",
)
async def get_local_tasks(user: CurrentUserDep, service: TodoServiceDep) -> List[TodoTaskRead]:
    return [TodoTaskRead.model_validate(t) for t in await service.get_local_tasks(user)]
