"""任务清单 API"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..exceptions import TaskListError
from ..models.task import Task, ListCreatedResponse, TaskAddedResponse, TaskChangedResponse
from ..services.list_service import ListService

router = APIRouter(prefix="/lists", tags=["任务清单"])


def get_list_service(request: Request) -> ListService:
    """从应用状态中取出共享的 TaskStore"""
    return ListService(request.app.state.store)


# 处理函数均为同步函数，由线程池并发执行；互斥由 TaskStore 保证


@router.get(
    "",
    response_model=Dict[str, List[Task]],
    summary="列出所有清单",
    description="返回以清单名为键的全部任务"
)
def list_all(service: ListService = Depends(get_list_service)):
    return service.list_all()


@router.post(
    "/{name}",
    response_model=ListCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="创建清单",
    description="创建一个空清单，同名清单已存在时返回 409"
)
def create_list(name: str, service: ListService = Depends(get_list_service)):
    """
    创建清单

    - **name**: 清单名称（唯一）
    """
    try:
        return service.create_list(name)
    except TaskListError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get(
    "/{name}/tasks",
    response_model=List[Task],
    summary="查询清单任务",
    description="按顺序返回清单中的任务"
)
def get_tasks(name: str, service: ListService = Depends(get_list_service)):
    try:
        return service.get_tasks(name)
    except TaskListError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post(
    "/{name}/tasks",
    response_model=TaskAddedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="添加任务",
    description="在清单末尾追加任务"
)
def add_task(name: str, task: Task, service: ListService = Depends(get_list_service)):
    """
    添加任务

    - **description**: 任务描述
    - **status**: 是否已完成（可选，默认 false）
    """
    try:
        return service.add_task(name, task)
    except TaskListError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.put(
    "/{name}/tasks/{index}",
    response_model=TaskChangedResponse,
    summary="切换任务状态",
    description="切换第 index 个任务（从 1 开始）的完成状态"
)
def toggle_task(name: str, index: str, service: ListService = Depends(get_list_service)):
    try:
        return service.toggle_task(name, index)
    except TaskListError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.delete(
    "/{name}/tasks/{index}",
    response_model=TaskChangedResponse,
    summary="删除任务",
    description="删除第 index 个任务（从 1 开始），后续任务前移"
)
def delete_task(name: str, index: str, service: ListService = Depends(get_list_service)):
    try:
        return service.delete_task(name, index)
    except TaskListError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
