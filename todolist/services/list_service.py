import logging
import re
from typing import Dict, List

from ..exceptions import InvalidIndexError, TaskListError
from ..models.task import (
    Task,
    ListCreatedResponse,
    TaskAddedResponse,
    TaskChangedResponse,
)
from ..storage.task_store import TaskStore

logger = logging.getLogger(__name__)

# 只接受 ASCII 十进制整数，不接受空白、下划线或其他数字字符
INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_index(raw) -> int:
    """解析从 1 开始的任务位置，非数字或非正数抛出 InvalidIndexError"""
    if isinstance(raw, bool):
        raise InvalidIndexError(raw)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and INDEX_PATTERN.fullmatch(raw):
        value = int(raw)
    else:
        raise InvalidIndexError(raw)
    if value < 1:
        raise InvalidIndexError(raw)
    return value


class ListService:
    """清单操作：每个请求对应一次 TaskStore 调用"""

    def __init__(self, store: TaskStore):
        self.store = store

    def create_list(self, name: str) -> ListCreatedResponse:
        """创建清单"""
        try:
            self.store.create_list(name)
        except TaskListError as e:
            logger.warning(f"创建清单失败: {e}")
            raise
        return ListCreatedResponse(message=f"Task list created: {name}", name=name)

    def add_task(self, name: str, task: Task) -> TaskAddedResponse:
        """添加任务，status 未指定时为 False"""
        try:
            stored = self.store.append_task(name, task)
        except TaskListError as e:
            logger.warning(f"添加任务失败: {e}")
            raise
        return TaskAddedResponse(
            message=f"Task added to {name}",
            name=name,
            description=stored.description,
        )

    def toggle_task(self, name: str, raw_index) -> TaskChangedResponse:
        """切换任务完成状态"""
        index = parse_index(raw_index)
        try:
            task = self.store.toggle_task(name, index)
        except TaskListError as e:
            logger.warning(f"切换任务失败: {e}")
            raise
        return TaskChangedResponse(
            message=f"Task {index} in {name} marked {'done' if task.status else 'not done'}",
            name=name,
            index=index,
            task=task,
        )

    def delete_task(self, name: str, raw_index) -> TaskChangedResponse:
        """删除任务"""
        index = parse_index(raw_index)
        try:
            task = self.store.delete_task(name, index)
        except TaskListError as e:
            logger.warning(f"删除任务失败: {e}")
            raise
        return TaskChangedResponse(
            message=f"Task {index} deleted from {name}",
            name=name,
            index=index,
            task=task,
        )

    def list_all(self) -> Dict[str, List[Task]]:
        return self.store.list_all()

    def get_tasks(self, name: str) -> List[Task]:
        return self.store.get_tasks(name)

    def list_names(self) -> List[str]:
        return self.store.list_names()
