"""任务清单存储（内存）

清单名 -> 有序任务列表。所有读写都在同一把全局锁内完成，
不做按清单的细粒度加锁：跨清单的并发写会被串行化，但不会出现
半完成的写被读到的情况。日志在释放锁之后输出。
"""
import logging
import threading
from typing import Dict, List

from ..exceptions import IndexOutOfRangeError, ListAlreadyExistsError, ListNotFoundError
from ..models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self):
        self._lists: Dict[str, List[Task]] = {}
        self._lock = threading.Lock()

    def create_list(self, name: str) -> None:
        """创建空清单，同名清单已存在时拒绝"""
        with self._lock:
            if name in self._lists:
                raise ListAlreadyExistsError(name)
            self._lists[name] = []
        logger.info(f"创建清单: {name}")

    def get_tasks(self, name: str) -> List[Task]:
        """返回清单任务快照"""
        with self._lock:
            return [task.model_copy() for task in self._tasks_of(name)]

    def append_task(self, name: str, task: Task) -> Task:
        """追加任务到清单末尾"""
        stored = task.model_copy()
        with self._lock:
            self._tasks_of(name).append(stored)
            position = len(self._lists[name])
            snapshot = stored.model_copy()
        logger.info(f"添加任务: {name}#{position}")
        return snapshot

    def toggle_task(self, name: str, index: int) -> Task:
        """切换第 index 个任务（从 1 开始）的完成状态"""
        with self._lock:
            tasks = self._tasks_of(name)
            self._check_index(name, tasks, index)
            task = tasks[index - 1]
            task.status = not task.status
            snapshot = task.model_copy()
        logger.info(f"切换任务状态: {name}#{index} -> {snapshot.status}")
        return snapshot

    def delete_task(self, name: str, index: int) -> Task:
        """删除第 index 个任务，后续任务前移"""
        with self._lock:
            tasks = self._tasks_of(name)
            self._check_index(name, tasks, index)
            removed = tasks.pop(index - 1)
        logger.info(f"删除任务: {name}#{index}")
        return removed

    def list_all(self) -> Dict[str, List[Task]]:
        """返回全部清单快照，按创建顺序"""
        with self._lock:
            return {
                name: [task.model_copy() for task in tasks]
                for name, tasks in self._lists.items()
            }

    def list_names(self) -> List[str]:
        """返回清单名，按创建顺序"""
        with self._lock:
            return list(self._lists)

    # 以下方法要求调用方已持有锁
    def _tasks_of(self, name: str) -> List[Task]:
        tasks = self._lists.get(name)
        if tasks is None:
            raise ListNotFoundError(name)
        return tasks

    @staticmethod
    def _check_index(name: str, tasks: List[Task], index: int) -> None:
        if index < 1 or index > len(tasks):
            raise IndexOutOfRangeError(name, index, len(tasks))
