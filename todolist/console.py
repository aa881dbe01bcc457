"""交互式控制台：菜单驱动，逐行读取标准输入

与 HTTP 服务使用同一套 ListService / TaskStore，控制台只显示任务描述。
"""
import logging
from typing import Optional

from .exceptions import ListAlreadyExistsError
from .models.task import Task
from .services.list_service import ListService
from .storage.task_store import TaskStore

logger = logging.getLogger(__name__)

MENU = (
    "\nChoose an option:\n"
    "1. Create a new task list\n"
    "2. Add task to a list\n"
    "3. View task lists\n"
    "4. Exit"
)


class Console:
    def __init__(self, service: ListService):
        self.service = service

    def run(self) -> None:
        """主循环；选择 4 或输入结束时退出"""
        print("Welcome to the To-Do List!")
        try:
            while True:
                print(MENU)
                choice = input("Enter choice: ").strip()
                if choice == "1":
                    self._create_list()
                elif choice == "2":
                    self._add_task()
                elif choice == "3":
                    self._print_lists()
                elif choice == "4":
                    break
                else:
                    print("Invalid choice, try again.")
        except (KeyboardInterrupt, EOFError):
            logger.debug("输入结束，退出控制台")
        print("Exited")

    def _create_list(self) -> None:
        name = input("Enter name of new task list: ")
        try:
            self.service.create_list(name)
        except ListAlreadyExistsError:
            print("Task list already exists.")
            return
        print(f"Task list created: {name}")

    def _add_task(self) -> None:
        names = self.service.list_names()
        if not names:
            print("No task lists available. Create one first!")
            return

        print("Available task lists:")
        for name in names:
            print(f"- {name}")

        name = input("Enter task list to add task to: ")
        if name not in names:
            print("Task list does not exist.")
            return

        description = input("Enter task: ")
        self.service.add_task(name, Task(description=description))
        print(f"Task added to {name}")

    def _print_lists(self) -> None:
        lists = self.service.list_all()
        if not lists:
            print("No task lists found.")
            return

        print("\nAll Task Lists:")
        for name, tasks in lists.items():
            print(f"List: {name}")
            if not tasks:
                print("  (No tasks)")
            for i, task in enumerate(tasks, start=1):
                print(f"  {i}. {task.description}")


def main(store: Optional[TaskStore] = None) -> None:
    logging.basicConfig(
        level=logging.ERROR,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # 菜单已输出操作结果，包内只保留 ERROR 日志
    logging.getLogger("todolist").setLevel(logging.ERROR)
    Console(ListService(store if store is not None else TaskStore())).run()


if __name__ == "__main__":
    main()
