"""控制台测试用例"""

import logging
from unittest.mock import MagicMock

import pytest

from todolist.console import Console, main
from todolist.models.task import Task
from todolist.services.list_service import ListService
from todolist.storage.task_store import TaskStore


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """main() 会调整 todolist 日志级别，测试后恢复"""
    package_logger = logging.getLogger("todolist")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


@pytest.fixture
def feed_input(monkeypatch):
    """按顺序提供输入行，耗尽后模拟 EOF"""

    def _feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            print(prompt, end="")
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def console(store):
    return Console(ListService(store))


class TestConsole:
    """测试菜单流程"""

    def test_exit(self, console, feed_input, capsys):
        feed_input("4")
        console.run()
        out = capsys.readouterr().out
        assert out.startswith("Welcome to the To-Do List!")
        assert "1. Create a new task list" in out
        assert out.rstrip().endswith("Exited")

    def test_eof_exits(self, console, feed_input, capsys):
        feed_input()
        console.run()
        assert capsys.readouterr().out.rstrip().endswith("Exited")

    def test_invalid_choice(self, console, feed_input, capsys):
        feed_input("9", "4")
        console.run()
        assert "Invalid choice, try again." in capsys.readouterr().out

    def test_create_list(self, console, store, feed_input, capsys):
        feed_input("1", "work", "1", "work", "4")
        console.run()
        out = capsys.readouterr().out
        assert "Task list created: work" in out
        assert "Task list already exists." in out
        assert store.list_names() == ["work"]

    def test_add_task_without_lists(self, console, feed_input, capsys):
        feed_input("2", "4")
        console.run()
        assert "No task lists available. Create one first!" in capsys.readouterr().out

    def test_add_task(self, console, store, feed_input, capsys):
        feed_input("1", "work", "2", "work", "buy milk", "4")
        console.run()
        out = capsys.readouterr().out
        assert "Available task lists:\n- work\n" in out
        assert "Task added to work" in out
        assert store.get_tasks("work") == [Task(description="buy milk", status=False)]

    def test_add_task_unknown_list(self, console, store, feed_input, capsys):
        feed_input("1", "work", "2", "home", "4")
        console.run()
        assert "Task list does not exist." in capsys.readouterr().out
        assert store.get_tasks("work") == []

    def test_view_empty(self, console, feed_input, capsys):
        feed_input("3", "4")
        console.run()
        assert "No task lists found." in capsys.readouterr().out

    def test_view_lists(self, console, store, feed_input, capsys):
        store.create_list("work")
        store.append_task("work", Task(description="buy milk", status=True))
        store.append_task("work", Task(description="call bob"))
        store.create_list("home")

        feed_input("3", "4")
        console.run()

        out = capsys.readouterr().out
        assert (
            "All Task Lists:\n"
            "List: work\n"
            "  1. buy milk\n"
            "  2. call bob\n"
            "List: home\n"
            "  (No tasks)\n"
        ) in out
        # 控制台只显示描述
        assert "True" not in out

    def test_main_uses_given_store(self, store, feed_input, capsys):
        feed_input("1", "groceries", "4")
        main(store)
        assert store.list_names() == ["groceries"]

    def test_add_task_lists_names_through_service(self, feed_input, capsys):
        """可选清单通过 ListService 获取"""
        service = MagicMock(spec=ListService)
        service.list_names.return_value = []

        feed_input("2", "4")
        Console(service).run()

        assert "No task lists available. Create one first!" in capsys.readouterr().out
        service.list_names.assert_called_once_with()


class TestConsoleLogging:
    """测试控制台日志输出"""

    def test_duplicate_create_logs_nothing(self, store, feed_input, capsys, caplog):
        """重复创建只打印提示，不输出 WARNING 日志"""
        feed_input("1", "work", "1", "work", "4")
        main(store)

        captured = capsys.readouterr()
        assert "Task list already exists." in captured.out
        assert "创建清单失败" not in captured.err
        assert not [r for r in caplog.records if r.name.startswith("todolist")]
        assert logging.getLogger("todolist").getEffectiveLevel() == logging.ERROR
