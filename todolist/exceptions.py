"""任务清单自定义异常"""


class TaskListError(Exception):
    """任务清单基础异常"""
    status_code = 400


class ListAlreadyExistsError(TaskListError):
    """清单已存在"""
    status_code = 409

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Task list '{name}' already exists")


class ListNotFoundError(TaskListError):
    """清单不存在"""
    status_code = 404

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Task list '{name}' not found")


class InvalidIndexError(TaskListError):
    """索引不是正整数"""
    status_code = 400

    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"Invalid task index: {raw!r}")


class IndexOutOfRangeError(TaskListError):
    """索引超出清单长度"""
    status_code = 400

    def __init__(self, name: str, index: int, length: int):
        self.name = name
        self.index = index
        self.length = length
        super().__init__(
            f"Task index {index} out of range for list '{name}' ({length} tasks)"
        )


class MalformedPayloadError(TaskListError):
    """请求体无法解析"""
    status_code = 400
