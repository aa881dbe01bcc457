"""内存多清单待办事项：HTTP 服务与交互式控制台"""

__version__ = "1.0.0"
