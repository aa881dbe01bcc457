from .list_service import ListService, parse_index

__all__ = ["ListService", "parse_index"]
