from .table_config import TableConfig

__all__ = [
    "TableConfig",
]
