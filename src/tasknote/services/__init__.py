"""Services module for tasknote - configuration, forms and document access."""

from .config_service import ConfigService, get_config_service
from .document_service import DocumentError, insert_line, read_line, replace_line
from .form_service import TaskForm

__all__ = [
    "ConfigService",
    "get_config_service",
    "DocumentError",
    "insert_line",
    "read_line",
    "replace_line",
    "TaskForm",
]
