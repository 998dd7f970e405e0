"""SQL statement builders."""

from .base import Statement
from .delete import Delete
from .insert import Insert
from .select import Select
from .update import Update

__all__ = ["Delete", "Insert", "Select", "Statement", "Update"]
