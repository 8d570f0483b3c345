"""Output schemas for command functions.

Importing this package registers every schema.
"""

from . import config, session  # noqa: F401
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
