"""Domain policies package."""

from .unit_fields import exposes_unit_fields, resolve_unit_flag

__all__ = ["exposes_unit_fields", "resolve_unit_flag"]
