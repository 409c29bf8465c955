# ABOUTME: Field layout management
# ABOUTME: Exposes the fields service used by campaign type lifecycle operations

from .service import FieldsService

__all__ = ["FieldsService"]
