from .common import ApiResponse, CamelSchema, ORMBaseSchema, require_text

__all__ = ["ApiResponse", "CamelSchema", "ORMBaseSchema", "require_text"]
