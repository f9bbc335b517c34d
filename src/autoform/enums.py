"""Enumeration type definitions"""

from enum import Enum


class Primitive(str, Enum):
    """Primitive types a leaf node can describe"""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ANY = "any"


class WrapperKind(str, Enum):
    OPTIONAL = "optional"
    NULLABLE = "nullable"
    NULLISH = "nullish"


class ConstraintType(str, Enum):
    MIN_VALUE = "min_value"
    MAX_VALUE = "max_value"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    INTEGER = "integer"
    EMAIL = "email"
    URL = "url"
    ISO_DATE = "iso_date"


class MetadataType(str, Enum):
    TITLE = "title"
    DESCRIPTION = "description"
    METADATA = "metadata"


class FieldType(str, Enum):
    """Field types a descriptor can carry"""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    PICKLIST = "picklist"
    ENUM = "enum"
    OBJECT = "object"
    ARRAY = "array"
