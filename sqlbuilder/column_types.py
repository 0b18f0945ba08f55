"""
==============================
PostgreSQL column type names.
==============================

Example:
    >>> from sqlbuilder.column_types import ColType, with_modifiers
    >>> 
    >>> ColType.VARCHAR.options("255")
    'varchar(255)'
    >>> with_modifiers("decimal", "10", "2")
    'decimal(10,2)'
"""

from enum import Enum


def with_modifiers(keyword: str, *modifiers: str) -> str:
    """Append parenthesized, comma-separated type modifiers to a type keyword."""
    return f"{keyword}({','.join(modifiers)})"


class ColType(str, Enum):
    """PostgreSQL column type keywords."""
    
    BIGINT = "bigint"
    BIGSERIAL = "bigserial"
    BIT = "bit"
    VARBIT = "varbit"
    BOOL = "bool"
    BOX = "box"
    BYTEA = "bytea"
    CHAR = "char"
    VARCHAR = "varchar"
    CIDR = "cidr"
    CIRCLE = "circle"
    DATE = "date"
    FLOAT8 = "float8"
    INET = "inet"
    INT = "int"
    INTERVAL = "interval"
    JSON = "json"
    JSONB = "jsonb"
    LINE = "line"
    LSEG = "lseg"
    MACADDR = "macaddr"
    MACADDR8 = "macaddr8"
    MONEY = "money"
    DECIMAL = "decimal"
    PATH = "path"
    PG_LSN = "pg_lsn"
    PG_SNAPSHOT = "pg_snapshot"
    POINT = "point"
    POLYGON = "polygon"
    REAL = "real"
    SMALLINT = "smallint"
    SMALLSERIAL = "smallserial"
    SERIAL = "serial"
    TEXT = "text"
    TIME = "time"
    TIMETZ = "timetz"
    TIMESTAMP = "timestamp"
    TIMESTAMPTZ = "timestamptz"
    TSQUERY = "tsquery"
    TSVECTOR = "tsvector"
    TXID_SNAPSHOT = "txid_snapshot"
    UUID = "uuid"
    XML = "xml"
    
    def __str__(self) -> str:
        return self.value
    
    def options(self, *modifiers: str) -> str:
        """Return this type with modifiers, e.g. varchar(255)."""
        return with_modifiers(self.value, *modifiers)
