"""
===================================
SQL flavors (dialect registry).
===================================

A Flavor identifies the target SQL dialect of a compiled statement. It owns
two rules:

- placeholder(ordinal): the bind parameter token for the ordinal-th argument
  ($1 for PostgreSQL, @p1 for SQL Server, :1 for Oracle, ? elsewhere)
- quote(name): the dialect-quoted form of an identifier

Identifier quoting is delegated to SQLAlchemy's IdentifierPreparer, using the
dialect SQLAlchemy ships where there is one and a preparer configured with the
dialect's quote character otherwise.

Example:
    >>> from sqlbuilder.flavor import Flavor, get_flavor
    >>> 
    >>> Flavor.POSTGRESQL.placeholder(2)
    '$2'
    >>> get_flavor('mysql').quote('users')
    '`users`'
"""

import logging
from enum import Enum
from typing import Dict, Union

from sqlalchemy.dialects.mssql.base import MSDialect
from sqlalchemy.dialects.mysql.base import MySQLDialect
from sqlalchemy.dialects.oracle.base import OracleDialect
from sqlalchemy.dialects.postgresql.base import PGDialect
from sqlalchemy.dialects.sqlite.base import SQLiteDialect
from sqlalchemy.engine.default import DefaultDialect
from sqlalchemy.sql.compiler import IdentifierPreparer

from core.config import config
from sqlbuilder.exceptions import FlavorError

logger = logging.getLogger(__name__)


class Flavor(Enum):
    """Supported SQL flavors."""
    
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    SQLITE = "sqlite"
    SQLSERVER = "sqlserver"
    CQL = "cql"
    CLICKHOUSE = "clickhouse"
    PRESTO = "presto"
    ORACLE = "oracle"
    INFORMIX = "informix"
    DORIS = "doris"
    
    def __str__(self) -> str:
        return self.name
    
    def placeholder(self, ordinal: int) -> str:
        """Render the bind parameter token for a 1-based argument position.
        
        Args:
            ordinal: Position of the argument in the compiled text, starting at 1
            
        Returns:
            Dialect-specific placeholder token
            
        Raises:
            ValueError: If ordinal is less than 1
        """
        if ordinal < 1:
            raise ValueError(f"Placeholder ordinal must be >= 1, got {ordinal}")
        
        return _PLACEHOLDER_FORMATS.get(self, "?").format(ordinal)
    
    def quote(self, name: str) -> str:
        """Quote an identifier, escaping any embedded quote characters.
        
        Args:
            name: Raw identifier text
            
        Returns:
            Quoted identifier
        """
        return _identifier_preparer(self).quote_identifier(name)
    
    def new_create_table_builder(self):
        """Create a CREATE TABLE builder bound to this flavor."""
        from sqlbuilder.create_table import CreateTableBuilder
        
        return CreateTableBuilder(flavor=self)


# Flavors missing from this map use "?"
_PLACEHOLDER_FORMATS: Dict[Flavor, str] = {
    Flavor.POSTGRESQL: "${}",
    Flavor.SQLSERVER: "@p{}",
    Flavor.ORACLE: ":{}",
}

_SQLALCHEMY_DIALECTS = {
    Flavor.MYSQL: MySQLDialect,
    Flavor.POSTGRESQL: PGDialect,
    Flavor.SQLITE: SQLiteDialect,
    Flavor.SQLSERVER: MSDialect,
    Flavor.ORACLE: OracleDialect,
}

_QUOTE_CHARS = {
    Flavor.CLICKHOUSE: "`",
    Flavor.DORIS: "`",
    Flavor.CQL: '"',
    Flavor.PRESTO: '"',
    Flavor.INFORMIX: '"',
}

_preparers: Dict[Flavor, IdentifierPreparer] = {}


def _identifier_preparer(flavor: Flavor) -> IdentifierPreparer:
    """Get (and cache) the SQLAlchemy identifier preparer for a flavor."""
    preparer = _preparers.get(flavor)
    
    if preparer is None:
        if flavor in _SQLALCHEMY_DIALECTS:
            # qmark keeps "%" in names from being doubled as pyformat dialects do
            preparer = _SQLALCHEMY_DIALECTS[flavor](paramstyle="qmark").identifier_preparer
        else:
            quote_char = _QUOTE_CHARS[flavor]
            preparer = IdentifierPreparer(
                DefaultDialect(),
                initial_quote=quote_char,
                escape_quote=quote_char
            )
        _preparers[flavor] = preparer
    
    return preparer


def get_flavor(name: Union[str, Flavor]) -> Flavor:
    """Look up a flavor by name.
    
    Args:
        name: Flavor name (case-insensitive) or a Flavor instance
        
    Returns:
        Matching Flavor
        
    Raises:
        FlavorError: If no flavor has that name
        
    Example:
        >>> get_flavor('PostgreSQL')
        <Flavor.POSTGRESQL: 'postgresql'>
    """
    if isinstance(name, Flavor):
        return name
    
    try:
        return Flavor(str(name).strip().lower())
    except ValueError:
        known = ", ".join(flavor.value for flavor in Flavor)
        logger.error(f"Unknown SQL flavor {name!r}")
        raise FlavorError(f"Unknown SQL flavor {name!r} (expected one of: {known})")


def default_flavor() -> Flavor:
    """Resolve the flavor configured by SQLBUILDER_FLAVOR.
    
    Raises:
        FlavorError: If the configured name is not a known flavor
    """
    return get_flavor(config.default_flavor)
