"""
====================================================
sqlbuilder: flavor-aware SQL statement builders.
====================================================

Builders assemble SQL text through chained method calls and defer two
decisions to build time: the target SQL flavor, and how bound values are
written as placeholders.

Modules:
    - flavor.py: Flavor registry (placeholder syntax, identifier quoting)
    - args.py: Argument compilation (synthetic tokens to real placeholders)
    - injection.py: Raw SQL injection points
    - create_table.py: CREATE TABLE builder
    - column_types.py: PostgreSQL column type names

Example:
    >>> from sqlbuilder import Flavor, create_table
    >>> 
    >>> ctb = create_table("public.users")
    >>> ctb.pk_column().define("name", "varchar", "NOT NULL")
    >>> sql, args = ctb.build_with_flavor(Flavor.POSTGRESQL)
"""

__version__ = "0.1.0"
__all__ = [
    'Args', 'Raw', 'Statement', 'escape', 'escape_all',
    'ColType', 'with_modifiers',
    'CreateTableBuilder', 'create_table', 'new_create_table_builder',
    'SQLBuilderError', 'FlavorError', 'PlaceholderError',
    'Flavor', 'default_flavor', 'get_flavor',
    'CreateTableMarker', 'Injection',
]

from .args import Args, Raw, Statement, escape, escape_all
from .column_types import ColType, with_modifiers
from .create_table import CreateTableBuilder, create_table, new_create_table_builder
from .exceptions import FlavorError, PlaceholderError, SQLBuilderError
from .flavor import Flavor, default_flavor, get_flavor
from .injection import CreateTableMarker, Injection
