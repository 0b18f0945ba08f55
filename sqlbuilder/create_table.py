"""
=================================
CREATE TABLE statement builder.
=================================

Builds CREATE TABLE statements through chained method calls. Column and index
definitions, table options, raw SQL injections and bound values accumulate on
the builder; build() assembles them into SQL text and an argument list for
the target flavor.

Raw SQL passed to sql() is queued at the builder's current position, which
moves forward as the statement is built:

    sql() before create_table()  -> before the verb
    sql() after create_table()   -> after the table name
    sql() after define()         -> after the definitions clause
    sql() after option()         -> after the options clause

Example:
    >>> from sqlbuilder import CreateTableBuilder, Flavor
    >>> 
    >>> ctb = CreateTableBuilder(Flavor.MYSQL)
    >>> ctb.create_table("users").if_not_exists()
    >>> ctb.define("id", "BIGINT(20)", "NOT NULL", "AUTO_INCREMENT", "PRIMARY KEY")
    >>> ctb.define("status", "TINYINT", "DEFAULT", ctb.var(1))
    >>> ctb.option("DEFAULT CHARACTER SET", "utf8mb4")
    >>> ctb.build()
    Statement(sql='CREATE TABLE IF NOT EXISTS users (id BIGINT(20) NOT NULL AUTO_INCREMENT PRIMARY KEY, status TINYINT DEFAULT ?) DEFAULT CHARACTER SET utf8mb4', args=[1])
"""

import logging
from typing import Any, List, Optional, Union

from sqlbuilder.args import Args, Statement, escape
from sqlbuilder.column_types import ColType
from sqlbuilder.flavor import Flavor, get_flavor
from sqlbuilder.injection import CreateTableMarker, Injection

logger = logging.getLogger(__name__)


class CreateTableBuilder:
    """Builder for CREATE TABLE statements.
    
    Not safe for concurrent mutation; build one statement from one caller.
    
    Attributes:
        args: Argument store holding values registered through var()
    """
    
    def __init__(self, flavor: Optional[Union[Flavor, str]] = None):
        """Initialize an empty builder.
        
        Args:
            flavor: Target flavor or flavor name; defaults to the configured SQLBUILDER_FLAVOR
            
        Raises:
            FlavorError: If the flavor (given or configured) is unknown
        """
        self.args = Args(flavor)
        self._verb = "CREATE TABLE"
        self._if_not_exists = False
        self._table = ""
        self._defs: List[List[str]] = []
        self._options: List[List[str]] = []
        self._injection = Injection()
        self._marker = CreateTableMarker.INIT
    
    def __str__(self) -> str:
        return self.build().sql
    
    @property
    def flavor(self) -> Flavor:
        return self.args.flavor
    
    def set_flavor(self, flavor: Union[Flavor, str]) -> Flavor:
        """Set the flavor used by build() and return the previous one.
        
        Raises:
            FlavorError: If the flavor cannot be resolved
        """
        old = self.args.flavor
        self.args.flavor = get_flavor(flavor)
        return old
    
    def create_table(self, table: str) -> "CreateTableBuilder":
        """Set the table name."""
        self._table = escape(table)
        self._marker = CreateTableMarker.AFTER_CREATE
        return self
    
    def create_temp_table(self, table: str) -> "CreateTableBuilder":
        """Set the table name and switch the verb to CREATE TEMPORARY TABLE."""
        self._verb = "CREATE TEMPORARY TABLE"
        return self.create_table(table)
    
    def if_not_exists(self) -> "CreateTableBuilder":
        """Add IF NOT EXISTS before the table name."""
        self._if_not_exists = True
        return self
    
    def define(self, *tokens: str) -> "CreateTableBuilder":
        """Add a column or index definition.
        
        Tokens are joined with spaces; definitions are joined with commas
        inside a single pair of parentheses.
        
        Example:
            >>> ctb.define("name", "varchar", "NOT NULL")
        """
        self._defs.append(list(tokens))
        self._marker = CreateTableMarker.AFTER_DEFINE
        return self
    
    def option(self, *tokens: str) -> "CreateTableBuilder":
        """Add a table option, rendered after the definitions clause."""
        self._options.append(list(tokens))
        self._marker = CreateTableMarker.AFTER_OPTION
        return self
    
    def sql(self, sql: str) -> "CreateTableBuilder":
        """Inject raw SQL at the builder's current position."""
        self._injection.sql(self._marker, sql)
        return self
    
    def var(self, value: Any) -> str:
        """Register a value and return the placeholder token to embed in SQL."""
        return self.args.add(value)
    
    def build(self) -> Statement:
        """Build the statement with the builder's flavor."""
        return self.build_with_flavor(self.args.flavor)
    
    def build_with_flavor(self, flavor: Union[Flavor, str], *initial_args: Any) -> Statement:
        """Build the statement for a given flavor.
        
        Building does not modify the builder; it may be built again, with any
        flavor, and keeps accepting mutations afterwards.
        
        Args:
            flavor: Target flavor (or flavor name) for placeholders
            *initial_args: Arguments bound ahead of the builder's own values
            
        Returns:
            Statement with SQL text and the ordered argument list
            
        Raises:
            FlavorError: If the flavor cannot be resolved
            PlaceholderError: If injected raw SQL contains a malformed or
                unregistered placeholder token
        """
        flavor = get_flavor(flavor)
        render = self._injection.render
        parts = []
        
        # SQL injected before the verb starts the statement
        before = render(CreateTableMarker.INIT)
        if before:
            parts.append(before[1:] + " ")
        
        parts.append(self._verb)
        
        if self._if_not_exists:
            parts.append(" IF NOT EXISTS")
        
        parts.append(" " + self._table)
        parts.append(render(CreateTableMarker.AFTER_CREATE))
        
        if self._defs:
            defs = ", ".join(" ".join(tokens) for tokens in self._defs)
            parts.append(f" ({defs})")
        
        parts.append(render(CreateTableMarker.AFTER_DEFINE))
        
        if self._options:
            parts.append(" " + ", ".join(" ".join(tokens) for tokens in self._options))
        
        parts.append(render(CreateTableMarker.AFTER_OPTION))
        
        statement = self.args.compile_with_flavor("".join(parts), flavor, *initial_args)
        logger.debug(
            f"Built {self._verb} {self._table!r} for {flavor} "
            f"with {len(statement.args)} argument(s)"
        )
        return statement
    
    # Column helpers
    
    def column(self, name: str, col_type: Union[ColType, str], nullable: bool) -> "CreateTableBuilder":
        """Define a column as 'name type NULL' or 'name type NOT NULL'."""
        return self.define(name, str(col_type), "NULL" if nullable else "NOT NULL")
    
    def pk_column(self) -> "CreateTableBuilder":
        """Define a bigserial 'id' primary key column."""
        return self.define("id", ColType.BIGSERIAL.value, "PRIMARY KEY", "NOT NULL")
    
    def fk_column(self, table: str, nullable: bool) -> "CreateTableBuilder":
        """Define a column referencing table(id).
        
        The column is named after the singular table name, so
        fk_column("public.users", False) defines
        'user_id bigint NOT NULL REFERENCES public.users(id)'.
        
        Args:
            table: Referenced table, optionally schema-qualified
            nullable: If False, add NOT NULL
        """
        name = table.split(".")[-1]
        if name.endswith("s"):
            name = name[:-1]
        
        tokens = [f"{name}_id", ColType.BIGINT.value]
        
        if not nullable:
            tokens.append("NOT NULL")
        
        tokens.extend(["REFERENCES", f"{table}(id)"])
        return self.define(*tokens)
    
    def created_column(self) -> "CreateTableBuilder":
        return self.define("created_at", ColType.TIMESTAMPTZ.value, "NOT NULL", "DEFAULT NOW()")
    
    def updated_column(self) -> "CreateTableBuilder":
        return self.define("updated_at", ColType.TIMESTAMPTZ.value, "NOT NULL", "DEFAULT NOW()")
    
    def deleted_column(self) -> "CreateTableBuilder":
        return self.define("deleted_at", ColType.TIMESTAMPTZ.value, "NULL")


def new_create_table_builder() -> CreateTableBuilder:
    """Create a CREATE TABLE builder with the configured default flavor."""
    return CreateTableBuilder()


def create_table(table: str) -> CreateTableBuilder:
    """Create a CREATE TABLE builder for a table with the default flavor."""
    return CreateTableBuilder().create_table(table)
