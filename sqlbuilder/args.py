"""
=========================================
Argument compilation for built statements.
=========================================

Builders never write bind parameter syntax directly. Each literal value is
registered with Args.add(), which returns a synthetic token to embed in
fragment text. At build time Args.compile_with_flavor() scans the assembled
text left to right and replaces every token with the flavor's real
placeholder, collecting the values in the same order.

Token syntax:
    \\x00<n>\\x00    reference to the n-th registered value (0-based)

NUL never occurs in SQL text, so everything else, "$" included, passes through
untouched. A NUL that does not open a complete token is malformed and raises
PlaceholderError, as does a reference to a value that was never registered.

Example:
    >>> from sqlbuilder.args import Args
    >>> from sqlbuilder.flavor import Flavor
    >>> 
    >>> args = Args(Flavor.POSTGRESQL)
    >>> token = args.add(42)
    >>> args.compile(f"CHECK (qty < {token})")
    Statement(sql='CHECK (qty < $1)', args=[42])
"""

import logging
import re
from typing import Any, List, NamedTuple, Optional, Union

from sqlbuilder.exceptions import PlaceholderError
from sqlbuilder.flavor import Flavor, default_flavor, get_flavor

logger = logging.getLogger(__name__)

TOKEN_SENTINEL = "\x00"

# A complete token, or a bare sentinel (malformed)
_TOKEN_PATTERN = re.compile(r"\x00(?:(\d+)\x00)?")


class Statement(NamedTuple):
    """A compiled statement: SQL text and its ordered bind arguments."""
    
    sql: str
    args: List[Any]


class Raw:
    """A value that is spliced into the SQL text verbatim instead of bound.
    
    Example:
        >>> ctb.define("created_at", "timestamptz", "DEFAULT", ctb.var(Raw("NOW()")))
    """
    
    def __init__(self, expr: str):
        self.expr = expr
    
    def __repr__(self) -> str:
        return f"Raw({self.expr!r})"
    
    def __eq__(self, other) -> bool:
        return isinstance(other, Raw) and other.expr == self.expr
    
    def __hash__(self) -> int:
        return hash(self.expr)


def escape(ident: str) -> str:
    """Strip token sentinels from an identifier so it cannot forge a token."""
    return ident.replace(TOKEN_SENTINEL, "")


def escape_all(*idents: str) -> List[str]:
    """Escape several identifiers at once."""
    return [escape(ident) for ident in idents]


class Args:
    """Ordered store of literal values pending compilation.
    
    Values are append-only and never deduplicated: registering an equal value
    twice yields two distinct tokens.
    
    Attributes:
        flavor: Flavor used by compile()
    """
    
    def __init__(self, flavor: Optional[Union[Flavor, str]] = None):
        """Initialize an empty store.
        
        Args:
            flavor: Flavor or flavor name; defaults to the configured SQLBUILDER_FLAVOR
            
        Raises:
            FlavorError: If the flavor cannot be resolved
        """
        self.flavor = get_flavor(flavor) if flavor is not None else default_flavor()
        self._values: List[Any] = []
    
    def __len__(self) -> int:
        return len(self._values)
    
    def add(self, value: Any) -> str:
        """Register a value and return its synthetic placeholder token.
        
        Args:
            value: Literal value to bind (or a Raw expression to inline)
            
        Returns:
            Token to embed in fragment text
        """
        self._values.append(value)
        return f"{TOKEN_SENTINEL}{len(self._values) - 1}{TOKEN_SENTINEL}"
    
    def compile(self, text: str, *initial_args: Any) -> Statement:
        """Compile text with the bound flavor. See compile_with_flavor()."""
        return self.compile_with_flavor(text, self.flavor, *initial_args)
    
    def compile_with_flavor(self, text: str, flavor: Union[Flavor, str], *initial_args: Any) -> Statement:
        """Replace synthetic tokens with real placeholders and collect arguments.
        
        Placeholders are numbered in left-to-right order of the final text,
        after any initial arguments. A token that occurs several times binds
        its value once per occurrence.
        
        Args:
            text: Assembled SQL text containing synthetic tokens
            flavor: Target flavor (or flavor name) for placeholder rendering
            *initial_args: Arguments placed ahead of all registered values
            
        Returns:
            Statement with the final SQL and the matching argument list
            
        Raises:
            FlavorError: If the flavor cannot be resolved
            PlaceholderError: If a token is malformed or unregistered
        """
        flavor = get_flavor(flavor)
        values = list(initial_args)
        parts = []
        pos = 0
        
        for match in _TOKEN_PATTERN.finditer(text):
            parts.append(text[pos:match.start()])
            pos = match.end()
            ref = match.group(1)
            
            if ref is None:
                logger.error(f"Malformed placeholder at offset {match.start()}: {text!r}")
                raise PlaceholderError(
                    f"Malformed placeholder at offset {match.start()} in {text!r}"
                )
            
            index = int(ref)
            
            if index >= len(self._values):
                logger.error(f"Placeholder #{index} has no registered value: {text!r}")
                raise PlaceholderError(
                    f"Placeholder #{index} at offset {match.start()} has no registered value "
                    f"({len(self._values)} registered)"
                )
            
            value = self._values[index]
            
            if isinstance(value, Raw):
                parts.append(value.expr)
                continue
            
            values.append(value)
            parts.append(flavor.placeholder(len(values)))
        
        parts.append(text[pos:])
        return Statement("".join(parts), values)
