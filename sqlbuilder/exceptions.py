"""Exception types raised by the sqlbuilder package."""


class SQLBuilderError(Exception):
    """Base exception for statement building errors."""
    pass


class FlavorError(SQLBuilderError):
    """Exception raised when a flavor name cannot be resolved.
    
    Raised at registry lookup or builder construction time, never while
    compiling a statement.
    """
    pass


class PlaceholderError(SQLBuilderError):
    """Exception raised when compiled text and arguments would fall out of sync.
    
    Raised for malformed or truncated placeholder tokens and for tokens that
    reference a value that was never registered. Both can only come from raw
    SQL that mimics the reserved `$` syntax.
    """
    pass
