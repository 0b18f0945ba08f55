"""
=====================================
Raw SQL injection at statement markers.
=====================================

A marker names a position in a statement's grammar (before the verb, after
the table name, ...). Builders keep track of their current marker and queue
raw SQL there; at build time they render each marker's queue in fixed grammar
order, so injections keep their place no matter when they were queued.
"""

from enum import IntEnum
from typing import Dict, List


class CreateTableMarker(IntEnum):
    """Injection points of a CREATE TABLE statement, in grammar order."""
    
    INIT = 0
    AFTER_CREATE = 1
    AFTER_DEFINE = 2
    AFTER_OPTION = 3


class Injection:
    """Queues of raw SQL keyed by marker."""
    
    def __init__(self):
        self._markers: Dict[int, List[str]] = {}
    
    def sql(self, marker: int, sql: str) -> None:
        """Queue raw SQL at a marker."""
        self._markers.setdefault(marker, []).append(sql)
    
    def render(self, marker: int) -> str:
        """Render the SQL queued at a marker.
        
        Args:
            marker: Marker to render
            
        Returns:
            A leading space followed by the queued entries joined with
            spaces, or an empty string when nothing is queued
        """
        entries = self._markers.get(marker)
        
        if not entries:
            return ""
        
        return " " + " ".join(entries)
