"""The student app's deep-link table and screen descriptors."""

from waypoint.student.ids import CURRENT_USER, ContextKind, ContextRef, expand_tilde_id
from waypoint.student.routes import ROUTES, build_router, build_table
from waypoint.student.screens import Screen

__all__ = [
    "CURRENT_USER",
    "ROUTES",
    "ContextKind",
    "ContextRef",
    "Screen",
    "build_router",
    "build_table",
    "expand_tilde_id",
]
