"""Route table import resolution — ``"module:attribute"`` to ``Router``.

Shared by ``waypoint routes`` and ``waypoint match``.
"""

import importlib

from waypoint.config import RouterConfig
from waypoint.routing.router import Router
from waypoint.routing.table import RouteTable


def resolve_router(import_string: str, config: RouterConfig | None = None) -> Router:
    """Resolve an import string to a compiled ``Router``.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"router"``. The attribute may be a ``Router``, a
    ``RouteTable`` (compiled here with *config*), or a zero-argument
    factory returning either.

    A factory that accepts a ``config`` argument receives *config*.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a router or table.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (Router, RouteTable)):
        try:
            obj = obj(config) if config is not None else obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteTable):
        return obj.compile(config)

    if not isinstance(obj, Router):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a waypoint Router"
        raise TypeError(msg)

    return obj
