"""Resource declarations expanded into CRUD routes."""

from typing import Callable, Dict, List, Optional, Tuple

from .exceptions import ConfigurationError
from .models import HTTPMethod, RouteDescriptor

# action -> (HTTP method, whether the route addresses a single member via <id>)
ACTIONS: Dict[str, Tuple[HTTPMethod, bool]] = {
    "get": (HTTPMethod.GET, True),
    "create": (HTTPMethod.POST, False),
    "update": (HTTPMethod.PUT, True),
    "delete": (HTTPMethod.DELETE, True),
}


def resource_path(name: str, member: bool) -> str:
    """Build the path pattern for a resource route, format suffix included.

    Args:
        name: Resource name, with or without leading slash
        member: Whether the route addresses a single member (adds ``/<id>``)

    Returns:
        Pattern such as ``/user/<id>[.<format>]``
    """
    path = "/" + name.strip("/")
    if member:
        path += "/<id>"
    return path + RouteDescriptor.FORMAT_SUFFIX


def expand_resource(name: str, **actions: Optional[Callable]) -> List[RouteDescriptor]:
    """Expand a resource declaration into route descriptors.

    Only supplied actions produce routes; ``None`` counts as not supplied.

    Raises:
        ConfigurationError: if the name is empty, no action is given, an action
            is unknown or a handler is not callable.
    """
    if not name or not name.strip("/"):
        raise ConfigurationError("resource should be given a name")

    unknown = sorted(action for action in actions if action not in ACTIONS)
    if unknown:
        raise ConfigurationError(
            f"unknown action(s) {unknown} for resource '{name}', expected any of {list(ACTIONS)}"
        )

    supplied = {action: handler for action, handler in actions.items() if handler is not None}
    if not supplied:
        raise ConfigurationError(f"resource '{name}' should be given with triggers")

    routes = []
    for action, handler in supplied.items():
        if not callable(handler):
            raise ConfigurationError(f"handler for '{action}' on resource '{name}' is not callable")
        method, member = ACTIONS[action]
        routes.append(RouteDescriptor(method, resource_path(name, member), handler, action))
    return routes
