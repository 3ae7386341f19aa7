from __future__ import annotations

from typing import Any, Dict, List, NamedTuple

from ..logging_config import get_logger
from .settings_tree import Group, RoutePath, classify_root

log = get_logger(__name__)


class SettingsRoute(NamedTuple):
    route: str
    path: RoutePath
    group: Group


class SettingsRouteBuilder:
    """Discovers every group node of a settings tree.

    Each group gets one route keyed by its path from the root, in depth-first
    order following the tree's own key order. Leaves contribute nothing.
    The tree must be acyclic.
    """

    def build_paths(self, tree: Any) -> Dict[RoutePath, Group]:
        root = classify_root(tree)
        routes: Dict[RoutePath, Group] = {}
        self._collect(root, RoutePath(), routes)
        return routes

    def _collect(self, node: Group, path: RoutePath, routes: Dict[RoutePath, Group]):
        for key, child in node.groups():
            child_path = path.child(key)
            routes[child_path] = child
            self._collect(child, child_path, routes)

    def build_routes(self, tree: Any) -> List[SettingsRoute]:
        """Encoded routes in discovery order.

        A key containing the delimiter can make two paths encode alike; the
        first one discovered keeps the route.
        """
        taken = set()
        routes = []
        for path, group in self.build_paths(tree).items():
            encoded = path.encode()
            if encoded in taken:
                log.warning("Skipping settings group %s: route already taken", path.segments)
                continue
            taken.add(encoded)
            routes.append(SettingsRoute(encoded, path, group))
        return routes

    def build(self, tree: Any) -> Dict[str, Group]:
        return {r.route: r.group for r in self.build_routes(tree)}
