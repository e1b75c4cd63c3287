"""
Dependency graph traversal for bundles and targets.

Walks the graph depth-first, dependencies before dependents, and records the
order in which nodes complete. A node met again while it is still in progress
closes a cycle.
"""
from enum import Enum

from .console import debug_log, log
from .errors import CircularDependencyError


class RegistrationState(Enum):
    UNVISITED = "unvisited"
    IN_PROGRESS = "in-progress"
    DONE = "done"


def dependency_order(names, depends_of, kind="bundle"):
    """
    Return ``names`` and everything they depend on, dependencies first.

    Args:
        names: Node names to start from, visited in the given order
        depends_of: Callable returning the dependency names of a node
        kind: "bundle" or "target", used in error messages

    Returns:
        List of node names in completion order

    Raises:
        CircularDependencyError: If a node depends on itself, directly or not
    """
    states = {}
    order = []

    def visit(name):
        state = states.get(name, RegistrationState.UNVISITED)
        if state is RegistrationState.DONE:
            return
        if state is RegistrationState.IN_PROGRESS:
            raise CircularDependencyError(name, kind=kind)

        states[name] = RegistrationState.IN_PROGRESS
        for dependency in depends_of(name):
            visit(dependency)
        states[name] = RegistrationState.DONE
        order.append(name)

    for name in names:
        visit(name)
    return order


def resolve(names, registry):
    """
    Load the requested bundles and all of their transitive dependencies.

    Args:
        names: Requested bundle names
        registry: Object with a ``lookup(name)`` method returning a SourceBundle

    Returns:
        Dict of name -> SourceBundle, in resolution order

    Raises:
        UnknownBundleError: If the registry does not know a name
        CircularDependencyError: If the bundles depend on each other in a cycle
    """
    log("Collecting source bundles information...")
    loaded = {}

    def depends_of(name):
        if name not in loaded:
            loaded[name] = registry.lookup(name)
        return loaded[name].depends

    order = dependency_order(names, depends_of)
    debug_log(f"Resolution order: {', '.join(order)}")
    return {name: loaded[name] for name in order}
