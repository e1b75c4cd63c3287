"""
Rewrites bundle dependencies after targets are built.

Targets end up depending on other targets only, and every absorbed source
bundle becomes a pass-through entry that depends on its target.
"""
from .console import log, warn
from .errors import UnknownBundleError
from .graph import dependency_order
from .models import BundleDefinition


def absorbed_by(targets):
    """Map each absorbed source bundle name to the target that absorbed it."""
    owners = {}
    for name, target in targets.items():
        for bundle in target.depends:
            owners[bundle] = name
    return owners


def redirect(targets, bundles):
    """
    Point dependencies at targets instead of the source bundles they absorbed.

    Args:
        targets: Dict of target name -> TargetBundle (built)
        bundles: Dict of name -> SourceBundle

    Returns:
        Dict of bundle name -> BundleDefinition: the targets first, then one
        pass-through entry per absorbed source bundle

    Raises:
        CircularDependencyError: If the targets now depend on each other in a cycle
    """
    log("Creating new bundle configuration...")
    owners = absorbed_by(targets)

    def owner_of(name):
        return owners.get(name, name)

    for name, target in targets.items():
        depends = {}
        for bundle in target.depends:
            if bundle not in bundles:
                raise UnknownBundleError(bundle)
            for dependency in bundles[bundle].depends:
                owner = owner_of(dependency)
                if owner == dependency:
                    warn(f"Bundle '{dependency}' is not part of any target; '{name}' keeps depending on it.")
                depends[owner] = True
        depends.pop(name, None)
        target.depends = list(depends)

    def depends_of(name):
        if name in targets:
            return targets[name].depends
        # A source bundle left outside every target
        return list(dict.fromkeys(owner_of(d) for d in bundles[name].depends)) if name in bundles else []

    dependency_order(targets, depends_of, kind="target")

    result = {name: target.to_definition() for name, target in targets.items()}
    for bundle, target in owners.items():
        result[bundle] = BundleDefinition(depends=[target])
    return result
