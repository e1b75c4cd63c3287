"""
Assignment of resolved source bundles to output targets.
"""
from .console import debug_log
from .errors import ConfigurationError, UnknownBundleError
from .graph import dependency_order
from .models import TargetBundle


def bundle_ranks(bundles):
    """Map each bundle name to its position in dependency order."""
    order = dependency_order(bundles, lambda name: bundles[name].depends)
    return {name: rank for rank, name in enumerate(order)}


def partition(target_configs, bundles):
    """
    Create the output targets and distribute the source bundles among them.

    A target with empty ``depends`` takes every bundle no other target claims.
    Each target's ``depends`` is sorted so dependencies come first.

    Args:
        target_configs: Dict of target name -> TargetConfig
        bundles: Dict of name -> SourceBundle, as returned by ``resolve``

    Returns:
        Dict of target name -> TargetBundle

    Raises:
        UnknownBundleError: If a target lists a bundle that was not resolved
        ConfigurationError: On a second implicit target, a bundle claimed by two
            targets, a missing output directory/URL or a target named like a bundle
    """
    ranks = bundle_ranks(bundles)

    implicit = None
    referenced = {}
    for name, config in target_configs.items():
        if name in bundles:
            raise ConfigurationError(
                f"Target '{name}' has the same name as a source bundle.",
                bundle=name,
            )
        if not config.depends:
            if implicit is None:
                implicit = name
            else:
                raise ConfigurationError(
                    f"Only one target can have empty 'depends' option. Found two now: {implicit}, {name}"
                )
            continue
        for bundle in config.depends:
            if bundle not in bundles:
                raise UnknownBundleError(
                    bundle,
                    suggestion=f"Remove it from the 'depends' of target '{name}' or add it to 'bundles'",
                )
            if bundle in referenced and referenced[bundle] != name:
                raise ConfigurationError(
                    f"Target '{referenced[bundle]}' and '{name}' cannot contain the bundle '{bundle}' at the same time.",
                    bundle=bundle,
                )
            referenced[bundle] = name

    targets = {}
    for name, config in target_configs.items():
        if config.base_path is None:
            raise ConfigurationError(f"Please specify 'base_path' for the '{name}' target.", bundle=name)
        if config.base_url is None:
            raise ConfigurationError(f"Please specify 'base_url' for the '{name}' target.", bundle=name)

        if name == implicit:
            depends = [bundle for bundle in ranks if bundle not in referenced]
        else:
            depends = list(dict.fromkeys(config.depends))
        depends.sort(key=ranks.__getitem__)
        debug_log(f"Target '{name}' absorbs: {', '.join(depends) or '(nothing)'}")

        targets[name] = TargetBundle(
            name=name,
            base_path=config.base_path,
            base_url=config.base_url,
            js_pattern=config.js,
            css_pattern=config.css,
            depends=depends,
        )

    return targets
