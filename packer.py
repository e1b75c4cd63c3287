from bundling.builder import build_targets
from bundling.config import load_config
from bundling.console import debug_log, set_verbose
from bundling.graph import resolve
from bundling.models import CSS, JS
from bundling.compressors import make_compressor
from bundling.partition import partition
from bundling.redirect import redirect
from bundling.registry import BundleRegistry
from bundling.serializer import save_bundles

__all__ = ['compress', 'pack', 'set_verbose']


def pack(config, registry=None):
    """
    Run the packing pipeline on a loaded configuration.

    Returns:
        Dict of bundle name -> BundleDefinition to be saved
    """
    # STEP 1: RESOLVE SOURCE BUNDLES
    if registry is None:
        registry = BundleRegistry.from_config(config)
    bundles = resolve(config.bundles, registry)

    # STEP 2: ASSIGN BUNDLES TO TARGETS
    targets = partition(config.targets, bundles)

    # STEP 3: COMBINE AND COMPRESS
    compressors = {
        JS: make_compressor(config.js_compressor, JS, timeout=config.compress_timeout),
        CSS: make_compressor(config.css_compressor, CSS, timeout=config.compress_timeout),
    }
    build_targets(targets, bundles, compressors)

    # STEP 4: REDIRECT SOURCE BUNDLES TO TARGETS
    definitions = redirect(targets, bundles)
    debug_log(f"Final bundles: {', '.join(definitions)}")
    return definitions


def compress(config_file, bundle_file):
    """
    Combine and compress assets per ``config_file`` and write the new bundle
    configuration to ``bundle_file``.
    """
    config = load_config(config_file)
    definitions = pack(config)
    return save_bundles(definitions, bundle_file)
