"""
Builds the output files of a target bundle.
"""
import os

from .compressors import run_compressor
from .console import debug_log, log
from .errors import AssetIOError, UnknownBundleError
from .files import file_hash
from .models import KINDS


def collect_files(target, kind, bundles):
    """Return the files of ``kind`` from every bundle the target absorbs, in order."""
    input_files = []
    for name in target.depends:
        if name not in bundles:
            raise UnknownBundleError(name, suggestion=f"Remove it from the 'depends' of target '{target.name}'")
        input_files.extend(bundles[name].files(kind))
    return input_files


def build_target(target, kind, bundles, compressor):
    """
    Combine and compress the target's files of one kind.

    The compressed file is named after the target's pattern with ``{hash}``
    replaced by the MD5 of the compressed content, and its name (relative
    to the target's base path) is stored on the target.

    Args:
        target: TargetBundle to build
        kind: "js" or "css"
        bundles: Dict of name -> SourceBundle
        compressor: Compressor for this kind

    Raises:
        UnknownBundleError: If the target absorbs a bundle that was not resolved
        CompressionError: If the compressor produced no output
        AssetIOError: If files cannot be read, written or renamed
    """
    pattern = target.pattern(kind)
    if not pattern:
        return

    input_files = collect_files(target, kind, bundles)
    if not input_files:
        debug_log(f"Target '{target.name}' has no {kind} files, skipping")
        return

    temp_file = os.path.join(target.base_path, pattern.replace("{hash}", "temp"))
    os.makedirs(os.path.dirname(temp_file) or ".", exist_ok=True)
    if os.path.exists(temp_file):
        # Left over from an aborted run
        os.remove(temp_file)
    run_compressor(compressor, kind, input_files, temp_file)

    output_name = pattern.replace("{hash}", file_hash(temp_file))
    output_file = os.path.join(target.base_path, output_name)
    try:
        os.replace(temp_file, output_file)
    except OSError as e:
        raise AssetIOError(f"Unable to rename '{temp_file}' to '{output_file}': {e.strerror}", path=output_file)
    debug_log(f"Created '{output_file}'")

    setattr(target, kind, [output_name])


def build_targets(targets, bundles, compressors):
    """Build every kind of every target, one after another."""
    for name, target in targets.items():
        log(f"Creating output bundle '{name}':")
        for kind in KINDS:
            build_target(target, kind, bundles, compressors[kind])
