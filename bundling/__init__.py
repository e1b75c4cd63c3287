# Asset Packer - Core Components
"""
Core modules for the asset packer:
- errors: Error types carrying bundle/file context
- models: Bundle, target and configuration records
- config: Configuration loading and template
- registry: Bundle definition lookup
- graph: Dependency resolution and cycle detection
- partition: Assignment of source bundles to targets
- stylesheet: url() rewriting for relocated stylesheets
- compressors: Shell and callback compressors
- builder: Combining, compressing and hashing target files
- redirect: Dependency rewriting after build
- serializer: Output bundle configuration
"""

from .errors import (
    AssetError,
    AssetIOError,
    CircularDependencyError,
    CompressionError,
    ConfigurationError,
    UnknownBundleError,
)
from .models import BundleDefinition, PackConfig, SourceBundle, TargetBundle, TargetConfig
from .config import load_config, parse_config, write_template
from .registry import BundleRegistry
from .graph import RegistrationState, dependency_order, resolve
from .partition import partition
from .stylesheet import rewrite_references
from .compressors import CallbackCompressor, Compressor, ShellCompressor, make_compressor
from .builder import build_target, build_targets
from .redirect import redirect
from .serializer import save_bundles

__all__ = [
    'AssetError',
    'AssetIOError',
    'CircularDependencyError',
    'CompressionError',
    'ConfigurationError',
    'UnknownBundleError',
    'BundleDefinition',
    'PackConfig',
    'SourceBundle',
    'TargetBundle',
    'TargetConfig',
    'load_config',
    'parse_config',
    'write_template',
    'BundleRegistry',
    'RegistrationState',
    'dependency_order',
    'resolve',
    'partition',
    'rewrite_references',
    'CallbackCompressor',
    'Compressor',
    'ShellCompressor',
    'make_compressor',
    'build_target',
    'build_targets',
    'redirect',
    'save_bundles',
]
