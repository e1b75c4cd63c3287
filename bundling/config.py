"""
Loading and templating of packer configuration files.

Configuration files are JSON documents validated against ``PackConfig``.
Unknown keys are rejected instead of being silently ignored.
"""
import json
import os

from pydantic import ValidationError

from .console import log
from .errors import AssetIOError, ConfigurationError
from .models import DEFAULT_CSS_COMPRESSOR, DEFAULT_JS_COMPRESSOR, PackConfig


def _format_validation_error(error):
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        lines.append(f"{location}: {item['msg']}")
    return "; ".join(lines)


def read_json(path):
    """Read a JSON document, mapping failures to packer errors."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON: {e}", path=path)
    except UnicodeDecodeError:
        raise AssetIOError(f"Unable to decode file '{path}' as UTF-8", path=path)
    except OSError as e:
        raise AssetIOError(f"Unable to read '{path}': {e.strerror}", path=path)


def _resolve(path, base_dir):
    if path is None or os.path.isabs(path):
        return path
    return os.path.normpath(os.path.join(base_dir, path))


def parse_config(data, base_dir=".", path=None):
    """
    Validate raw configuration data and resolve its relative paths.

    Args:
        data: Decoded configuration mapping
        base_dir: Directory relative paths are resolved against
        path: Config file name, used in error messages only

    Returns:
        A validated PackConfig

    Raises:
        ConfigurationError: If the data has unknown or malformed fields
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a JSON object", path=path)
    try:
        config = PackConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            _format_validation_error(e),
            path=path,
            suggestion="Run 'assetpack template' to see the supported options",
        )

    for target in config.targets.values():
        target.base_path = _resolve(target.base_path, base_dir)
    for definition in config.sources.values():
        definition.base_path = _resolve(definition.base_path, base_dir)
    config.source_files = [_resolve(p, base_dir) for p in config.source_files]
    return config


def load_config(path):
    """Load the configuration file at ``path``."""
    log(f"Loading configuration from '{path}'...")
    data = read_json(path)
    base_dir = os.path.dirname(os.path.abspath(path))
    return parse_config(data, base_dir, path=path)


def template_config():
    """Return the template configuration as a dict."""
    return {
        # Adjust command/callback for JavaScript files compressing:
        "js_compressor": DEFAULT_JS_COMPRESSOR,
        # Adjust command/callback for CSS files compressing:
        "css_compressor": DEFAULT_CSS_COMPRESSOR,
        "compress_timeout": 300,
        # The list of asset bundles to compress:
        "bundles": [
            "app",
        ],
        # Where the listed bundles and their dependencies are defined:
        "sources": {
            "app": {
                "base_path": "assets/app",
                "base_url": "/assets/app",
                "js": ["app.js"],
                "css": ["app.css"],
                "depends": [],
            },
        },
        "source_files": [],
        # Asset bundle for compression output:
        "targets": {
            "all": {
                "base_path": "web",
                "base_url": "",
                "js": "js/all-{hash}.js",
                "css": "css/all-{hash}.css",
            },
        },
    }


def write_template(path):
    """Write the template configuration file to ``path``."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(template_config(), f, indent=2)
            f.write("\n")
    except OSError as e:
        raise AssetIOError(f"Unable to write template file '{path}': {e.strerror}", path=path)
    log(f"Configuration file template created at '{path}'.")
