"""
Bundle registry: looks up source bundle definitions by name.
"""
import os

from pydantic import ValidationError

from .config import read_json
from .console import debug_log
from .errors import ConfigurationError, UnknownBundleError
from .models import BundleDefinition, SourceBundle


class BundleRegistry:
    """Name -> definition lookup backed by a plain mapping."""

    def __init__(self, definitions=None):
        self.definitions = dict(definitions or {})

    def lookup(self, name):
        """
        Return the source bundle registered under ``name``.

        Raises:
            UnknownBundleError: If no definition exists for the name
        """
        definition = self.definitions.get(name)
        if definition is None:
            raise UnknownBundleError(name)
        return SourceBundle(name=name, **definition.model_dump())

    def update(self, definitions):
        self.definitions.update(definitions)

    @classmethod
    def load_file(cls, path):
        """Read bundle definitions from a JSON file (e.g. a previous packer output)."""
        debug_log(f"Reading bundle definitions from '{path}'")
        data = read_json(path)
        if not isinstance(data, dict):
            raise ConfigurationError("Bundle definitions must be a JSON object", path=path)

        base_dir = os.path.dirname(os.path.abspath(path))
        definitions = {}
        for name, raw in data.items():
            try:
                definition = BundleDefinition.model_validate(raw)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid definition: {e}", bundle=name, path=path)
            if definition.base_path and not os.path.isabs(definition.base_path):
                definition.base_path = os.path.normpath(os.path.join(base_dir, definition.base_path))
            definitions[name] = definition
        return definitions

    @classmethod
    def from_config(cls, config):
        """Build a registry from ``source_files`` followed by inline ``sources``."""
        registry = cls()
        for path in config.source_files:
            registry.update(cls.load_file(path))
        registry.update(config.sources)
        return registry
