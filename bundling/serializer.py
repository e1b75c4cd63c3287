"""
Writes the final bundle definitions to a JSON file.
"""
import json

from .console import log
from .errors import AssetIOError

FIELDS = ("base_path", "base_url", "js", "css", "depends")


def definition_entry(definition):
    """Return the serializable dict for one definition, without empty fields."""
    entry = {}
    for field in FIELDS:
        value = getattr(definition, field)
        if value:
            entry[field] = value
        elif field in ("js", "css"):
            entry[field] = []
    return entry


def save_bundles(definitions, bundle_file):
    """
    Save bundle definitions as JSON, one entry per bundle name.

    Raises:
        AssetIOError: If the file cannot be written
    """
    data = {name: definition_entry(definition) for name, definition in definitions.items()}
    try:
        with open(bundle_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
    except OSError as e:
        raise AssetIOError(
            f"Unable to write output bundle configuration at '{bundle_file}': {e.strerror}",
            path=bundle_file,
        )
    log(f"Output bundle configuration created at '{bundle_file}'.")
    return data
