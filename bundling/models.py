"""
Data records shared by every stage of the packer.

Source bundles come from the registry, targets come from the configuration.
Both end up serialized as ``BundleDefinition`` entries.
"""
import os
from typing import Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

# Resource kinds, in build order
JS = "js"
CSS = "css"
KINDS = (JS, CSS)

DEFAULT_JS_COMPRESSOR = "java -jar compiler.jar --js {from} --js_output_file {to}"
DEFAULT_CSS_COMPRESSOR = "java -jar yuicompressor.jar --type css {from} -o {to}"


class BundleDefinition(BaseModel):
    """A named set of script/stylesheet files plus the bundles it depends on."""
    model_config = ConfigDict(extra="forbid")

    base_path: Optional[str] = None
    base_url: Optional[str] = None
    js: List[str] = []
    css: List[str] = []
    depends: List[str] = []


class SourceBundle(BundleDefinition):
    """A bundle loaded from the registry for one packing run."""
    name: str

    def files(self, kind: str) -> List[str]:
        """Return the bundle's files of the given kind, qualified by its base path."""
        base_path = self.base_path or ""
        return [os.path.join(base_path, f) for f in getattr(self, kind)]


class TargetConfig(BaseModel):
    """Configuration of one output bundle."""
    model_config = ConfigDict(extra="forbid")

    depends: List[str] = []
    base_path: Optional[str] = None
    base_url: Optional[str] = None
    js: Optional[str] = None  # e.g. "js/all-{hash}.js"
    css: Optional[str] = None  # e.g. "css/all-{hash}.css"


class TargetBundle(BaseModel):
    """An output bundle: the source bundles it absorbs and the files built for it."""
    name: str
    base_path: str
    base_url: str
    js_pattern: Optional[str] = None
    css_pattern: Optional[str] = None
    depends: List[str] = []
    js: List[str] = []
    css: List[str] = []

    def pattern(self, kind: str) -> Optional[str]:
        return getattr(self, f"{kind}_pattern")

    def to_definition(self) -> BundleDefinition:
        return BundleDefinition(
            base_path=self.base_path,
            base_url=self.base_url,
            js=list(self.js),
            css=list(self.css),
            depends=list(self.depends),
        )


Compressor = Union[str, Callable[[List[str], str], None]]


class PackConfig(BaseModel):
    """Top-level configuration of a packing run."""
    model_config = ConfigDict(extra="forbid")

    bundles: List[str] = []
    targets: Dict[str, TargetConfig] = {}
    js_compressor: Compressor = DEFAULT_JS_COMPRESSOR
    css_compressor: Compressor = DEFAULT_CSS_COMPRESSOR
    compress_timeout: Optional[float] = None
    sources: Dict[str, BundleDefinition] = {}
    source_files: List[str] = []
