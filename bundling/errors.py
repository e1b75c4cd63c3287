"""
Error types for the asset packer.

Every failure in the pipeline is fatal: the first error aborts the run and is
reported with the bundle/target name and file path it concerns.
"""


class AssetError(Exception):
    """Base exception for asset packing errors with bundle/path context and hints."""
    title = "Asset Error"

    def __init__(self, message, bundle=None, path=None, suggestion=None):
        self.message = message
        self.bundle = bundle  # Offending bundle or target name
        self.path = path  # Offending file
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with context and suggestion."""
        lines = [f"\n❌ {self.title}:\n"]
        lines.append(f"   {self.message}\n")

        if self.bundle:
            lines.append(f"   > bundle: {self.bundle}\n")
        if self.path:
            lines.append(f"   > file: {self.path}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


class UnknownBundleError(AssetError):
    title = "Unknown Bundle"

    def __init__(self, name, suggestion=None):
        self.name = name
        super().__init__(
            f"Unknown bundle: '{name}'",
            bundle=name,
            suggestion=suggestion or "Define it under 'sources' or in one of the 'source_files'",
        )


class CircularDependencyError(AssetError):
    title = "Circular Dependency"

    def __init__(self, name, kind="bundle"):
        self.name = name
        self.kind = kind  # "bundle" or "target"
        super().__init__(
            f"A circular dependency is detected for {kind} '{name}'.",
            bundle=name,
        )


class ConfigurationError(AssetError):
    title = "Configuration Error"


class CompressionError(AssetError):
    title = "Compression Error"


class AssetIOError(AssetError, OSError):
    title = "I/O Error"
