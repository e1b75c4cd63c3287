"""
Compressors: the external tools that turn the collected files into one
minified output file.

Two implementations share the ``Compressor`` interface:
- ShellCompressor runs a command template with {from} and {to} placeholders
  on the combined input.
- CallbackCompressor calls a Python function with the raw input file list.
"""
import os
import shlex
import subprocess
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .console import debug_log, log
from .errors import CompressionError
from .files import combine_css_files, combine_js_files
from .models import CSS, JS

KIND_LABELS = {JS: "JavaScript", CSS: "CSS"}


class Compressor(ABC):
    """Combines and compresses a list of files into ``output_file``."""

    @abstractmethod
    def compress(self, input_files: List[str], output_file: str) -> None:
        pass


class ShellCompressor(Compressor):
    """Runs a shell command template on the combined input files."""

    def __init__(self, template: str, combine: Callable[[List[str], str], None], timeout: Optional[float] = None):
        self.template = template
        self.combine = combine
        self.timeout = timeout

    def command(self, from_file, to_file):
        return self.template.replace("{from}", shlex.quote(from_file)).replace("{to}", shlex.quote(to_file))

    def compress(self, input_files, output_file):
        tmp_file = output_file + ".tmp"
        self.combine(input_files, tmp_file)
        command = self.command(tmp_file, output_file)
        debug_log(f"Running: {command}")
        try:
            result = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise CompressionError(
                f"Compressor did not finish within {self.timeout} seconds.",
                path=output_file,
                suggestion="Raise 'compress_timeout' or check the compressor command",
            )
        finally:
            if os.path.exists(tmp_file):
                os.remove(tmp_file)

        if result.stdout:
            debug_log(result.stdout.rstrip())
        if result.returncode != 0:
            debug_log(f"Compressor exited with status {result.returncode}: {result.stderr.rstrip()}")
        if not os.path.isfile(output_file):
            raise CompressionError(
                f"Unable to compress files into '{output_file}': {result.stderr.strip() or 'no output produced'}",
                path=output_file,
                suggestion="Check that the compressor command works from the shell",
            )


class CallbackCompressor(Compressor):
    """Calls ``callback(input_files, output_file)``."""

    def __init__(self, callback: Callable[[List[str], str], None]):
        self.callback = callback

    def compress(self, input_files, output_file):
        self.callback(list(input_files), output_file)
        if not os.path.isfile(output_file):
            raise CompressionError(
                f"Unable to compress files into '{output_file}': callback produced no output",
                path=output_file,
            )


def make_compressor(value, kind, timeout=None):
    """Create the compressor for ``kind`` from a command template or a callable."""
    if isinstance(value, Compressor):
        return value
    if isinstance(value, str):
        combine = combine_js_files if kind == JS else combine_css_files
        return ShellCompressor(value, combine, timeout=timeout)
    if callable(value):
        return CallbackCompressor(value)
    raise TypeError(f"Unsupported {kind} compressor: {value!r}")


def run_compressor(compressor, kind, input_files, output_file):
    """Compress ``input_files`` into ``output_file`` with progress output."""
    label = KIND_LABELS[kind]
    log(f"  Compressing {label} files...")
    compressor.compress(input_files, output_file)
    log(f"  {label} files compressed into '{output_file}'.")
