"""
File helpers: reading, writing, hashing and combining asset files.
"""
import hashlib
import os

from .errors import AssetIOError
from .stylesheet import rewrite_references


def read_text(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError:
        raise AssetIOError(f"Unable to decode file '{path}' as UTF-8", path=path)
    except OSError as e:
        raise AssetIOError(f"Unable to read file '{path}': {e.strerror}", path=path)


def write_text(path, content):
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise AssetIOError(f"Unable to write file '{path}': {e.strerror}", path=path)


def file_hash(path):
    """Return the hex MD5 digest of a file's contents."""
    digest = hashlib.md5()
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(65536), b""):
                digest.update(chunk)
    except OSError as e:
        raise AssetIOError(f"Unable to read file '{path}': {e.strerror}", path=path)
    return digest.hexdigest()


def combine_files(input_files, output_file, rewrite_urls=False):
    """
    Concatenate ``input_files`` into ``output_file``.

    Each file is wrapped in BEGIN/END FILE comments naming its path. With
    ``rewrite_urls`` set, stylesheet url() references are adjusted to the
    output file's directory.
    """
    output_dir = os.path.dirname(os.path.abspath(output_file))
    parts = []
    for path in input_files:
        content = read_text(path)
        if rewrite_urls:
            content = rewrite_references(content, os.path.dirname(os.path.abspath(path)), output_dir)
        parts.append(f"/*** BEGIN FILE: {path} ***/\n{content}/*** END FILE: {path} ***/\n")
    write_text(output_file, "".join(parts))


def combine_js_files(input_files, output_file):
    """Combine JavaScript files into a single one."""
    combine_files(input_files, output_file)


def combine_css_files(input_files, output_file):
    """Combine CSS files into a single one, keeping url() references valid."""
    combine_files(input_files, output_file, rewrite_urls=True)
