"""
Stylesheet url() rewriting.

When stylesheets from different directories are concatenated into one output
file, relative ``url(...)`` references must be rewritten so they still point
at the original resources.

The stylesheet text is split into tokens with a Lark lexer: ``url(...)``
references and everything else, which is passed through untouched.
"""
import posixpath
import re

from lark import Lark

stylesheet_grammar = r"""
    start: (URL_REF | TEXT | CHAR)*

    URL_REF.2: /url\(\s*["']?[^)"']*["']?\s*\)/i
    TEXT: /[^uU]+/
    CHAR: /[uU]/
"""

_lexer = Lark(stylesheet_grammar, parser="lalr", lexer="basic")

# Splits a url(...) token into: prefix, path, suffix
URL_PARTS_RE = re.compile(r"""^(url\(\s*["']?)([^)"']*)(["']?\s*\)$)""", re.IGNORECASE)

# References that do not depend on the stylesheet location
ABSOLUTE_URL_RE = re.compile(r"^(https?://|data:|//|/)", re.IGNORECASE)


def split_path(path):
    """Split a directory path into its components ('' and '.' are dropped)."""
    path = posixpath.normpath(path.replace("\\", "/"))
    parts = path.split("/")
    if path.startswith("/"):
        # Keep the root so absolute and relative paths never share a prefix
        return ["/"] + [p for p in parts if p not in ("", ".")]
    return [p for p in parts if p not in ("", ".")]


def relative_prefix(source_dir, output_dir):
    """
    Return the path components leading from ``output_dir`` to ``source_dir``.

    E.g. source ``a/b`` and output ``a/c`` give ``['..', 'b']``.
    """
    source_parts = split_path(source_dir)
    output_parts = split_path(output_dir)

    shared = 0
    for source_part, output_part in zip(source_parts, output_parts):
        if source_part != output_part:
            break
        shared += 1

    return [".."] * len(output_parts[shared:]) + source_parts[shared:]


def rewrite_url(url, prefix):
    """
    Rewrite a single relative reference given the output -> source ``prefix``.

    Leading ``..`` segments of the reference first consume trailing prefix
    components, so a reference that already climbs out of its own directory
    is not climbed twice.
    """
    if not url or ABSOLUTE_URL_RE.match(url):
        return url

    parts = list(prefix)
    url_parts = url.split("/")
    while url_parts and url_parts[0] in ("..", "."):
        segment = url_parts.pop(0)
        if segment == ".":
            continue
        if parts and parts[-1] != "..":
            parts.pop()
        else:
            parts.append("..")

    return "/".join(parts + url_parts)


def rewrite_references(content, source_dir, output_dir):
    """
    Rewrite every relative url() reference in stylesheet ``content``.

    Args:
        content: Stylesheet text
        source_dir: Directory the stylesheet originally lives in
        output_dir: Directory the combined stylesheet is written to

    Returns:
        The stylesheet text with adjusted references. Absolute (http/https,
        root- or protocol-relative) and data: URLs are left as they are.
    """
    prefix = relative_prefix(source_dir, output_dir)
    if not prefix:
        return content

    chunks = []
    for token in _lexer.lex(content):
        if token.type != "URL_REF":
            chunks.append(str(token))
            continue
        match = URL_PARTS_RE.match(str(token))
        if match is None:
            chunks.append(str(token))
            continue
        head, url, tail = match.groups()
        core = url.strip()
        start = url.find(core) if core else len(url)
        chunks.append(head + url[:start] + rewrite_url(core, prefix) + url[start + len(core):] + tail)

    return "".join(chunks)
