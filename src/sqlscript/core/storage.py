"""
Storage layer for reading SQL script sources.

Resolves file paths, ``file://`` URLs and named resources to script text.
"""

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import ModuleType
from urllib.parse import urlparse
from urllib.request import url2pathname

from sqlscript.domain.errors import SourceUnreadableError

logger = logging.getLogger(__name__)

ResourceLocation = str | ModuleType | Path | None


def read_script_text(path: Path | Traversable, encoding: str = "utf-8") -> str:
    """
    Read the full text of a script file.

    Args:
        path: Script file (filesystem path or package resource)
        encoding: Text encoding of the file

    Returns:
        File contents

    Raises:
        SourceUnreadableError: If the file is missing, unreadable or not valid text
    """
    logger.debug("Reading SQL script %s (encoding=%s)", path, encoding)
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise SourceUnreadableError(
            message=f"Script file not found: {path}", code="file_not_found"
        ) from e
    except OSError as e:
        raise SourceUnreadableError(
            message=f"Cannot read script file {path}: {e}", code="read_failed"
        ) from e

    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise SourceUnreadableError(
            message=f"Cannot decode script file {path} as {encoding}: {e}", code="decode_failed"
        ) from e


def path_from_url(url: str) -> Path:
    """
    Convert a ``file://`` URL (or a plain path) to a filesystem path.

    Raises:
        SourceUnreadableError: If the URL uses a scheme other than ``file``
    """
    parsed = urlparse(url)
    if parsed.scheme in ("", "file"):
        if not parsed.scheme:
            return Path(url)
        if parsed.netloc not in ("", "localhost"):
            raise SourceUnreadableError(
                message=f"Remote file URLs are not supported: {url}", code="unsupported_scheme"
            )
        return Path(url2pathname(parsed.path))
    if len(parsed.scheme) == 1:
        # Windows drive letter, e.g. C:\scripts\init.sql
        return Path(url)
    raise SourceUnreadableError(
        message=f"Unsupported URL scheme '{parsed.scheme}': {url}", code="unsupported_scheme"
    )


def _resource_root(package: ResourceLocation) -> Traversable | Path:
    if package is None:
        return Path.cwd()
    if isinstance(package, Path):
        return package
    return resources.files(package)


def _normalize_extension(extension: str | None) -> str:
    if not extension:
        return ""
    return extension if extension.startswith(".") else f".{extension}"


def find_resource(
    name: str | None,
    extension: str | None = None,
    package: ResourceLocation = None,
) -> Traversable | Path | None:
    """
    Look up a script resource by name and extension.

    - If ``name`` is None, the first file (by name) with ``extension`` is used.
    - If ``extension`` is None or "", the file named exactly ``name`` is used.

    Args:
        name: Resource name without extension
        extension: File extension, with or without the leading dot
        package: Package name/module (importlib.resources), a directory, or
            None for the current working directory

    Returns:
        The matching resource, or None if nothing matches
    """
    suffix = _normalize_extension(extension)
    if name is None and not suffix:
        return None

    try:
        root = _resource_root(package)
    except ModuleNotFoundError:
        logger.debug("Resource package %s not found", package)
        return None
    if not root.is_dir():
        return None

    if name is not None:
        candidate = root.joinpath(f"{name}{suffix}")
        if candidate.is_file():
            return candidate
        logger.debug("Resource %s%s not found in %s", name, suffix, root)
        return None

    matches = sorted(
        (entry for entry in root.iterdir() if entry.is_file() and entry.name.endswith(suffix)),
        key=lambda entry: entry.name,
    )
    if not matches:
        logger.debug("No *%s resource found in %s", suffix, root)
        return None
    return matches[0]
