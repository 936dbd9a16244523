"""Read-only access to the packaged static assets.

Three asset trees ship inside the package: ``components/`` (Jinja2
component templates), ``css/`` (the design system stylesheet) and ``js/``
(the vanilla JS bundle). Hosting applications serve them as opaque
files addressed by relative path.
"""

from __future__ import annotations

from importlib.resources import files
from importlib.resources.abc import Traversable

PACKAGE = "uxr_ds"

ASSET_KINDS: tuple[str, ...] = ("components", "css", "js")


def asset_root(kind: str) -> Traversable:
    """Return the root of one packaged asset tree.

    Raises:
        ValueError: If *kind* is not one of :data:`ASSET_KINDS`.
    """
    if kind not in ASSET_KINDS:
        msg = f"Unknown asset kind: {kind!r} (expected one of {', '.join(ASSET_KINDS)})"
        raise ValueError(msg)
    return files(PACKAGE).joinpath(kind)


def components() -> Traversable:
    """The shared HTML component templates."""
    return asset_root("components")


def css() -> Traversable:
    """The design system stylesheet directory."""
    return asset_root("css")


def js() -> Traversable:
    """The design system JavaScript directory."""
    return asset_root("js")


def _walk(node: Traversable, prefix: str) -> list[str]:
    paths: list[str] = []
    for child in sorted(node.iterdir(), key=lambda c: c.name):
        if child.name.startswith(("_", ".")):
            continue
        rel = f"{prefix}{child.name}"
        if child.is_dir():
            paths.extend(_walk(child, f"{rel}/"))
        else:
            paths.append(rel)
    return paths


def list_assets(kind: str) -> list[str]:
    """Return every file path in an asset tree, relative to its root."""
    return _walk(asset_root(kind), "")


def read_asset(kind: str, relative_path: str) -> bytes:
    """Read one asset file by its path relative to the tree root.

    Raises:
        ValueError: For an unknown kind or a path escaping the tree.
        FileNotFoundError: If no such file exists.
    """
    parts = [p for p in relative_path.split("/") if p]
    if not parts or any(p == ".." for p in parts):
        msg = f"Invalid asset path: {relative_path!r}"
        raise ValueError(msg)
    node = asset_root(kind).joinpath(*parts)
    if not node.is_file():
        msg = f"No {kind} asset at {relative_path!r}"
        raise FileNotFoundError(msg)
    return node.read_bytes()
