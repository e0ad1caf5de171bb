"""Utility helpers used across routegraph.

This package contains small, self-contained utilities that do not depend on
project internals. Keep modules minimal and focused.
"""

from routegraph.utils.output_paths import (
    build_artifact_path,
    ensure_parent_dir,
    image_path_for_route,
    resolve_override_path,
    route_image_prefix,
)

__all__ = [
    "build_artifact_path",
    "ensure_parent_dir",
    "image_path_for_route",
    "resolve_override_path",
    "route_image_prefix",
]
