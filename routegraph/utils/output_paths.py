"""Utilities for building CLI artifact output paths.

Exported images are named from the query that produced them:
``graph.<sides>.<source>.<target>.<timestamp><suffix>``. The timestamp uses
``yyyyMMdd.HHmmss`` so that names sort chronologically.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

#: Sortable timestamp format used in artifact names.
TIMESTAMP_FORMAT = "%Y%m%d.%H%M%S"

#: Human-readable timestamp with UTC offset, drawn on exported images.
NICE_TIMESTAMP_FORMAT = "%Y-%m-%d @ %H:%M:%S %z"


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def build_artifact_path(output_dir: Optional[Path], prefix: str, suffix: str) -> Path:
    """Compose an artifact path as output_dir / (prefix + suffix).

    If ``output_dir`` is None, the path is created relative to the current
    working directory.

    Args:
        output_dir: Base directory for outputs; if None, use CWD.
        prefix: Filename prefix.
        suffix: Per-artifact suffix including the dot (e.g. ".png").

    Returns:
        The composed path.
    """
    base = output_dir if output_dir is not None else Path.cwd()
    return base / f"{prefix}{suffix}"


def resolve_override_path(
    override: Optional[Path], output_dir: Optional[Path]
) -> Optional[Path]:
    """Resolve an override path with respect to an optional output directory.

    - Absolute override paths are returned as-is.
    - Relative override paths are interpreted as relative to ``output_dir``
      when provided; otherwise relative to the current working directory.

    Args:
        override: Path provided by the user to override the default.
        output_dir: Optional base directory for relative overrides.

    Returns:
        The resolved path or None if no override was provided.
    """
    if override is None:
        return None
    if override.is_absolute():
        return override
    if output_dir is not None:
        return (output_dir / override).resolve()
    return override


def route_image_prefix(
    sides: int, source: str, target: str, when: Optional[datetime] = None
) -> str:
    """Return ``graph.<sides>.<source>.<target>.<timestamp>``."""
    stamp = (when or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"graph.{sides}.{source}.{target}.{stamp}"


def image_path_for_route(
    sides: int,
    source: str,
    target: str,
    output_dir: Optional[Path],
    image_override: Optional[Path],
    default_dir: Path = Path("exported-graph-images"),
    suffix: str = ".png",
    when: Optional[datetime] = None,
) -> Path:
    """Determine the image path for the ``route`` command.

    Behavior:
    - If ``image_override`` is provided, return it (resolved relative to
      ``output_dir`` when that is specified, otherwise as-is).
    - Else return ``<dir>/graph.<sides>.<source>.<target>.<timestamp><suffix>``
      where ``<dir>`` is ``output_dir`` or ``default_dir``.

    Args:
        sides: Number of polygon sides.
        source: Route source id.
        target: Route target id.
        output_dir: Optional base output directory.
        image_override: Optional explicit image path.
        default_dir: Directory used when ``output_dir`` is None.
        suffix: Image suffix, selects the format.
        when: Timestamp to embed; defaults to now.

    Returns:
        The path where the image should be written.
    """
    resolved_override = resolve_override_path(image_override, output_dir)
    if resolved_override is not None:
        return resolved_override

    prefix = route_image_prefix(sides, source, target, when)
    base = output_dir if output_dir is not None else default_dir
    return build_artifact_path(base, prefix, suffix)
