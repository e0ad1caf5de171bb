"""Raster export of graphs with an optional highlighted route.

Images use pixel coordinates with the origin at the top-left corner. A node at
``(x, y)`` is drawn at ``(x * zoom + xoffset, y * zoom + yoffset)``. The file
format follows the suffix of the output path (``.png``, ``.jpg``, ...).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import matplotlib

matplotlib.use("Agg")  # Non-interactive backend for file export
import matplotlib.image as mpimg  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.axes import Axes  # noqa: E402
from matplotlib.patches import Circle  # noqa: E402

from routegraph.config import RENDER_CONFIG, RenderConfig  # noqa: E402
from routegraph.logging import get_logger  # noqa: E402
from routegraph.model.graph import Graph, Node  # noqa: E402
from routegraph.types.base import NodeID  # noqa: E402
from routegraph.utils.output_paths import ensure_parent_dir  # noqa: E402

logger = get_logger(__name__)


class _Canvas:
    """Pixel-space drawing helpers bound to one axes."""

    def __init__(
        self,
        ax: Axes,
        cfg: RenderConfig,
        zoom: float,
        xoffset: int,
        yoffset: int,
    ) -> None:
        self.ax = ax
        self.cfg = cfg
        self.zoom = zoom
        self.xoffset = xoffset
        self.yoffset = yoffset
        self.node_size = cfg.node_size * zoom

    def point(self, node: Node) -> Tuple[float, float]:
        return node.x * self.zoom + self.xoffset, node.y * self.zoom + self.yoffset

    def line(self, a: Node, b: Node, color: str, zorder: int) -> None:
        (x1, y1), (x2, y2) = self.point(a), self.point(b)
        self.ax.plot([x1, x2], [y1, y2], color=color, linewidth=1.0, zorder=zorder)

    def node(self, node: Node, color: str, scale: float, zorder: int) -> None:
        x, y = self.point(node)
        radius = self.node_size * scale / 2
        self.ax.add_patch(Circle((x, y), radius=radius, color=color, zorder=zorder))
        self.ax.text(
            x,
            y,
            node.id,
            color=self.cfg.node_text_color,
            fontsize=self.cfg.font_size,
            zorder=zorder + 1,
        )


def export_graph_image(
    graph: Graph,
    path: Union[str, Path],
    *,
    width: int,
    height: int,
    upper_left: str = "",
    lower_left: str = "",
    xoffset: int = 0,
    yoffset: int = 0,
    zoom: float = 1.0,
    route: Optional[Sequence[NodeID]] = None,
    logo: Optional[Union[str, Path]] = None,
    config: Optional[RenderConfig] = None,
) -> Path:
    """Export ``graph`` as a raster image, highlighting ``route`` if given.

    Args:
        graph: Graph to draw.
        path: Output file; the suffix selects the image format.
        width: Image width in pixels before zoom.
        height: Image height in pixels before zoom.
        upper_left: Text drawn in the upper-left corner.
        lower_left: Text drawn in the lower-left corner.
        xoffset: Horizontal offset in pixels applied after zoom.
        yoffset: Vertical offset in pixels applied after zoom.
        zoom: Scale factor for the canvas and node positions.
        route: Node ids to highlight; first is the source, last the target.
        logo: Optional image centered on the canvas beneath the graph.
        config: Colors and sizes; defaults to ``RENDER_CONFIG``.

    Returns:
        The path of the written image.

    Raises:
        ValueError: If the canvas is empty or ``route`` names an unknown node.
    """
    cfg = config or RENDER_CONFIG
    out = Path(path)

    w = int(width * zoom)
    h = int(height * zoom)
    if w <= 0 or h <= 0:
        raise ValueError(f"Image size must be positive, got {w}x{h}.")
    if route:
        unknown = [nid for nid in route if nid not in graph.nodes]
        if unknown:
            raise ValueError(f"Route references unknown node ids: {unknown}")

    fig = plt.figure(figsize=(w / cfg.dpi, h / cfg.dpi), dpi=cfg.dpi)
    try:
        fig.patch.set_facecolor(cfg.background_color)
        ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
        ax.set_facecolor(cfg.background_color)
        ax.axis("off")
        canvas = _Canvas(ax, cfg, zoom, xoffset, yoffset)

        ax.text(10, 20, upper_left, color=cfg.node_text_color, fontsize=cfg.font_size)
        ax.text(
            10, h - 10, lower_left, color=cfg.node_text_color, fontsize=cfg.font_size
        )

        if logo is not None:
            img = mpimg.imread(str(logo))
            ih, iw = img.shape[0], img.shape[1]
            ax.imshow(
                img,
                extent=(w / 2 - iw / 2, w / 2 + iw / 2, h / 2 + ih / 2, h / 2 - ih / 2),
                aspect="auto",
                zorder=0,
            )

        for edge in graph.edges:
            canvas.line(
                graph.nodes[edge.node_a], graph.nodes[edge.node_b], cfg.edge_color, 1
            )
        for node in graph.nodes.values():
            canvas.node(node, cfg.node_color, 1.0, 2)

        if route:
            source = graph.nodes[route[0]]
            for prev_id, nid in zip(route, route[1:]):
                node = graph.nodes[nid]
                canvas.line(graph.nodes[prev_id], node, cfg.edge_traversed_color, 4)
                canvas.node(node, cfg.node_traversed_color, 1.0, 5)
            canvas.node(source, cfg.node_source_color, 2.0, 7)
            canvas.node(graph.nodes[route[-1]], cfg.node_target_color, 2.0, 7)

        # Pixel coordinates, origin at the top-left
        ax.set_xlim(0, w)
        ax.set_ylim(h, 0)

        ensure_parent_dir(out)
        fig.savefig(out, dpi=cfg.dpi, facecolor=cfg.background_color)
    finally:
        plt.close(fig)

    logger.info(f"Exported graph image: {out}")
    return out
