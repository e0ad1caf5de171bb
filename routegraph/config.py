"""Configuration classes for routegraph components."""

from dataclasses import dataclass


@dataclass
class PolygonConfig:
    """Geometry defaults for generated regular-polygon graphs."""

    # Radius of the circle the polygon nodes are placed on
    radius: float = 100.0

    # Distance scale of the two spike nodes attached to each polygon node
    spike_length: float = 12.0

    # Angle added to the polygon slice angle when placing spike nodes
    spike_delta: float = 0.0

    # Fraction of the radius by which the last node is pushed outward so that
    # half-way targets on even polygons resolve through ascending ids
    closing_offset_ratio: float = 0.05

    def closing_offset(self, radius: float) -> float:
        """Return the outward offset applied to the last polygon node."""
        return radius * self.closing_offset_ratio


@dataclass
class RenderConfig:
    """Colors and sizes for exported graph images."""

    background_color: str = "white"
    node_color: str = "lightgray"
    node_source_color: str = "green"
    node_target_color: str = "orange"
    node_traversed_color: str = "red"
    node_text_color: str = "black"
    edge_color: str = "lightgray"
    edge_traversed_color: str = "red"

    # Node diameter in pixels before zoom
    node_size: float = 2.0

    font_size: float = 8.0
    dpi: int = 100


@dataclass
class DemoConfig:
    """Defaults for the ``routegraph route`` command."""

    sides: int = 23
    source: str = "0"
    target: str = "11"
    xoffset: int = 40
    yoffset: int = 40
    zoom: float = 3.0
    image_dir: str = "exported-graph-images"


# Global configuration instances
POLYGON_CONFIG = PolygonConfig()
RENDER_CONFIG = RenderConfig()
DEMO_CONFIG = DemoConfig()
