"""3D renderer using matplotlib."""

from typing import Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from solar_sim.physics.body import Body
from solar_sim.render.base import Renderer
from solar_sim.render.trails import TrailRecorder

# Marker size (points) per AU of physical radius; planets would be invisible at true scale
RADIUS_EXAGGERATION = 28800.0
MIN_MARKER = 0.55
MAX_MARKER = 10.0


def marker_size(body: Body) -> float:
    """Visual radius of a body, exaggerated and clamped."""
    return float(np.clip(body.radius_au * RADIUS_EXAGGERATION, MIN_MARKER, MAX_MARKER))


def hex_color(color: int) -> str:
    return "#{:06x}".format(int(color) & 0xFFFFFF)


class Renderer3D(Renderer):
    """3D view of bodies and their trails.

    The ecliptic of the presets is the x-z plane, so the engine's y axis is
    drawn as the vertical axis.
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        show_trails: bool = True,
        elevation: float = 25.0,
        azimuth: float = 45.0,
        view_radius: Optional[float] = None,
        space_theme: bool = True,
        interactive: bool = True,
    ):
        """Initialize 3D renderer.

        Args:
            figsize: Figure size
            dpi: Dots per inch
            show_trails: Whether to draw trails
            elevation: Camera elevation angle
            azimuth: Camera azimuth angle
            view_radius: Half-width of the view cube in AU (auto if None)
            space_theme: Black background without axes
            interactive: Open a window and refresh it on each frame
        """
        self.figsize = figsize
        self.dpi = dpi
        self.show_trails = show_trails
        self.elevation = elevation
        self.azimuth = azimuth
        self.view_radius = view_radius
        self.space_theme = space_theme
        self.interactive = interactive
        self.fig: Optional[Figure] = None
        self.ax = None

    def _initialize(self):
        if self.fig is not None:
            return
        self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        self.ax = self.fig.add_subplot(111, projection="3d")
        if self.space_theme:
            self.fig.patch.set_facecolor("black")
        if self.interactive:
            plt.show(block=False)

    def _is_figure_open(self) -> bool:
        return self.fig is not None and plt.fignum_exists(self.fig.number)

    def _limits(self, positions: np.ndarray) -> float:
        if self.view_radius is not None:
            return self.view_radius
        finite = positions[np.all(np.isfinite(positions), axis=1)]
        if finite.size == 0:
            return 1.0
        return max(1e-3, float(np.max(np.abs(finite))) * 1.1)

    def render(self, bodies: Sequence[Body], trails: Optional[TrailRecorder] = None, t_days: float = 0.0):
        """Render current frame."""
        if self.fig is not None and self.interactive and not self._is_figure_open():
            return
        self._initialize()
        ax = self.ax
        ax.clear()
        if self.space_theme:
            ax.set_facecolor("black")
            ax.set_axis_off()
        else:
            ax.set_xlabel("x [AU]")
            ax.set_ylabel("z [AU]")
            ax.set_zlabel("y [AU]")

        positions = np.array([b.pos for b in bodies]).reshape(-1, 3)
        lim = self._limits(positions)
        ax.set_xlim(-lim, lim)
        ax.set_ylim(-lim, lim)
        ax.set_zlim(-lim, lim)
        ax.view_init(elev=self.elevation, azim=self.azimuth)

        if self.show_trails and trails is not None:
            for body in bodies:
                points = trails.get(body.id)
                if points is not None and len(points) > 1:
                    ax.plot(points[:, 0], points[:, 2], points[:, 1], color=hex_color(body.color), alpha=0.75, linewidth=0.8)

        if len(bodies):
            sizes = [(3.0 * marker_size(b)) ** 2 for b in bodies]
            colors = [hex_color(b.color) for b in bodies]
            ax.scatter(positions[:, 0], positions[:, 2], positions[:, 1], s=sizes, c=colors, depthshade=False)

        text_color = "white" if self.space_theme else "black"
        ax.set_title(f"t = {t_days:.2f} d   bodies = {len(bodies)}", color=text_color)

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.canvas.draw()
        return np.asarray(self.fig.canvas.buffer_rgba())[:, :, :3].copy()

    def set_view(self, elevation: float, azimuth: float):
        """Set camera view angles."""
        self.elevation = elevation
        self.azimuth = azimuth
        if self.ax is not None:
            self.ax.view_init(elev=elevation, azim=azimuth)

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
