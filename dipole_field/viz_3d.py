import numpy as np
import pyvista as pv
from typing import Sequence

from .charges import PointCharge
from .core import FieldSnapshot
from .summary import format_summary


def add_charges(p: pv.Plotter, charges: Sequence[PointCharge], radius: float = 0.3):
    """Red sphere for positive, blue for negative charges."""
    for k, c in enumerate(charges):
        sphere = pv.Sphere(radius=radius, center=c.position)
        color = "red" if c.value > 0 else "blue"
        p.add_mesh(sphere, color=color, name=f"charge_{k}")


def streamlines_mesh(streamlines) -> pv.PolyData:
    """All streamlines as one polyline dataset."""
    mb = pv.MultiBlock()
    for line in streamlines:
        if len(line) < 2:
            continue
        mb.append(pv.lines_from_points(np.asarray(line, float)))
    if len(mb) == 0:
        return pv.PolyData()
    return mb.combine().extract_surface()


def arrows_mesh(samples, scale_factor: float = 1.0) -> pv.PolyData:
    """One arrow per grid sample, length = sample length, per-point RGB color."""
    mb = pv.MultiBlock()
    for s in samples:
        if s.length <= 0 or not np.any(s.direction):
            continue
        size = s.length * scale_factor
        arr = pv.Arrow(
            start=s.position,
            direction=s.direction,
            scale=size,
            tip_length=0.3,
            tip_radius=0.1,
            shaft_radius=0.03,
        )
        rgb = (np.asarray(s.color) * 255).astype(np.uint8)
        arr.point_data["rgb"] = np.tile(rgb, (arr.n_points, 1))
        mb.append(arr)
    if len(mb) == 0:
        return pv.PolyData()
    return mb.combine().extract_surface()


def draw_snapshot(
    p: pv.Plotter,
    snapshot: FieldSnapshot,
    *,
    line_color: str = "white",
    line_width: float = 1.5,
    arrow_scale: float = 1.0,
):
    """
    Put a snapshot on the plotter under fixed actor names.

    Re-adding a mesh with the same name replaces the previous actor, so a
    second call swaps the old picture for the new one in a single step.
    """
    lines = streamlines_mesh(snapshot.streamlines)
    if lines.n_points:
        p.add_mesh(lines, color=line_color, line_width=line_width, name="streamlines")
    else:
        p.remove_actor("streamlines")

    arrows = arrows_mesh(snapshot.samples, scale_factor=arrow_scale)
    if arrows.n_points:
        p.add_mesh(arrows, scalars="rgb", rgb=True, name="grid")
    else:
        p.remove_actor("grid")

    text = "\n".join(format_summary(snapshot.summary).values())
    p.add_text(text, position="upper_left", font_size=10, name="summary")


def plot_snapshot_pyvista(
    charges: Sequence[PointCharge],
    snapshot: FieldSnapshot,
    *,
    show: bool = True,
    off_screen: bool = False,
    screenshot=None,
    background: str = "black",
    charge_radius: float = 0.3,
    arrow_scale: float = 1.0,
):
    """Main 3D view: charges, streamlines, grid arrows and the summary panel."""
    p = pv.Plotter(off_screen=off_screen or screenshot is not None)
    p.set_background(background)
    add_charges(p, charges, radius=charge_radius)
    draw_snapshot(p, snapshot, arrow_scale=arrow_scale)
    p.show_axes()
    if screenshot is not None:
        p.show(screenshot=screenshot, auto_close=False)
    elif show:
        p.show()
    return p
