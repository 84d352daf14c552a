import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Sequence

from .charges import PointCharge, charge_positions
from .core import FieldSnapshot
from .summary import format_summary
from .utils import fixed_basis, project_points, project_vectors, filter_by_slab


def _sample_arrays(samples):
    if not samples:
        return np.zeros((0, 3)), np.zeros((0, 3)), np.zeros(0), np.zeros((0, 3))
    P = np.array([s.position for s in samples], float)
    D = np.array([s.direction for s in samples], float)
    L = np.array([s.length for s in samples], float)
    C = np.array([s.color for s in samples], float)
    return P, D, L, C


def plot_snapshot_2d(
    charges: Sequence[PointCharge],
    snapshot: FieldSnapshot,
    *,
    plane='xy',
    slab: Optional[float] = None,
    figsize=(8, 7),
    fig_lims=None,
    line_color='0.35',
    line_width=0.8,
    arrow_width=0.003,
    save_path=None,
    show=True,
):
    """Streamlines and in-slab grid arrows projected onto a Cartesian plane."""
    basis = fixed_basis(plane)
    fig, ax = plt.subplots(figsize=figsize)

    for line in snapshot.streamlines:
        if len(line) == 0:
            continue
        L2 = project_points(line, basis)
        ax.plot(L2[:, 0], L2[:, 1], color=line_color, lw=line_width, alpha=0.8)

    P, D, L, C = _sample_arrays(snapshot.samples)
    if slab is None:
        # default slab: half a lattice cell around the plane
        slab = 0.5 * _lattice_step(P)
    mask = filter_by_slab(P, basis, slab) if len(P) else np.zeros(0, dtype=bool)
    if np.any(mask):
        P2 = project_points(P[mask], basis)
        V2 = project_vectors(D[mask] * L[mask, None], basis)
        ax.quiver(
            P2[:, 0], P2[:, 1], V2[:, 0], V2[:, 1],
            color=C[mask], angles='xy', scale_units='xy', scale=1.0,
            width=arrow_width, pivot='tail',
        )

    if charges:
        Q2 = project_points(charge_positions(charges), basis)
        colors = ['red' if c.value > 0 else 'blue' for c in charges]
        ax.scatter(Q2[:, 0], Q2[:, 1], s=120, c=colors, edgecolors='k', zorder=3)

    if fig_lims is not None:
        xmin, xmax, ymin, ymax = fig_lims
        ax.set_xlim([xmin, xmax]); ax.set_ylim([ymin, ymax])

    labels = format_summary(snapshot.summary)
    ax.set_aspect('equal', adjustable='box')
    ax.set_xlabel(f'{plane[0]}'); ax.set_ylabel(f'{plane[1]}')
    ax.set_title('Dipole field\n' + '   '.join(labels.values()), fontsize=9)

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=300)
    if show:
        plt.show()
    return fig


def _lattice_step(P: np.ndarray) -> float:
    if len(P) < 2:
        return 1.0
    xs = np.unique(P[:, 0])
    return float(np.min(np.diff(xs))) if xs.size > 1 else 1.0
