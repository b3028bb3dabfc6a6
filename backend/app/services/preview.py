# Matplotlib -> PNG preview of a layout
import base64
import io

import matplotlib
matplotlib.use("Agg")
import matplotlib.patches as patches
import matplotlib.pyplot as plt

from blueprint.constants import COLORS
from blueprint.grouping import group_rooms, round_half_up
from blueprint.layout import HouseLayout


def group_label(group) -> str:
    return f"{group.name}\n{round_half_up(group.total_area)} sqft"


def render_preview_png(layout: HouseLayout, inches_per_floor: float = 4.0, dpi: int = 100) -> str:
    """One subplot per floor, rooms filled in their colors, group names on anchors."""
    land = layout.land
    n = max(len(layout.floors), 1)
    aspect = land.height / land.width if land.width > 0 else 1.0
    fig, axes = plt.subplots(n, 1, figsize=(inches_per_floor * 1.5, inches_per_floor * 1.5 * aspect * n + 0.5),
                             squeeze=False)
    try:
        for ax, floor in zip(axes[:, 0], layout.floors):
            ax.add_patch(patches.Rectangle(
                (0, 0), land.width, land.height,
                fill=False, edgecolor=COLORS["land"], linestyle="--", linewidth=1.5,
            ))
            for room in floor.rooms:
                ax.add_patch(patches.Rectangle(
                    (room.x, room.y), room.width, room.height,
                    facecolor=room.color or COLORS["room_default"],
                    edgecolor=COLORS["outline"], linewidth=1.2,
                ))
            for group in group_rooms(floor.rooms):
                anchor = group.anchor
                ax.text(anchor.x + anchor.width / 2, anchor.y + anchor.height / 2,
                        group_label(group),
                        ha="center", va="center", fontsize=6, color=COLORS["label"])
            ax.set_title(floor.name, fontsize=9, loc="left")
            ax.set_xlim(-5, land.width + 5)
            ax.set_ylim(land.height + 5, -5)  # y grows downward, as on the canvas
            ax.set_aspect("equal")
            ax.tick_params(labelsize=6)
        for ax in axes[len(layout.floors):, 0]:
            ax.axis("off")

        buf = io.BytesIO()
        fig.tight_layout()
        fig.savefig(buf, format="png", dpi=dpi)
    finally:
        plt.close(fig)
    return base64.b64encode(buf.getvalue()).decode("ascii")
