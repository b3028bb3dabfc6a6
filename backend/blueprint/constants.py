# blueprint/constants.py
# Drawing constants shared by the render stages. Units are feet unless the
# name ends in _PX.

PADDING_FT = 5
FLOOR_GAP_PX = 80
MIN_CANVAS_HEIGHT_PX = 700
GRID_STEP_FT = 10
TOP_RULER_STEP_FT = 10
LEFT_RULER_TICKS = 5

# Same-name rooms closer than this are treated as touching.
EDGE_EPSILON_FT = 0.1

# Clutter thresholds, in pixels of the anchor rectangle.
LABEL_MIN_WIDTH_PX = 20
LABEL_MIN_HEIGHT_PX = 15
DIMENSION_MIN_PX = 20
DIMENSION_OFFSET_PX = 4

ADU_NAME_PREFIX = "ADU"
ADU_ID_PREFIX = "adu_"

COLORS = {
    "room_default": "#cbd5e1",
    "outline": "#334155",
    "grid": "#e2e8f0",
    "land": "#cbd5e1",
    "title": "#1e293b",
    "label": "#1e293b",
    "area": "#475569",
    "dimension": "#64748b",
    "ruler": "#64748b",
    "ruler_left": "#94a3b8",
    "legend_border": "#e2e8f0",
    "legend_title": "#334155",
    "legend_text": "#475569",
    "compass_ring": "#cbd5e1",
    "compass_north": "#334155",
    "compass_east": "#64748b",
}
