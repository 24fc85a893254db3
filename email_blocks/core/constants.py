"""Constantes de mise en page email (largeurs fixes en px)."""

MAX_WIDTH = 600
COLUMN_GAP = 20
IMAGE_ASPECT_RATIO = 0.67

# Largeurs de colonnes précalculées sur le canevas 600px
FULL = 600
TWO_COL_50 = 290
TWO_COL_60 = 360
TWO_COL_40 = 220
TWO_COL_70 = 420
TWO_COL_30 = 160
THREE_COL = 186
FOUR_COL = 135
COMPACT_IMAGE = 200

IMAGE_GRID_WIDTHS = {1: FULL, 2: 290, 3: 190}

DEFAULT_BACKGROUND = "#f3f4f6"
DEFAULT_CONTENT_BACKGROUND = "#ffffff"
