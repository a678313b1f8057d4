"""
Single source of truth for workbook colors, fonts, fills, borders, alignments.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
HEADER_BG = "C0C0C0"
HEADER_RULE = "808080"
GRID_GRAY = "CCCCCC"
BLACK = "000000"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=BLACK)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=HEADER_BG, end_color=HEADER_BG, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color=GRID_GRAY),
    right=Side(style="thin", color=GRID_GRAY),
    top=Side(style="thin", color=GRID_GRAY),
    bottom=Side(style="thin", color=GRID_GRAY),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=HEADER_RULE),
    right=Side(style="thin", color=HEADER_RULE),
    top=Side(style="thin", color=HEADER_RULE),
    bottom=Side(style="medium", color=HEADER_RULE),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")

# ---------------------------------------------------------------------------
# Number formats
# ---------------------------------------------------------------------------
INTEGER_FORMAT = "##0"
