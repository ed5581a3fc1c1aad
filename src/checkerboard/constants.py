GRID_ROWS = 8
GRID_COLS = 8
CELL_COUNT = GRID_ROWS * GRID_COLS

# Display symbols used by Board.render(); one character per cell.
SYMBOL_EMPTY = "·"
SYMBOL_OCCUPIER_A = "A"
SYMBOL_OCCUPIER_B = "B"

# Default layout: occupied squares are the ones where (x + y) is odd.
OCCUPIER_A_ROWS = (0, 1, 2)
OCCUPIER_B_ROWS = (5, 6, 7)

# Environment variable read by the demo entry point.
LOG_LEVEL_ENV = "CHECKERBOARD_LOG_LEVEL"
