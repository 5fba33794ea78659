# iterbar/config.py
# Configuration constants (tweak as needed)

DEFAULT_TITLE = ""
DEFAULT_MININTERVAL_MS = 100
DEFAULT_WIDTH = 10
# blank + eighth blocks, lightest to full
DEFAULT_GLYPHS = (" ", "▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")
ASCII_GLYPHS = (" ", "#")
BAR_EPSILON = 1e-5
TERMINAL_FALLBACK_COLUMNS = 80
LOG_FILE = "iterbar.log"
DEMO_COUNT = 1000
DEMO_DELAY_MS = 10
