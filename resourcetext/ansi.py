"""ANSI escape sequences used to colour terminal output."""

RESET = "\u001b[0m"

HIGH_INTENSITY = "\u001b[1m"
LOW_INTENSITY = "\u001b[2m"

ITALIC = "\u001b[3m"
UNDERLINE = "\u001b[4m"
BLINK = "\u001b[5m"
RAPID_BLINK = "\u001b[6m"
REVERSE_VIDEO = "\u001b[7m"
INVISIBLE_TEXT = "\u001b[8m"

BLACK = "\u001b[30m"
RED = "\u001b[31m"
GREEN = "\u001b[32m"
YELLOW = "\u001b[33m"
BLUE = "\u001b[34m"
MAGENTA = "\u001b[35m"
CYAN = "\u001b[36m"
WHITE = "\u001b[37m"

BACKGROUND_BLACK = "\u001b[40m"
BACKGROUND_RED = "\u001b[41m"
BACKGROUND_GREEN = "\u001b[42m"
BACKGROUND_YELLOW = "\u001b[43m"
BACKGROUND_BLUE = "\u001b[44m"
BACKGROUND_MAGENTA = "\u001b[45m"
BACKGROUND_CYAN = "\u001b[46m"
BACKGROUND_WHITE = "\u001b[47m"