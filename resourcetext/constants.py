"""Menu context identifiers and the input separator character."""

DEFAULT = 0
INFO = 1

SYSTEMS = 2
SYSTEM = 3
OBJECT = 4

ONLY_QUIT = 5
DISPLAY_KEYS = 6
SELECT = 7
START = 8

SEP = "/"