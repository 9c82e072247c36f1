import string

# Symbols for digit values 0..35, in value order
DIGITS = string.digits + string.ascii_uppercase

MIN_BASE = 2
MAX_BASE = len(DIGITS)

# Base tag for numbers built from Python ints
DEFAULT_BASE = 10
