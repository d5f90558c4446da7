DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30
DEFAULT_WINDOW = 1
DEFAULT_LOOK_AHEAD = 10

MIN_DIGITS = 1
# 10 digits is allowed for existing clients, but the leading digit
# can only take on values 0..2 because of the 31-bit mask.
MAX_DIGITS = 10

#: minimum secret size in bytes before a security warning is issued
MIN_KEY_SIZE = 10

MAX_COUNTER = (1 << 64) - 1
