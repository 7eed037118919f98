DEFAULT_WORD_LEN = 6
MIN_WORD_LEN = 1
MAX_WORD_LEN = 100

# Fast mode keeps only the first N words of the sorted pool
FAST_WORD_LIMIT = 10

NUMERIC_SUFFIXES = ("1", "2", "3", "01", "02", "03")

WORD_SEPARATORS = ("-", ".")

# Second-level labels that form a two-label suffix, e.g. co.uk, com.au
SECOND_LEVEL_LABELS = {
    "ac",
    "co",
    "com",
    "edu",
    "gov",
    "mil",
    "ne",
    "net",
    "or",
    "org",
}

MAX_HOSTNAME_LENGTH = 253
MAX_LABEL_LENGTH = 63
MAX_LABELS = 127

# Upper bound on per-domain worker threads
DEFAULT_THREADS = 50
