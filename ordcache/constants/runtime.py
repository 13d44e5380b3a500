"""Runtime/default constants for the cache, trace generation and the CLI."""

# Cache defaults
DEFAULT_CAPACITY = 128

# Trace generation
TRACE_DISTRIBUTIONS = ("zipf", "uniform", "sequential")
DEFAULT_TRACE_DISTRIBUTION = "zipf"
DEFAULT_ZIPF_EXPONENT = 1.2             # must stay > 1 for numpy's zipf sampler
DEFAULT_TRACE_REQUESTS = 10000
DEFAULT_KEY_SPACE = 1000

# Trace files: one key per line, lines starting with this are ignored
TRACE_COMMENT_PREFIX = "#"
