"""Hard-coded parameters for natbreaks. These should not change between runs."""
# Number of classes used when none is specified on the command line
DEFAULT_N_CLASSES = 5

# Classification methods
BREAK_METHODS = ("fisher", "jenks")

# Search engines for the Fisher dynamic program
SEARCH_ENGINES = ("levelwise", "recursive")
DEFAULT_ENGINE = "levelwise"

# Above this many values the classic Jenks method gets slow (O(k n^2))
JENKS_WARN_SIZE = 5000
