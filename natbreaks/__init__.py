from .commands import *
from .errors import BreaksInputError, InvariantError
from .fisher import classify_value_counts, fisher_breaks
from ._version import __version__
