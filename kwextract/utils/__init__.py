"""General utilities."""

from .errors import *
from .misc import *
from .trace import *
