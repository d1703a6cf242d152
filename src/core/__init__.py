"""
Core mathematical primitives, domain models and contracts.

Pure, stateless computations with no I/O. Logging is silent unless the
host application configures handlers.
"""

import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
