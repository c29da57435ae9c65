"""logtribe: one logger façade over many logging sinks.

Log once through a ``Multiplexer`` and every configured sink receives the
call: leveled loggers directly, tag-posting event shippers through a
pre-formatted fallback message.
"""

__version__ = "0.1.0"
__description__ = "Logging multiplexer over heterogeneous sinks"

from logtribe.formatter import Formatter
from logtribe.multiplexer import Multiplexer
from logtribe.severity import InvalidSeverityError, Severity, severity_name
from logtribe.sinks.stream import StreamLogger

__all__ = [
    "Formatter",
    "InvalidSeverityError",
    "Multiplexer",
    "Severity",
    "StreamLogger",
    "severity_name",
    "__version__",
]
