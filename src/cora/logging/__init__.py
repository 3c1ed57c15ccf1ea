"""
cora.logging – Logger configuration helpers and debug sinks.
"""
from .factory import CoraLoggerFactory
from .helpers import JsonLogFormatter, get_logger, setup_base_logger
from .sinks import ListDebugSink, LoggerDebugSink, NullDebugSink, make_debug_sink

__all__ = [
    "CoraLoggerFactory",
    "JsonLogFormatter",
    "get_logger",
    "setup_base_logger",
    "ListDebugSink",
    "LoggerDebugSink",
    "NullDebugSink",
    "make_debug_sink",
]
