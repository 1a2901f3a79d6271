"""logging-svc: publishes log records over HTTP and consumes them from a message binding."""

__version__ = "0.1.0"
