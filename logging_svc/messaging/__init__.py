"""
Messaging package.

- StreamBridge: send payloads to output bindings
- FunctionBindingRegistry: subscribe consumer functions on input bindings
"""

from .function_bindings import FunctionBindingRegistry, input_binding_name
from .stream_bridge import StreamBridge

__all__ = [
    "FunctionBindingRegistry",
    "StreamBridge",
    "input_binding_name",
]
