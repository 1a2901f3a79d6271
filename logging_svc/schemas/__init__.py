from .responses import DeliveryResponse, ErrorResponse, HealthResponse, ServiceResponse

__all__ = [
    "DeliveryResponse",
    "ErrorResponse",
    "HealthResponse",
    "ServiceResponse",
]
