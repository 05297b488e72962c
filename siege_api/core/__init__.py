from .logging import configure_logging
from .request_context import OutboundCall, current_call, outbound_call, record_status

__all__ = ["configure_logging", "OutboundCall", "current_call", "outbound_call", "record_status"]
