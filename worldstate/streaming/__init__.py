from .broadcaster import Broadcaster, handle_websocket_stream

__all__ = ["Broadcaster", "handle_websocket_stream"]
