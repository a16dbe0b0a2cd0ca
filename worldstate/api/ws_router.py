"""WebSocket route for the event stream."""
from fastapi import APIRouter, WebSocket
from ..streaming.broadcaster import handle_websocket_stream

router = APIRouter(tags=["websocket"])


@router.websocket("/")
async def websocket_endpoint(websocket: WebSocket):
    """
    Broadcast-only event stream.

    On connect the client receives one ``init`` message with reference
    data and a snapshot of recent live events, then one ``event`` message
    per broadcast tick. Anything the client sends is ignored.

    Example client (Python):
    ```python
    async with websockets.connect("ws://localhost:8080/") as ws:
        async for frame in ws:
            message = json.loads(frame)
            print(message["type"], message["payload"])
    ```
    """
    await handle_websocket_stream(websocket, websocket.app.state.broadcaster)
