from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect

from events.mapper import map_events
from monopoly.exceptions import DuplicatePlayerError, EmptyRosterError, RosterFullError
from snapshot import serialize_board, serialize_player, serialize_snapshot

from .hub import SyncHub
from .schemas import EventsResponse, JoinRequest, PlayerDTO, SnapshotResponse, TurnResponse
from .settings import ServerSettings, get_settings

logger = logging.getLogger(__name__)


def create_app(hub: Optional[SyncHub] = None, settings: Optional[ServerSettings] = None) -> FastAPI:
    """Build the sync server application around a hub."""
    settings = settings or get_settings()
    hub = hub or SyncHub.from_config(settings.game_config())

    app = FastAPI(title="Monopoly Sync Server", version="0.1.0")
    app.state.hub = hub

    @app.websocket(settings.ws_path)
    async def ws_game(websocket: WebSocket):
        await websocket.accept()
        queue = await hub.subscribe()

        # Forward outbound snapshots
        async def sender():
            while True:
                msg = await queue.get()
                await websocket.send_text(msg)

        sender_task = asyncio.create_task(sender())
        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break
                text = message.get("text")
                if text is None:
                    logger.debug("Ignoring binary frame")
                    continue
                await hub.handle_message(text)
        except WebSocketDisconnect:
            pass
        finally:
            await hub.unsubscribe(queue)
            sender_task.cancel()
            await asyncio.gather(sender_task, return_exceptions=True)

    @app.get("/snapshot", response_model=SnapshotResponse)
    async def get_snapshot():
        return serialize_snapshot(await hub.snapshot())

    @app.get("/board")
    async def get_board():
        return {"spaces": serialize_board(hub.board)}

    @app.post("/roll", response_model=TurnResponse)
    async def roll():
        try:
            result = await hub.take_turn()
        except EmptyRosterError as e:
            raise HTTPException(status_code=409, detail=str(e))

        landing = result.final_landing
        return TurnResponse(
            player=result.player,
            dice=list(result.dice),
            from_position=result.from_position,
            to_position=result.to_position,
            space=hub.board.get_space(result.to_position).name,
            outcome=landing.outcome.value,
            amount=landing.amount,
            counterparty=landing.counterparty,
            card=result.card.to_dict() if result.card is not None else None,
            next_player=result.next_player,
            events=map_events(hub.board, result.events),
            snapshot=serialize_snapshot(result.snapshot),
        )

    @app.get("/events", response_model=EventsResponse)
    async def get_events(since: int = -1):
        """Logged events after index `since`, oldest first."""
        return await hub.get_events_since(since)

    @app.post("/players", response_model=PlayerDTO, status_code=201)
    async def join(req: JoinRequest):
        try:
            await hub.add_player(req.name, piece=req.piece)
        except (DuplicatePlayerError, RosterFullError) as e:
            raise HTTPException(status_code=409, detail=str(e))
        snap = await hub.snapshot()
        return serialize_player(snap.get_player(req.name))

    return app


app = create_app()


def main() -> None:
    """Run the sync server with uvicorn."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting sync server on {settings.host}:{settings.port}{settings.ws_path}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        ws_ping_interval=settings.ping_interval,
        ws_ping_timeout=settings.idle_timeout,
        ws_max_size=settings.max_frame_size,
    )


if __name__ == "__main__":
    main()
