from __future__ import annotations
import logging
import random
from contextlib import asynccontextmanager
from typing import Optional

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .managers.game import GameManager
from .routers import dictionary, profile, rounds
from .storage import JsonFileStore, KeyValueStore

log = logging.getLogger('wordplay')


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[KeyValueStore] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)-7s %(name)s: %(message)s',
    )
    storage = storage or JsonFileStore(settings.data_dir)

    # Socket.IO server (ASGI) used to push dictionary changes to clients
    origins = '*' if settings.cors_origins == ['*'] else settings.cors_origins
    sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=origins)
    game = GameManager(storage, sio=sio, fallback=settings.fallback_word, rng=rng)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        loaded = game.startup()
        log.info('Dictionary %s (%d words)', 'restored' if loaded else 'starting empty', game.size())
        yield
        await game.shutdown()

    app = FastAPI(title="Wordplay Server", version="0.1.0", lifespan=lifespan)
    app.state.game = game
    app.state.sio = sio

    # CORS for REST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    app.include_router(dictionary.router)
    app.include_router(rounds.router)
    app.include_router(profile.router)

    # Socket.IO Events
    @sio.event
    async def connect(sid, environ, auth=None):
        await sio.emit('dictionary:size', {'size': game.size()}, to=sid)

    @sio.on('rush:next')
    async def rush_next(sid):
        await sio.emit('rush:round', game.rush_round().model_dump(), to=sid)

    @sio.on('scramble:shuffle')
    async def scramble_shuffle(sid, word: str):
        await sio.emit('scramble:shuffled', {'scrambled': game.shuffle(word if isinstance(word, str) else '')}, to=sid)

    return app


def create_asgi_app(app: Optional[FastAPI] = None) -> socketio.ASGIApp:
    app = app or create_app()
    return socketio.ASGIApp(app.state.sio, other_asgi_app=app)


# Export ASGI app for uvicorn
application = create_asgi_app()

# For local running: uvicorn wordplay.main:application --reload --host 0.0.0.0 --port 8000
