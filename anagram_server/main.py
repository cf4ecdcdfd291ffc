from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Optional

import socketio
from fastapi import Depends, FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .canonical import signature
from .classifier import NltkWordClassifier, NullClassifier, WordClassifier
from .config import ALLOWED_HEADERS, ALLOWED_METHODS, Settings, settings, setup_logging
from .dictionary import load_dictionary
from .errors import AnagramError, ParseResult
from .managers.metrics import compute_metrics, top_group
from .managers.query import QueryEngine
from .managers.store import AnagramStore
from .schemas import (
    AnagramCheck, AnagramGroups, AnagramList, DictionaryLoaded, Metrics, TopGroup, WordsAdded, parse_words,
)

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Socket.IO server (ASGI), used to push store change notifications
sio = socketio.AsyncServer(
    async_mode='asgi',
    cors_allowed_origins='*' if settings.cors_origins == ['*'] else settings.cors_origins,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load the tagger model before serving so no request pays for a download
    warm_up = getattr(app.state.classifier, 'warm_up', None)
    if warm_up is not None:
        await run_in_threadpool(warm_up)
    yield


app = FastAPI(title="Anagram Server", version="0.1.0", lifespan=lifespan)

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=ALLOWED_METHODS,
    allow_headers=['*'],
)

# One store per process, handed to routes through dependencies
app.state.settings = settings
app.state.store = AnagramStore()
app.state.classifier = NltkWordClassifier() if settings.tagging_enabled else NullClassifier()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> AnagramStore:
    return request.app.state.store


def get_classifier(request: Request) -> WordClassifier:
    return request.app.state.classifier


def get_query_engine(
    store: AnagramStore = Depends(get_store),
    classifier: WordClassifier = Depends(get_classifier),
) -> QueryEngine:
    return QueryEngine(store, classifier)


def _error_response(result: ParseResult) -> JSONResponse:
    return JSONResponse({'message': result.message()}, status_code=result.error.status_code)


async def _notify(action: str, **data):
    await sio.emit('store:changed', {'action': action, **data})


@app.exception_handler(AnagramError)
async def anagram_error_handler(request: Request, exc: AnagramError):
    logger.info('%s %s failed: %s', request.method, request.url.path, exc)
    return JSONResponse({'message': str(exc)}, status_code=exc.status_code)


# REST Endpoints
@app.post('/dictionary.json', status_code=201, response_model=DictionaryLoaded)
async def populate_dictionary(
    store: AnagramStore = Depends(get_store),
    config: Settings = Depends(get_settings),
):
    count = await run_in_threadpool(load_dictionary, store, config.dictionary_path)
    await _notify('dictionary', count=count)
    return {'words_loaded': count}


@app.post('/words.json', status_code=201, response_model=WordsAdded)
async def add_words(request: Request, store: AnagramStore = Depends(get_store)):
    result = parse_words(await request.body())
    if not result.ok:
        return _error_response(result)
    added = store.add_bulk(result.value)
    logger.debug('Added %d of %d words', added, len(result.value))
    await _notify('add', count=added)
    return {'words_added': added}


@app.get('/anagrams/{word}.json', response_model=AnagramList)
async def get_anagrams(
    word: str,
    proper_nouns: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=0),
    engine: QueryEngine = Depends(get_query_engine),
):
    # Tagging is blocking work
    anagrams = await run_in_threadpool(
        engine.lookup, word, include_proper_nouns=proper_nouns != 'false', limit=limit,
    )
    return {'anagrams': sorted(anagrams)}


# Takes a set of words and reports whether they are all anagrams of each other
@app.get('/anagram.json', response_model=AnagramCheck)
async def check_anagrams(request: Request):
    result = parse_words(await request.body(), strict=True)
    if not result.ok:
        return _error_response(result)
    return {'anagrams': QueryEngine.are_anagrams(result.value)}


@app.delete('/words/{word}.json', status_code=204)
async def delete_word(word: str, store: AnagramStore = Depends(get_store)):
    store.remove_word(word)
    await _notify('remove_word', signature=signature(word))
    return Response(status_code=204)


@app.delete('/anagrams/{word}.json', status_code=204)
async def delete_group(word: str, store: AnagramStore = Depends(get_store)):
    store.remove_group(word)
    await _notify('remove_group', signature=signature(word))
    return Response(status_code=204)


@app.delete('/words.json', status_code=204)
async def delete_all(store: AnagramStore = Depends(get_store)):
    store.clear()
    logger.info('Store cleared')
    await _notify('clear')
    return Response(status_code=204)


@app.get('/words/metrics.json', response_model=Metrics)
async def word_metrics(store: AnagramStore = Depends(get_store)):
    return Metrics.from_metrics(compute_metrics(store))


# Doesn't return multiple groups if there is a tie
@app.get('/words/top.json', response_model=TopGroup)
async def most_anagrams(store: AnagramStore = Depends(get_store)):
    return {'most_anagrams': sorted(top_group(store))}


@app.get('/anagramsby/{size}.json', response_model=AnagramGroups)
async def anagrams_by_size(size: int, engine: QueryEngine = Depends(get_query_engine)):
    groups = engine.groups_with_signature_length(size)
    return {'anagrams': [sorted(group) for group in groups]}


# Plain OPTIONS requests; CORS preflights are answered by the middleware
@app.options('/{path:path}')
async def options_any(path: str):
    return Response(status_code=200, headers={
        'Allow': ', '.join(ALLOWED_METHODS),
        'Access-Control-Allow-Headers': ', '.join(ALLOWED_HEADERS),
        'Access-Control-Allow-Origin': '*',
    })


# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.emit('pong', to=sid)


@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)


@sio.on('store:metrics')
async def on_metrics(sid):
    try:
        payload = Metrics.from_metrics(compute_metrics(app.state.store)).model_dump()
    except AnagramError as exc:
        payload = {'error': str(exc)}
    await sio.emit('store:metrics', payload, to=sid)


# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn anagram_server.main:application --reload --host 0.0.0.0 --port 3000
