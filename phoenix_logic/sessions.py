"""Independent play sessions keyed by id, one command at a time per session."""

import logging
import threading

from phoenix_logic.config import DEFAULT_CONFIG, EngineConfig
from phoenix_logic.engine import CommandResult, GameEngine
from phoenix_logic.errors import UnknownSessionError

logger = logging.getLogger(__name__)


class SessionRegistry:
    def __init__(self, config: EngineConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self._engines: dict[str, GameEngine] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def __len__(self) -> int:
        return len(self._engines)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._engines

    def _entry(self, session_id: str, create: bool) -> tuple[GameEngine, threading.Lock]:
        with self._guard:
            if session_id not in self._engines:
                if not create:
                    raise UnknownSessionError(session_id)
                self._engines[session_id] = GameEngine(self.config)
                self._locks[session_id] = threading.Lock()
                logger.info("New session %s", session_id)
            return self._engines[session_id], self._locks[session_id]

    def get(self, session_id: str, create: bool = True) -> GameEngine:
        engine, _lock = self._entry(session_id, create)
        return engine

    def execute(self, session_id: str, command: str) -> CommandResult:
        """Run a command in the named session, creating the session on first use."""
        engine, lock = self._entry(session_id, create=True)
        with lock:
            engine.execute(command)
            return engine.last_result

    def reset(self, session_id: str) -> GameEngine:
        engine, lock = self._entry(session_id, create=True)
        with lock:
            engine.reset()
        return engine

    def drop(self, session_id: str) -> None:
        with self._guard:
            if session_id not in self._engines:
                raise UnknownSessionError(session_id)
            del self._engines[session_id]
            del self._locks[session_id]
