"""
weatherchat/session.py

Conversation transcript kept in memory for the lifetime of the process.

Classes:
- Session: bounded message history for one conversation id.
- SessionStore: thread-safe map of conversation id -> Session; evicts the least
  recently used conversation once full.

Environment:
- HISTORY_MESSAGES: messages kept per conversation (default 50)
- MAX_SESSIONS: conversations kept in memory (default 1000)
"""

import os
import threading
from collections import OrderedDict, deque
from dataclasses import dataclass, field


def _env_int(name, default):
    try:
        value = int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


HISTORY_MESSAGES = _env_int("HISTORY_MESSAGES", 50)
MAX_SESSIONS = _env_int("MAX_SESSIONS", 1000)


@dataclass
class Session:
    history_limit: int = HISTORY_MESSAGES
    history: deque = field(init=False)  # of {role, content}; oldest dropped first

    def __post_init__(self):
        self.history = deque(maxlen=self.history_limit)

    def add(self, role, content):
        """Append a message to the conversation history."""
        self.history.append({"role": role, "content": content})

    def clear(self):
        self.history.clear()


class SessionStore:
    """Sessions keyed by conversation id. Nothing is written to disk."""

    def __init__(self, max_sessions=MAX_SESSIONS, history_limit=HISTORY_MESSAGES):
        self.max_sessions = max_sessions
        self.history_limit = history_limit
        self._sessions: OrderedDict[str, Session] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, conversation_id: str) -> Session:
        with self._lock:
            sess = self._sessions.get(conversation_id)
            if sess is None:
                sess = Session(history_limit=self.history_limit)
                self._sessions[conversation_id] = sess
                while len(self._sessions) > self.max_sessions:
                    self._sessions.popitem(last=False)
            else:
                self._sessions.move_to_end(conversation_id)
            return sess

    def drop(self, conversation_id: str) -> bool:
        """Forget a conversation. Returns False if it was unknown."""
        with self._lock:
            return self._sessions.pop(conversation_id, None) is not None

    def __contains__(self, conversation_id):
        with self._lock:
            return conversation_id in self._sessions

    def __len__(self):
        with self._lock:
            return len(self._sessions)
