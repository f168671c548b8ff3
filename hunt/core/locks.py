"""
Concurrency helpers

One lock per team serializes the load -> check -> save sequence of a
submission, so two devices of the same team cannot lose or double count
attempts. Different teams never contend.
"""
import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class TeamLocks:
    """Lazily created per-team locks"""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def get(self, team_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(team_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[team_id] = lock
            return lock

    @contextmanager
    def hold(self, team_id: str) -> Iterator[None]:
        """
        Hold the team's lock for the duration of the block

        Example:
            with locks.hold(team_id):
                progress = store.load(team_id)
                ...
                store.save(progress)
        """
        lock = self.get(team_id)
        with lock:
            yield
