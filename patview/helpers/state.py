"""Change tracking base class for viewer state"""

import collections
from typing import Any, Callable

MISSING = object()


class State:
    """Tracks changes to its public attributes and notifies registered watchers.

    Subclasses may be dataclasses; the bookkeeping containers are created lazily
    so no ``__init__`` cooperation is needed.
    """

    def __setattr__(self, name: str, value: Any) -> None:
        """Override setattr to track changes to public attributes."""
        old_value = getattr(self, name, MISSING)
        super().__setattr__(name, value)
        if not name.startswith("_") and old_value != value:
            self._changed(name)

    @property
    def _changes(self) -> set[str]:
        return self.__dict__.setdefault("_change_set", set())

    @property
    def _watchers(self) -> dict[str, list[Callable[[], None]]]:
        return self.__dict__.setdefault(
            "_watcher_map", collections.defaultdict(list)
        )

    def _changed(self, name: str) -> None:
        self._changes.add(name)
        self._notify_watchers(name)

    @property
    def changes(self) -> set[str]:
        """Get the set of attribute names that have changed."""
        return self._changes.copy()

    def clear_changes(self) -> None:
        """Clear the changes set."""
        self._changes.clear()

    def register_watcher(self, name: str, callback: Callable[[], None]) -> None:
        """Register a callback to be notified when an attribute changes"""
        self._watchers[name].append(callback)

    def _notify_watchers(self, name: str) -> None:
        for callback in self._watchers[name]:
            callback()
