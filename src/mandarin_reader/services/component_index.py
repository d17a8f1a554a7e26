"""Component Index Service - recency lists of characters per radical/component."""

import threading
from typing import Dict, List

from mandarin_reader.core import CharacterInfo
from mandarin_reader.io import DatabaseManager

MAX_CHARACTERS_PER_COMPONENT = 20
SEEN_IN_DISPLAY_LIMIT = 5


class ComponentIndexService:
    """
    Tracks which characters were recently seen containing each component.

    A character's radical is recorded alongside its visual components, so a
    "seen in" list can mix structural components with radical classes.
    """

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db
        self._lock = threading.Lock()

    def record(self, component: str, character: str) -> List[str]:
        """Append character under component if absent; returns the updated list."""
        with self._lock:
            characters = self._db.get_component_characters(component)
            if character in characters:
                return characters
            characters.append(character)
            if len(characters) > MAX_CHARACTERS_PER_COMPONENT:
                characters.pop(0)
            self._db.put_component_characters(component, characters)
            return characters

    def record_character(self, info: CharacterInfo) -> Dict[str, List[str]]:
        """Record info.character under its radical and components."""
        return {key: self.record(key, info.character) for key in info.component_keys()}

    def characters_with_component(self, component: str) -> List[str]:
        """Most recent last."""
        return self._db.get_component_characters(component)

    def seen_in(self, info: CharacterInfo) -> Dict[str, List[str]]:
        """Other recently seen characters sharing a component with info."""
        seen: Dict[str, List[str]] = {}
        for key in info.component_keys():
            others = [c for c in self.characters_with_component(key) if c != info.character]
            if others:
                seen[key] = others[-SEEN_IN_DISPLAY_LIMIT:]
        return seen
