"""Composition root for the Mandarin Reader core."""

import logging
from typing import Optional

from mandarin_reader.coordinators import LookupCoordinator
from mandarin_reader.io import DatabaseManager, ResourceRepository
from mandarin_reader.services import (
    ComponentIndexService,
    DictionaryService,
    FileReplicaStore,
    GeminiTranslationService,
    InMemoryTranslationCache,
    LookupService,
    SettingsManager,
    VocabularyService,
)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


def bootstrap(settings: Optional[SettingsManager] = None) -> LookupCoordinator:
    """
    This is the only place that knows how to instantiate and wire all components.

    Replicated vocabulary is merged into the local store before the
    coordinator is returned, so no lookup runs against a half-synced store.
    """
    # 1. Configuration
    settings = settings or SettingsManager()
    configure_logging(settings.get_log_level())

    # 2. Infrastructure
    resources = ResourceRepository(settings.get_data_dir())
    resources.preload()

    db_path = settings.get_database_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    db = DatabaseManager(db_path)
    db.ensure_schema()

    # 3. Services
    component_index = ComponentIndexService(db)
    vocabulary = VocabularyService(
        db,
        FileReplicaStore(settings.get_replica_path()),
        component_index,
    )
    vocabulary.sync_from_replica()

    lookup = LookupService(DictionaryService(resources), vocabulary, component_index)

    # 4. Coordinator
    return LookupCoordinator(
        lookup_service=lookup,
        translation_service=GeminiTranslationService(),
        translation_cache=InMemoryTranslationCache(),
        settings_manager=settings,
    )
