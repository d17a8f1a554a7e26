"""Lookup Coordinator - runs lookups and translations off the caller's thread."""

import logging
from datetime import datetime
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from mandarin_reader.core import LookupRequest, LookupResult
from mandarin_reader.services import (
    CacheRecord,
    LookupService,
    SettingsManager,
    TranslationCache,
    TranslationService,
    normalize_text,
)
from mandarin_reader.services.text_processing.api_workers import LookupWorker, TranslationWorker

logger = logging.getLogger(__name__)


class _LookupRequest(QObject):
    """Helper class to hold lookup request context and handle results safely."""

    def __init__(self, worker_id: int, parent: "LookupCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_lookup_result(self, response):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_lookup_response(response, self.worker_id)
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(str)
    def on_lookup_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_lookup_error(error, self.worker_id)
            except RuntimeError:
                pass


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, normalized: str, worker_id: int, parent: "LookupCoordinator"):
        super().__init__()
        self.normalized = normalized
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(result, self.normalized, self.worker_id)
            except RuntimeError:
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error, self.worker_id)
            except RuntimeError:
                pass


class LookupCoordinator(QObject):
    """
    Orchestrates the lookup call boundary.

    Responsibilities:
    - Run the lookup pipeline on the thread pool and report the result.
    - Request a natural translation in parallel when an API key is configured.
    - Drop results from requests superseded by a newer lookup.
    """

    lookup_started = Signal(str)
    lookup_completed = Signal(object)  # LookupResult
    lookup_failed = Signal(str)
    translation_completed = Signal(str)
    translation_failed = Signal(str)

    def __init__(
        self,
        lookup_service: LookupService,
        translation_service: TranslationService,
        translation_cache: TranslationCache,
        settings_manager: SettingsManager,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.lookup_service = lookup_service
        self.translation_service = translation_service
        self.translation_cache = translation_cache
        self.settings_manager = settings_manager
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.current_result: Optional[LookupResult] = None
        self._current_translation: Optional[str] = None
        self._active_worker_id: Optional[int] = None
        self._worker_counter = 0

        # Keep references so helpers are not garbage collected while workers run
        self._lookup_request_helper: Optional[_LookupRequest] = None
        self._translation_request_helper: Optional[_TranslationRequest] = None

    def request_lookup(
        self,
        text: str,
        context: Optional[str] = None,
        source_url: Optional[str] = None,
        skip_save: bool = False,
    ) -> None:
        """Start a lookup; results arrive through lookup_completed/lookup_failed."""
        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_worker_id = worker_id
        self.current_result = None
        self._current_translation = None

        self.lookup_started.emit(text)

        request = LookupRequest(
            text=text, context=context, source_url=source_url, skip_save=skip_save
        )
        worker = LookupWorker(lookup_service=self.lookup_service, request=request)
        helper = _LookupRequest(worker_id, self)
        self._lookup_request_helper = helper
        worker.signals.lookup_result.connect(helper.on_lookup_result)
        worker.signals.error.connect(helper.on_lookup_error)
        self.thread_pool.start(worker)

        self._request_translation(text, worker_id)

    def _request_translation(self, text: str, worker_id: int) -> None:
        api_key = self.settings_manager.get_gemini_api_key()
        if not api_key:
            return

        normalized = normalize_text(text)
        cached = self.translation_cache.get(normalized, lang="en")
        if cached:
            self._apply_translation(cached.translation)
            return

        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=normalized,
            api_key=api_key,
        )
        helper = _TranslationRequest(normalized, worker_id, self)
        self._translation_request_helper = helper
        worker.signals.translation_result.connect(helper.on_translation_result)
        worker.signals.error.connect(helper.on_translation_error)
        self.thread_pool.start(worker)

    def _handle_lookup_response(self, response, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            logger.debug(
                "Ignoring stale lookup result (worker %d, current %s)",
                worker_id,
                self._active_worker_id,
            )
            return

        if not response.success:
            self.lookup_failed.emit(response.error or "Unknown error")
            return

        result = response.result
        if self._current_translation is not None:
            result.natural_translation = self._current_translation
        self.current_result = result
        self.lookup_completed.emit(result)

    def _handle_lookup_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            return
        self.lookup_failed.emit(error)

    def _handle_translation_result(self, result, normalized: str, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            logger.debug("Ignoring stale translation result (worker %d)", worker_id)
            return

        if result.is_error:
            self.translation_failed.emit(result.error or "Unknown error")
            return

        self.translation_cache.put(
            CacheRecord(
                normalized_text=normalized,
                lang="en",
                translation=result.text,
                model=result.model,
                updated_at=datetime.now(),
            )
        )
        self._apply_translation(result.text)

    def _handle_translation_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            return
        self.translation_failed.emit(error)

    def _apply_translation(self, translation: str) -> None:
        self._current_translation = translation
        if self.current_result is not None:
            self.current_result.natural_translation = translation
        self.translation_completed.emit(translation)
