"""Async workers for non-blocking lookups and API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from mandarin_reader.core import LookupRequest
from mandarin_reader.services.translation import TranslationService


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    lookup_result = Signal(object)  # LookupResponse
    translation_result = Signal(object)  # TranslationResult


class LookupWorker(QRunnable):
    """
    Worker that runs the full lookup pipeline in a background thread.

    The lookup service never raises for a request (failures come back as an
    unsuccessful LookupResponse), so the error signal only covers bugs.
    """

    def __init__(self, lookup_service, request: LookupRequest):
        super().__init__()
        self.lookup_service = lookup_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the lookup in background thread."""
        try:
            response = self.lookup_service.handle_request(self.request)
            self.signals.lookup_result.emit(response)
        except Exception as e:
            self.signals.error.emit(f"Unexpected lookup error: {str(e)}")
        finally:
            self.signals.finished.emit()


class TranslationWorker(QRunnable):
    """
    Worker that runs translation API call in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when translation completes or fails.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        text: str,
        api_key: str,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.text = text
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(
                text=self.text,
                api_key=self.api_key,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()
