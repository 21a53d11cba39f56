import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Callable, List, Optional

from src.application.doctor_search import find_nearby_doctors
from src.application.ports import FacilitySearchPort, LLMPort, PractitionerStorePort
from src.application.schemas import AggregateResult, LocationChatRequest
from src.application.suggestions import SuggestionGenerator, fallback_suggestion
from src.domain.models import BilingualSuggestion, Coordinate, DoctorMatch, Facility
from src.domain.rules import detect_specialization


logger = logging.getLogger(__name__)


DEFAULT_BRANCH_TIMEOUT_SECONDS = 30.0
DEFAULT_POOL_SIZE = 8


def _isolated(name: str, fn: Callable[[], Any], default: Any) -> Any:
    """Run one branch; any exception becomes the branch default."""
    try:
        return fn()
    except Exception as e:
        logger.exception("Branch %s failed: %s", name, e)
        return default


def _join(name: str, future: Optional[Future], deadline: float, default: Any) -> Any:
    if future is None:
        return default
    try:
        return future.result(timeout=max(0.0, deadline - time.monotonic()))
    except FutureTimeoutError:
        logger.warning("Branch %s did not finish in time; using default", name)
        # Only stops branches still queued; running ones finish in the background
        future.cancel()
        return default


class LocationChatUseCase:
    """
    Combines AI advice, nearby doctors and nearby hospitals for one message.

    The three branches run concurrently on a shared worker pool and the call
    returns once all of them have finished (or the join timeout elapses).
    Every branch degrades to a default, so process() never raises.
    """

    def __init__(
        self,
        llm: LLMPort,
        practitioners: PractitionerStorePort,
        facilities: FacilitySearchPort,
        branch_timeout: float = DEFAULT_BRANCH_TIMEOUT_SECONDS,
        max_workers: int = DEFAULT_POOL_SIZE,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self.suggestions = SuggestionGenerator(llm)
        self.practitioners = practitioners
        self.facilities = facilities
        self.branch_timeout = branch_timeout
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="location-chat"
        )

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def handle(self, request: LocationChatRequest) -> AggregateResult:
        return self.process(request.message, request.coordinate)

    def process(self, message: str, coordinate: Optional[Coordinate] = None) -> AggregateResult:
        specialization = detect_specialization(message)
        logger.info("Detected specialization: %s", specialization)

        fallback = fallback_suggestion(specialization)
        no_doctors: List[DoctorMatch] = []
        no_facilities: List[Facility] = []

        ai_future = self._executor.submit(
            _isolated, "ai_suggestion",
            lambda: self.suggestions.suggest(message, specialization),
            fallback,
        )
        doctor_future = None
        facility_future = None
        if coordinate is not None:
            doctor_future = self._executor.submit(
                _isolated, "doctor_search",
                lambda: find_nearby_doctors(self.practitioners, coordinate, specialization),
                no_doctors,
            )
            facility_future = self._executor.submit(
                _isolated, "facility_search",
                lambda: self.facilities.find_nearby_hospitals(coordinate),
                no_facilities,
            )

        deadline = time.monotonic() + self.branch_timeout
        suggestion: BilingualSuggestion = _join("ai_suggestion", ai_future, deadline, fallback)
        doctors = _join("doctor_search", doctor_future, deadline, no_doctors)
        facilities = _join("facility_search", facility_future, deadline, no_facilities)

        return AggregateResult(
            suggestion_primary=suggestion.english,
            suggestion_secondary=suggestion.telugu,
            specialization=specialization,
            matched_doctors=doctors,
            nearby_facilities=facilities,
        )
