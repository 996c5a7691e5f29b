"""One-shot position acquisition with a bounded wait."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Callable

from danji_care.models import GeoPoint

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "위치 서비스를 지원하지 않습니다."
UNAVAILABLE_MESSAGE = "위치를 가져올 수 없습니다."
TIMEOUT_MESSAGE = "위치 요청 시간이 초과되었습니다."


@dataclass(frozen=True)
class Position:
    """A fix reported by a position source."""

    lat: float
    lng: float
    timestamp: float  # epoch seconds


@dataclass
class GeolocationState:
    """Shared UI state for the planner's current position."""

    lat: float | None = None
    lng: float | None = None
    loading: bool = True
    error: str | None = None

    @property
    def center(self) -> GeoPoint | None:
        if self.lat is None or self.lng is None:
            return None
        return GeoPoint(self.lat, self.lng)


PositionSource = Callable[[], Position]


class GeolocationService:
    """Acquire the planner's position once per request, never retrying.

    Parameters
    ----------
    source : PositionSource | None
        Callable returning a :class:`Position`. ``None`` means the device
        has no location support.
    timeout : float
        Seconds to wait for the source before giving up.
    maximum_age : float
        A previously acquired position younger than this is reused.
    clock : Callable[[], float]
        Time source, epoch seconds.
    """

    def __init__(
        self,
        source: PositionSource | None,
        timeout: float = 10.0,
        maximum_age: float = 60.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._source = source
        self.timeout = timeout
        self.maximum_age = maximum_age
        self._clock = clock
        self._last: Position | None = None
        self.state = GeolocationState()

    def acquire(self) -> GeolocationState:
        """Resolve the current position into :attr:`state`."""
        if self._source is None:
            self.state = GeolocationState(loading=False, error=UNSUPPORTED_MESSAGE)
            return self.state

        if self._last is not None and self._clock() - self._last.timestamp <= self.maximum_age:
            return self._resolve(self._last)

        # The worker is abandoned on timeout; a late fix is dropped.
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="geolocation")
        try:
            future = pool.submit(self._source)
            position = future.result(timeout=self.timeout)
        except FutureTimeoutError:
            logger.info("Position request timed out after %.1fs", self.timeout)
            self.state = GeolocationState(loading=False, error=TIMEOUT_MESSAGE)
            return self.state
        except Exception as exc:
            logger.info("Position unavailable: %s", exc)
            self.state = GeolocationState(loading=False, error=str(exc) or UNAVAILABLE_MESSAGE)
            return self.state
        finally:
            pool.shutdown(wait=False)

        self._last = position
        return self._resolve(position)

    def _resolve(self, position: Position) -> GeolocationState:
        self.state = GeolocationState(lat=position.lat, lng=position.lng, loading=False, error=None)
        return self.state


def fixed_position(lat: float, lng: float, clock: Callable[[], float] = time.time) -> PositionSource:
    """Position source that always reports the same coordinates."""

    def source() -> Position:
        return Position(lat=lat, lng=lng, timestamp=clock())

    return source
