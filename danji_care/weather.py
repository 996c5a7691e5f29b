"""Weather-based sales encouragement for the planner dashboard.

There is no weather integration; :class:`RandomWeatherProvider` draws a
demo condition. A real source only has to satisfy :class:`WeatherProvider`.
"""

import random
import re
from typing import Protocol

from danji_care.models import Weather

LOCATION_LOADING = "위치 정보를 불러오는 중이에요."
LOCATION_NEARBY = "지금 계신 곳 주변 단지를 살펴보고 있어요."

# **text** segments render bold
WEATHER_MESSAGES: dict[Weather, str] = {
    Weather.CLEAR: (
        "☀️ 날씨가 정말 화창해요! **소장님들께 커피 한 잔** 들고 "
        "**방문하기 딱 좋은 날씨**입니다."
    ),
    Weather.RAIN: (
        "☔ 비 오는 날엔 **소장님들도 사무실에 계실 확률이 높죠?** "
        "**안부 전화**로 점수를 따보세요!"
    ),
    Weather.CLOUDY: (
        "☁️ 흐린 날씨지만 **사장님의 영업 열정은 오늘도 맑음!** "
        "주변 단지들을 **꼼꼼히 챙겨드릴게요.**"
    ),
}

_BOLD_PATTERN = re.compile(r"\*\*([^*]+)\*\*")


class WeatherProvider(Protocol):
    def current(self) -> Weather: ...


class RandomWeatherProvider:
    """Demo weather: clear 40%, cloudy 30%, rain 30%."""

    CONDITIONS = [Weather.CLEAR, Weather.CLOUDY, Weather.RAIN]
    WEIGHTS = [0.4, 0.3, 0.3]

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def current(self) -> Weather:
        return self._random.choices(self.CONDITIONS, weights=self.WEIGHTS, k=1)[0]


def encouragement_message(provider: WeatherProvider) -> str:
    """Message matching the provider's current weather."""
    return WEATHER_MESSAGES[provider.current()]


def split_bold(text: str) -> list[tuple[str, bool]]:
    """Split ``text`` into ``(segment, is_bold)`` pairs, dropping empties."""
    parts = _BOLD_PATTERN.split(text)
    return [(part, i % 2 == 1) for i, part in enumerate(parts) if part]


def location_label(lat: float | None, lng: float | None) -> str:
    if lat is None or lng is None:
        return LOCATION_LOADING
    return LOCATION_NEARBY
