"""Dataclasses for the sample records shown on each screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Trend(Enum):
    UP = "up"
    DOWN = "down"


class Impact(Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Sky(Enum):
    """Weather icon for forecast rows."""

    SUNNY = "sun"
    CLOUDY = "cloud"
    RAIN = "rain"


@dataclass(frozen=True)
class LanguageOption:
    code: str
    name: str
    native: str


@dataclass(frozen=True)
class FarmAlert:
    kind: str
    message: str
    priority: Priority


@dataclass(frozen=True)
class QuickAction:
    title: str
    subtitle: str
    target: str  # ScreenID value


@dataclass(frozen=True)
class CropRecommendation:
    crop: str
    status: str
    confidence: int
    reason: str


@dataclass(frozen=True)
class PriceSummary:
    crop: str
    price: int
    change: float


@dataclass(frozen=True)
class SoilMetric:
    name: str
    value: float
    ideal: str
    status: str
    description: str


@dataclass(frozen=True)
class NutrientLevel:
    name: str
    level: int
    status: str


@dataclass(frozen=True)
class Recommendation:
    title: str
    priority: Priority
    description: str


@dataclass(frozen=True)
class Fertilizer:
    name: str
    dosage: str
    timing: str
    cost: str


@dataclass(frozen=True)
class Detection:
    date: str
    pest: str
    confidence: int
    severity: str
    crop: str
    status: str

    @property
    def treated(self) -> bool:
        return self.status == "treated"


@dataclass(frozen=True)
class AnalysisResult:
    pest: str
    confidence: int
    severity: str
    treatment: str
    description: str
    urgency: str


@dataclass(frozen=True)
class CurrentWeather:
    temperature: int
    condition: str
    humidity: int
    wind_speed: int
    visibility: int
    uv_index: int
    pressure: int
    dew_point: int


@dataclass(frozen=True)
class HourlyForecast:
    time: str
    temp: int
    sky: Sky
    rain: int


@dataclass(frozen=True)
class DailyForecast:
    day: str
    high: int
    low: int
    sky: Sky
    condition: str
    rain: int


@dataclass(frozen=True)
class FarmingAdvice:
    title: str
    message: str
    priority: Priority


@dataclass(frozen=True)
class WeatherAlert:
    title: str
    time: str
    description: str
    severity: Priority


@dataclass(frozen=True)
class Location:
    code: str
    name: str


@dataclass(frozen=True)
class CropPrice:
    crop: str
    price: int
    unit: str
    change: float
    trend: Trend
    market: str
    quality: str
    demand: str


@dataclass(frozen=True)
class PriceHistory:
    period: str
    wheat: int
    rice: int
    cotton: int


@dataclass(frozen=True)
class MarketInsight:
    title: str
    description: str
    impact: Impact
    timeframe: str


@dataclass(frozen=True)
class WatchItem:
    crop: str
    target_price: int
    current_price: int

    @property
    def target_met(self) -> bool:
        return self.current_price >= self.target_price


@dataclass(frozen=True)
class Faq:
    question: str
    answer: str
    category: str


@dataclass(frozen=True)
class HelpResource:
    title: str
    description: str
    kind: str
    duration: str


@dataclass(frozen=True)
class SupportChannel:
    kind: str
    contact: str
    hours: str
