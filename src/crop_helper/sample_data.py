"""Built-in sample records. Nothing here is fetched or computed."""

from __future__ import annotations

from .models import (
    AnalysisResult,
    CropPrice,
    CropRecommendation,
    CurrentWeather,
    DailyForecast,
    Detection,
    FarmAlert,
    FarmingAdvice,
    Faq,
    Fertilizer,
    HelpResource,
    HourlyForecast,
    Impact,
    LanguageOption,
    Location,
    MarketInsight,
    NutrientLevel,
    PriceHistory,
    PriceSummary,
    Priority,
    QuickAction,
    Recommendation,
    Sky,
    SoilMetric,
    SupportChannel,
    Trend,
    WatchItem,
    WeatherAlert,
)

# --- Onboarding ---
LANGUAGES: tuple[LanguageOption, ...] = (
    LanguageOption("en", "English", "English"),
    LanguageOption("hi", "Hindi", "हिन्दी"),
    LanguageOption("bn", "Bengali", "বাংলা"),
    LanguageOption("te", "Telugu", "తెలుగు"),
    LanguageOption("ta", "Tamil", "தமிழ்"),
    LanguageOption("mr", "Marathi", "मराठी"),
    LanguageOption("gu", "Gujarati", "ગુજરાતી"),
    LanguageOption("kn", "Kannada", "ಕನ್ನಡ"),
)

# --- Dashboard ---
DASHBOARD_TEMPERATURE = 28
DASHBOARD_HUMIDITY = 65
DASHBOARD_CONDITION = "Partly Cloudy"
DASHBOARD_HIGH_LOW = (32, 24)

QUICK_ACTIONS: tuple[QuickAction, ...] = (
    QuickAction("Detect Pest", "Take photo to identify", "pest-detection"),
    QuickAction("Soil Health", "Check soil condition", "soil-health"),
    QuickAction("Weather", "7-day forecast", "weather"),
    QuickAction("Market Prices", "Today's rates", "pricing"),
)

CROP_RECOMMENDATIONS: tuple[CropRecommendation, ...] = (
    CropRecommendation("Tomato", "Optimal", 95, "Perfect soil pH and weather conditions"),
    CropRecommendation("Wheat", "Good", 78, "Consider irrigation timing"),
    CropRecommendation("Rice", "Moderate", 65, "Monitor water levels closely"),
)

DASHBOARD_ALERTS: tuple[FarmAlert, ...] = (
    FarmAlert("weather", "Heavy rain expected in 2 days", Priority.HIGH),
    FarmAlert("pest", "Aphid activity reported in nearby farms", Priority.MEDIUM),
)

PRICE_SUMMARY: tuple[PriceSummary, ...] = (
    PriceSummary("Wheat", 2150, 2.3),
    PriceSummary("Rice", 1850, -1.2),
)

# --- Soil health ---
SOIL_METRICS: tuple[SoilMetric, ...] = (
    SoilMetric("pH Level", 6.8, "6.0-7.0", "good", "Slightly acidic - perfect for most crops"),
    SoilMetric("Moisture", 45, "40-60%", "good", "Optimal moisture level maintained"),
    SoilMetric("Temperature", 24, "20-30°C", "good", "Ideal temperature for seed germination"),
    SoilMetric("Conductivity", 1.2, "0.8-2.0 dS/m", "good", "Good nutrient availability"),
)

NUTRIENTS: tuple[NutrientLevel, ...] = (
    NutrientLevel("Nitrogen (N)", 78, "high"),
    NutrientLevel("Phosphorus (P)", 45, "medium"),
    NutrientLevel("Potassium (K)", 32, "low"),
    NutrientLevel("Organic Matter", 67, "good"),
)

SOIL_RECOMMENDATIONS: tuple[Recommendation, ...] = (
    Recommendation(
        "Add Potassium Fertilizer",
        Priority.HIGH,
        "Apply 50kg/hectare of potassium sulfate before next planting",
    ),
    Recommendation(
        "Maintain Moisture Levels",
        Priority.MEDIUM,
        "Current moisture is optimal, continue current irrigation schedule",
    ),
    Recommendation(
        "Monitor pH Regularly",
        Priority.LOW,
        "pH is good but check weekly during growing season",
    ),
)

FERTILIZERS: tuple[Fertilizer, ...] = (
    Fertilizer("NPK 19:19:19", "200 kg/hectare", "Pre-planting", "Rs 1,250/bag"),
    Fertilizer("Potassium Sulfate", "50 kg/hectare", "Immediate", "Rs 850/bag"),
    Fertilizer("Organic Compost", "2 tonnes/hectare", "Before tillage", "Rs 300/tonne"),
)

# --- Pest detection ---
RECENT_DETECTIONS: tuple[Detection, ...] = (
    Detection("2 hours ago", "Aphids", 94, "Medium", "Tomato", "treated"),
    Detection("Yesterday", "Leaf Rust", 87, "High", "Wheat", "pending"),
    Detection("3 days ago", "Cutworm", 92, "Low", "Cabbage", "treated"),
)

SIMULATED_ANALYSIS = AnalysisResult(
    pest="Aphids",
    confidence=92,
    severity="Medium",
    treatment="Insecticidal Soap Spray",
    description="Small, soft-bodied insects that feed on plant sap",
    urgency="Treat within 2-3 days",
)

# --- Weather ---
CURRENT_WEATHER = CurrentWeather(
    temperature=28,
    condition="Partly Cloudy",
    humidity=65,
    wind_speed=12,
    visibility=8,
    uv_index=6,
    pressure=1013,
    dew_point=18,
)

HOURLY_FORECAST: tuple[HourlyForecast, ...] = (
    HourlyForecast("12 PM", 28, Sky.SUNNY, 10),
    HourlyForecast("1 PM", 30, Sky.SUNNY, 5),
    HourlyForecast("2 PM", 32, Sky.CLOUDY, 15),
    HourlyForecast("3 PM", 31, Sky.CLOUDY, 25),
    HourlyForecast("4 PM", 29, Sky.RAIN, 65),
    HourlyForecast("5 PM", 26, Sky.RAIN, 80),
)

WEEKLY_FORECAST: tuple[DailyForecast, ...] = (
    DailyForecast("Today", 32, 24, Sky.SUNNY, "Sunny", 10),
    DailyForecast("Tomorrow", 29, 22, Sky.RAIN, "Rain", 85),
    DailyForecast("Wed", 27, 20, Sky.RAIN, "Heavy Rain", 95),
    DailyForecast("Thu", 30, 23, Sky.CLOUDY, "Cloudy", 30),
    DailyForecast("Fri", 33, 25, Sky.SUNNY, "Sunny", 5),
    DailyForecast("Sat", 31, 24, Sky.CLOUDY, "Partly Cloudy", 20),
    DailyForecast("Sun", 28, 22, Sky.RAIN, "Light Rain", 60),
)

FARMING_ADVICE: tuple[FarmingAdvice, ...] = (
    FarmingAdvice(
        "Irrigation Planning",
        "Heavy rain expected Wednesday-Thursday. Reduce watering schedule.",
        Priority.HIGH,
    ),
    FarmingAdvice(
        "Harvest Window",
        "Good conditions Friday-Saturday for harvesting mature crops.",
        Priority.MEDIUM,
    ),
    FarmingAdvice(
        "Pest Alert",
        "High humidity may increase fungal disease risk. Monitor closely.",
        Priority.MEDIUM,
    ),
)

WEATHER_ALERTS: tuple[WeatherAlert, ...] = (
    WeatherAlert(
        "Heavy Rain Warning",
        "Tomorrow 3 PM - Thursday 6 AM",
        "Expected rainfall: 45-60mm. Prepare drainage systems.",
        Priority.HIGH,
    ),
)

# --- Market prices ---
LOCATIONS: tuple[Location, ...] = (
    Location("punjab", "Punjab"),
    Location("haryana", "Haryana"),
    Location("up", "Uttar Pradesh"),
    Location("rajasthan", "Rajasthan"),
    Location("gujarat", "Gujarat"),
)

TODAY_PRICES: tuple[CropPrice, ...] = (
    CropPrice("Wheat", 2150, "quintal", 2.3, Trend.UP, "Ludhiana Mandi", "Grade A", "High"),
    CropPrice("Rice (Basmati)", 3850, "quintal", -1.2, Trend.DOWN, "Amritsar Mandi", "Premium", "Medium"),
    CropPrice("Cotton", 5680, "quintal", 4.7, Trend.UP, "Bathinda Mandi", "Grade A", "High"),
    CropPrice("Sugarcane", 380, "quintal", 0.8, Trend.UP, "Jalandhar Mandi", "Good", "Medium"),
    CropPrice("Maize", 1850, "quintal", -2.1, Trend.DOWN, "Patiala Mandi", "Grade B", "Low"),
    CropPrice("Mustard", 5200, "quintal", 3.5, Trend.UP, "Ludhiana Mandi", "Grade A", "High"),
)

PRICE_HISTORY: tuple[PriceHistory, ...] = (
    PriceHistory("1 week ago", 2100, 3900, 5420),
    PriceHistory("2 weeks ago", 2080, 3950, 5380),
    PriceHistory("1 month ago", 2050, 4000, 5200),
    PriceHistory("3 months ago", 1950, 3800, 4950),
)

MARKET_INSIGHTS: tuple[MarketInsight, ...] = (
    MarketInsight(
        "Wheat Prices Rising",
        "Strong export demand driving wheat prices up by 8% this month",
        Impact.POSITIVE,
        "2 weeks",
    ),
    MarketInsight(
        "Cotton Season Peak",
        "Harvest season approaching, expect price volatility",
        Impact.NEUTRAL,
        "1 month",
    ),
    MarketInsight(
        "Rice Export Boost",
        "Government policy changes favoring rice exports",
        Impact.POSITIVE,
        "3 months",
    ),
)

WATCHLIST: tuple[WatchItem, ...] = (
    WatchItem("Wheat", 2200, 2150),
    WatchItem("Cotton", 6000, 5680),
    WatchItem("Rice", 4000, 3850),
)

# --- Feedback and help ---
FAQS: tuple[Faq, ...] = (
    Faq(
        "How accurate is the crop recommendation?",
        "Our AI model has 90%+ accuracy based on soil conditions, weather data, "
        "and local farming practices.",
        "AI Features",
    ),
    Faq(
        "Can I use the app without internet?",
        "Some features work offline, but real-time weather and price updates "
        "require internet connection.",
        "Technical",
    ),
    Faq(
        "How do I add my own field data?",
        "Go to Profile > My Fields and add field details including size, crop "
        "history, and soil type.",
        "App Usage",
    ),
    Faq(
        "Is pest detection available for all crops?",
        "Currently supports 50+ major crops. We're constantly adding more based "
        "on user requests.",
        "AI Features",
    ),
    Faq(
        "How often are market prices updated?",
        "Prices are updated multiple times daily from major mandis across India.",
        "Market Data",
    ),
)

HELP_RESOURCES: tuple[HelpResource, ...] = (
    HelpResource("Getting Started Guide", "Complete walkthrough of all app features", "guide", "10 min read"),
    HelpResource("Video Tutorials", "Step-by-step video instructions", "video", "15 videos"),
    HelpResource("Voice Commands List", "All supported voice commands", "reference", "5 min read"),
)

SUPPORT_CHANNELS: tuple[SupportChannel, ...] = (
    SupportChannel("WhatsApp", "+91-9876543210", "24/7 Available"),
    SupportChannel("Phone Support", "1800-FARMER (1800-327637)", "6 AM - 10 PM"),
    SupportChannel("Email Support", "help@crophelper.com", "24-48 hour response"),
)
