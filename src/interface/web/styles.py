"""Display vocabulary shared by the Streamlit views."""
from __future__ import annotations

from typing import Mapping

CATEGORY_EMOJIS: Mapping[str, str] = {
    "flooding": "💧",
    "power_outage": "⚡",
    "air_quality": "🌬️",
    "violence": "🚨",
    "fire": "🔥",
    "medical": "🏥",
    "traffic": "🚗",
    "weather": "⛈️",
}

CATEGORY_LABELS: Mapping[str, str] = {
    "flooding": "Waterlogging/Flooding",
    "power_outage": "Power Outage",
    "air_quality": "Air Quality Issue",
    "violence": "Safety/Security",
    "fire": "Fire Emergency",
    "medical": "Medical Emergency",
    "traffic": "Traffic Issue",
    "weather": "Weather Emergency",
}

# Short names used by the map legend.
LEGEND_LABELS: Mapping[str, str] = {
    "flooding": "Flooding",
    "power_outage": "Power",
    "air_quality": "Air Quality",
    "violence": "Safety",
    "fire": "Fire",
    "medical": "Medical",
    "traffic": "Traffic",
    "weather": "Weather",
}

SEVERITY_HEX: Mapping[str, str] = {
    "low": "#22C55E",
    "medium": "#F59E0B",
    "high": "#EF4444",
    "critical": "#DC2626",
}

# Streamlit markdown colour names for badges.
SEVERITY_BADGE: Mapping[str, str] = {
    "low": "green",
    "medium": "orange",
    "high": "red",
    "critical": "violet",
}

STATUS_BADGE: Mapping[str, str] = {
    "active": "red",
    "investigating": "orange",
    "resolved": "green",
}

TAB_LABELS: Mapping[str, str] = {
    "dashboard": "📊 Dashboard",
    "map": "🗺️ Live Map",
    "report": "➕ Report Emergency",
}


def badge(text: str, colour: str) -> str:
    return f":{colour}-background[{text}]"


def category_label(category: str) -> str:
    return f"{CATEGORY_EMOJIS.get(category, '❓')} {CATEGORY_LABELS.get(category, category)}"


__all__ = [
    "CATEGORY_EMOJIS",
    "CATEGORY_LABELS",
    "LEGEND_LABELS",
    "SEVERITY_BADGE",
    "SEVERITY_HEX",
    "STATUS_BADGE",
    "TAB_LABELS",
    "badge",
    "category_label",
]
