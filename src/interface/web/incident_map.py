"""Folium map of the incident collection rendered through streamlit-folium."""
from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

import folium
import streamlit as st
from streamlit_folium import st_folium

from src.core.entities import SEVERITIES, STATUSES, Coordinates, Incident, severity_rank
from src.infrastructure.geo.locator import DEFAULT_LOCATION
from src.interface.web.styles import CATEGORY_EMOJIS, LEGEND_LABELS, SEVERITY_HEX

DEFAULT_TILES_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
DEFAULT_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)
MIN_CIRCLE_PX = 5
MAX_CIRCLE_PX = 20
# Clicked coordinates come back from the browser as floats.
_CLICK_TOLERANCE = 1e-6
_LAST_CLICK_KEY = "incident_map_last_click"
MAP_KEY_PREFIX = "incident-map"
# Keeps higher severities drawn above lower ones where markers overlap.
_SEVERITY_Z_STEP = 1000


@dataclass(frozen=True)
class MapSettings:
    tiles_url: str = DEFAULT_TILES_URL
    attribution: str = DEFAULT_ATTRIBUTION
    default_center: Coordinates = DEFAULT_LOCATION
    default_zoom: int = 10
    selected_zoom: int = 15
    height: int = 600


@dataclass(frozen=True)
class MapFilters:
    statuses: frozenset[str] = field(default_factory=lambda: frozenset(STATUSES))
    critical_only: bool = False
    verified_only: bool = False


def circle_radius_px(affected_radius: float) -> float:
    """Scale an affected radius in meters to a marker size in pixels."""

    return max(MIN_CIRCLE_PX, min(MAX_CIRCLE_PX, affected_radius / 100))


def filter_incidents(incidents: Sequence[Incident], filters: MapFilters) -> list[Incident]:
    return [
        incident
        for incident in incidents
        if incident.status in filters.statuses
        and (not filters.critical_only or incident.severity == "critical")
        and (not filters.verified_only or incident.verified_by_authority)
    ]


def map_view(
    selected: Optional[Incident], settings: MapSettings
) -> tuple[Coordinates, int]:
    """Return the center and zoom the map should show."""

    if selected is not None:
        return selected.coordinates, settings.selected_zoom
    return settings.default_center, settings.default_zoom


def find_incident_at(
    incidents: Sequence[Incident], clicked: Optional[Mapping[str, Any]]
) -> Optional[Incident]:
    """Map a streamlit-folium click payload back to the incident it hit."""

    if not clicked:
        return None
    lat = clicked.get("lat")
    lng = clicked.get("lng")
    if lat is None or lng is None:
        return None

    for incident in incidents:
        if (
            abs(incident.latitude - float(lat)) <= _CLICK_TOLERANCE
            and abs(incident.longitude - float(lng)) <= _CLICK_TOLERANCE
        ):
            return incident
    return None


def _marker_icon(incident: Incident) -> folium.DivIcon:
    colour = SEVERITY_HEX[incident.severity]
    emoji = CATEGORY_EMOJIS.get(incident.category, "❓")
    return folium.DivIcon(
        html=(
            f'<div style="background:{colour};width:32px;height:32px;border-radius:50%;'
            "display:flex;align-items:center;justify-content:center;border:2px solid white;"
            f'box-shadow:0 2px 8px rgba(0,0,0,0.3);font-size:16px;">{emoji}</div>'
        ),
        class_name="incident-marker",
        icon_size=(32, 32),
        icon_anchor=(16, 16),
    )


def _popup_html(incident: Incident) -> str:
    title = html.escape(incident.title, quote=False)
    description = html.escape(incident.description, quote=False)
    colour = SEVERITY_HEX[incident.severity]
    return (
        f'<div style="max-width:260px"><strong>{title}</strong>'
        f'<p style="margin:4px 0">{description}</p>'
        f'<span style="background:{colour};color:white;padding:2px 8px;border-radius:9px">'
        f"{incident.severity.upper()}</span> "
        f'<span style="color:#6b7280">AI: {incident.confidence}%</span></div>'
    )


def _legend_html() -> str:
    categories = "".join(
        f"<div>{CATEGORY_EMOJIS[category]} {label}</div>"
        for category, label in LEGEND_LABELS.items()
    )
    severities = "".join(
        f'<span style="margin-right:6px"><span style="display:inline-block;width:10px;height:10px;'
        f'border-radius:50%;background:{SEVERITY_HEX[severity]}"></span> {severity.title()}</span>'
        for severity in SEVERITIES
    )
    return (
        '<div style="position:absolute;bottom:16px;left:16px;z-index:1000;background:white;'
        'padding:10px;border-radius:8px;box-shadow:0 2px 8px rgba(0,0,0,0.3);font-size:12px;">'
        "<strong>Emergency Types</strong>"
        f'<div style="display:grid;grid-template-columns:1fr 1fr;gap:2px 10px">{categories}</div>'
        f'<div style="margin-top:6px;border-top:1px solid #e5e7eb;padding-top:4px">'
        f"<strong>Severity</strong><br>{severities}</div></div>"
    )


def marker_z_offset(incident: Incident) -> int:
    return severity_rank(incident.severity) * _SEVERITY_Z_STEP


def build_incident_layer(incidents: Sequence[Incident]) -> folium.FeatureGroup:
    """Markers and affected-area circles, one pair per incident."""

    layer = folium.FeatureGroup(name="Incidents")
    for incident in incidents:
        position = [incident.latitude, incident.longitude]
        colour = SEVERITY_HEX[incident.severity]
        folium.Marker(
            position,
            icon=_marker_icon(incident),
            tooltip=html.escape(incident.title, quote=False),
            popup=folium.Popup(_popup_html(incident), max_width=280),
            z_index_offset=marker_z_offset(incident),
        ).add_to(layer)
        folium.CircleMarker(
            position,
            radius=circle_radius_px(incident.affected_radius),
            color=colour,
            fill=True,
            fill_color=colour,
            fill_opacity=0.1,
            opacity=0.3,
            weight=1,
        ).add_to(layer)
    return layer


def build_base_map(
    selected: Optional[Incident] = None, settings: MapSettings | None = None
) -> folium.Map:
    """Tiles and legend only; the incident layer is added separately."""

    settings = settings or MapSettings()
    center, zoom = map_view(selected, settings)
    base_map = folium.Map(
        location=[center.latitude, center.longitude],
        zoom_start=zoom,
        tiles=settings.tiles_url,
        attr=settings.attribution,
    )
    base_map.get_root().html.add_child(folium.Element(_legend_html()))
    return base_map


def build_incident_map(
    incidents: Sequence[Incident],
    selected: Optional[Incident] = None,
    settings: MapSettings | None = None,
) -> folium.Map:
    incident_map = build_base_map(selected, settings)
    build_incident_layer(incidents).add_to(incident_map)
    return incident_map


def map_component_key(selected: Optional[Incident]) -> str:
    """Widget key for the map; a new selection mounts a fresh component."""

    return f"{MAP_KEY_PREFIX}-{selected.id if selected is not None else 'none'}"


def is_new_click(
    clicked: Optional[Mapping[str, Any]],
    map_key: str,
    last_handled: Optional[tuple[str, Mapping[str, Any]]],
) -> bool:
    """Tell a fresh click apart from the payload the component repeats on rerun."""

    if not clicked:
        return False
    return last_handled != (map_key, clicked)


def reset_map_state() -> None:
    st.session_state.pop(_LAST_CLICK_KEY, None)


def render_map_filters(key_prefix: str = "map-filter") -> MapFilters:
    st.markdown("#### Map Filters")
    statuses = st.multiselect(
        "Status",
        options=list(STATUSES),
        default=list(STATUSES),
        format_func=str.title,
        key=f"{key_prefix}-status",
    )
    critical_only = st.toggle("Critical only", value=False, key=f"{key_prefix}-critical")
    verified_only = st.toggle("Verified reports", value=False, key=f"{key_prefix}-verified")
    return MapFilters(
        statuses=frozenset(statuses),
        critical_only=critical_only,
        verified_only=verified_only,
    )


def render_incident_map(
    incidents: Sequence[Incident],
    on_select: Callable[[str], None],
    selected: Optional[Incident] = None,
    settings: MapSettings | None = None,
) -> None:
    settings = settings or MapSettings()
    center, zoom = map_view(selected, settings)
    map_key = map_component_key(selected)

    # Incidents travel as a dynamic layer so tick updates keep the user's pan and zoom.
    result = st_folium(
        build_base_map(selected, settings),
        key=map_key,
        height=settings.height,
        use_container_width=True,
        center=[center.latitude, center.longitude],
        zoom=zoom,
        feature_group_to_add=build_incident_layer(incidents),
        returned_objects=["last_object_clicked"],
    )

    clicked = (result or {}).get("last_object_clicked")
    if not is_new_click(clicked, map_key, st.session_state.get(_LAST_CLICK_KEY)):
        return
    st.session_state[_LAST_CLICK_KEY] = (map_key, clicked)

    hit = find_incident_at(incidents, clicked)
    if hit is not None and (selected is None or hit.id != selected.id):
        on_select(hit.id)
        st.rerun()


__all__ = [
    "DEFAULT_ATTRIBUTION",
    "DEFAULT_TILES_URL",
    "MAP_KEY_PREFIX",
    "MapFilters",
    "MapSettings",
    "build_base_map",
    "build_incident_layer",
    "build_incident_map",
    "circle_radius_px",
    "filter_incidents",
    "find_incident_at",
    "is_new_click",
    "map_component_key",
    "map_view",
    "marker_z_offset",
    "render_incident_map",
    "render_map_filters",
    "reset_map_state",
]
