"""Streamlit interface for the emergency incident dashboard."""
from __future__ import annotations

import random
import sys
from datetime import timedelta
from functools import partial
from pathlib import Path
from typing import Optional, TypedDict, cast

import streamlit as st

CURRENT_FILE = Path(__file__).resolve()
for candidate in CURRENT_FILE.parents:
    if (candidate / "pyproject.toml").exists():
        project_root = candidate
        break
else:
    project_root = CURRENT_FILE.parents[3]

project_root_str = str(project_root)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from scripts.bootstrap import bootstrap_project

PROJECT_ROOT = bootstrap_project()

from src.utils.logger import configure_logging, logger

from src.core.entities import TABS, Coordinates
from src.infrastructure.classification.providers import (
    FixedClassificationProvider,
    SimulatedClassificationProvider,
)
from src.infrastructure.geo.locator import DEFAULT_LOCATION, UserLocator
from src.infrastructure.mock.generators import (
    DEFAULT_INCIDENT_COUNT,
    generate_mock_incidents,
    generate_mock_notifications,
    generate_mock_stats,
)
from src.infrastructure.reports.incident_summary import IncidentSummaryAnalyzer
from src.interface.web.incident_list import render_incident_list
from src.interface.web.incident_map import (
    DEFAULT_ATTRIBUTION,
    DEFAULT_TILES_URL,
    MapSettings,
    filter_incidents,
    render_incident_map,
    render_map_filters,
    reset_map_state,
)
from src.interface.web.notification_panel import render_notification_panel
from src.interface.web.report_form import render_report_form
from src.interface.web.stats_cards import render_incident_breakdown, render_stats_cards
from src.interface.web.styles import TAB_LABELS
from src.use_cases.analyze_report import AnalyzeReportUseCase, ClassificationProvider
from src.use_cases.dashboard_session import DashboardSession
from src.use_cases.simulate_updates import (
    DEFAULT_NOTIFICATION_CHANCE,
    DEFAULT_NOTIFICATION_LIMIT,
    SimulateUpdatesUseCase,
)

SESSION_KEY = "dashboard_session"
TAB_WIDGET_KEY = "active_tab_selector"


class SimulationConfig(TypedDict, total=False):
    interval_seconds: float
    notification_chance: float
    notification_limit: int
    seed: Optional[int]


class MockDataConfig(TypedDict, total=False):
    incident_count: int


class ClassificationConfig(TypedDict, total=False):
    provider: str
    processing_delay_seconds: float
    confidence: Optional[int]
    affected_radius: Optional[int]


class LocationConfig(TypedDict, total=False):
    query: str
    fallback_latitude: float
    fallback_longitude: float


class MapsConfig(TypedDict, total=False):
    tiles_url: str
    attribution: str
    default_zoom: int
    selected_zoom: int
    height: int


class LoggingConfig(TypedDict, total=False):
    level: str


class AppConfig(TypedDict, total=False):
    simulation: SimulationConfig
    mock_data: MockDataConfig
    classification: ClassificationConfig
    location: LocationConfig
    maps: MapsConfig
    logging: LoggingConfig


@st.cache_data
def load_config(path: Path) -> AppConfig:
    import yaml

    with path.open("r", encoding="utf-8") as file:
        data = yaml.safe_load(file)

    if not isinstance(data, dict):
        raise ValueError("The configuration file must contain a mapping at the top level.")

    return cast(AppConfig, data)


@st.cache_resource
def setup_logging(level: str) -> str:
    configure_logging(level)
    logger.info("Logging configured at {} level", level)
    return level


def get_fallback_location(config: AppConfig) -> Coordinates:
    location_config = cast(LocationConfig, config.get("location", {}))
    latitude = location_config.get("fallback_latitude")
    longitude = location_config.get("fallback_longitude")
    if isinstance(latitude, (int, float)) and isinstance(longitude, (int, float)):
        return Coordinates(latitude=float(latitude), longitude=float(longitude))
    return DEFAULT_LOCATION


def build_map_settings(config: AppConfig) -> MapSettings:
    maps_config = cast(MapsConfig, config.get("maps", {}))
    return MapSettings(
        tiles_url=str(maps_config.get("tiles_url") or DEFAULT_TILES_URL),
        attribution=str(maps_config.get("attribution") or DEFAULT_ATTRIBUTION),
        default_center=get_fallback_location(config),
        default_zoom=int(maps_config.get("default_zoom", 10) or 10),
        selected_zoom=int(maps_config.get("selected_zoom", 15) or 15),
        height=int(maps_config.get("height", 600) or 600),
    )


def build_classification_provider(config: AppConfig, rng: random.Random) -> ClassificationProvider:
    classification_config = cast(ClassificationConfig, config.get("classification", {}))
    provider_name = str(classification_config.get("provider", "simulated")).strip().lower()

    if provider_name == "simulated":
        delay = classification_config.get("processing_delay_seconds", 2.0)
        return SimulatedClassificationProvider(
            rng=rng,
            delay_seconds=float(delay if delay is not None else 2.0),
        )
    if provider_name == "fixed":
        return FixedClassificationProvider(
            confidence=classification_config.get("confidence"),
            affected_radius=classification_config.get("affected_radius"),
        )

    raise ValueError(f"Unknown classification provider '{provider_name}'.")


def create_session(config: AppConfig) -> tuple[DashboardSession, AnalyzeReportUseCase]:
    simulation_config = cast(SimulationConfig, config.get("simulation", {}))
    mock_config = cast(MockDataConfig, config.get("mock_data", {}))
    location_config = cast(LocationConfig, config.get("location", {}))

    seed = simulation_config.get("seed")
    base_rng = random.Random(seed)
    generator_rng = random.Random(base_rng.random())
    updater_rng = random.Random(base_rng.random())
    report_rng = random.Random(base_rng.random())

    incident_count = int(mock_config.get("incident_count", DEFAULT_INCIDENT_COUNT) or 0)
    fallback = get_fallback_location(config)
    locator = UserLocator(query=str(location_config.get("query") or ""), fallback=fallback)

    updater = SimulateUpdatesUseCase(
        rng=updater_rng,
        notification_chance=float(
            simulation_config.get("notification_chance", DEFAULT_NOTIFICATION_CHANCE)
        ),
        notification_limit=int(
            simulation_config.get("notification_limit", DEFAULT_NOTIFICATION_LIMIT)
        ),
    )
    session = DashboardSession(
        incident_source=partial(generate_mock_incidents, generator_rng, incident_count),
        stats_source=generate_mock_stats,
        notification_source=generate_mock_notifications,
        locator=locator,
        updater=updater,
        interval_seconds=float(simulation_config.get("interval_seconds", 10.0) or 10.0),
    )
    analyze_use_case = AnalyzeReportUseCase(
        build_classification_provider(config, report_rng),
        fallback_location=fallback,
        rng=report_rng,
    )
    return session, analyze_use_case


def get_session(config: AppConfig) -> tuple[DashboardSession, AnalyzeReportUseCase]:
    if SESSION_KEY not in st.session_state:
        session, analyze_use_case = create_session(config)
        session.mount()
        st.session_state[SESSION_KEY] = (session, analyze_use_case)
    return cast(tuple[DashboardSession, AnalyzeReportUseCase], st.session_state[SESSION_KEY])


def reset_session() -> None:
    stored = st.session_state.pop(SESSION_KEY, None)
    if stored is not None:
        session, _ = stored
        session.teardown()
    st.session_state.pop(TAB_WIDGET_KEY, None)
    reset_map_state()


def render_live_updates(session: DashboardSession) -> None:
    interval = timedelta(seconds=session.scheduler.interval_seconds)

    @st.fragment(run_every=interval)
    def poll() -> None:
        if not session.mounted:
            return
        if session.poll_updates():
            st.rerun()

    poll()


def render_header(session: DashboardSession) -> None:
    title_col, status_col = st.columns([4, 1])
    with title_col:
        st.title("🛡️ AERAS")
        st.caption("AI Emergency Response System")
    with status_col:
        st.markdown(":green[●] Live Monitoring")
        unread = session.unread_count()
        st.markdown(f"🔔 :red-background[{unread}]" if unread else "🔔")
        st.button("Restart simulation", on_click=reset_session, use_container_width=True)


def render_tab_selector(session: DashboardSession) -> str:
    if st.session_state.get(TAB_WIDGET_KEY) != session.state.active_tab:
        st.session_state[TAB_WIDGET_KEY] = session.state.active_tab

    def on_change() -> None:
        session.set_active_tab(st.session_state[TAB_WIDGET_KEY])

    st.radio(
        "View",
        options=list(TABS),
        format_func=lambda tab: TAB_LABELS[tab],
        horizontal=True,
        label_visibility="collapsed",
        key=TAB_WIDGET_KEY,
        on_change=on_change,
    )
    return session.state.active_tab


def render_dashboard_tab(session: DashboardSession, analyzer: IncidentSummaryAnalyzer) -> None:
    if session.state.stats is not None:
        render_stats_cards(session.state.stats)

    list_col, alerts_col = st.columns([2, 1])
    with list_col:
        st.markdown("#### Recent Emergencies")
        render_incident_list(
            session.active_incidents(),
            on_select=session.select_incident,
            selected_id=session.state.selected_incident_id,
            key_prefix="dashboard-list",
        )
    with alerts_col:
        render_notification_panel(
            session.state.notifications,
            on_dismiss=session.dismiss_notification,
            on_mark_read=session.mark_notification_read,
        )

    render_incident_breakdown(session.state.incidents, analyzer)


def render_map_tab(session: DashboardSession, settings: MapSettings) -> None:
    map_col, side_col = st.columns([3, 1])
    with side_col:
        filters = render_map_filters()
        st.markdown("#### Nearby Emergencies")
        render_incident_list(
            session.nearby_incidents(),
            on_select=session.select_incident,
            selected_id=session.state.selected_incident_id,
            key_prefix="nearby-list",
        )
    with map_col:
        render_incident_map(
            filter_incidents(session.state.incidents, filters),
            on_select=session.select_incident,
            selected=session.selected_incident(),
            settings=settings,
        )


def main() -> None:
    st.set_page_config(page_title="AERAS Emergency Dashboard", layout="wide")

    config: AppConfig = load_config(PROJECT_ROOT / "configs" / "config.yaml")
    logging_config = cast(LoggingConfig, config.get("logging", {}))
    setup_logging(str(logging_config.get("level") or "INFO"))

    session, analyze_use_case = get_session(config)
    map_settings = build_map_settings(config)
    analyzer = IncidentSummaryAnalyzer()

    render_header(session)
    render_live_updates(session)
    active_tab = render_tab_selector(session)

    if active_tab == "dashboard":
        render_dashboard_tab(session, analyzer)
    elif active_tab == "map":
        render_map_tab(session, map_settings)
    else:
        render_report_form(
            analyze_use_case,
            on_submit=session.submit_report,
            user_location=session.state.user_location,
        )
    logger.debug("Rendered '{}' view", active_tab)


if __name__ == "__main__":
    main()
