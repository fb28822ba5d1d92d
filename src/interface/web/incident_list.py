"""Streamlit rendering of the incident list."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence

import streamlit as st

from src.core.entities import Incident
from src.interface.web.styles import (
    CATEGORY_EMOJIS,
    SEVERITY_BADGE,
    STATUS_BADGE,
    badge,
)
from src.utils.time_format import format_relative_time

MAX_LISTED_INCIDENTS = 10


@dataclass(frozen=True)
class IncidentCard:
    """Pre-formatted text for a single list entry."""

    incident_id: str
    heading: str
    description: str
    details: str
    badges: str
    trust: str
    selected: bool


def build_incident_cards(
    incidents: Sequence[Incident],
    selected_id: Optional[str] = None,
    now: Optional[datetime] = None,
    limit: int = MAX_LISTED_INCIDENTS,
) -> list[IncidentCard]:
    cards: list[IncidentCard] = []
    for incident in incidents[:limit]:
        heading = f"{CATEGORY_EMOJIS.get(incident.category, '❓')} **{incident.title}**"
        if incident.verified_by_authority:
            heading += " 🛡️"
        cards.append(
            IncidentCard(
                incident_id=incident.id,
                heading=heading,
                description=incident.description,
                details=(
                    f"📍 {incident.affected_radius}m radius · "
                    f"🕒 {format_relative_time(incident.reported_at, now)}"
                ),
                badges=" ".join(
                    (
                        badge(incident.severity.upper(), SEVERITY_BADGE[incident.severity]),
                        badge(incident.status.upper(), STATUS_BADGE[incident.status]),
                    )
                ),
                trust=(
                    f"▲ {incident.upvotes} · ▼ {incident.downvotes} · "
                    f"🤖 {incident.confidence}%"
                ),
                selected=incident.id == selected_id,
            )
        )
    return cards


def render_incident_list(
    incidents: Sequence[Incident],
    on_select: Callable[[str], None],
    selected_id: Optional[str] = None,
    *,
    key_prefix: str = "incident-list",
) -> None:
    cards = build_incident_cards(incidents, selected_id=selected_id)
    if not cards:
        st.info("No incidents to display.")
        return

    for card in cards:
        with st.container(border=True):
            heading = card.heading
            if card.selected:
                heading = f"{badge('SELECTED', 'blue')} {heading}"
            st.markdown(heading)
            st.caption(card.description)
            st.markdown(card.details)
            badges_col, trust_col, action_col = st.columns([2, 2, 1])
            badges_col.markdown(card.badges)
            trust_col.markdown(card.trust)
            action_col.button(
                "View",
                key=f"{key_prefix}-{card.incident_id}",
                on_click=on_select,
                args=(card.incident_id,),
                use_container_width=True,
                type="primary" if card.selected else "secondary",
            )


__all__ = ["IncidentCard", "MAX_LISTED_INCIDENTS", "build_incident_cards", "render_incident_list"]
