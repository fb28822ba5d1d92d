"""Streamlit form for submitting a new emergency report."""
from __future__ import annotations

from typing import Callable, Optional

import streamlit as st

from src.core.entities import INCIDENT_CATEGORIES, SEVERITIES, Coordinates, IncidentReport, ReportDraft
from src.interface.web.styles import category_label
from src.use_cases.analyze_report import AnalyzeReportUseCase

_FORM_NONCE_KEY = "report_form_nonce"


def describe_location(user_location: Optional[Coordinates]) -> str:
    if user_location is None:
        return "📍 Location will be auto-detected"
    return f"📍 Location: {user_location.latitude:.4f}, {user_location.longitude:.4f}"


def render_report_form(
    analyze_use_case: AnalyzeReportUseCase,
    on_submit: Callable[[IncidentReport], None],
    user_location: Optional[Coordinates] = None,
) -> None:
    st.markdown("### 🚨 Report Emergency")

    # Bumping the nonce gives every widget a fresh key, which resets the draft.
    nonce = st.session_state.setdefault(_FORM_NONCE_KEY, 0)
    with st.form(f"report-form-{nonce}"):
        category = st.selectbox(
            "Emergency Type",
            options=list(INCIDENT_CATEGORIES),
            index=0,
            format_func=category_label,
            key=f"report-category-{nonce}",
        )
        title = st.text_input(
            "Title",
            placeholder="Brief description of the emergency...",
            key=f"report-title-{nonce}",
        )
        description = st.text_area(
            "Detailed Description",
            height=140,
            placeholder="Provide more details about the situation, location landmarks, severity...",
            key=f"report-description-{nonce}",
        )
        severity = st.radio(
            "Severity Level",
            options=list(SEVERITIES),
            index=SEVERITIES.index("medium"),
            format_func=str.title,
            horizontal=True,
            key=f"report-severity-{nonce}",
        )
        st.caption(describe_location(user_location))
        submitted = st.form_submit_button("Submit Emergency Report", use_container_width=True)

    if not submitted:
        return

    draft = ReportDraft(
        category=str(category),
        title=title,
        description=description,
        severity=str(severity),
    )
    if not draft.is_complete():
        st.warning("Please provide both a title and a description before submitting.")
        return

    st.caption("🤖 AI is analyzing your report for classification and threat assessment...")
    with st.spinner("Processing with AI..."):
        report = analyze_use_case.execute(draft, user_location)

    on_submit(report)
    st.session_state[_FORM_NONCE_KEY] = nonce + 1
    st.rerun()


__all__ = ["describe_location", "render_report_form"]
