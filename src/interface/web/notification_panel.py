"""Streamlit rendering of the live alerts panel."""
from __future__ import annotations

from datetime import datetime
from typing import Callable, Mapping, Optional, Sequence

import streamlit as st

from src.core.entities import Notification
from src.utils.time_format import format_relative_time

SEVERITY_ICONS: Mapping[str, str] = {
    "low": "ℹ️",
    "medium": "⚠️",
    "high": "🔶",
    "critical": "🚨",
}


def count_unread(notifications: Sequence[Notification]) -> int:
    return sum(1 for notification in notifications if not notification.read)


def format_notification(notification: Notification, now: Optional[datetime] = None) -> str:
    icon = "✉️" if notification.read else SEVERITY_ICONS[notification.severity]
    title = notification.title if notification.read else f"**{notification.title}**"
    return (
        f"{icon} {title}  \n"
        f"{notification.message}  \n"
        f"_{format_relative_time(notification.timestamp, now)}_"
    )


def render_notification_panel(
    notifications: Sequence[Notification],
    on_dismiss: Callable[[str], None],
    on_mark_read: Callable[[str], None],
) -> None:
    st.markdown(f"#### 🔔 Live Alerts :red-background[{count_unread(notifications)} new]")

    if not notifications:
        st.caption("No alerts at this time")
        return

    for notification in notifications:
        with st.container(border=True):
            text_col, read_col, dismiss_col = st.columns([6, 1, 1])
            text_col.markdown(format_notification(notification))
            if not notification.read:
                read_col.button(
                    "●",
                    key=f"alert-read-{notification.id}",
                    help="Mark as read",
                    on_click=on_mark_read,
                    args=(notification.id,),
                )
            dismiss_col.button(
                "✕",
                key=f"alert-dismiss-{notification.id}",
                help="Dismiss",
                on_click=on_dismiss,
                args=(notification.id,),
            )


__all__ = ["SEVERITY_ICONS", "count_unread", "format_notification", "render_notification_panel"]
