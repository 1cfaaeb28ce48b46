# utils/cctv/fragments.py
"""
Streamlit components for the CCTV monitoring page.
"""

import logging
from typing import Sequence

import streamlit as st

from .cameras import (
    ALL, CAMERA_STATUSES, GRID_LAYOUTS, STATUS_ICONS, Camera, camera_status_counts, filter_cameras, grid_rows
)

logger = logging.getLogger(__name__)


def render_status_summary(cameras: Sequence[Camera]):
    counts = camera_status_counts(cameras)
    columns = st.columns(len(counts) + 1)
    columns[0].metric("📹 Cameras", len(cameras))
    for col, (status, count) in zip(columns[1:], counts.items()):
        col.metric(f"{STATUS_ICONS[status]} {status.title()}", count)


def render_camera_card(camera: Camera, selected: bool = False):
    with st.container(border=True):
        title = f"**{camera.name}**" + (" ⭐" if selected else "")
        st.markdown(title)
        st.markdown(f":{camera.status_color}[{camera.status_icon} {camera.status.upper()}]")
        if camera.is_online:
            st.caption("🔇 Live view not available in this dashboard")
        else:
            st.caption("📴 No signal")
        st.caption(f"📍 {camera.location}")
        st.caption(f"🕒 Last activity: {camera.last_activity}")


@st.fragment
def camera_grid_fragment(cameras: Sequence[Camera], fragment_key: str = "cctv_grid"):
    """Layout/status controls, grid of camera cards and a selected-camera panel."""
    col1, col2 = st.columns(2)
    with col1:
        layout = st.segmented_control("Grid layout", list(GRID_LAYOUTS), default='2x2',
                                      key=f"{fragment_key}_layout")
    with col2:
        status = st.selectbox("Status", [ALL] + list(CAMERA_STATUSES),
                              format_func=lambda s: "All statuses" if s == ALL else s.title(),
                              key=f"{fragment_key}_status")

    visible = filter_cameras(cameras, status=status)
    if not visible:
        st.info("No cameras match the selected status")
        return

    selected_id = st.session_state.get(f"{fragment_key}_selected")
    for row in grid_rows(visible, layout or '2x2'):
        columns = st.columns(GRID_LAYOUTS[layout or '2x2'][0])
        for col, camera in zip(columns, row):
            with col:
                render_camera_card(camera, selected=camera.id == selected_id)
                if st.button("Select", key=f"{fragment_key}_select_{camera.id}", use_container_width=True):
                    st.session_state[f"{fragment_key}_selected"] = camera.id
                    st.rerun(scope="fragment")

    selected = next((c for c in cameras if c.id == selected_id), None)
    if selected:
        st.markdown("---")
        st.markdown(f"### {selected.status_icon} {selected.name}")
        st.write(f"District: {selected.district} · Location: {selected.location} · "
                 f"Last activity: {selected.last_activity}")
        logger.debug(f"Camera selected: {selected.id}")
