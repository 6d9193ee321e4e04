"""Streamlit web UI for smogon-scraper."""

import os
import sys
from pathlib import Path

# Ensure the src/ directory is on the Python path so that
# smogon_scraper is importable on Streamlit Community Cloud
# (which doesn't pip-install the package itself).
_src_dir = str(Path(__file__).resolve().parent.parent)
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

import pandas as pd
import streamlit as st

from smogon_scraper.config import SESSION_ENV, USER_ID_ENV
from smogon_scraper.core import SmogonScraper
from smogon_scraper.errors import ScraperError
from smogon_scraper.extractors import EXTRACTOR_CLASSES
from smogon_scraper.models import ContributionReport
from smogon_scraper.output import report_from_bytes, report_to_bytes


def main():
    st.set_page_config(page_title="Smogon Contributions", layout="wide")
    st.title("Smogon Contribution Scraper")
    st.markdown(
        "Fetch the analyses you wrote or quality checked on **Smogon** "
        "and download them as a JSON report."
    )

    # Sidebar
    with st.sidebar:
        st.header("Settings")
        user_id = st.text_input("User ID", value=os.environ.get(USER_ID_ENV, ""))
        session_cookie = st.text_input(
            "Session cookie",
            value=os.environ.get(SESSION_ENV, ""),
            type="password",
            help="Value of the smogon_session cookie from a logged-in browser",
        )
        extractor_name = st.selectbox("Extractor", sorted(EXTRACTOR_CLASSES))
        uploaded = st.file_uploader("Or open a saved report", type=["json"])

    # Load an upload once; later reruns must not replace a fetched report
    if uploaded is not None and st.session_state.get("upload_id") != uploaded.file_id:
        st.session_state["upload_id"] = uploaded.file_id
        try:
            st.session_state["report"] = report_from_bytes(uploaded.getvalue())
        except ValueError as exc:
            st.error(f"Could not open {uploaded.name}: {exc}")

    ready = bool(user_id.strip() and session_cookie.strip())
    if st.button("Fetch Contributions", type="primary", disabled=not ready):
        scraper = SmogonScraper(
            session_cookie.strip(), extractor=EXTRACTOR_CLASSES[extractor_name]()
        )
        with st.spinner(f"Fetching user {user_id.strip()}..."):
            try:
                st.session_state["report"] = scraper.fetch_contributions(user_id)
            except ScraperError as exc:
                st.error(str(exc))
                st.session_state.pop("report", None)

    if "report" in st.session_state:
        _show_report(st.session_state["report"])


def _show_report(report: ContributionReport) -> None:
    st.subheader(report.username)
    st.caption(f"Fetched at {report.fetched_at}")

    col1, col2, col3 = st.columns(3)
    col1.metric("Total", report.total_contributions)
    col2.metric("Written", report.stats.written)
    col3.metric("Quality Checked", report.stats.quality_checked)

    df = pd.DataFrame([c.to_dict() for c in report.contributions])
    st.dataframe(
        df,
        use_container_width=True,
        column_config={"url": st.column_config.LinkColumn("url")},
    )

    left, right = st.columns(2)
    with left:
        st.markdown("**By format**")
        st.bar_chart(pd.Series(report.stats.by_format, name="count"))
    with right:
        st.markdown("**By generation**")
        st.bar_chart(pd.Series(report.stats.by_generation, name="count"))

    st.download_button(
        label="Download JSON",
        data=report_to_bytes(report),
        file_name="contributions.json",
        mime="application/json",
    )


if __name__ == "__main__":
    main()
