"""
Streamlit UI for the Follow-Back Checker
Everything runs locally: paste two lists, compare, export
"""

import logging
from typing import Any, Dict, List, Tuple

import streamlit as st

from .export import EXPORT_FILENAME, to_csv
from .io_utils import SUPPORTED_EXTENSIONS, FileHandler
from .lookup import CATEGORY_LABELS, explain_handle, find_handles
from .models import ComparisonReport
from .normalize import extract_handles
from .org_filter import load_org_hints
from .pipeline import ComparisonPipeline


logger = logging.getLogger(__name__)


@st.cache_data(show_spinner=False, max_entries=32)
def run_comparison(following_text: str, followers_text: str,
                   exclude_orgs: bool, org_hints: Tuple[str, ...]) -> ComparisonReport:
    pipeline = ComparisonPipeline({'exclude_orgs': exclude_orgs, 'org_hints': org_hints})
    return pipeline.run(following_text, followers_text)


class FollowBackCheckerUI:
    def __init__(self):
        self.file_handler = FileHandler()
        # Initialize session state for the two inputs
        if 'following_text' not in st.session_state:
            st.session_state.following_text = ""
        if 'followers_text' not in st.session_state:
            st.session_state.followers_text = ""
        if 'load_error' not in st.session_state:
            st.session_state.load_error = None

    def run(self):
        """Main UI rendering method"""
        # Header
        st.title("Instagram Follow-Back Checker")
        st.markdown("Paste your lists below. Everything runs locally: no login, no uploads to any server.")

        # Input section
        self._render_input_section()

        # Options section
        options = self._render_options_section()

        report = run_comparison(
            st.session_state.following_text,
            st.session_state.followers_text,
            options['exclude_orgs'],
            tuple(options['org_hints']),
        )

        self._render_actions(report)
        self._render_results_section(report)
        self._render_lookup_section(report)

    def _render_input_section(self):
        """Render the two list inputs"""
        if st.session_state.load_error:
            st.error(f"Could not load file: {st.session_state.load_error}")
            st.session_state.load_error = None

        col1, col2 = st.columns(2)

        with col1:
            self._render_list_input(
                "Following",
                "following_text",
                "Paste your Following list here (one username per line, or raw text copied from Instagram)",
                "Tip: you can paste the messy text straight from Instagram, it gets cleaned.",
            )

        with col2:
            self._render_list_input(
                "Followers",
                "followers_text",
                "Paste your Followers list here (one username per line, or raw text copied from Instagram)",
                "If Instagram truncates the list, use Settings → Your activity → Download your information for full data.",
            )

    def _render_list_input(self, title: str, state_key: str, placeholder: str, tip: str):
        count = len(extract_handles(st.session_state.get(state_key, "")))

        st.subheader(title)
        st.text_area(title, key=state_key, placeholder=placeholder, height=260, label_visibility="collapsed")
        st.caption(f"{count} handles")
        st.caption(tip)

        upload_key = f"{state_key}_upload"
        st.file_uploader(
            f"Load {title} from file",
            type=SUPPORTED_EXTENSIONS,
            key=upload_key,
            on_change=self._append_uploaded_file,
            args=(upload_key, state_key),
            help="TXT, CSV, TSV, XLSX, or the JSON files from Instagram's data download.",
        )

    def _append_uploaded_file(self, upload_key: str, state_key: str):
        """Append an uploaded list file to its text area"""
        uploaded_file = st.session_state.get(upload_key)
        if uploaded_file is None:
            return

        try:
            text = self.file_handler.load_list_file(uploaded_file)
        except ValueError as e:
            logger.warning("Failed to load %s: %s", uploaded_file.name, e)
            st.session_state.load_error = str(e)
            return

        current = st.session_state.get(state_key, "")
        st.session_state[state_key] = f"{current}\n{text}" if current.strip() else text

    def _render_options_section(self) -> Dict[str, Any]:
        """Render display options"""
        exclude_orgs = st.checkbox(
            "Hide brands / orgs",
            value=False,
            help="Best-effort: hides handles containing words like 'official', 'club' or 'shop' from the results below.",
        )

        return {
            "exclude_orgs": exclude_orgs,
            "org_hints": load_org_hints(),
        }

    def _render_actions(self, report: ComparisonReport):
        col1, col2, _ = st.columns([1, 1, 4])

        with col1:
            st.download_button(
                "Export CSV",
                data=to_csv(report.non_followers, report.followers_only, report.mutuals),
                file_name=EXPORT_FILENAME,
                mime="text/csv",
                type="primary",
            )

        with col2:
            st.button("Clear", on_click=self._clear_inputs)

    @staticmethod
    def _clear_inputs():
        st.session_state.following_text = ""
        st.session_state.followers_text = ""

    def _render_results_section(self, report: ComparisonReport):
        """Render the three result cards"""
        col1, col2, col3 = st.columns(3)

        with col1:
            self._render_card("They don't follow you back", report.non_followers)
        with col2:
            self._render_card("You don't follow them back", report.followers_only)
        with col3:
            self._render_card("Mutuals", report.mutuals)

    def _render_card(self, title: str, items: List[str]):
        st.metric(title, len(items))
        with st.container(height=300):
            if not items:
                st.caption("No items.")
            else:
                st.markdown("\n".join(f"- `@{h}`" for h in items))

    def _render_lookup_section(self, report: ComparisonReport):
        """Explain a single handle or search by substring"""
        st.subheader("Lookup")
        following = set(report.following)
        followers = set(report.followers)

        col1, col2 = st.columns(2)

        with col1:
            query = st.text_input("Why is this handle here?", placeholder="@username")
            if query.strip():
                result = explain_handle(query, following, followers)
                if not result.handle:
                    st.warning("That is not a valid handle (3–30 characters: letters, digits, '.', '_').")
                else:
                    st.write(f"**@{result.handle}**")
                    st.write(f"Following: {'yes' if result.in_following else 'no'}")
                    st.write(f"Followers: {'yes' if result.in_followers else 'no'}")
                    st.write(f"Category: {CATEGORY_LABELS[result.category]}")

        with col2:
            pattern = st.text_input("Find handles containing", placeholder="part of a username")
            if pattern.strip():
                found = find_handles(pattern, following, followers)
                st.write(f"Following ({len(found['following'])}): {', '.join(found['following']) or '—'}")
                st.write(f"Followers ({len(found['followers'])}): {', '.join(found['followers']) or '—'}")
