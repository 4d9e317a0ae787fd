"""
Instagram Follow-Back Checker
Main Streamlit application entry point
Client-only comparison of Following and Followers lists
"""

import logging

import streamlit as st
from followcheck.ui import FollowBackCheckerUI

def main():
    st.set_page_config(
        page_title="Instagram Follow-Back Checker",
        page_icon="🔁",
        layout="wide",
        initial_sidebar_state="collapsed"
    )
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Initialize and run the UI
    ui = FollowBackCheckerUI()
    ui.run()

if __name__ == "__main__":
    main()
