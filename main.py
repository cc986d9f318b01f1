"""
CNPJ x Email Record Generator
Main Streamlit application entry point
"""

import logging

import streamlit as st
from ui.streamlit_ui import CNPJGeneratorUI
from utils.config import config

def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    st.set_page_config(
        page_title="Gerador de Dados CNPJ x Email",
        page_icon="🧾",
        layout="wide",
        initial_sidebar_state="collapsed"
    )

    # Initialize and run the UI
    ui = CNPJGeneratorUI()
    ui.run()

if __name__ == "__main__":
    main()
