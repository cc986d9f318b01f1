"""
Streamlit UI for the CNPJ x Email record generator
Form input, results table, CSV / Excel download and transient banners
"""

import streamlit as st

from core.controller import CNPJController
from core.notifier import ERROR, Notifier
from core.validators import format_identifier_lines
from models.record import AppState, GenerationForm
from utils.config import config
from utils.output_processor import CSV, EXCEL

EXPORT_BUTTONS = (
    (CSV, "📄 Exportar CSV"),
    (EXCEL, "📊 Exportar Excel"),
)


def _format_cnpjs():
    """Runs when the CNPJ text area loses focus"""
    st.session_state.cnpjs = format_identifier_lines(st.session_state.cnpjs)


@st.fragment(run_every=1)
def _render_banner():
    """Re-drawn every second so an expired banner disappears on its own"""
    banner = st.session_state.notifier.current()
    if banner is None:
        return

    if banner.kind == ERROR:
        st.error(banner.message)
    else:
        st.success(banner.message)


class CNPJGeneratorUI:
    def __init__(self):
        # Initialize session state for persistent results
        if 'app_state' not in st.session_state:
            st.session_state.app_state = AppState()
        if 'notifier' not in st.session_state:
            st.session_state.notifier = Notifier(duration=config.BANNER_SECONDS)

        self.controller = CNPJController(st.session_state.notifier)

    def run(self):
        """Main UI rendering method"""
        st.title("🧾 Gerador de Dados CNPJ x Email")
        st.markdown("**Combine uma lista de CNPJs com uma lista de emails e exporte o resultado.**")

        self._render_form_section()
        _render_banner()
        self._render_results_section()
        self._render_export_section()

    def _render_form_section(self):
        """Render the input form"""
        st.subheader("📝 Dados de Entrada")

        col1, col2 = st.columns(2)

        with col1:
            st.text_area(
                "CNPJs (um por linha)",
                key="cnpjs",
                height=180,
                placeholder="11.222.333/0001-81",
                on_change=_format_cnpjs,
            )

        with col2:
            st.text_area(
                "Emails (um por linha)",
                key="emails",
                height=180,
                placeholder="usuario@empresa.com",
            )

        col3, col4, col5 = st.columns(3)

        with col3:
            st.selectbox("Ação", options=list(config.ACTIONS), key="action")

        with col4:
            st.text_input(
                "Vendor Name",
                key="vendor_name",
                placeholder=config.DEFAULT_VENDOR_NAME,
            )

        with col5:
            st.text_input(
                "País",
                key="country",
                max_chars=2,
                placeholder=config.DEFAULT_COUNTRY,
            )

        st.button(
            "🚀 Gerar Dados",
            key="generate",
            type="primary",
            use_container_width=True,
            on_click=self._on_generate,
        )

    def _render_results_section(self):
        """Render the generated records as a data grid (cell text, never raw markup)"""
        records = st.session_state.app_state.records

        st.subheader("📊 Resultado")
        df = self.controller.output_processor.to_dataframe(records)
        st.dataframe(df, use_container_width=True, hide_index=True)
        st.caption(f"{len(records)} registro(s)")

    def _render_export_section(self):
        """Download buttons once data exists; before that a click only reports the missing data"""
        state = st.session_state.app_state
        columns = st.columns(len(EXPORT_BUTTONS))

        for column, (mode, label) in zip(columns, EXPORT_BUTTONS):
            with column:
                if state.has_records():
                    export_file = self.controller.export(state, mode)
                    st.download_button(
                        label,
                        data=export_file.content,
                        file_name=export_file.filename,
                        mime=export_file.mime,
                        key=f"download_{mode}",
                        use_container_width=True,
                        on_click=self._on_downloaded,
                        args=(export_file.filename,),
                    )
                else:
                    st.button(
                        label,
                        key=f"export_{mode}",
                        use_container_width=True,
                        on_click=self._on_export,
                        args=(mode,),
                    )

    def _on_generate(self):
        form = GenerationForm(
            cnpj_text=st.session_state.get("cnpjs", ""),
            email_text=st.session_state.get("emails", ""),
            action=st.session_state.get("action") or "",
            vendor_name=st.session_state.get("vendor_name", ""),
            country=st.session_state.get("country", ""),
        )
        st.session_state.app_state = self.controller.generate(st.session_state.app_state, form)

    def _on_export(self, mode: str):
        self.controller.export(st.session_state.app_state, mode)

    def _on_downloaded(self, filename: str):
        self.controller.notify_downloaded(filename)
