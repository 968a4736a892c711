import io
import logging
import warnings
import streamlit as st
import pandas as pd
from core.models import SpecFamily, HarnessRequest
from core.errors import HarnessError
from standards.harness_logic import HarnessLogic
from standards.wire_tables import WIRE_TABLES, CONTACT_RESISTANCE, TEMPERATURE_BASIS_C

logging.basicConfig(level=logging.ERROR)

# --- Page Config ---
st.set_page_config(
    page_title="Resistencia de Arnés",
    page_icon="🔌",
    layout="wide",
    initial_sidebar_state="expanded"
)

SPEC_OPTIONS = ["Auto", "33", "44", "0"]

# --- Session State Init ---
INPUT_COLUMNS = ["Segmento", "AWG", "Hilos", "Longitud (ft)", "Spec"]

if 'segments_df' not in st.session_state:
    st.session_state.segments_df = pd.DataFrame(columns=INPUT_COLUMNS)

def parse_spec(value):
    # Empty data_editor cells arrive as None / NaN / pd.NA
    if value is None or pd.isna(value):
        return None
    return SpecFamily.from_choice(value)

def run_calculation(request):
    """Returns (result, notes). HarnessError propagates to the caller."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = HarnessLogic.calculate(request)
    notes = list(result.notes) or [str(w.message) for w in caught]
    return result, notes

# --- Helper: Calculate Row ---
def calculate_row_results(row):
    try:
        request = HarnessRequest(
            gauge=int(row["AWG"]),
            strand_count=int(row["Hilos"]),
            length_ft=float(row["Longitud (ft)"]),
            spec_family=parse_spec(row["Spec"]),
        )
        res, notes = run_calculation(request)
        return pd.Series({
            "Spec usada": res.spec_family.label + (" (auto)" if res.spec_inferred else ""),
            "Ohm/ft": res.ohms_per_foot,
            "Ohm/contacto": res.ohms_per_contact,
            "Resistencia (Ohm)": round(res.resistance_ohms, 6),
            "Notas": "; ".join(notes),
        })
    except (HarnessError, ValueError, TypeError) as e:
        return pd.Series({"Notas": f"Error: {str(e)}"})

def reference_frames():
    frames = {}
    for family, table in WIRE_TABLES.items():
        frames[family.description] = pd.DataFrame(table, columns=["AWG", "Ohm/ft"])
    frames["Contacto D38999"] = pd.DataFrame(CONTACT_RESISTANCE, columns=["AWG", "Ohm/contacto"])
    return frames

# --- Helper: Export Excel ---
def to_excel(df):
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        df.to_excel(writer, index=False, sheet_name='Segmentos')
        start = 0
        for title, frame in reference_frames().items():
            pd.DataFrame([[title]]).to_excel(writer, index=False, header=False, sheet_name='Referencia', startrow=start)
            frame.to_excel(writer, index=False, sheet_name='Referencia', startrow=start + 1)
            start += len(frame) + 3
    return output.getvalue()

# --- Sidebar ---
with st.sidebar:
    st.title("Tablas de Referencia")
    st.caption(f"Valores a {TEMPERATURE_BASIS_C:.0f}°C / 68°F")
    for title, frame in reference_frames().items():
        st.markdown(f"**{title}**")
        st.dataframe(frame, hide_index=True, use_container_width=True)

# --- Main Area ---
st.markdown("# 🔌 Resistencia de Arnés (M22759 / D38999)")
st.markdown("---")

with st.expander("🧮 Segmento Individual", expanded=True):
    c1, c2, c3, c4 = st.columns(4)
    gauge = c1.number_input("Calibre (AWG)", -4, 40, 22, step=1)
    strands = c2.number_input("Hilos en paralelo", 1, 100, 1, step=1)
    length = c3.number_input("Longitud (ft)", 0.0, value=10.0, step=1.0)
    spec_choice = c4.selectbox("Especificación", SPEC_OPTIONS,
                               help="Auto: /33 para 20 AWG o menor, /44 para 12-18 AWG, tabla online para el resto.")

    try:
        res, notes = run_calculation(HarnessRequest(
            gauge=int(gauge), strand_count=int(strands), length_ft=float(length),
            spec_family=parse_spec(spec_choice)
        ))
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Resistencia", f"{res.resistance_ohms:.4f} Ω")
        m2.metric("Ohm/ft", f"{res.ohms_per_foot:g}")
        m3.metric("Ohm/contacto", f"{res.ohms_per_contact:g}")
        m4.metric("Especificación", res.spec_family.label + (" (auto)" if res.spec_inferred else ""))
        for note in notes:
            st.warning(note)
    except HarnessError as e:
        st.error(str(e))

    if st.button("Agregar a Tabla", type="primary", use_container_width=True):
        new_row = {
            "Segmento": f"Segmento {len(st.session_state.segments_df) + 1}",
            "AWG": int(gauge), "Hilos": int(strands), "Longitud (ft)": float(length), "Spec": spec_choice,
        }
        st.session_state.segments_df = pd.concat([st.session_state.segments_df, pd.DataFrame([new_row])], ignore_index=True)
        st.rerun()

st.markdown("### 📋 Tabla de Segmentos (Editable)")

if st.button("🗑️ Borrar Tabla", type="secondary"):
    st.session_state.segments_df = pd.DataFrame(columns=INPUT_COLUMNS)
    st.rerun()

df_to_show = st.session_state.segments_df.copy()

if not df_to_show.empty:
    results = df_to_show.apply(calculate_row_results, axis=1)
    df_full = pd.concat([df_to_show, results], axis=1)
else:
    result_cols = ["Spec usada", "Ohm/ft", "Ohm/contacto", "Resistencia (Ohm)", "Notas"]
    df_full = pd.concat([df_to_show, pd.DataFrame(columns=result_cols)], axis=1)

column_config = {
    "AWG": st.column_config.NumberColumn(step=1, width="small"),
    "Hilos": st.column_config.NumberColumn(min_value=1, step=1, width="small"),
    "Longitud (ft)": st.column_config.NumberColumn(min_value=0, step=0.5, format="%.1f"),
    "Spec": st.column_config.SelectboxColumn(options=SPEC_OPTIONS, width="small"),
}

disabled_cols = ["Spec usada", "Ohm/ft", "Ohm/contacto", "Resistencia (Ohm)", "Notas"]

edited_df = st.data_editor(
    df_full,
    key="editor",
    use_container_width=True,
    num_rows="dynamic",
    column_config=column_config,
    disabled=disabled_cols,
)

edited_inputs = edited_df[INPUT_COLUMNS]
if not edited_inputs.equals(st.session_state.segments_df):
    st.session_state.segments_df = edited_inputs
    st.rerun()

if not df_full.empty:
    st.download_button(
        "📥 Descargar Resultados (Excel)",
        data=to_excel(df_full),
        file_name="resistencia_arnes.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
