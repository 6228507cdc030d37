# developer's note
# to run locally: activate venv, navigate to the repo root, streamlit run gravityBrain.py

import streamlit as st

from gravity_log import (Clear, DeleteRow, EditField, RowField, SwitchTempUnit, TempUnit,
                         format_abv, format_gravity, reduce_log)
from settings_manager import build_table, load_settings

# --- SESSION STATE ---
if 'table' not in st.session_state:
    st.session_state.table = build_table(load_settings())


def dispatch(action):
    st.session_state.table = reduce_log(st.session_state.table, action)


# --- WIDGET CALLBACKS ---
def on_cell_change(row_id, field, key):
    idx = st.session_state.table.index_of(row_id)
    if idx is not None:
        dispatch(EditField(idx, field, st.session_state[key]))


def on_delete(row_id):
    idx = st.session_state.table.index_of(row_id)
    if idx is not None:
        dispatch(DeleteRow(idx))


def on_unit_change():
    chosen = TempUnit(st.session_state.unit_choice)
    if chosen is not st.session_state.table.unit:
        dispatch(SwitchTempUnit())


# --- STREAMLIT UI ---
st.set_page_config(page_title="gravityBrain", layout="wide")
st.title("gravityBrain Hydrometer Log")

table = st.session_state.table
unit_options = [u.value for u in TempUnit]

with st.sidebar:
    st.header("Assumptions")
    st.write("(1) The first reading in the log is your Original Gravity (OG).")
    st.write("(2) Temperature correction uses a standard hydrometer polynomial and is most accurate near the calibration temperature.")
    st.write("(3) Use at your own risk. Compare results with other calculators.")
    st.markdown("<br><hr>", unsafe_allow_html=True)
    st.header("Global Settings")
    st.radio("Temperature Unit", unit_options, index=unit_options.index(table.unit.value),
             key="unit_choice", on_change=on_unit_change, horizontal=True)
    st.button("CLEAR LOG", type="primary", use_container_width=True, on_click=dispatch, args=(Clear(),))

u_temp = table.unit.value
col_in, col_out = st.columns([3, 1], gap="large")

with col_in:
    st.subheader("Gravity Readings")
    with st.container(border=True):
        headers = st.columns([2, 2, 2, 2, 2, 1])
        headers[0].markdown("**Measured SG**")
        headers[1].markdown(f"**Temp ({u_temp})**")
        headers[2].markdown(f"**Calibration ({u_temp})**")
        headers[3].markdown("**Corrected SG**")
        headers[4].markdown("**ABV**")

        rows = table.display_rows()
        for i, row in enumerate(rows):
            c = st.columns([2, 2, 2, 2, 2, 1])
            for col, field, prefix in ((c[0], RowField.MEASURED_GRAVITY, "sg"),
                                       (c[1], RowField.MEASURED_TEMP, "temp"),
                                       (c[2], RowField.HYDROMETER_CAL, "cal")):
                key = f"{prefix}_{row.id}"
                col.text_input(field.value, value=row.get_raw(field), key=key,
                               label_visibility="collapsed",
                               on_change=on_cell_change, args=(row.id, field, key))
            c[3].write(format_gravity(row.corrected_gravity))
            c[4].write(format_abv(row.abv))
            if i < len(rows) - 1:
                c[5].button("🗑️", key=f"del_{row.id}", help="Delete reading",
                            on_click=on_delete, args=(row.id,))

with col_out:
    st.subheader("Batch Summary")
    readings = [r for r in table.rows if r.corrected_gravity is not None]
    if readings:
        st.info("### 🍺 Fermentation")
        st.metric("Original Gravity", format_gravity(table.original_gravity()) or "—")
        latest = readings[-1]
        st.metric("Latest Gravity", format_gravity(latest.corrected_gravity))
        st.metric("Current ABV", format_abv(latest.abv) or "—")
    else:
        st.warning("Enter a gravity, temperature and calibration to start the log.")
