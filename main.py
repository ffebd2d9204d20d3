import warnings

import streamlit as st
import numpy as np
import pandas as pd
import plotly.express as px

from carbonate_calcs.constants import CASE_KNOWNS, STATE_UNITS
from carbonate_calcs.carbonate_system import carbonate_state, solve_alk_DIC
from carbonate_calcs.equilibrium import equilibrium_constants
from carbonate_calcs.exceptions import Error, RangeWarning
from carbonate_calcs.flux import air_sea_co2_flux
from carbonate_calcs.gas_properties import real_gas_props
from carbonate_calcs.salinity import salinity_to_psu
from carbonate_calcs.units import fahrenheit_to_celsius
from carbonate_calcs.water_properties import unesco_density, umol_kg_to_umol_L


# ------------------------------------ Streamlit Application ------------------------------------
st.set_page_config('Seawater Carbonate System Calculator', page_icon="🌊", layout='wide')
st.title("Seawater Carbonate System Calculator")

DEFAULTS = {'ALK': 2300.0, 'DIC': 2000.0, 'CO2': 11.0, 'pCO2': 400.0, 'pH': 8.05}

with st.expander("Input Parameters"):
    st.info("Default values")
    col1, col2 = st.columns(2)

    # value
    with col1:
        temp_input = st.number_input("Temperature", value=25.0)
        t_s = st.number_input("Salinity value", value=35.0)
        case = st.selectbox("Known pair", options=list(CASE_KNOWNS.keys()), index=2)
        name_a, name_b = CASE_KNOWNS[case]
        known_a = st.number_input(f"{name_a} ({STATE_UNITS[name_a]})", value=DEFAULTS[name_a])
        known_b = st.number_input(f"{name_b} ({STATE_UNITS[name_b]})", value=DEFAULTS[name_b])

    # unit of measure
    with col2:
        temp_unit = st.selectbox("Unit", ["°C", "°F"], index=0)
        unit_s = st.selectbox("Salinity unit", ["psu", "ppt", "mg/L"], index=0)
        wind = st.number_input("Wind speed at 10 m (m/s)", value=7.0)
        pco2_air = st.number_input("Atmospheric pCO2 (µatm)", value=420.0)

S = salinity_to_psu(t_s, unit_s)

# Temp Convert
Temp_C = fahrenheit_to_celsius(temp_input) if temp_unit == "°F" else temp_input


if st.button("Calculate"):
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", RangeWarning)
            state = carbonate_state(Temp_C, S, **{name_a: known_a, name_b: known_b})
    except Error as e:
        st.error(e.message)
        st.stop()
    for w in caught:
        st.warning(str(w.message))

    consts = equilibrium_constants(Temp_C, S)
    rho_sw = unesco_density(Temp_C, S)
    flux = air_sea_co2_flux(Temp_C, S, wind, state.pCO2, pco2_air)
    _, phi, _, _ = real_gas_props(Temp_C, 1.0)

    st.markdown(" # Results💡")

    # Two-column layout
    col1, col2 = st.columns(2)

    with col1:
        for name in ['DIC', 'CO2', 'HCO3', 'CO3', 'ALK']:
            st.metric(f"{name} ({STATE_UNITS[name]})", f"{state._asdict()[name]:.2f}")
        st.metric("DIC (µmol/L)", f"{umol_kg_to_umol_L(state.DIC, Temp_C, S):.2f}")

    with col2:
        st.metric("pH (total scale)",            f"{state.pH:.4f}")
        st.metric("pCO2 (µatm)",                 f"{state.pCO2:.2f}")
        st.metric("fCO2 (µatm)",                 f"{state.fCO2:.2f}")
        st.metric("Air-sea flux (mol/m²/yr)",    f"{flux:.3f}")
        st.metric("Density (kg/m³)",             f"{rho_sw:.3f}")
        st.metric("φ CO2, Weiss p2f / HEOS",     f"{consts.p2f:.5f} / {phi:.5f}")

    # Graphs

    # ----- pH and pCO2 vs DIC at fixed ALK --------

    st.markdown("# Graphs 📊")

    dics = np.linspace(0.85 * state.DIC, 1.1 * state.DIC, 30)
    pco2_vs_dic, _, _, _, ph_vs_dic = solve_alk_DIC(Temp_C, S, state.ALK, dics)

    df_DIC = pd.DataFrame({
        "DIC (µmol/kg)": dics,
        "pH": ph_vs_dic,
        "pCO2 (µatm)": pco2_vs_dic,
        })

    fig_pH = px.line(df_DIC, x="DIC (µmol/kg)", y="pH",
                     title=f"pH vs DIC @ ALK = {state.ALK:.0f} µmol/kg, {Temp_C:.1f} °C, S = {S:.1f}",
                     markers=True)
    fig_pH.update_traces(line_color = 'orange')
    st.plotly_chart(fig_pH)

    fig_P = px.line(df_DIC, x="DIC (µmol/kg)", y="pCO2 (µatm)",
                    title=f"pCO2 vs DIC @ ALK = {state.ALK:.0f} µmol/kg, {Temp_C:.1f} °C, S = {S:.1f}",
                    markers=True,
                    line_shape='linear')
    fig_P.update_traces(line_color = 'lightgreen')
    st.plotly_chart(fig_P)

    # ------- Bjerrum plot -------
    pHs = np.linspace(4.0, 11.0, 71)
    h = 10.0**(-pHs)
    K1, K2 = consts.K1, consts.K2
    denom = h * h + K1 * h + K1 * K2

    df_bjerrum = pd.DataFrame({
        "pH": pHs,
        "CO2": h * h / denom,
        "HCO3": K1 * h / denom,
        "CO3": K1 * K2 / denom,
        }).melt(id_vars="pH", var_name="Species", value_name="Fraction of DIC")

    fig_B = px.line(df_bjerrum, x="pH", y="Fraction of DIC", color="Species",
                    title=f"Bjerrum plot @ {Temp_C:.1f} °C, S = {S:.1f}")
    fig_B.add_vline(x=state.pH, line_dash="dash", line_color="grey")
    st.plotly_chart(fig_B)
