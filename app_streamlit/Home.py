# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from envelope.config import configure_logging
from envelope.selftest import run_selftest

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Token Envelope", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 Token Envelope")
st.write("Sobres cifrados con AES-256-GCM: nonce de 96 bits, tag de 128 bits, todo en hex.")
st.info("Empieza en **Generar clave**, luego **Cifrar** y **Descifrar**.")

# Ejecuta la prueba de humo bajo demanda.
if st.button("Ejecutar selftest"):
    report = run_selftest()
    if report.ok:
        st.success("✅ Selftest OK")
    else:
        st.error("❌ Selftest fallido:\n- " + "\n- ".join(report.failures))
