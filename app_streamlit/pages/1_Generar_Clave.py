# --------------------------------------------------------------
# File: 1_Generar_Clave.py
# Description: Genera claves simétricas de 256 bits desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from envelope.crypto_sym import generate_key_hex
from envelope.errors import EntropySourceUnavailable

st.title("🔑 Generar clave")

if st.button("Nueva clave AES-256"):
    try:
        # SECURITY: la clave solo vive en la sesión; no se persiste.
        st.session_state["key_hex"] = generate_key_hex()
    except EntropySourceUnavailable as exc:
        st.error(f"Sin fuente de entropía segura: {exc}")
        st.stop()

key_hex = st.session_state.get("key_hex")
if key_hex:
    st.code(key_hex)
    st.caption(f"{len(key_hex) // 2 * 8} bits | guárdala fuera de la aplicación")
else:
    st.info("Aún no hay clave en la sesión.")
