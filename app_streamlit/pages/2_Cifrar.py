# --------------------------------------------------------------
# File: 2_Cifrar.py
# Description: Cifra un texto con la clave de sesión y muestra el sobre.
# --------------------------------------------------------------

import json

import streamlit as st

from envelope.crypto_sym import encrypt_with_key_hex
from envelope.errors import EnvelopeError

st.title("🔒 Cifrar")

key_hex = st.text_input("Clave (64 hex)", value=st.session_state.get("key_hex", ""))
text = st.text_area("Texto en claro")

if st.button("Cifrar con AES-GCM", disabled=not key_hex):
    try:
        env = encrypt_with_key_hex(key_hex.strip(), text)
    except EnvelopeError as exc:
        st.error(f"{type(exc).__name__}: {exc}")
        st.stop()

    st.success("Texto cifrado (AES-GCM-256).")
    st.code(
        f"AES-GCM-256 | nonce={len(env.nonce) * 8} bits | tag={len(env.tag) * 8} bits\n"
        f"ct_len={len(env.ciphertext)} bytes"
    )
    st.markdown("### Sobre")
    st.code(json.dumps(env.to_wire(), indent=2), language="json")
