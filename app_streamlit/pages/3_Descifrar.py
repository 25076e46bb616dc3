# --------------------------------------------------------------
# File: 3_Descifrar.py
# Description: Abre un sobre AES-GCM a partir de sus componentes hex.
# --------------------------------------------------------------

import streamlit as st

from envelope.crypto_sym import decrypt_with_key_hex
from envelope.errors import AuthenticationFailure, EnvelopeError

st.title("🔓 Descifrar")

key_hex = st.text_input("Clave (64 hex)", value=st.session_state.get("key_hex", ""))
nonce_hex = st.text_input("nonceHex (24 hex)")
tag_hex = st.text_input("tagHex (32 hex)")
ciphertext_hex = st.text_area("ciphertextHex")

if st.button("Descifrar", disabled=not (key_hex and nonce_hex and tag_hex)):
    try:
        plaintext = decrypt_with_key_hex(
            key_hex.strip(), nonce_hex.strip(), tag_hex.strip(), ciphertext_hex.strip()
        )
    except AuthenticationFailure:
        st.error("❌ La etiqueta no verifica: clave incorrecta o sobre manipulado.")
        st.stop()
    except EnvelopeError as exc:
        st.error(f"{type(exc).__name__}: {exc}")
        st.stop()

    st.success("✅ Etiqueta verificada")
    try:
        st.code(plaintext.decode("utf-8"))
    except UnicodeDecodeError:
        st.code(plaintext.hex())
        st.caption("El contenido no es UTF-8; se muestra en hex.")
