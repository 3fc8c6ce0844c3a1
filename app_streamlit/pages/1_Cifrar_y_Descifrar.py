# --------------------------------------------------------------
# File: 1_Cifrar_y_Descifrar.py
# Description: Cifra y descifra texto con contraseña y recuerda la última sesión.
# --------------------------------------------------------------

import logging

import streamlit as st

from core.session import CipherSession, SessionState
from core.settings import SettingsError, load_settings, save_settings

logger = logging.getLogger(__name__)

# Presenta el título de la sección.
st.title("🔏 Cifrar y Descifrar")

# Recupera la configuración persistida solo una vez por sesión de navegador.
if "settings" not in st.session_state:
    st.session_state["settings"] = load_settings()
settings = st.session_state["settings"]

if "cipher_session" not in st.session_state:
    st.session_state["cipher_session"] = CipherSession(
        password=settings.last_used_password or "",
        encrypted_text=settings.last_encrypted_text or "",
    )
session: CipherSession = st.session_state["cipher_session"]

session.text = st.text_area("Texto", value=session.text, height=150)
session.password = st.text_input("Contraseña", value=session.password, type="password")
session.encrypted_text = st.text_area("Texto cifrado (Base64)", value=session.encrypted_text, height=120)
remember = st.checkbox("Recordar contraseña", value=settings.remember_password)

col_enc, col_dec = st.columns(2)
encrypt_clicked = col_enc.button("Cifrar", disabled=not session.can_encrypt())
decrypt_clicked = col_dec.button("Descifrar", disabled=not session.can_decrypt())

if encrypt_clicked or decrypt_clicked:
    with st.spinner("Derivando clave..."):
        result = session.encrypt() if encrypt_clicked else session.decrypt()

    if result is not None:
        # SECURITY: la contraseña solo se guarda si el usuario lo ha pedido.
        updated = settings.model_copy(
            update={
                "remember_password": remember,
                "last_used_password": session.password,
                "last_encrypted_text": session.encrypted_text,
            }
        )
        try:
            st.session_state["settings"] = save_settings(updated)
        except SettingsError as exc:
            logger.error("%s", exc)
            st.warning("No se ha podido guardar la configuración.")
        st.rerun()

if session.state is SessionState.ERROR:
    st.error(session.status_message)
elif session.status_message:
    st.success(session.status_message)

# Bloque copiable con el resultado cifrado.
if session.encrypted_text:
    st.markdown("### Resultado cifrado")
    st.code(session.encrypted_text)
