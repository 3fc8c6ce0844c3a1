# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from core.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Text Cipher", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 Text Cipher")
st.write(
    "Cifra y descifra texto con una contraseña (PBKDF2-HMAC-SHA256 + AES-256-CBC) "
    "y comprueba la fortaleza de tus contraseñas."
)
st.info("Ve a **Cifrar y Descifrar** para proteger un texto o recuperarlo.")
st.warning(
    "El sobre cifrado no lleva etiqueta de autenticación: solo el relleno PKCS#7 "
    "delata una contraseña incorrecta. No garantiza integridad frente a manipulaciones."
)
