# --------------------------------------------------------------
# File: 2_Fortaleza_de_Contrasena.py
# Description: Muestra la puntuación, el nivel y las recomendaciones de una contraseña.
# --------------------------------------------------------------

import streamlit as st

from api.services import validate_password
from core.models import StrengthTier

TIER_LABELS = {
    StrengthTier.VERY_WEAK: "Muy débil",
    StrengthTier.WEAK: "Débil",
    StrengthTier.MEDIUM: "Media",
    StrengthTier.STRONG: "Fuerte",
    StrengthTier.VERY_STRONG: "Muy fuerte",
}

st.title("🛡️ Fortaleza de contraseña")

password = st.text_input("Contraseña a evaluar", type="password")

if password:
    result = validate_password(password)
    st.progress(
        result.strength_score / 100.0,
        text=f"Fortaleza: {TIER_LABELS[result.strength_tier]} ({result.strength_score}/100)",
    )
    if result.is_valid:
        st.success("La contraseña cumple la longitud mínima.")
    else:
        st.error("La contraseña no es válida.")
    if result.messages:
        st.warning("Mejoras recomendadas:\n- " + "\n- ".join(result.messages))
