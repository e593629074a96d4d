import streamlit as st

from core.password_utils import AMBIGUOUS, MAX_LENGTH, MIN_LENGTH


def render():
    st.markdown(
        """
        <style>
          .title{
            font-size: 44px;
            line-height: 1.1;
            margin: .2em 0 .1em 0;
            letter-spacing: .5px;
          }
          @media (max-width: 768px){
            .title{ font-size: 32px; }
          }
          @media (prefers-color-scheme: dark){
            .title{ color: #f3f4f6; }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown('<div class="title">Keysmith 🔐</div>', unsafe_allow_html=True)

    st.markdown(
        f"Generate strong passwords of {MIN_LENGTH}–{MAX_LENGTH} characters. "
        "Every selected character set is guaranteed to appear at least once, "
        "and all randomness comes from the operating system's secure generator."
    )
    st.markdown(
        "**Easy to read** drops look-alike characters (`"
        + " ".join(sorted(AMBIGUOUS))
        + "`) so passwords can be dictated or typed from paper."
    )

    st.info("Pick **Password Generator** in the **sidebar** to start.")
