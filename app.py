#!/usr/bin/env python
# coding: utf-8

import requests
import streamlit as st

from fontifier import Engine, Gallery, PackError, Settings, load_catalog, load_pack, load_packs
from fontifier.logging_adapter import get_configured_logger
from fontifier.rng import hash_str

log = get_configured_logger("app")


# ================== header (Fraktur for headings only) ==================
def to_fraktur(text):
    normal = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    fraktur = [
        "𝔄𝔅ℭ𝔇𝔈𝔉𝔊ℌℑ𝔍𝔎𝔏𝔐𝔑𝔒𝔓𝔔ℜ𝔖𝔗𝔘𝔙𝔚𝔛𝔜ℨ",
        "𝔞𝔟𝔠𝔡𝔢𝔣𝔤𝔥𝔦𝔧𝔨𝔩𝔪𝔫𝔬𝔭𝔮𝔯𝔰𝔱𝔲𝔳𝔴𝔵𝔶𝔷"
    ]
    mapping = {c: f for c, f in zip(normal, fraktur[0] + fraktur[1])}
    return ''.join(mapping.get(ch, ch) for ch in text)


def parse_seed(raw):
    """Integers are used as-is, anything else is hashed (same text, same seed)."""
    raw = raw.strip()
    try:
        return int(raw, 0) & 0xFFFFFFFF
    except ValueError:
        return hash_str(raw)


# ================== session ==================
def boot():
    settings = Settings.from_env()
    extra = load_packs(settings.packs)
    catalog = load_catalog(extra)
    engine = Engine.from_settings(settings, catalog)
    log(f"boot: {len(catalog)} styles, seed={engine.global_seed}")
    st.session_state["settings"] = settings
    st.session_state["extra"] = extra
    st.session_state["gallery"] = Gallery.from_settings(engine, settings)
    st.session_state["text"] = settings.default_text


if "gallery" not in st.session_state:
    boot()

gallery = st.session_state["gallery"]


def on_text():
    gallery.set_text(st.session_state["text"])


def on_clear():
    gallery.clear()
    st.session_state["text"] = ""


def on_seed():
    raw = st.session_state["seed"]
    seed = parse_seed(raw) if raw.strip() else st.session_state["settings"].global_seed
    gallery.engine = Engine(gallery.engine.catalog, global_seed=seed, segment_mode=gallery.engine.segment_mode)


# ================== UI ==================
st.set_page_config(page_title="Fontifier", page_icon="✨", layout="wide")
st.markdown("<h1 style='font-size:2.4em; font-family:serif;'>✨ Fontifier</h1>", unsafe_allow_html=True)
st.markdown(f"<div style='font-size:1.4em; color:#5b0a0a; margin-bottom:16px'>{to_fraktur('Type once, wear it everywhere.')}</div>", unsafe_allow_html=True)

with st.sidebar:
    st.markdown("### 📦 Style packs")
    pack_src = st.text_input("Pack URL or path (JSON)", value="")
    if st.button("Load pack") and pack_src.strip():
        try:
            records = load_pack(pack_src.strip())
            st.session_state["extra"] = st.session_state["extra"] + records
            gallery.reload(load_catalog(st.session_state["extra"]))
            st.success(f"Loaded {len(records)} style(s).")
        except PackError as e:
            st.error(f"Pack failed: {e}")
        except requests.RequestException as e:
            st.error(f"Pack download failed: {e}")
    st.caption(f"{len(gallery.styles)} styles • seed `{gallery.engine.global_seed}`")

# Controls
colA, colB, colC = st.columns(3)
with colA:
    st.button("🎲 Remix all", on_click=gallery.remix_all)
with colB:
    st.button("🗑️ Clear", on_click=on_clear)
with colC:
    st.button("Next ⟳", on_click=gallery.next_page)

st.text_input("Seed (optional for consistent styling)", value="", key="seed", on_change=on_seed)
st.text_area("Enter text:", key="text", on_change=on_text)

if gallery.engine.catalog is None or gallery.engine.catalog.is_empty:
    st.warning("No styles loaded.")
else:
    st.caption(f"Page {gallery.page_index + 1} / {gallery.page_count()}")
    for category, cards in gallery.sections():
        st.subheader(category)
        cols = st.columns(3)
        for i, card in enumerate(cards):
            with cols[i % 3]:
                st.markdown(f"**{card.style.name}**")
                st.code(card.preview or " ", language="text")
                st.button("Remix 🎲", key=f"remix-{card.key}", on_click=gallery.remix, args=(card.ordinal,))
