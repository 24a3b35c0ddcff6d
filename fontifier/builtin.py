# ================== Built-in style catalog ==================
# Raw records in the same shape JSON packs use; Catalog.from_sources normalizes them.
from __future__ import annotations

import re
import string
import unicodedata

from .catalog import Catalog
from .graphemes import is_letter_or_number, segment
from .mapping import apply_combining, apply_map, sanitize_visible, spaced, thin_space, weave
from .rng import pick

AZ = string.ascii_uppercase
az = string.ascii_lowercase
D10 = string.digits

FEATURED = "Featured Styles"
CREATIVE = "Creative & Mixed Styles"
ALGORITHMIC = "Algorithmic & Combining Marks"
EXOTIC = "Exotic & International Styles"
FLOURISH = "Flourish Decorated"
CLASSIC = "Classic Styles"
COMPLEX = "Complex / Glitched"
FUSION = "Symbol–Alphabet Fusion"


def _zip(keys, glyphs):
    """Pair keys with whitespace-separated glyphs (a glyph may carry marks)."""
    return dict(zip(keys, glyphs.split()))


def _alphabet(upper, lower, digits=None):
    table = {**_zip(AZ, upper), **_zip(az, lower)}
    if digits:
        table.update(_zip(D10, digits))
    return table


# ================== Alphabets ==================
SCRIPT = ("𝓐 𝓑 𝓒 𝓓 𝓔 𝓕 𝓖 𝓗 𝓘 𝓙 𝓚 𝓛 𝓜 𝓝 𝓞 𝓟 𝓠 𝓡 𝓢 𝓣 𝓤 𝓥 𝓦 𝓧 𝓨 𝓩",
          "𝓪 𝓫 𝓬 𝓭 𝓮 𝓯 𝓰 𝓱 𝓲 𝓳 𝓴 𝓵 𝓶 𝓷 𝓸 𝓹 𝓺 𝓻 𝓼 𝓽 𝓾 𝓿 𝔀 𝔁 𝔂 𝔃")
FRAKTUR = ("𝔄 𝔅 ℭ 𝔇 𝔈 𝔉 𝔊 ℌ ℑ 𝔍 𝔎 𝔏 𝔐 𝔑 𝒪 𝔓 𝔔 ℜ 𝔖 𝔗 𝔘 𝔙 𝔚 𝔛 𝔜 ℨ",
           "𝔞 𝔟 𝔠 𝔡 𝔢 𝔣 𝔤 𝔥 𝔦 𝔧 𝔨 𝔩 𝔪 𝔫 𝔬 𝔭 𝔮 𝔯 𝔰 𝔱 𝔲 𝔳 𝔴 𝔵 𝔶 𝔷")
DOUBLE = ("𝔸 𝔹 ℂ 𝔻 𝔼 𝔽 𝔾 ℍ 𝕀 𝕁 𝕂 𝕃 𝕄 ℕ 𝕆 ℙ ℚ ℝ 𝕊 𝕋 𝕌 𝕍 𝕎 𝕏 𝕐 ℤ",
          "𝕒 𝕓 𝕔 𝕕 𝕖 𝕗 𝕘 𝕙 𝕚 𝕛 𝕜 𝕝 𝕞 𝕟 𝕠 𝕡 𝕢 𝕣 𝕤 𝕥 𝕦 𝕧 𝕨 𝕩 𝕪 𝕫")
MONO = ("𝙰 𝙱 𝙲 𝙳 𝙴 𝙵 𝙶 𝙷 𝙸 𝙹 𝙺 𝙻 𝙼 𝙽 𝙾 𝙿 𝚀 𝚁 𝚂 𝚃 𝚄 𝚅 𝚆 𝚇 𝚈 𝚉",
        "𝚊 𝚋 𝚌 𝚍 𝚎 𝚏 𝚐 𝚑 𝚒 𝚓 𝚔 𝚕 𝚖 𝚗 𝚘 𝚙 𝚚 𝚛 𝚜 𝚝 𝚞 𝚟 𝚠 𝚡 𝚢 𝚣")
FULL = ("Ａ Ｂ Ｃ Ｄ Ｅ Ｆ Ｇ Ｈ Ｉ Ｊ Ｋ Ｌ Ｍ Ｎ Ｏ Ｐ Ｑ Ｒ Ｓ Ｔ Ｕ Ｖ Ｗ Ｘ Ｙ Ｚ",
        "ａ ｂ ｃ ｄ ｅ ｆ ｇ ｈ ｉ ｊ ｋ ｌ ｍ ｎ ｏ ｐ ｑ ｒ ｓ ｔ ｕ ｖ ｗ ｘ ｙ ｚ")
BOLD = ("𝗔 𝗕 𝗖 𝗗 𝗘 𝗙 𝗚 𝗛 𝗜 𝗝 𝗞 𝗟 𝗠 𝗡 𝗢 𝗣 𝗤 𝗥 𝗦 𝗧 𝗨 𝗩 𝗪 𝗫 𝗬 𝗭",
        "𝗮 𝗯 𝗰 𝗱 𝗲 𝗳 𝗴 𝗵 𝗶 𝗷 𝗸 𝗹 𝗺 𝗻 𝗼 𝗽 𝗾 𝗿 𝘀 𝘁 𝘂 𝘃 𝘄 𝘅 𝘆 𝘇")
ITALIC = ("𝘈 𝘉 𝘊 𝘋 𝘌 𝘍 𝘎 𝘏 𝘐 𝘑 𝘒 𝘓 𝘔 𝘕 𝘖 𝘗 𝘘 𝘙 𝘚 𝘛 𝘜 𝘝 𝘞 𝘟 𝘠 𝘡",
          "𝘢 𝘣 𝘤 𝘥 𝘦 𝘧 𝘨 𝘩 𝘪 𝘫 𝘬 𝘭 𝘮 𝘯 𝘰 𝘱 𝘲 𝘳 𝘴 𝘵 𝘶 𝘷 𝘸 𝘹 𝘺 𝘻")
CURSIVE = ("𝒜 ℬ 𝒞 𝒟 ℰ ℱ 𝒢 ℋ ℐ 𝒥 𝒦 ℒ ℳ 𝒩 𝒪 𝒫 𝒬 ℛ 𝒮 𝒯 𝒰 𝒱 𝒲 𝒳 𝒴 𝒵",
           "𝒶 𝒷 𝒸 𝒹 ℯ 𝒻 ℊ 𝒽 𝒾 𝒿 𝓀 𝓁 𝓂 𝓃 ℴ 𝓅 𝓆 𝓇 𝓈 𝓉 𝓊 𝓋 𝓌 𝓍 𝓎 𝓏")
BLACKLETTER = ("𝕬 𝕭 𝕮 𝕯 𝕰 𝕱 𝕲 𝕳 𝕴 𝕵 𝕶 𝕷 𝕸 𝕹 𝕺 𝕻 𝕼 𝕽 𝕾 𝕿 𝖀 𝖁 𝖂 𝖃 𝖄 𝖅",
               "𝖆 𝖇 𝖈 𝖉 𝖊 𝖋 𝖌 𝖍 𝖎 𝖏 𝖐 𝖑 𝖒 𝖓 𝖔 𝖕 𝖖 𝖗 𝖘 𝖙 𝖚 𝖛 𝖜 𝖝 𝖞 𝖟")
CIRCLED = ("Ⓐ Ⓑ Ⓒ Ⓓ Ⓔ Ⓕ Ⓖ Ⓗ Ⓘ Ⓙ Ⓚ Ⓛ Ⓜ Ⓝ Ⓞ Ⓟ Ⓠ Ⓡ Ⓢ Ⓣ Ⓤ Ⓥ Ⓦ Ⓧ Ⓨ Ⓩ",
           "ⓐ ⓑ ⓒ ⓓ ⓔ ⓕ ⓖ ⓗ ⓘ ⓙ ⓚ ⓛ ⓜ ⓝ ⓞ ⓟ ⓠ ⓡ ⓢ ⓣ ⓤ ⓥ ⓦ ⓧ ⓨ ⓩ")
RUNIC = "ᚨ ᛒ ᚲ ᛞ ᛖ ᚠ ᚷ ᚺ ᛁ ᛃ ᚲ ᛚ ᛗ ᚾ ᛟ ᛈ ᛩ ᚱ ᛊ ᛏ ᚢ ᚡ ᚹ ᛪ ᛦ ᛉ"

BASES = {
    "SCRIPT": SCRIPT,
    "FRAKTUR": FRAKTUR,
    "DOUBLE": DOUBLE,
    "MONO": MONO,
    "FULL": FULL,
}

SCRIPT_MAP = _alphabet(*SCRIPT)
MONO_MAP = _alphabet(*MONO)
BLACKLETTER_MAP = _alphabet(*BLACKLETTER)
ITALIC_MAP = _alphabet(*ITALIC)
CURSIVE_MAP = _alphabet(*CURSIVE)
CIRCLED_MAP = _alphabet(*CIRCLED)
FULL_MAP = _alphabet(*FULL)
RUNIC_MAP = _zip(AZ, RUNIC)

SUPERSCRIPT_MAP = _zip(az, "ᵃ ᵇ ᶜ ᵈ ᵉ ᶠ ᵍ ʰ ⁱ ʲ ᵏ ˡ ᵐ ⁿ ᵒ ᵖ ۹ ʳ ˢ ᵗ ᵘ ᵛ ʷ ˣ ʸ ᶻ")
SUBSCRIPT_MAP = _zip(az, "ₐ ♭ ꜀ Ꮷ ₑ բ ₉ ₕ ᵢ ⱼ ₖ ₗ ₘ ₙ ₒ ₚ ૧ ᵣ ₛ ₜ ᵤ ᵥ w ₓ ᵧ ₂")

# ================== Remix builder ==================
REMIX_VOWELS_RE = re.compile("[AEIOUaeiou𝓪𝓮𝓲𝓸𝓾]")
REMIX_TAGS = ("unique", "remix", "readable")


def compose_map(upper="SCRIPT", lower="SCRIPT", overrides=None):
    table = {**_zip(AZ, BASES[upper][0]), **_zip(az, BASES[lower][1])}
    table.update(overrides or {})
    return table


def _micro(g, rng, micro):
    """Per-letter tweaks; each roll only happens when its switch is on."""
    if not is_letter_or_number(g):
        return g
    t = g
    if micro.get("dot_vowels") and REMIX_VOWELS_RE.search(g) and rng() < 0.12:
        t += "\u0307"
    if micro.get("underline") and rng() < 0.08:
        t += "\u0332"
    if micro.get("tilde") and rng() < 0.08:
        t += "\u0303"
    if micro.get("slash") and rng() < 0.06:
        t += "\u0335"
    return t


def remix_style(name, frame=("", ""), bases=("SCRIPT", "SCRIPT"), overrides=None,
                palette=(), category=CREATIVE, **micro):
    table = compose_map(bases[0], bases[1], overrides)
    pre, post = frame
    symbol_chance = micro.get("symbol_chance", 0.6)

    def transform(text, rng):
        core = apply_map(text, table)
        core = sanitize_visible("".join(_micro(g, rng, micro) for g in segment(core)))

        if micro.get("allow_symbol", True) and palette and symbol_chance > rng():
            sym = pick(rng, palette)
            words = [w for w in re.split(r"\b", core) if w]
            if len(words) > 2:
                words.insert(len(words) // 2, thin_space(sym))
                core = "".join(words)
            else:
                core = sym + thin_space(core) + sym

        core = unicodedata.normalize("NFC", core)
        return pre + thin_space(core) + post

    return dict(name=name, category=category, map=table, transform=transform,
                decorates=True, tags=REMIX_TAGS)


# ================== Transforms ==================
VOWELS = frozenset("AEIOUaeiou")


def cyborg_construct(text, rng):
    out = []
    for g in segment(text):
        if g in VOWELS:
            out.append(RUNIC_MAP.get(g.upper(), g))
        else:
            out.append(MONO_MAP.get(g, g))
    return unicodedata.normalize("NFC", "".join(out))


DEMONIC_MARKS = ("\u031b", "\u0317", "\u0338", "\u0321", "\u0322")


def demonic_script(text, rng):
    out = []
    for g in segment(apply_map(text, BLACKLETTER_MAP)):
        if g.strip() and rng() < 0.4 and is_letter_or_number(g):
            g += pick(rng, DEMONIC_MARKS)
        out.append(g)
    return unicodedata.normalize("NFC", "".join(out))


def bubble_pop(text, rng):
    out, i = [], 0
    for g in segment(text):
        if not g.strip():
            out.append(g)
            continue
        out.append(CIRCLED_MAP.get(g, g) if i % 2 == 0 else g)
        i += 1
    return unicodedata.normalize("NFC", "".join(out))


def super_sub_mix(text, rng):
    out = []
    for g in segment(text):
        r = rng()
        if r < 0.33:
            g = SUPERSCRIPT_MAP.get(g.lower(), g)
        elif r < 0.66:
            g = SUBSCRIPT_MAP.get(g.lower(), g)
        out.append(g)
    return unicodedata.normalize("NFC", "".join(out))


def vaporwave(text, rng):
    return " ".join(segment(apply_map(text, FULL_MAP)))


GLITCH_MARKS = (
    "\u030d", "\u030e", "\u0304", "\u0305", "\u033f", "\u0311", "\u0306", "\u0310",
    "\u0352", "\u0357", "\u0358", "\u0325", "\u0324", "\u0323", "\u0326", "\u032e",
    "\u0330", "\u0331", "\u0332", "\u0333", "\u0334", "\u0335", "\u0336", "\u034f",
    "\u035c", "\u035d", "\u035e", "\u035f", "\u0360", "\u0361", "\u0362",
)


def corrupted_glitch(text, rng):
    return apply_combining(text, GLITCH_MARKS, rng, 3, 8)


def encased(text, rng):
    out = (g + "\u0305\u0332" if is_letter_or_number(g) else g for g in segment(text))
    return unicodedata.normalize("NFC", "".join(out))


SPARKS = ("\u030a", "\u0359", "\u0307", "\u0323", "\u0358", "˚", "˙")


def ethereal_sparkles(text, rng):
    out = []
    for g in segment(text):
        if g.strip() and is_letter_or_number(g) and rng() < 0.6:
            n = int(rng() * 2) + 1
            g += "".join(pick(rng, SPARKS) for _ in range(n))
        out.append(g)
    return unicodedata.normalize("NFC", "".join(out))


def framed(prefix, suffix, table=None):
    """Wrap the (optionally mapped) text between fixed flourishes."""
    def transform(text, rng):
        body = apply_map(text, table) if table else text
        return prefix + body + suffix
    return transform


def heavy_frame(text, rng):
    bar = "═" * len(segment(text))
    return f"╔═{bar}═╗\n║  {text}  ║\n╚═{bar}═╝"


FIRE_MAP = _zip(AZ, "ค ๒ ς ๔ є Ŧ ﻮ ђ เ ן к ɭ ๓ ภ ๏ ק ợ г ร Շ ย ש ฬ א ץ չ")
PASTEL_MAP = _zip(AZ, "🄰 🄱 🄲 𝟄 🄴 𝟄 𝖄 🄷 🄸 🄹 🄺 🄻 𝄼 𝟄 𝄾 🄿 🅀 🅁 🅂 🅃 🅄 🅅 🆆 🅇 🅈 🅉")
HEARTS_MAP = _zip(az, "α в ¢ ∂ є ƒ g н ι נ к ℓ м η σ ρ q я ѕ т υ ν ω χ у z")
ECLECTIC_MAP = _zip(AZ, "α ᵇ ⓒ Ｄ Ⓔ ℱ Ꮆ 卄 𝐈 𝓳 𝕜 Ĺ Ｍ 𝐧 Ỗ Ƥ q 𝐫 𝓼 𝐓 ย ⓥ ｗ 𝔁 𝐲 ｚ")
EMBLEM_MAP = _zip(AZ, "ⓐ в 匚 ∂ ᵉ Ŧ 𝐆 𝐡 ι 𝐉 Ҝ ｌ м Ⓝ ㄖ ρ 𝓺 尺 𝓼 Ｔ Ⓤ ש ω 𝔵 ｙ ž")

# ================== Complex / glitched maps ==================
GLITCH_HOP = _zip(AZ, "A 🅑 C Ꮄ 𝙀 F 𝓖 H\u0336 🇮 ʝ K L M N 𝙾 ｱ Q Ɽ 丂 𝒯 U ᐯ 🇼 א ░Y░ 𝚉")
BRACKET_MIX = _zip(AZ, "𝘼 ⦑B⦒ C 𝘿 𝘌 𝙵 ᧁ 🅷 ⓘ 🄹 𝔎 ㄥ M ℕ օ P\u20dd ᑫ 𝑅 𝕊 T 𝐔 V\u0336 ฬ ⦑X⦒ Y ⦑Z⦒")
CURSED_SCRIPT = _zip(AZ, "A\u0337 B\u20dd ƈ ɖ 𝐄 F\u0336 G 𝘏 i J 𝒦 ⓛ Ｍ N ₒ 🄿 ᕴ R\u0337 ⦑S⦒ T\u0337 🆄 V ω x ¥ Z")
DIGITAL_DECAY = _zip(AZ, "A\u0336 ᗷ ᄃ ░D░ 乇 ᠻ 🇬 H 𝐼 ʝ K\u20dd ℓ M ℕ ට ⦏P\u0302⦎ Q\u0336 ⦑R⦒ 🅂 Ꮦ 𝘜 ۷ ᭙ 𝓧 Ꭹ Z\u0334")
ROYAL_MIX = _zip(AZ, "ค ᴮ 匚 D\u20dd 𝙴 £ Ⓖ Ή ℑ ᒚ 𝙺 𝙻 🄼 𝔑 O Ꭾ Q\u0337 r ░S░ 𝕋 ⦑U⦒ V\u0334 W\u0336 ⫸⫷ у 𝒵")
ELEGANT_GLITCH = _zip(AZ, "ǟ B 𝙲 D 𝘌 ⦑F⦒ G\u0334 ░H░ 𝕀 🇯 𝐊 ⓛ 𝕄 ᘉ 𝓞 ᑭ 𝐐 ᥅ Ｓ T ᵁ ⦏V\u0302⦎ 𝓦 ᙭ Y չ")
WIERD = _zip(AZ, "𒀀 𒁀 ℭ 𒁓 𝔈 𐎣 𝔊 ℌ ℑ 𝔍 𝔎 𒁇 𐎠 㞓 𝔒 𝔓 𒌒 Я 𒂍 𒈦 𝔘 𐎏 𝔚 𒉽 𒌨 𒑣")
DECOR = _zip(AZ, "₳ ฿ ₵ Đ Ɇ ₣ ₲ Ⱨ Ł J ₭ Ⱡ ₥ ₦ Ø ₱ Q Ɽ ₴ ₮ Ʉ V ₩ Ӿ Ɏ Ⱬ")
ALIEN = _zip(AZ, "ꁲ ꋰ ꀯ ꂠ ꈼ ꄞ ꁅ ꍩ ꂑ ꒻ ꀗ ꒒ ꂵ ꋊ ꂦ ꉣ ꁷ ꌅ ꌚ ꋖ ꐇ ꀰ ꅏ ꇒ ꐞ ꁴ")
NEON = _zip(AZ, "ᾰ ♭ ḉ ᖱ ḙ ḟ ❡ ℏ ! ♩ к ℓ Պ ℵ ✺ ℘ ǭ Ի ṧ т ṳ ṽ ω ✘ ⑂ ℨ")
COOL = _zip(AZ, "A\u0337\u033a\u034b Ḃ\u0335\u0339 C\u0336\u0354\u0346 D\u0337\u034d\u030a E\u0335\u034e\u0315 F\u0338\u0322\u0350 G\u0338\u0317\u0313 Ḩ\u0335\u0302 I\u0334\u032f\u030b J\u0334\u0333\u0305 Ǩ\u0338\u0354 L\u0334\u032e\u033f M\u0334\u033c\u0350 "
                "N\u0337\u033a\u030f Ó\u0338\u031c P\u0338\u0326\u0308\u0301 Q\u0336\u032c\u035b R\u0334\u034e\u035d S\u0337\u035a\u0306 Ť\u0336\u0333 U\u0338\u0349\u035b V\u0334\u0326\u034c W\u0338\u0332\u0360 X\u0335\u033c\u030d Y\u0336\u0356\u0305 Z\u0336\u0325\u0311")
KOOL = _zip(AZ, "Ⱥ β ↻ Ꭰ Ɛ Ƒ Ɠ Ƕ į ل Ҡ Ꝉ Ɱ ហ ට φ Ҩ འ Ϛ Ͳ Ա Ỽ చ ჯ Ӌ ɀ")

INVERTED = _alphabet(
    "∀ 𐐒 Ɔ ᗡ Ǝ Ⅎ פ H I ſ ʞ ˥ W N O Ԁ Q ᴚ S ┴ ∩ Λ M X ⅄ Z",
    "ɐ q ɔ p ǝ ɟ ƃ ɥ ı ɾ ʞ l ɯ u o d b ɹ s ʇ n ʌ ʍ x ʎ z",
)
CJK_RADICALS = _zip(AZ, "鿕 ⻖ で ぬ 乲 乎 ⻢ ぜ ⻈ ブ ⽔ 乳 丛 乗 ロ ⺺ ꀹ ⺠ ぶ ⻱ ひ ㇾ 丗 ⼢ ㆩ ゑ")
CJK_RADICALS["a"] = "𐐨"


# ================== Base styles ==================
BASE_STYLES = [
    # Featured
    dict(name="Ancient Glyphs", category=FEATURED,
         map=_zip(AZ, "𖤬 ꔪ ꛕ 𖤀 𖤟 ꘘ ꚽ ꛅ ꛈ ꚠ 𖤰 ꚳ 𖢑 ꛘ 𖣠 ㄗ ꚩ 𖦪 ꕷ 𖢧 ꚶ ꚴ ꛃ 𖤗 ꚲ ꛉ"),
         tags=("exotic", "gamer", "safe")),
    dict(name="Hieroglyphic Mix", category=FEATURED,
         map=_zip(AZ, "ᗋ ᗾ ᕩ ᗥ ᗴ Ϝ G ꃙ ꉁ ꂖ Ƙ ᒫ ꉙ ꉌ ꇩ ᕾ ᕴ ꔶ ꍛ 𐏕 ᕰ ᘙ ᘺ ꇨ ꖃ 𑢪"),
         tags=("exotic", "gamer", "safe")),
    dict(name="CJK Radicals", category=FEATURED, map=CJK_RADICALS, tags=("exotic", "safe")),

    # Creative & mixed
    dict(name="Cyborg Construct", category=CREATIVE, transform=cyborg_construct,
         tags=("cyber", "gamer", "readable", "safe")),
    dict(name="Demonic Script", category=CREATIVE, transform=demonic_script, decorates=True,
         tags=("glitch", "gamer", "unreadable")),
    dict(name="Bubble Pop", category=CREATIVE, transform=bubble_pop,
         tags=("cute", "aesthetic", "readable", "safe")),
    dict(name="Super/Subscript Mix", category=CREATIVE, transform=super_sub_mix, decorates=True,
         tags=("cute", "small", "readable")),
    dict(name="Vaporwave", category=CREATIVE, transform=vaporwave,
         tags=("aesthetic", "wide", "readable", "safe")),

    # Algorithmic
    dict(name="Corrupted Glitch", category=ALGORITHMIC, transform=corrupted_glitch, decorates=True,
         tags=("glitch", "gamer", "unreadable")),
    dict(name="Encased", category=ALGORITHMIC, transform=encased, tags=("clean", "readable")),
    dict(name="Ethereal Sparkles", category=ALGORITHMIC, transform=ethereal_sparkles, decorates=True,
         tags=("cute", "aesthetic")),

    # Exotic
    dict(name="Tribal", category=EXOTIC,
         map=_zip(AZ, "ᗩ ᗷ ᑕ ᗪ ᕮ ᖴ Ꮆ ᕼ Ꭵ ᒎ Ꮶ ᒪ ᗰ ᑎ ᗝ ᑭ Ϭ Ꭱ ᔕ 丅 ᑌ ᐯ ᗯ 乂 Ꭹ 乙"),
         tags=("gamer", "exotic", "readable", "safe")),
    dict(name="Runic", category=EXOTIC, map=RUNIC_MAP, tags=("gamer", "exotic", "readable", "safe")),
    dict(name="Inverted", category=EXOTIC, map=INVERTED, tags=("fun", "readable", "safe")),
    dict(name="Tifinagh", category=EXOTIC,
         map=_zip(AZ, "ⴰ ⴱ ⵎ ⴷ ⴻ ⴼ ⴳ ⵀ ⵉ ⵊ ⴽ ⵍ ⵎ ⵏ ⵓ ⵃ ⵇ ⵔ ⵙ ⵜ ⵓ ⵖ ⵡ ╳ ⵢ ⵣ"),
         tags=("exotic", "clean", "readable", "safe")),
    dict(name="Ol Chiki", category=EXOTIC,
         map=_zip(AZ, "ᱚ ᱵ ᱪ ᱫ ᱮ ᱯ ᱜ ᱦ ᱤ ᱡ ᱠ ᱞ ᱢ ᱱ ᱳ ᱯ ዒ ᱨ ᱥ ᱛ ᱩ ᱣ ᱣ ᱬ ᱭ ᱡ"),
         tags=("exotic", "bubbly", "readable", "safe")),
    dict(name="Bamum", category=EXOTIC,
         map=_zip(AZ, "𖠊 𖠋 𖠌 𖠍 𖠎 𖠏 𖠐 𖠑 𖠒 𖠓 𖠔 𖠕 𖠖 𖠗 𖠘 𖠙 𖠚 𖠛 𖠜 𖠝 𖠞 𖠟 𖠠 𖠡 𖠢 𖠣"),
         tags=("exotic", "gamer", "unreadable")),

    # Flourish
    dict(name="Skull & Stars", category=FLOURISH,
         transform=framed("꧁༒☠💥✨", "✨💥☠༒꧂", ITALIC_MAP), tags=("gamer", "emoji")),
    dict(name="Heart Wings", category=FLOURISH,
         transform=framed("෴❤\ufe0f෴ ", " ෴❤\ufe0f෴", CURSIVE_MAP), tags=("cute", "aesthetic", "emoji")),
    dict(name="Fire Brackets", category=FLOURISH,
         transform=framed("🔥(✖ ", " ✖)🔥", FIRE_MAP), tags=("gamer", "emoji")),
    dict(name="Pastel Hearts", category=FLOURISH,
         transform=framed("(◍•ᴗ•◍) ミ💖 ", " 💖彡", PASTEL_MAP), tags=("cute", "aesthetic", "emoji")),
    # box drawing: beads and frames would break the box
    dict(name="Heavy Frame", category=FLOURISH, transform=heavy_frame, pure=True, tags=("clean",)),
    dict(name="Sparkle Throw", category=FLOURISH,
         transform=framed("(ﾉ◕ヮ◕)ﾉ*:･ﾟ✧ ", " ✧ﾟ･:*ヽ(◕ヮ◕ヽ)"), tags=("cute", "aesthetic", "emoji")),
    dict(name="Symbolic Hearts", category=FLOURISH,
         transform=framed("♥ﮩ٨ـﮩﮩ٨ـﮩﮩ ", " ﮩﮩـ٨ﮩﮩـ٨ﮩ♥", HEARTS_MAP), tags=("aesthetic", "emoji")),
    dict(name="Eclectic Mix", category=FLOURISH,
         transform=framed("`•.,¸¸,.•´¯ ", " ¯`•.,¸¸,.•´", ECLECTIC_MAP), tags=("aesthetic",)),
    dict(name="Ornate Emblem", category=FLOURISH,
         transform=framed("-·=»‡«=·- ", " -·=»‡«=·-", EMBLEM_MAP), tags=("gamer", "aesthetic")),

    # Classic
    dict(name="Bold", category=CLASSIC, map=_alphabet(*BOLD), tags=("bold", "readable", "safe")),
    dict(name="Italic", category=CLASSIC, map=ITALIC_MAP, tags=("italic", "readable", "safe")),
    dict(name="Cursive", category=CLASSIC, map=CURSIVE_MAP, tags=("cursive", "aesthetic", "readable", "safe")),
    dict(name="Double Struck", category=CLASSIC, map=_alphabet(*DOUBLE), tags=("bold", "clean", "readable", "safe")),
    dict(name="Fraktur", category=CLASSIC, map=_alphabet(*FRAKTUR), tags=("gamer", "readable")),
    dict(name="Medieval", category=CLASSIC, map=BLACKLETTER_MAP, tags=("bold", "gamer", "readable")),
    dict(name="Monospace", category=CLASSIC, map=MONO_MAP, tags=("clean", "readable", "safe")),
    dict(name="Circled", category=CLASSIC, map=CIRCLED_MAP, tags=("bubbly", "cute", "readable", "safe")),
    dict(name="Full Width", category=CLASSIC, map=FULL_MAP, tags=("wide", "aesthetic", "readable", "safe")),

    # Complex / glitched
    dict(name="Glitch Hop", category=COMPLEX, map=GLITCH_HOP, tags=("glitch", "gamer", "unreadable")),
    dict(name="Bracket Mix", category=COMPLEX, map=BRACKET_MIX, tags=("cyber", "gamer", "readable")),
    dict(name="Cursed Script", category=COMPLEX, map=CURSED_SCRIPT, tags=("glitch", "unreadable")),
    dict(name="Digital Decay", category=COMPLEX, map=DIGITAL_DECAY, tags=("glitch", "cyber", "unreadable")),
    dict(name="Royal Mix", category=COMPLEX, map=ROYAL_MIX, tags=("aesthetic", "cute")),
    dict(name="Elegant Glitch", category=COMPLEX, map=ELEGANT_GLITCH, tags=("glitch", "aesthetic", "readable")),
    dict(name="Wierd", category=COMPLEX, map=WIERD, tags=("exotic", "unreadable")),
    dict(name="Decor", category=COMPLEX, map=DECOR, tags=("clean", "readable", "safe")),
    dict(name="Alien", category=COMPLEX, map=ALIEN, tags=("gamer", "cyber", "exotic", "readable", "safe")),
    dict(name="Neon", category=COMPLEX, map=NEON, tags=("aesthetic", "unreadable")),
    dict(name="Cool", category=COMPLEX, map=COOL, tags=("glitch", "gamer", "unreadable")),
    dict(name="Kool", category=COMPLEX, map=KOOL, tags=("exotic", "readable")),
]

# ================== Remix styles ==================
REMIX_STYLES = [
    remix_style("Quantum Spell", ("⟁", "⟁"), ("SCRIPT", "SCRIPT"),
                dict(W="𝔚", w="𝔀", X="𝔛", x="𝔁", Y="𝔜", y="𝔂", Z="ℨ", z="𝔃", O="𝓞", o="𝓸"),
                ("⌬", "◬", "⟡"), dot_vowels=True, symbol_chance=0.4),
    remix_style("Starlit Ice", ("❄\ufe0e", "❄\ufe0e"), ("SCRIPT", "SCRIPT"),
                dict(A="Ａ", E="Ｅ", I="Ｉ", O="Ｏ", U="Ｕ", a="ａ", e="ｅ", i="ｉ", o="ｏ", u="ｕ"),
                ("☾", "✦", "❆"), dot_vowels=True, symbol_chance=0.5),
    remix_style("Blood Rune", ("𖤐", "𖤐"), ("FRAKTUR", "FRAKTUR"), dict(O="𝒪", o="𝔬"),
                ("☨", "✠", "†"), underline=True, symbol_chance=0.4),
    remix_style("Ember Strike", ("🔥", "🔥"), ("DOUBLE", "SCRIPT"), dict(X="𝔛", x="𝔁", V="𝓥"),
                ("✦", "⚑", "⚡"), dot_vowels=True, symbol_chance=0.5),
    remix_style("Toxic Pulse", ("☣\ufe0e", "☣\ufe0e"), ("MONO", "MONO"),
                dict(O="Ø", o="ø", E="Ξ", e="ξ", A="Δ", a="Δ", Y="¥", y="ყ"),
                ("⌁", "⌬", "⎔"), underline=True, symbol_chance=0.5),
    remix_style("Cosmic Bloom", ("✧", "✧"), ("SCRIPT", "SCRIPT"), None,
                ("✺", "✸", "✶"), dot_vowels=True, symbol_chance=0.6),
    remix_style("Shadow Circuit", ("⚫", "⚫"), ("MONO", "MONO"),
                dict(O="𝙾", o="ø", A="𝙰", E="𝙴", X="𝚇", x="𝚡"),
                ("▣", "◧", "◨"), underline=True, symbol_chance=0.4),
    remix_style("Solar Sigil", ("☀\ufe0e", "☀\ufe0e"), ("DOUBLE", "SCRIPT"), dict(T="𝕋", R="ℝ"),
                ("☩", "☼", "✷"), dot_vowels=True, symbol_chance=0.5),
    remix_style("Necro Warden", ("☠\ufe0e", "☠\ufe0e"), ("FRAKTUR", "FRAKTUR"), None,
                ("☥", "⚰\ufe0e", "✟"), underline=True, symbol_chance=0.4),
    remix_style("Lunar Bloom", ("☽", "☾"), ("SCRIPT", "SCRIPT"), None,
                ("✧", "☄\ufe0e", "✦"), dot_vowels=True, symbol_chance=0.55),
    remix_style("Frost Bite", ("❄\ufe0e", "❄\ufe0e"), ("MONO", "FRAKTUR"), dict(O="Ｏ", o="ｏ"),
                ("☾", "✶", "❆"), dot_vowels=True, symbol_chance=0.45),
    remix_style("Arcane Tide", ("𓆉", "𓆉"), ("SCRIPT", "SCRIPT"), None,
                ("☸\ufe0e", "༄", "⋆"), dot_vowels=True, symbol_chance=0.6),
    remix_style("Iron Howl", ("⛓", "⛓"), ("MONO", "MONO"), dict(V="𝚅", W="𝚆", X="𝚇", Y="𝚈"),
                ("⟟", "⛓", "⛨"), underline=True, symbol_chance=0.35),
    remix_style("Burning Sigil", ("✠", "✠"), ("DOUBLE", "DOUBLE"), dict(A="𝔸", a="𝕒", E="𝔼", e="𝕖"),
                ("†", "☉", "☍"), dot_vowels=True, symbol_chance=0.45),
    remix_style("Abyss Crown", ("🌊", "🌊"), ("FULL", "SCRIPT"), dict(O="Ｏ", o="ｏ", N="Ｎ", n="ｎ"),
                ("❪", "❫", "⟢"), dot_vowels=True, symbol_chance=0.55),
    remix_style("Ghost Pulse", ("👁", "👁"), ("MONO", "SCRIPT"), dict(O="Ø", o="ø"),
                ("▫", "▪", "◦"), underline=True, symbol_chance=0.4),
    remix_style("Thunder Crest", ("⚡", "⚡"), ("DOUBLE", "DOUBLE"), dict(O="𝕆", o="𝕠", S="𝕊", s="𝕤"),
                ("✦", "⯈", "➤"), symbol_chance=0.5),
    remix_style("Dream Weaver", ("✿", "✿"), ("SCRIPT", "SCRIPT"), None,
                ("🫧", "⋆", "❀"), dot_vowels=True, symbol_chance=0.6),
    remix_style("Obsidian Flame", ("⛧", "⛧"), ("FRAKTUR", "FRAKTUR"), dict(O="𝒪", o="𝔬"),
                ("✟", "❖", "☗"), underline=True, symbol_chance=0.4),
    remix_style("Soul Key", ("☽", "☽"), ("SCRIPT", "SCRIPT"), dict(G="𝓖", g="𝓰", K="𝓚", k="𝓴"),
                ("⚷", "⌘", "✧"), dot_vowels=True, symbol_chance=0.55),
]

ZODIAC = tuple("♈♉♊♋♌♍♎♏♐♑♒♓")
PHOENICIAN = tuple("𐤀𐤁𐤂𐤃𐤄𐤅𐤆𐤇𐤈𐤉𐤊𐤋𐤌𐤍𐤎𐤏𐤐𐤑𐤒𐤓𐤔𐤕")
OLD_ITALIC = tuple("𐌀𐌁𐌂𐌃𐌄𐌅𐌆𐌇𐌈𐌊𐌋𐌌𐌍𐌏𐌐𐌒𐌓𐌔𐌕𐌖𐌗𐌙")
MAHJONG = tuple("🀇🀈🀉🀊🀋🀌🀍🀎🀏🀐🀑🀒🀓🀔🀕🀖🀗🀘🀙")
CHESS = tuple("♔♕♖♗♘♙♚♛♜♝♞♟")

FUSION_STYLES = [
    remix_style("Astral Rune — Zodiac Seal", ("♐", "♌"), ("DOUBLE", "SCRIPT"),
                dict(O="⊙", o="⊙", S="Ϟ", s="ϟ"), ZODIAC, FUSION,
                dot_vowels=True, underline=True, symbol_chance=0.45),
    remix_style("Obscura Flame — Tifinagh Ember", ("ⴰ", "🔥"), ("FRAKTUR", "SCRIPT"),
                _zip("ABEHIKLOUVWYZ", "ⴰ ⴱ ⴻ ⵀ ⵉ ⴽ ⵍ ⵓ ⵓ ⵖ ⵡ ⵢ ⵣ"),
                ("ⵣ", "ⵔ", "ⵇ", "ⴷ", "ⴳ"), FUSION, symbol_chance=0.5, slash=True),
    remix_style("Venin Crown — Alchemical Sigil", ("🜂", "🜁"), ("MONO", "MONO"),
                dict(O="🜔", o="🜔", A="🜃", a="🜃", E="🜁", e="🜁"),
                ("🜍", "🜏", "🜔", "🜚", "🜃", "🜄"), FUSION, underline=True, symbol_chance=0.55),
    remix_style("Royal Gambit — Chess Fang", ("♔", "♕"), ("DOUBLE", "SCRIPT"),
                dict(K="♚", Q="♛", B="♝", N="♞", R="♜", P="♟"),
                CHESS, FUSION, symbol_chance=0.5, dot_vowels=True),
    remix_style("Jade Lotus — Mahjong Bloom", ("🀄", "🀚"), ("SCRIPT", "SCRIPT"), None,
                MAHJONG, FUSION, symbol_chance=0.6, dot_vowels=True),
    remix_style("Ancient Oracle — Phoenician Sigil", ("𐤀", "𐤅"), ("FRAKTUR", "FRAKTUR"),
                dict(zip(("A", "B", "G", "D", "H", "W", "Z", "Ḥ", "Ṭ", "Y", "K", "L", "M", "N",
                          "S", "ʿ", "P", "Ṣ", "Q", "R", "Š", "T"), PHOENICIAN)),
                PHOENICIAN, FUSION, symbol_chance=0.35, underline=True),
    remix_style("Twilight Mirror — Gothic Veil", ("⛧", "⛧"), ("FRAKTUR", "SCRIPT"), None,
                ("✟", "☩", "✠", "✞"), FUSION, symbol_chance=0.45, slash=True),
    remix_style("Solar Relic — Old Italic Flame", ("𐌀", "🔥"), ("DOUBLE", "DOUBLE"),
                _zip("ABCDEFGHIKLMNOPQRSTUVXZ", "𐌀 𐌁 𐌂 𐌃 𐌄 𐌅 𐌆 𐌇 𐌈 𐌊 𐌋 𐌌 𐌍 𐌏 𐌐 𐌒 𐌓 𐌔 𐌕 𐌖 𐌖 𐌗 𐌙"),
                OLD_ITALIC, FUSION, symbol_chance=0.4, dot_vowels=True),
    remix_style("Frozen Zodiac — Ice Rune", ("❄\ufe0e", "❄\ufe0e"), ("MONO", "MONO"),
                dict(O="♒", o="♒", A="♑", a="♑"),
                ("♑", "♒", "♓", "❆", "❄\ufe0e"), FUSION, symbol_chance=0.5),
    remix_style("Sacred Bloom — Lotus Mark", ("☸", "☸"), ("SCRIPT", "SCRIPT"), None,
                ("☸", "✿", "❀", "🪷"), FUSION, symbol_chance=0.55, dot_vowels=True),
    remix_style("Infernal Sigil — Hell Rune", ("🜏", "🜍"), ("FRAKTUR", "FRAKTUR"), None,
                ("🜏", "🜍", "🝫", "🝟"), FUSION, symbol_chance=0.5, underline=True),
    remix_style("Crown of Ages — Time Relic", ("⌛", "⌛"), ("DOUBLE", "SCRIPT"),
                dict(O="◌\u0304", o="◌\u0304"),
                ("⌛", "⏳", "⧗", "🕰"), FUSION, symbol_chance=0.45, tilde=True),
    remix_style("Starveil Echo — Cosmic Song", ("✧", "✧"), ("SCRIPT", "SCRIPT"), None,
                ("✧", "✦", "⋆", "✶", "✷"), FUSION, symbol_chance=0.6, dot_vowels=True),
    remix_style("Venom Halo — Toxic Glyph", ("☣\ufe0e", "☣\ufe0e"), ("MONO", "MONO"), dict(O="⍥", o="⍥"),
                ("☣\ufe0e", "⎔", "⌬", "⌁"), FUSION, symbol_chance=0.55, slash=True),
    remix_style("Mystic Crown — Celestial Fang", ("☾", "☾"), ("DOUBLE", "SCRIPT"), None,
                ("☾", "☽", "✺", "⋆"), FUSION, symbol_chance=0.5, dot_vowels=True),
    remix_style("Dragon Rune — Ember Fang", ("🐉", "🐉"), ("FRAKTUR", "SCRIPT"), None,
                ("🐉", "🔥", "🜂", "✠"), FUSION, symbol_chance=0.5, underline=True),
    remix_style("Void Relic — Black Star", ("✦", "✦"), ("MONO", "DOUBLE"), dict(O="●", o="●"),
                ("✦", "●", "◈", "◇"), FUSION, symbol_chance=0.5),
    remix_style("Phantom Lotus — Spirit Petal", ("👁", "👁"), ("SCRIPT", "SCRIPT"), None,
                ("👁", "🪷", "✧", "◦"), FUSION, symbol_chance=0.55, dot_vowels=True),
    remix_style("Arcane Spiral — Chaos Sigil", ("⟲", "⟲"), ("DOUBLE", "DOUBLE"), None,
                ("⟲", "⟳", "↻", "↺", "⤿", "⤾"), FUSION, symbol_chance=0.45, tilde=True),
    remix_style("Throne of Ash — Ember Crown", ("🔥", "🔥"), ("FULL", "SCRIPT"), dict(O="⦿", o="⦿"),
                ("🔥", "✠", "⛧", "⛓"), FUSION, symbol_chance=0.55, underline=True),
]

BASE_RECORDS = tuple(BASE_STYLES + REMIX_STYLES + FUSION_STYLES)

# ================== Font packs ==================
MICROCAPS = _alphabet(
    "ᴬ ᴮ ᶜ ᴰ ᴱ ᶠ ᴳ ᴴ ᴵ ᴶ ᴷ ᴸ ᴹ ᴺ ᴼ ᴾ ᵠ ᴿ ˢ ᵀ ᵁ ⱽ ᵂ ˣ ʎ ᶻ",
    "ᴀ ʙ ᴄ ᴅ ᴇ ꜰ ɢ ʜ ɪ ᴊ ᴋ ʟ ᴍ ɴ ᴏ ᴘ ǫ ʀ s ᴛ ᴜ ᴠ ᴡ x ʏ ᴢ",
)
SQUARED = _alphabet(
    "🄰 🄱 🄲 🄳 🄴 🄵 🄶 🄷 🄸 🄹 🄺 🄻 🄼 🄽 🄾 🄿 🅀 🅁 🅂 🅃 🅄 🅅 🅆 🅇 🅈 🅉",
    CIRCLED[1],
    "⓪ ① ② ③ ④ ⑤ ⑥ ⑦ ⑧ ⑨",
)
WIRE_DOUBLE = _alphabet(*DOUBLE, "𝟘 𝟙 𝟚 𝟛 𝟜 𝟝 𝟞 𝟟 𝟠 𝟡")
BOX_MONO = _alphabet(*MONO, "𝟶 𝟷 𝟸 𝟹 𝟺 𝟻 𝟼 𝟽 𝟾 𝟿")

AURA_SEQ = ("\u0307", "\u030a")
SHADOW_SEQ = ("\u0333", "\u0331")
STITCH_SEQ = ("\u0330", "\u0324")
GLINT_SEQ = ("\u030c", "\u0323")


def woven(seq, sep=None):
    def transform(text, rng):
        out = weave(text, seq)
        return spaced(out, sep) if sep else out
    return transform


PACK_RECORDS = (
    dict(name="Microcaps Hybrid", pack="microcaps-hybrid", map=MICROCAPS,
         note="True small-cap feel using rare IPA forms; great for compact bios."),
    dict(name="Squared Enclosure", pack="squared-enclose", map=SQUARED,
         note="Boxed caps, circled lowercase and digits."),
    dict(name="Wireframe Double", pack="wire-doublestruck", map=WIRE_DOUBLE,
         note="Full A-Z/a-z/0-9 double-struck, clean hollow vibe."),
    dict(name="Box-Mono Tight", pack="boxy-mono-tight", map=BOX_MONO,
         note="Monospaced math alphabet for industrial labels and gamer tags."),
    dict(name="Aura Halo", pack="aura-halo", transform=woven(AURA_SEQ),
         note="Alternating dot & ring above for a soft halo aesthetic."),
    dict(name="Shadow Underline", pack="shadow-underline", transform=woven(SHADOW_SEQ),
         note="Alternating heavy/soft baselines for a sunk-ink effect."),
    dict(name="Stitched Thin", pack="stitched-thin", transform=woven(STITCH_SEQ, "\u2009"),
         note="Thin spacing plus low tildes and dots under, a textile stitch feel."),
    dict(name="Edge Glint", pack="edge-glint", transform=woven(GLINT_SEQ),
         note="Caron + dot-below pattern adds a metallic, edgy sparkle."),
)


def load_catalog(extra=()):
    return Catalog.from_sources(BASE_RECORDS, PACK_RECORDS, extra)
