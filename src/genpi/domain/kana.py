"""Hiragana → katakana / half-width katakana transliteration.

Full-width katakana sits at a fixed +0x60 offset from hiragana, so that
direction is pure arithmetic. Half-width katakana has no such layout: voiced
and semi-voiced syllables are written as the base character followed by a
separate mark (ﾞ / ﾟ), so it goes through a lookup table instead.
"""

from .errors import NotHiragana, NotKatakana

HIRAGANA_FIRST = 0x3041  # ぁ
HIRAGANA_LAST = 0x3096  # ゖ
KATAKANA_OFFSET = 0x60

_HALFWIDTH: dict[str, str] = {
    "ぁ": "ｧ", "あ": "ｱ", "ぃ": "ｨ", "い": "ｲ", "ぅ": "ｩ",
    "う": "ｳ", "ぇ": "ｪ", "え": "ｴ", "ぉ": "ｫ", "お": "ｵ",
    "か": "ｶ", "が": "ｶﾞ", "き": "ｷ", "ぎ": "ｷﾞ", "く": "ｸ",
    "ぐ": "ｸﾞ", "け": "ｹ", "げ": "ｹﾞ", "こ": "ｺ", "ご": "ｺﾞ",
    "さ": "ｻ", "ざ": "ｻﾞ", "し": "ｼ", "じ": "ｼﾞ", "す": "ｽ",
    "ず": "ｽﾞ", "せ": "ｾ", "ぜ": "ｾﾞ", "そ": "ｿ", "ぞ": "ｿﾞ",
    "た": "ﾀ", "だ": "ﾀﾞ", "ち": "ﾁ", "ぢ": "ﾁﾞ", "っ": "ｯ",
    "つ": "ﾂ", "づ": "ﾂﾞ", "て": "ﾃ", "で": "ﾃﾞ", "と": "ﾄ",
    "ど": "ﾄﾞ",
    "な": "ﾅ", "に": "ﾆ", "ぬ": "ﾇ", "ね": "ﾈ", "の": "ﾉ",
    "は": "ﾊ", "ば": "ﾊﾞ", "ぱ": "ﾊﾟ", "ひ": "ﾋ", "び": "ﾋﾞ",
    "ぴ": "ﾋﾟ", "ふ": "ﾌ", "ぶ": "ﾌﾞ", "ぷ": "ﾌﾟ", "へ": "ﾍ",
    "べ": "ﾍﾞ", "ぺ": "ﾍﾟ", "ほ": "ﾎ", "ぼ": "ﾎﾞ", "ぽ": "ﾎﾟ",
    "ま": "ﾏ", "み": "ﾐ", "む": "ﾑ", "め": "ﾒ", "も": "ﾓ",
    "ゃ": "ｬ", "や": "ﾔ", "ゅ": "ｭ", "ゆ": "ﾕ", "ょ": "ｮ",
    "よ": "ﾖ",
    "ら": "ﾗ", "り": "ﾘ", "る": "ﾙ", "れ": "ﾚ", "ろ": "ﾛ",
    "ゎ": "ﾜ",  # no half-width form
    "わ": "ﾜ",
    "ゐ": "ｲ",  # no half-width form
    "ゑ": "ｴ",  # no half-width form
    "を": "ｦ", "ん": "ﾝ", "ゔ": "ｳﾞ",
    "ゕ": "ｶ",  # no half-width form
    "ゖ": "ｹ",  # no half-width form
}


def _is_hiragana_char(c: str) -> bool:
    return HIRAGANA_FIRST <= ord(c) <= HIRAGANA_LAST


def is_hiragana(s: str) -> bool:
    """True if ``s`` is non-empty and every character is hiragana."""
    return bool(s) and all(_is_hiragana_char(c) for c in s)


def to_katakana(s: str) -> str:
    """Convert hiragana to full-width katakana.

    Raises:
        NotHiragana: If any character is outside U+3041–U+3096.
    """
    out = []
    for c in s:
        if not _is_hiragana_char(c):
            raise NotHiragana(c, s)
        out.append(chr(ord(c) + KATAKANA_OFFSET))
    return "".join(out)


def to_hiragana(s: str) -> str:
    """Inverse of :func:`to_katakana`.

    Raises:
        NotKatakana: If any character is outside U+30A1–U+30F6.
    """
    out = []
    for c in s:
        code = ord(c) - KATAKANA_OFFSET
        if not HIRAGANA_FIRST <= code <= HIRAGANA_LAST:
            raise NotKatakana(c)
        out.append(chr(code))
    return "".join(out)


def to_halfwidth_kana(s: str) -> str:
    """Convert hiragana to half-width katakana.

    Voiced syllables expand to two code units (base + ﾞ/ﾟ), so the output
    can be longer than the input.

    Raises:
        NotHiragana: If any character is outside U+3041–U+3096.
    """
    out = []
    for c in s:
        if not _is_hiragana_char(c):
            raise NotHiragana(c, s)
        out.append(_HALFWIDTH[c])
    return "".join(out)
