"""
Fixed language and voice catalogues offered by the reader.
"""

from typing import NamedTuple


class Language(NamedTuple):
    """A selectable engine language"""

    code: str  # Short code shown in the picker
    locale: str  # Locale matched against installed engine voices


class SystemVoice(NamedTuple):
    """A voice offered for the system voice command"""

    name: str
    locale: str


DEFAULT_VOICE = "Default"

SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("US", "en_US"),
    Language("TR", "tr_TR"),
    Language("FR", "fr_FR"),
    Language("DE", "de_DE"),
    Language("ES", "es_ES"),
    Language("IT", "it_IT"),
    Language("NL", "nl_NL"),
    Language("RU", "ru_RU"),
    Language("JP", "ja_JP"),
    Language("KR", "ko_KR"),
    Language("BR", "pt_BR"),
    Language("SE", "sv_SE"),
    Language("CN", "zh_CN"),
)

SYSTEM_VOICES: tuple[SystemVoice, ...] = (
    SystemVoice(DEFAULT_VOICE, ""),
    SystemVoice("Albert", "en_US"),
    SystemVoice("Alice", "it_IT"),
    SystemVoice("Alva", "sv_SE"),
    SystemVoice("Amélie", "fr_CA"),
    SystemVoice("Amira", "ms_MY"),
    SystemVoice("Anna", "de_DE"),
    SystemVoice("Bad News", "en_US"),
    SystemVoice("Bahh", "en_US"),
    SystemVoice("Bells", "en_US"),
    SystemVoice("Boing", "en_US"),
    SystemVoice("Bubbles", "en_US"),
    SystemVoice("Carmit", "he_IL"),
    SystemVoice("Cellos", "en_US"),
    SystemVoice("Damayanti", "id_ID"),
    SystemVoice("Daniel", "en_GB"),
    SystemVoice("Daria", "bg_BG"),
    SystemVoice("Wobble", "en_US"),
    SystemVoice("Ellen", "nl_BE"),
    SystemVoice("Fred", "en_US"),
    SystemVoice("Good News", "en_US"),
    SystemVoice("Jester", "en_US"),
    SystemVoice("Ioana", "ro_RO"),
    SystemVoice("Jacques", "fr_FR"),
    SystemVoice("Joana", "pt_PT"),
    SystemVoice("Junior", "en_US"),
    SystemVoice("Kanya", "th_TH"),
    SystemVoice("Karen", "en_AU"),
    SystemVoice("Kathy", "en_US"),
    SystemVoice("Kyoko", "ja_JP"),
    SystemVoice("Lana", "hr_HR"),
    SystemVoice("Laura", "sk_SK"),
    SystemVoice("Lekha", "hi_IN"),
    SystemVoice("Lesya", "uk_UA"),
    SystemVoice("Linh", "vi_VN"),
    SystemVoice("Luciana", "pt_BR"),
    SystemVoice("Majed", "ar_001"),
    SystemVoice("Tünde", "hu_HU"),
    SystemVoice("Meijia", "zh_TW"),
    SystemVoice("Melina", "el_GR"),
    SystemVoice("Milena", "ru_RU"),
    SystemVoice("Moira", "en_IE"),
    SystemVoice("Mónica", "es_ES"),
    SystemVoice("Montse", "ca_ES"),
    SystemVoice("Nora", "nb_NO"),
    SystemVoice("Organ", "en_US"),
    SystemVoice("Paulina", "es_MX"),
    SystemVoice("Superstar", "en_US"),
    SystemVoice("Ralph", "en_US"),
    SystemVoice("Rishi", "en_IN"),
    SystemVoice("Samantha", "en_US"),
    SystemVoice("Sara", "da_DK"),
    SystemVoice("Satu", "fi_FI"),
    SystemVoice("Sinji", "zh_HK"),
    SystemVoice("Tessa", "en_ZA"),
    SystemVoice("Thomas", "fr_FR"),
    SystemVoice("Tingting", "zh_CN"),
    SystemVoice("Trinoids", "en_US"),
    SystemVoice("Whisper", "en_US"),
    SystemVoice("Xander", "nl_NL"),
    SystemVoice("Yelda", "tr_TR"),
    SystemVoice("Yuna", "ko_KR"),
    SystemVoice("Zarvox", "en_US"),
    SystemVoice("Zosia", "pl_PL"),
    SystemVoice("Zuzana", "cs_CZ"),
)


def is_valid_language_index(index: int) -> bool:
    """Check that index points into SUPPORTED_LANGUAGES"""
    return 0 <= index < len(SUPPORTED_LANGUAGES)


def language_code(index: int) -> str:
    """Get the short language code at index"""
    return SUPPORTED_LANGUAGES[index].code


def language_locale(index: int) -> str:
    """Get the engine locale at index"""
    return SUPPORTED_LANGUAGES[index].locale


def language_index(code: str) -> int:
    """Find the index of a short language code (case-insensitive)"""
    for index, language in enumerate(SUPPORTED_LANGUAGES):
        if language.code == code.upper():
            return index
    raise ValueError(
        f"Unknown language code: {code}. "
        f"Supported: {', '.join(lang.code for lang in SUPPORTED_LANGUAGES)}"
    )


def voice_label(name: str) -> str:
    """Render a voice the way the voice menu shows it, e.g. 'Albert [en_US]'"""
    for voice in SYSTEM_VOICES:
        if voice.name == name and voice.locale:
            return f"{voice.name} [{voice.locale}]"
    return name
