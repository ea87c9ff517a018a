"""Switching-material pattern library.

Covers schakelaars, stopcontacten, dimmers, frames, modules and blindplaten.
Rule order inside each family is significant.
"""
import re
from typing import Dict, Optional, Tuple

from elektro_extraction.models.fields import ProductType, SocketType, SwitchType
from elektro_extraction.services.extraction.rules import (
    RuleFamily,
    compile_pattern,
    group_float,
    group_int,
    rule,
    to_int,
)


def _constant(value):
    """Converter that ignores the match and returns ``value``."""
    def convert(match: re.Match):
        return value
    return convert


PRODUCT_TYPE_RULES: RuleFamily[ProductType] = RuleFamily(
    field="product_type",
    rules=(
        rule("schakelaar", r"\b(?:\w*schakelaars?|switch(?:es)?|schak\.?)\b",
             _constant(ProductType.SCHAKELAAR)),
        rule("stopcontact", r"\b(?:\w*stopcontact(?:en)?|socket|wandcontactdoos|wcd)\b",
             _constant(ProductType.STOPCONTACT)),
        rule("dimmer", r"\b(?:\w*dimmers?|dim\.?)\b", _constant(ProductType.DIMMER)),
        rule("drukknop", r"\b(?:drukknop(?:pen)?|druktoets|push.*?button)\b",
             _constant(ProductType.DRUKKNOP)),
        rule("frame", r"\b(?:\w*frames?|afdekking)\b", _constant(ProductType.FRAME)),
        rule("module", r"\b(?:modules?|inzet|mechanism)\b", _constant(ProductType.MODULE)),
        rule("blindplaat", r"\b(?:blindplaat|blind.*?plate|afdekplaat)\b",
             _constant(ProductType.BLINDPLAAT)),
    ),
)

SWITCH_TYPE_RULES: RuleFamily[SwitchType] = RuleFamily(
    field="switch_type",
    rules=(
        rule("single", r"\b(?:enkelpolige?|1[-\s]?polige?|single)\b", _constant(SwitchType.SINGLE)),
        rule("double", r"\b(?:dubbelpolige?|2[-\s]?polige?|double)\b", _constant(SwitchType.DOUBLE)),
        rule("crossover", r"\b(?:wissel\w*|crossover|cross)\b", _constant(SwitchType.CROSSOVER)),
        rule("intermediate", r"\b(?:kruis\w*|intermediate)\b", _constant(SwitchType.INTERMEDIATE)),
        rule("push_button", r"\b(?:druk\w*|push|bel)\b", _constant(SwitchType.PUSH_BUTTON)),
        rule("series", r"\b(?:serie(?:schakelaar)?|series)\b", _constant(SwitchType.SERIES)),
    ),
)

# Substring lookup, first term present wins
SOCKET_TERMS: Tuple[Tuple[str, SocketType], ...] = (
    ('schuko', SocketType.SCHUKO),
    ('frans', SocketType.FRENCH),
    ('french', SocketType.FRENCH),
    ('usb', SocketType.USB),
    ('data', SocketType.DATA),
    ('rj45', SocketType.DATA),
    ('telefoon', SocketType.PHONE),
    ('tv', SocketType.TV_SAT),
    ('sat', SocketType.TV_SAT),
    ('antenne', SocketType.TV_SAT),
)


def _mains_voltage(match: re.Match) -> Optional[int]:
    """Normalize 220/240 V to 230 V and 380 V to 400 V."""
    voltage = to_int(match.group(1))
    if voltage in (220, 230, 240):
        return 230
    if voltage in (380, 400):
        return 400
    return voltage


VOLTAGE_RULES: RuleFamily[int] = RuleFamily(
    field="voltage",
    rules=(
        # "230V", "230 Volt", "230VAC", "12Vdc"
        rule("volt", r"(\d+)\s*v(?:olts?|ac|dc)?\b", _mains_voltage),
    ),
)

CURRENT_RULES: RuleFamily[int] = RuleFamily(
    field="current_amp",
    rules=(
        # "16A", "16AX", "10 Amp"
        rule("ampere", r"(\d+)\s*a(?:mp(?:ère|ere)?|x)?\b", group_int(1)),
    ),
)

POWER_RULES: RuleFamily[int] = RuleFamily(
    field="power_watt",
    rules=(
        # "400W", "600 Watt"
        rule("watt", r"(\d+)\s*w(?:att)?\b", group_int(1)),
    ),
)

POLES_RULES: RuleFamily[int] = RuleFamily(
    field="poles",
    rules=(
        rule("polig", r"(\d+)[-\s]?polig", group_int(1)),
    ),
)

# Fallback when no "<n>-polig" is present: (substrings, poles)
POLES_TERMS: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (('enkelpolig', 'single'), 1),
    (('dubbelpolig', 'double'), 2),
)

SLOT_WORDS: Dict[str, int] = {'single': 1, 'double': 2, 'triple': 3, 'quad': 4}


def _slot_word(match: re.Match) -> Optional[int]:
    return SLOT_WORDS.get(match.group(1).lower())


FRAME_SLOT_RULES: RuleFamily[int] = RuleFamily(
    field="frame_slots",
    rules=(
        # "2-voudig", "3 voudige"
        rule("voudig", r"(\d+)[-\s]?voudig", group_int(1)),
        # "1 gang", "2-gang"
        rule("gang", r"(\d+)[-\s]?gang", group_int(1)),
        # "1-vaks", "2 vak"
        rule("vaks", r"(\d+)[-\s]?vaks?", group_int(1)),
        rule("slot_word", r"\b(single|double|triple|quad)\b", _slot_word),
    ),
)

MOUNTING_DEPTH_RULES: RuleFamily[float] = RuleFamily(
    field="mounting_depth_mm",
    rules=(
        rule("depth", r"(?:inbouwdiepte|depth).*?(\d+(?:[.,]\d+)?)\s*mm", group_float(1)),
    ),
)

COLOR_MAPPING: Dict[str, str] = {
    'wit': 'wit', 'witte': 'wit', 'white': 'wit', 'weiss': 'wit',
    'zwart': 'zwart', 'zwarte': 'zwart', 'black': 'zwart', 'schwarz': 'zwart', 'antraciet': 'zwart',
    'grijs': 'grijs', 'grijze': 'grijs', 'grey': 'grijs', 'gray': 'grijs',
    'rvs': 'rvs', 'inox': 'rvs', 'stainless': 'rvs', 'steel': 'rvs',
    'brons': 'brons', 'bronzen': 'brons', 'bronze': 'brons',
    'goud': 'goud', 'gold': 'goud', 'messing': 'goud', 'brass': 'goud',
    'aluminium': 'aluminium', 'alu': 'aluminium', 'silver': 'aluminium',
}


def _canonical_color(match: re.Match) -> str:
    token = match.group(1).lower()
    return COLOR_MAPPING.get(token, token)


COLOR_RULES: RuleFamily[str] = RuleFamily(
    field="color",
    rules=(
        rule("white", r"\b(wit(?:te)?|white|weiss)\b", _canonical_color),
        rule("black", r"\b(zwarte?|black|schwarz|antraciet)\b", _canonical_color),
        rule("grey", r"\b(grijs|grijze|grey|gray)\b", _canonical_color),
        rule("stainless", r"\b(rvs|inox|stainless|steel)\b", _canonical_color),
        rule("bronze", r"\b(brons|bronzen?)\b", _canonical_color),
        rule("gold", r"\b(goud|gold|messing|brass)\b", _canonical_color),
        rule("aluminium", r"\b(aluminium|alu|silver)\b", _canonical_color),
    ),
)


def _gira_series(match: re.Match) -> str:
    """Gira series names form a closed set; reported lower-case ("e2")."""
    return match.group(1).strip().lower()


def _captured_series(match: re.Match) -> Optional[str]:
    series = match.group(1).strip()
    return series or None


SERIES_RULES: RuleFamily[str] = RuleFamily(
    field="series",
    rules=(
        rule("gira", r"gira\s*(e2|e3|e22|event|esprit|classix|studio)\b", _gira_series),
        rule("jung", r"jung\s*(a\d+|as\d+|cd\d+|ls\d+)", _captured_series),
        rule("berker", r"berker\s+(\S+)", _captured_series),
        rule("generic", r"\b(\w+\s+(?:serie|series|line))\b", _captured_series),
    ),
)

LED_INDICATION_PATTERN = compile_pattern(r"\b(?:led|lamp|verlichting|glow)\b")
CHILD_PROTECTION_PATTERN = compile_pattern(r"\b(?:kinderveilig\w*|child.*?proof|veilig)\b")
SMART_PATTERN = compile_pattern(r"\b(?:smart|wifi|zigbee|z-wave|app)\b")


def _ip_code(match: re.Match) -> str:
    return f"IP{match.group(1)}"


IP_RATING_RULES: RuleFamily[str] = RuleFamily(
    field="ip_rating",
    rules=(
        rule("ip_code", r"\bip\s*(\d{2})\b", _ip_code),
    ),
)

INCLUDES_FRAME_TERMS: Tuple[str, ...] = ('inclusief frame', 'met frame', 'incl. frame')
EXCLUDES_FRAME_TERMS: Tuple[str, ...] = ('exclusief frame', 'zonder frame', 'excl. frame')

# Packaging quantities reuse the cable QUANTITY_RULES; single-unit phrases differ
SINGLE_UNIT_TERMS: Tuple[str, ...] = ('per stuk', 'los')
