"""Cable pattern library.

Rule order inside each family is significant: for ambiguous text the first
matching rule decides the value.

Cross-section has no bare-number rule: a lone number in a cable title
never yields a cross-section.
"""
import re
from typing import Dict, List, Optional, Tuple

from elektro_extraction.models.fields import CableCategory, NetworkCategory, ShieldingType
from elektro_extraction.services.extraction.rules import (
    RuleFamily,
    compile_pattern,
    group_float,
    group_int,
    rule,
    to_float,
)

# Known cable types per category. Declaration order is detection order.
CABLE_TYPES: Dict[CableCategory, List[str]] = {
    CableCategory.GROUND: ['YMVK-AS', 'XMVK-AS', 'YMvK-AS', 'XMvK-AS', 'grondkabel'],
    CableCategory.INSTALLATION: ['YMvK', 'XMvK', 'VMvK', 'TKF', 'YMvK-super-soepel'],
    CableCategory.NEOPREEN: ['Neopreen', 'H07RN-F', 'H05RR-F', 'H05RN-F'],
    CableCategory.WIRE: [
        'VD', 'NYAF', 'aansluitdraad', 'installatiedraad', 'aarddraad',
        'aardedraad', 'montagedraad',
    ],
    CableCategory.NETWORK: ['UTP', 'FTP', 'SFTP', 'Cat5e', 'Cat6', 'Cat7', 'netwerkkabel', 'patchkabel'],
    CableCategory.AV: ['HDMI', 'Coax', 'coaxkabel', 'antennekabel', 'luidsprekerkabel', 'USB', 'displayport'],
    CableCategory.HOUSEHOLD: ['netsnoer', 'VMVL', 'textielsnoer', 'verlengkabel', 'prikkabel', 'DSL'],
    CableCategory.INDUSTRIAL: [
        'H07BQ-F', 'PUR', 'solar', 'signaalkabel', 'brandmeldkabel', 'alarmkabel',
        'stuurstroomkabel', 'laskabel', 'H01N2-D', 'ELFLEX',
    ],
    CableCategory.LEGACY: [
        'PFXP', 'J-Y(St)Y', 'NYM', 'NKT', 'AMS', 'AMKA',
        'H07V-K', 'H07V-U', 'H05V-K', 'H05V-U',
    ],
}

# Flattened (token, category, whole-word pattern) in detection order
CABLE_TYPE_PATTERNS: Tuple[Tuple[str, CableCategory, re.Pattern], ...] = tuple(
    (token, category, compile_pattern(rf"\b{re.escape(token)}\b"))
    for category, tokens in CABLE_TYPES.items()
    for token in tokens
)

_NUMBER = r"(\d+(?:[.,]\d+)?)"


def _cross_section_from_product_code(match: re.Match) -> Optional[float]:
    """"3x2.5" -> 2.5 (the second number is the cross-section)."""
    return to_float(match.group(2))


def _kilometers_to_meters(match: re.Match) -> Optional[float]:
    value = to_float(match.group(1))
    return value * 1000 if value is not None else None


def _middle_of_three(match: re.Match) -> Optional[float]:
    """Inbouwdoos sizing "Ø16/19/20mm" reports the middle value."""
    return to_float(match.group(2))


CROSS_SECTION_RULES: RuleFamily[float] = RuleFamily(
    field="diameter_mm2",
    rules=(
        # "2.5mm²", "2,5 mm²", "16mm2"
        rule("mm2_notation", _NUMBER + r"\s*mm[²2]", group_float(1)),
        # "YMvK 3x2.5"
        rule("product_code", r"(\d+)[x×]" + _NUMBER, _cross_section_from_product_code),
    ),
)

CONDUCTOR_RULES: RuleFamily[int] = RuleFamily(
    field="conductor_count",
    rules=(
        # "3x2.5"
        rule("product_code", r"(\d+)[x×]" + _NUMBER, group_int(1)),
        # "5G2.5" (G = with earth conductor)
        rule("earth_notation", r"(\d+)G" + _NUMBER, group_int(1)),
        # "3-aderig", "5 aders"
        rule("aderig", r"(\d+)[-\s]?ader(?:ig|s)?", group_int(1)),
        # "3C"
        rule("conductor_shorthand", r"(\d+)C\b", group_int(1)),
    ),
)

# Checked before LENGTH_RULES; a "per meter" listing is always 1 meter
PER_METER_PATTERN = compile_pattern(r"\bper\s+meter")

LENGTH_RULES: RuleFamily[float] = RuleFamily(
    field="length_m",
    rules=(
        # "100m", "500 meter"
        rule("meters", _NUMBER + r"\s*(?:meter|m)\b", group_float(1)),
        # "1.5km"
        rule("kilometers", _NUMBER + r"\s*km", _kilometers_to_meters),
        # "haspel 500mtr", "rol a 100m"
        rule("ring_reel_roll", r"(?:ring|haspel|rol).*?(\d+)\s*m", group_float(1)),
    ),
)

QUANTITY_RULES: RuleFamily[int] = RuleFamily(
    field="quantity",
    rules=(
        # "per 10 stuks", "100 st.", "25 pcs"
        rule("per_pieces", r"(?:per\s+)?(\d+)\s*(?:stuks?|st\.?|pcs?)\b", group_int(1)),
        # "doos à 25"; "inbouwdoos" is a product name, not a box count
        rule("box", r"\b(?:doos|box)\b.*?(\d+)", group_int(1)),
        rule("pieces_per", r"(\d+)\s*(?:stuks?|st\.?)\s*per", group_int(1)),
        rule("packaging_unit", r"verpakking\s*(\d+)", group_int(1)),
    ),
)

# Any of these phrases means the listing is sold as a single unit
SINGLE_UNIT_TERMS: Tuple[str, ...] = ('per stuk', 'per meter', 'los')

OUTER_DIAMETER_RULES: RuleFamily[float] = RuleFamily(
    field="outer_diameter_mm",
    rules=(
        rule("diameter_sign", r"[øØ∅]" + _NUMBER + r"\s*mm", group_float(1)),
        rule("diameter_word", r"diameter\s*" + _NUMBER + r"\s*mm", group_float(1)),
        rule("inbouwdoos_sizes", r"[øØ∅]" + _NUMBER + "/" + _NUMBER + "/" + _NUMBER + r"\s*mm",
             _middle_of_three),
    ),
)

# Most specific first: "cat6a" contains "cat6", "cat5e" contains "cat5"
NETWORK_CATEGORY_TERMS: Tuple[Tuple[str, NetworkCategory], ...] = (
    ('cat8', NetworkCategory.CAT8),
    ('cat7', NetworkCategory.CAT7),
    ('cat6a', NetworkCategory.CAT6A),
    ('cat6', NetworkCategory.CAT6),
    ('cat5e', NetworkCategory.CAT5E),
    ('cat5', NetworkCategory.CAT5),
)

SHIELDING_TERMS: Tuple[Tuple[Tuple[str, ...], ShieldingType], ...] = (
    (('sftp', 's/ftp'), ShieldingType.SFTP),
    (('ftp', 'f/utp'), ShieldingType.FUTP),
    (('utp', 'u/utp'), ShieldingType.UUTP),
)

BANDWIDTH_PATTERN = compile_pattern(r"(\d+)\s*mhz")

BANDWIDTH_BY_CATEGORY: Dict[NetworkCategory, str] = {
    NetworkCategory.CAT8: '2000 MHz',
    NetworkCategory.CAT7: '600 MHz',
    NetworkCategory.CAT6A: '500 MHz',
    NetworkCategory.CAT6: '250 MHz',
    NetworkCategory.CAT5E: '100 MHz',
}

PACKAGING_PHRASES: Tuple[str, ...] = ('per rol', 'per meter', 'per stuk', 'per doos')

PACKAGING_QUANTITY_PATTERN = compile_pattern(r"(\d+)\s*(meter|stuks?|rollen?)")
