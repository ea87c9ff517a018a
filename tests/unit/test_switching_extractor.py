"""Unit tests for SwitchingExtractor.

Tests cover:
    - Product, switch and socket type detection
    - Electrical ratings with mains voltage normalization
    - Poles, frame slots, mounting depth
    - Color mapping and series capture
    - Tri-state boolean features and IP rating
    - Quantity and frame inclusion
"""
import pytest

from elektro_extraction.models import ProductType, SocketType, SwitchingRecord, SwitchType
from elektro_extraction.services.extraction import SwitchingExtractor


@pytest.fixture
def extractor():
    """Create extractor instance."""
    return SwitchingExtractor()


class TestSwitchingExtractor:
    """End-to-end switching listings."""

    def test_get_extractor_name(self, extractor):
        """Test extractor name."""
        assert extractor.get_extractor_name() == "switching"

    def test_gira_switch_listing(self, extractor):
        """Single-pole Gira switch with ratings."""
        record = extractor.extract("Gira E2 enkelpolige schakelaar wit 16A 230V", "", "")

        assert record.product_type == ProductType.SCHAKELAAR
        assert record.switch_type == SwitchType.SINGLE
        assert record.switch_type.value == "enkelpolig"
        assert record.voltage == 230
        assert record.current_amp == 16
        assert record.color == "wit"
        assert record.series == "e2"
        assert record.poles == 1
        assert record.socket_type is None
        assert record.power_watt is None

    def test_schuko_socket_listing(self, extractor):
        """Child-safe schuko socket with IP rating."""
        record = extractor.extract("EMAT schuko stopcontact met randaarde kinderveilig IP44", "", "")

        assert record.product_type == ProductType.STOPCONTACT
        assert record.socket_type == SocketType.SCHUKO
        assert record.child_protection is True
        assert record.ip_rating == "IP44"
        assert record.led_indication is None
        assert record.smart_compatible is None

    def test_breadcrumb_provides_context(self, extractor):
        """Test the breadcrumb is searched before title and description."""
        with_breadcrumb = extractor.extract("Gira E2 wit", "", "Schakelmateriaal > Stopcontacten")
        without_breadcrumb = extractor.extract("Gira E2 wit", "", "")

        assert with_breadcrumb.product_type == ProductType.STOPCONTACT
        assert without_breadcrumb.product_type is None

    def test_empty_input(self, extractor):
        """Test empty text yields an all-None record."""
        assert extractor.extract("", "", "") == SwitchingRecord()

    def test_non_string_input(self, extractor):
        """Test malformed upstream values never raise."""
        record = extractor.extract(None, 12, ["schakelaar"])
        assert record == SwitchingRecord()

    def test_extraction_is_repeatable(self, extractor):
        """Test identical input yields identical records."""
        text = "Busch-Jaeger Reflex SI wisselschakelaar 3-voudig rvs per 5 stuks"
        assert extractor.extract(text) == extractor.extract(text)


class TestTypeDetection:
    """Tests for product, switch and socket type."""

    @pytest.mark.parametrize("text,expected", [
        ("Niko wisselschakelaar", ProductType.SCHAKELAAR),
        ("Light switch", ProductType.SCHAKELAAR),
        ("Wandcontactdoos 2-voudig", ProductType.STOPCONTACT),
        ("Universeel dimmer LED", ProductType.DIMMER),
        ("Drukknop met naamplaat", ProductType.DRUKKNOP),
        ("Afdekframe 1-voudig", ProductType.FRAME),
        ("USB module 2.4A", ProductType.MODULE),
        ("Blindplaat wit", ProductType.BLINDPLAAT),
        ("Wago klem", None),
    ])
    def test_product_type(self, extractor, text, expected):
        """Test product type families."""
        assert extractor.extract(text).product_type == expected

    def test_product_type_order(self, extractor):
        """Test schakelaar is tested before dimmer."""
        record = extractor.extract("Dimmer schakelaar 300W")
        assert record.product_type == ProductType.SCHAKELAAR

    @pytest.mark.parametrize("text,expected", [
        ("Enkelpolige schakelaar", SwitchType.SINGLE),
        ("Dubbelpolige schakelaar", SwitchType.DOUBLE),
        ("Wisselschakelaar", SwitchType.CROSSOVER),
        ("Kruisschakelaar", SwitchType.INTERMEDIATE),
        ("Drukknop", SwitchType.PUSH_BUTTON),
        ("Serieschakelaar", SwitchType.SERIES),
        ("Blindplaat", None),
    ])
    def test_switch_type(self, extractor, text, expected):
        """Test switch type families."""
        assert extractor.extract(text).switch_type == expected

    @pytest.mark.parametrize("text,expected", [
        ("Schuko stopcontact", SocketType.SCHUKO),
        ("Frans stopcontact", SocketType.FRENCH),
        ("USB lader inbouw", SocketType.USB),
        ("Data aansluiting", SocketType.DATA),
        ("Wandcontactdoos RJ45", SocketType.DATA),
        ("Telefoon aansluiting", SocketType.PHONE),
        ("Antenne aansluiting", SocketType.TV_SAT),
        ("Stopcontact", None),
    ])
    def test_socket_type(self, extractor, text, expected):
        """Test socket term lookup."""
        assert extractor.extract(text).socket_type == expected

    def test_socket_type_wire_values(self):
        """Test Dutch wire values."""
        assert SocketType.FRENCH.value == "frans"
        assert SocketType.TV_SAT.value == "tv/sat"


class TestRatings:
    """Tests for voltage, current and power."""

    @pytest.mark.parametrize("raw,expected", [
        (220, 230),
        (230, 230),
        (240, 230),
        (380, 400),
        (400, 400),
        (12, 12),
        (24, 24),
    ])
    def test_voltage_normalization(self, extractor, raw, expected):
        """Test common mains values normalize to 230/400."""
        assert extractor.extract(f"Schakelaar {raw}V").voltage == expected

    def test_voltage_word(self, extractor):
        """Test "Volt" spelling."""
        assert extractor.extract("Dimmer 230 Volt").voltage == 230

    @pytest.mark.parametrize("text,expected", [
        ("Gira schakelaar 230VAC 16A", 230),
        ("Jung dimmer 12Vdc", 12),
        ("Niko stopcontact 230Vac", 230),
        ("Afdekframe 3 voudig", None),
    ])
    def test_voltage_current_kind_suffix(self, extractor, text, expected):
        """Test AC/DC suffixes; "voudig" is not a voltage."""
        assert extractor.extract(text).voltage == expected

    @pytest.mark.parametrize("text,expected", [
        ("Schakelaar 16A", 16),
        ("Schakelaar 10AX", 10),
        ("Stopcontact 16 Amp", 16),
    ])
    def test_current(self, extractor, text, expected):
        """Test current notations."""
        assert extractor.extract(text).current_amp == expected

    @pytest.mark.parametrize("text,expected", [
        ("Dimmer 400W", 400),
        ("Dimmer 600 Watt", 600),
    ])
    def test_power(self, extractor, text, expected):
        """Test power notations."""
        assert extractor.extract(text).power_watt == expected


class TestPhysicalProperties:
    """Tests for poles, frame slots and mounting depth."""

    @pytest.mark.parametrize("text,expected", [
        ("Schakelaar 2-polig", 2),
        ("Schakelaar 3 polig", 3),
        ("Enkelpolige schakelaar", 1),
        ("Dubbelpolige schakelaar", 2),
        ("Single switch", 1),
        ("Wisselschakelaar", None),
    ])
    def test_poles(self, extractor, text, expected):
        """Test explicit poles first, then enkel/dubbel inference."""
        assert extractor.extract(text).poles == expected

    @pytest.mark.parametrize("text,expected", [
        ("Afdekframe 2-voudig", 2),
        ("Afdekframe 3 voudig", 3),
        ("Frame 2-gang", 2),
        ("Frame 1-vaks", 1),
        ("Triple frame", 3),
        ("Quad frame", 4),
        ("Frame", None),
    ])
    def test_frame_slots(self, extractor, text, expected):
        """Test frame slot notations."""
        assert extractor.extract(text).frame_slots == expected

    def test_mounting_depth(self, extractor):
        """Test depth with decimal comma."""
        record = extractor.extract("Dimmer inbouwdiepte 32,5 mm")
        assert record.mounting_depth_mm == 32.5


class TestDesign:
    """Tests for color and series."""

    @pytest.mark.parametrize("text,expected", [
        ("Schakelaar white", "wit"),
        ("Schakelaar antraciet", "zwart"),
        ("Schakelaar grey", "grijs"),
        ("Schakelaar inox", "rvs"),
        ("Schakelaar bronze", "brons"),
        ("Schakelaar messing", "goud"),
        ("Schakelaar alu", "aluminium"),
        ("Gira witte wisselschakelaar", "wit"),
        ("Zwarte schakelaar", "zwart"),
        ("Grijze afdekplaat", "grijs"),
        ("Bronzen dimmer", "brons"),
        ("Schakelaar brons", "brons"),
        ("Schakelaar", None),
    ])
    def test_color_mapping(self, extractor, text, expected):
        """Test color tokens map to Dutch canonical names."""
        assert extractor.extract(text).color == expected

    @pytest.mark.parametrize("text,expected", [
        ("Gira E2 schakelaar", "e2"),
        ("Gira Event schakelaar", "event"),
        ("Jung A500 afdekframe", "A500"),
        ("Jung LS990 schakelaar", "LS990"),
        ("Berker S.1 dimmer", "S.1"),
        ("Niko Original serie schakelaar", "Original serie"),
        ("Schakelaar wit", None),
    ])
    def test_series(self, extractor, text, expected):
        """Test brand series capture."""
        assert extractor.extract(text).series == expected

    def test_jung_frame_listing(self, extractor):
        """Jung frame with slots and mapped color."""
        record = extractor.extract("Jung A500 2-voudig afdekframe antraciet mat")
        assert record.product_type == ProductType.FRAME
        assert record.frame_slots == 2
        assert record.color == "zwart"
        assert record.series == "A500"


class TestFeatures:
    """Tests for tri-state features, IP rating, quantity and frame."""

    def test_features_are_true_when_present(self, extractor):
        """Test keywords set features to True."""
        record = extractor.extract("Smart dimmer met LED verlichting kinderveilig")
        assert record.led_indication is True
        assert record.smart_compatible is True
        assert record.child_protection is True

    def test_features_are_undetermined_when_absent(self, extractor):
        """Test absence never becomes False."""
        record = extractor.extract("Schakelaar wit")
        assert record.led_indication is None
        assert record.smart_compatible is None
        assert record.child_protection is None

    @pytest.mark.parametrize("text,expected", [
        ("Stopcontact IP44", "IP44"),
        ("Schakelaar ip 55 opbouw", "IP55"),
        ("Schakelaar", None),
    ])
    def test_ip_rating(self, extractor, text, expected):
        """Test IP code formatting."""
        assert extractor.extract(text).ip_rating == expected

    @pytest.mark.parametrize("text,expected", [
        ("Wisselschakelaar per 5 stuks", 5),
        ("Afdekframe doos 10", 10),
        ("Blindplaat per stuk", 1),
        ("Stopcontact los", 1),
        ("Gira inbouwdoos schakelaar 230V", None),
        ("Stopcontact", None),
    ])
    def test_quantity(self, extractor, text, expected):
        """Test packaging quantity and single-unit fallback."""
        assert extractor.extract(text).quantity == expected

    @pytest.mark.parametrize("text,expected", [
        ("Stopcontact inclusief frame", True),
        ("Schakelaar met frame", True),
        ("Schakelaar incl. frame", True),
        ("Stopcontact zonder frame", False),
        ("Schakelaar excl. frame", False),
        ("Schakelaar", None),
    ])
    def test_includes_frame(self, extractor, text, expected):
        """Test two-sided frame phrase."""
        assert extractor.extract(text).includes_frame is expected
