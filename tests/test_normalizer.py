"""normalizer モジュールのユニットテスト."""

from decimal import Decimal

from ssd_ranker.models import ProductRecord
from ssd_ranker.normalizer import (
    get_capacity_in_gb,
    normalize,
    parse_price,
    unit_price_per_gb,
)


class TestParsePrice:
    """parse_price のテスト."""

    def test_thousands_separator_and_trailing_symbol(self):
        assert parse_price("2,499.00₾") == 2499

    def test_leading_symbol_truncates_fraction(self):
        """小数部は四捨五入ではなく切り捨てること."""
        assert parse_price("₾199.50") == 199
        assert parse_price("₾199.99") == 199

    def test_multiple_separators(self):
        assert parse_price("1,234,567.00₾") == 1234567

    def test_without_fraction(self):
        assert parse_price("89₾") == 89

    def test_surrounding_whitespace(self):
        assert parse_price("  ₾ 350.00 ") == 350

    def test_none_and_empty(self):
        assert parse_price(None) is None
        assert parse_price("") is None

    def test_non_numeric(self):
        assert parse_price("Call for price") is None
        assert parse_price("₾") is None

    def test_zero_is_parsed(self):
        """0 はパース自体は成功する（除外は normalize 側）."""
        assert parse_price("0.00₾") == 0


class TestGetCapacityInGB:
    """get_capacity_in_gb のテスト."""

    def test_terabytes(self):
        assert get_capacity_in_gb("Samsung 980 1TB NVMe") == 1000

    def test_gigabytes(self):
        assert get_capacity_in_gb("Samsung 980 500GB NVMe") == 500

    def test_no_capacity(self):
        assert get_capacity_in_gb("No size here") is None

    def test_case_insensitive_with_space(self):
        assert get_capacity_in_gb("Samsung T7 2 tb") == 2000
        assert get_capacity_in_gb("Samsung 870 QVO 256gb") == 256

    def test_first_match_only(self):
        assert get_capacity_in_gb("Samsung 4TB (4000GB) QVO") == 4000
        assert get_capacity_in_gb("Samsung 250GB / 1TB bundle") == 250

    def test_model_number_not_taken_as_capacity(self):
        assert get_capacity_in_gb("Samsung 990 PRO 2TB") == 2000

    def test_none_and_empty(self):
        assert get_capacity_in_gb(None) is None
        assert get_capacity_in_gb("") is None


class TestUnitPricePerGB:
    """unit_price_per_gb のテスト."""

    def test_two_decimal_places(self):
        result = unit_price_per_gb(2499, 1000)
        assert result == Decimal("2.50")
        assert str(result) == "2.50"

    def test_rounds_half_up(self):
        assert unit_price_per_gb(199, 500) == Decimal("0.40")
        assert unit_price_per_gb(1, 8) == Decimal("0.13")

    def test_rounds_down(self):
        assert unit_price_per_gb(100, 3) == Decimal("33.33")


class TestNormalize:
    """normalize のテスト."""

    def _record(self, name: str, price: str) -> ProductRecord:
        return ProductRecord(name=name, raw_price_text=price, raw_capacity_text=name)

    def test_valid_record(self):
        product = normalize(self._record("Samsung 980 1TB NVMe", "2,499.00₾"))

        assert product is not None
        assert product.name == "Samsung 980 1TB NVMe"
        assert product.price == 2499
        assert product.capacity_gb == 1000
        assert product.unit_price_per_gb == Decimal("2.50")

    def test_missing_capacity(self):
        assert normalize(self._record("Samsung SATA Cable", "15.00₾")) is None

    def test_unparseable_price(self):
        assert normalize(self._record("Samsung 980 1TB", "N/A")) is None

    def test_zero_price_dropped(self):
        assert normalize(self._record("Samsung 980 250GB", "0.00₾")) is None

    def test_zero_capacity_dropped(self):
        assert normalize(self._record("Samsung 0GB placeholder", "10.00₾")) is None
