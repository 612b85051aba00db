import pytest

from responsive_metrics import CategoryTable, ResponsiveError, SizeCategory, ViewportMetrics, select
from responsive_metrics.selector import responsive


class TestSelect:

    def test_exact_tier(self):
        assert select(SizeCategory.DESKTOP, "m", "t", "d", "l") == "d"

    def test_mobile_only_answers_every_category(self):
        for category in SizeCategory:
            assert select(category, 1) == 1

    def test_falls_back_toward_mobile(self):
        assert select(SizeCategory.LARGE_DESKTOP, "m", tablet="t") == "t"
        assert select(SizeCategory.LARGE_DESKTOP, "m", desktop="d") == "d"
        assert select(SizeCategory.DESKTOP, "m", tablet="t", large_desktop="l") == "t"

    def test_never_looks_upward(self):
        assert select(SizeCategory.TABLET, "m", desktop="d", large_desktop="l") == "m"

    def test_falsy_values_are_kept(self):
        assert select(SizeCategory.TABLET, 5, 0) == 0
        assert select(SizeCategory.DESKTOP, True, False) is False

    def test_mobile_is_mandatory(self):
        with pytest.raises(ResponsiveError, match="mobile value is required"):
            select(SizeCategory.MOBILE, None, 1)


class TestResponsive:

    def test_classifies_then_selects(self, tall_phone, full_hd):
        assert responsive(tall_phone, 1, 2, 3, 4) == 1
        assert responsive(full_hd, 1, 2, 3, 4) == 4
        assert responsive(ViewportMetrics(width=800, height=1000), 1, 2) == 2


class TestCategoryTable:

    def test_partial_table_resolves_through_chain(self):
        table = CategoryTable(10, desktop=30)
        assert table.resolve(SizeCategory.MOBILE) == 10
        assert table.resolve(SizeCategory.TABLET) == 10
        assert table.resolve(SizeCategory.DESKTOP) == 30
        assert table.resolve(SizeCategory.LARGE_DESKTOP) == 30
