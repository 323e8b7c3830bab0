import pytest

from receipts.tax import TaxGroup


@pytest.mark.parametrize(
    "group, rate, label",
    [
        (TaxGroup.FOOD, 0.08, "Food (8%)"),
        (TaxGroup.ALCOHOL, 0.10, "Alcohol (10%)"),
        (TaxGroup.NON_TAXABLE, 0.0, "Non-taxable"),
        (TaxGroup.OTHER, 0.08, "Other (8%)"),
    ],
)
def test_rates_and_labels(group, rate, label):
    assert group.rate == pytest.approx(rate)
    assert group.label == label
    assert str(group) == label


def test_all_lists_every_group_in_display_order():
    assert TaxGroup.ALL == (TaxGroup.FOOD, TaxGroup.ALCOHOL, TaxGroup.NON_TAXABLE, TaxGroup.OTHER)
    assert set(TaxGroup.ALL) == set(TaxGroup)
