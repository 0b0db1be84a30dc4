import dataclasses

import pytest

from warungkasir.models import (
    Category,
    Item,
    all_items,
    all_makanan,
    all_minuman,
    all_snack,
)


def test_first_food_item_is_pinned():
    first = all_makanan()[0]
    assert first == Item("Nasi Goreng", 18000, Category.MAKANAN)


def test_last_snack_item_is_pinned():
    assert all_snack()[-1] == Item("Takoyaki", 11000, Category.SNACK)


def test_espresso_price():
    prices = {item.name: item.price for item in all_minuman()}
    assert prices["Espresso"] == 8500


def test_category_sizes():
    assert len(all_makanan()) == 10
    assert len(all_minuman()) == 20
    assert len(all_snack()) == 20


@pytest.mark.parametrize(
    "getter, category",
    [
        (all_makanan, Category.MAKANAN),
        (all_minuman, Category.MINUMAN),
        (all_snack, Category.SNACK),
    ],
)
def test_items_carry_their_category(getter, category):
    assert all(item.category is category for item in getter())


def test_all_items_is_concatenation_in_order():
    assert all_items() == all_makanan() + all_minuman() + all_snack()


def test_returned_lists_are_independent():
    items = all_makanan()
    items.reverse()
    items.pop()
    assert all_makanan()[0].name == "Nasi Goreng"
    assert len(all_makanan()) == len(items) + 1


def test_items_are_immutable():
    item = all_snack()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.price = 1
    assert item.price == 5000
    assert all_snack()[0] == Item("Keripik Singkong", 5000, Category.SNACK)


def test_prices_are_positive():
    assert all(item.price > 0 for item in all_items())