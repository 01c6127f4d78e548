"""
Tests for the category/fuel taxonomy.
"""

import pytest

from carbon_aegis.services import taxonomy
from carbon_aegis.utils.constants import Category, Scope


def test_taxonomy_has_no_dead_end_selections():
    assert taxonomy.check_taxonomy_integrity() == []


def test_scope_categories_in_display_order():
    assert [c.category_id for c in taxonomy.get_scope_categories(Scope.SCOPE_1)] == [
        Category.FUELS,
        Category.BIOENERGY,
        Category.PASSENGER_VEHICLES,
        Category.DELIVERY_VEHICLES,
        Category.REFRIGERANT,
    ]
    assert [c.category_id for c in taxonomy.get_scope_categories(Scope.SCOPE_2)] == [
        Category.UK_ELECTRICITY,
        Category.HEAT_AND_STEAM,
    ]
    assert taxonomy.get_scope_categories(Scope.SCOPE_3) == []


@pytest.mark.parametrize(
    "category, scope, expected",
    [
        (Category.FUELS, Scope.SCOPE_1, True),
        (Category.FUELS, Scope.SCOPE_2, False),
        (Category.HEAT_AND_STEAM, Scope.SCOPE_2, True),
        ("Business travel", Scope.SCOPE_3, False),
        (None, Scope.SCOPE_1, False),
    ],
)
def test_category_belongs_to_scope(category, scope, expected):
    assert taxonomy.category_belongs_to_scope(category, scope) is expected


def test_fuel_options():
    fuel_types = [option.value for option in taxonomy.get_fuel_types(Category.FUELS)]
    assert fuel_types == ["Gaseous fuels", "Liquid fuels", "Solid fuels"]

    sub_types = [option.value for option in taxonomy.get_fuel_sub_types("Liquid fuels")]
    assert "Diesel (100% mineral diesel)" in sub_types

    assert [option.value for option in taxonomy.get_units("Liquid fuels")][-1] == "litres"
    assert taxonomy.get_fuel_sub_types("Unknown fuel") == ()
    assert [option.value for option in taxonomy.get_category_units(Category.UK_ELECTRICITY)] == ["kWh"]


def test_option_labels_differ_from_values():
    labels = {option.value: option.label for option in taxonomy.get_fuel_types(Category.FUELS)}
    assert labels["Liquid fuels"] == "Liquid Fuels"
