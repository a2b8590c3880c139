"""Tests for pre-made meal suggestions."""

from meal_tracker.services.catalog import ReferenceCatalog
from meal_tracker.services.matcher import MealMatcherService, suggest_premade_meal


def test_two_of_three_ingredients_suggest_meal(catalog: ReferenceCatalog) -> None:
    meal = suggest_premade_meal("dinner", ["chicken", "rice"], catalog)

    assert meal is not None
    assert meal.id == 1


def test_single_ingredient_never_suggests(catalog: ReferenceCatalog) -> None:
    assert suggest_premade_meal("dinner", ["x"], catalog) is None
    assert suggest_premade_meal("dinner", ["chicken"], catalog) is None


def test_empty_names_are_discarded(catalog: ReferenceCatalog) -> None:
    assert suggest_premade_meal("dinner", ["chicken", ""], catalog) is None


def test_meal_name_is_required(catalog: ReferenceCatalog) -> None:
    assert suggest_premade_meal("", ["chicken", "rice"], catalog) is None
    assert suggest_premade_meal(None, ["chicken", "rice"], catalog) is None


def test_match_is_case_insensitive_and_bidirectional(
    catalog: ReferenceCatalog,
) -> None:
    meal = suggest_premade_meal(
        "lunch", ["Grilled CHICKEN BREAST", "brown rice with lemon"], catalog
    )

    assert meal is not None
    assert meal.id == 1


def test_first_qualifying_meal_wins(catalog: ReferenceCatalog) -> None:
    meal = suggest_premade_meal("supper", ["salmon", "sweet potato"], catalog)

    assert meal is not None
    assert meal.id == 2


def test_half_match_qualifies(catalog: ReferenceCatalog) -> None:
    # Omelette: eggs, spinach, tomato, olive oil -> 2 of 4
    meal = suggest_premade_meal("brunch", ["tomato", "olive oil"], catalog)

    assert meal is not None
    assert meal.id == 3


def test_no_qualifying_meal(catalog: ReferenceCatalog) -> None:
    assert suggest_premade_meal("snack", ["quinoa", "avocado"], catalog) is None


def test_empty_catalog_never_suggests(catalog: ReferenceCatalog) -> None:
    empty = ReferenceCatalog(
        ingredients=catalog.ingredients, cooking_methods=catalog.cooking_methods
    )

    assert suggest_premade_meal("dinner", ["chicken", "rice"], empty) is None


def test_service_wraps_matcher(catalog: ReferenceCatalog) -> None:
    service = MealMatcherService(catalog)

    suggestion = service.suggest("pizza night", ["cheese", "pizza dough", "tomato"])

    assert suggestion is not None
    assert suggestion.name == "Cheese Pizza"
