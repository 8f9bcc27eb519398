"""
Unit tests for API data models.
"""

import pytest
from pydantic import ValidationError

from recipeapp.modules.api import GenericResponse, IngredientRequest, Recipe, RecipeUnit


def test_recipe_uses_camel_case_on_the_wire():
    recipe = Recipe.model_validate({
        "id": "r1",
        "name": "Toast",
        "imageUrl": "http://img.example.com/t.png",
        "phases": [{"name": "Bake", "items": [
            {"ordinal": 1, "ingredient": {"id": 1, "name": "bread"}, "amount": 2, "unit": "pcs"}
        ]}],
    })

    dumped = recipe.model_dump(mode="json", by_alias=True)

    assert recipe.image_url == "http://img.example.com/t.png"
    assert dumped["imageUrl"] == "http://img.example.com/t.png"
    assert dumped["phases"][0]["items"][0]["unit"] == "pcs"
    assert recipe.phases[0].items[0].unit is RecipeUnit.PCS


def test_recipe_unit_values():
    assert [unit.value for unit in RecipeUnit] == ["pcs", "kg", "g", "cup(s)", "tsp"]


def test_recipe_rejects_unknown_unit():
    with pytest.raises(ValidationError):
        Recipe.model_validate({
            "id": "r1",
            "name": "Toast",
            "phases": [{"name": "Bake", "items": [
                {"ordinal": 1, "ingredient": {"id": 1, "name": "bread"}, "amount": 2, "unit": "lb"}
            ]}],
        })


def test_ingredient_request_alias():
    assert IngredientRequest.model_validate({"ingredientNames": ["a"]}).ingredient_names == ["a"]
    assert IngredientRequest.model_validate({}).ingredient_names is None


def test_generic_response_status_is_restricted():
    assert GenericResponse(status="OK").model_dump(exclude_none=True) == {"status": "OK"}
    with pytest.raises(ValidationError):
        GenericResponse(status="MAYBE")
