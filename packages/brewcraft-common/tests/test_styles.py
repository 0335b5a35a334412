"""
Tests for brewcraft-common beer style matching.
"""

import pytest
from brewcraft_common.catalog import BrewingCatalog, default_catalog
from brewcraft_common.models import (
    BeerStyle,
    DerivedValues,
    HopUse,
    Recipe,
    RecipeIngredient,
    Unit,
)
from brewcraft_common.styles import (
    ingredient_bonus,
    match_styles,
    score_parameter,
    score_style,
)


def line(ingredient_id: str, amount: float, unit: Unit = Unit.LB, **usage) -> RecipeIngredient:
    return RecipeIngredient(
        ingredient=default_catalog().get_ingredient(ingredient_id),
        amount=amount,
        unit=unit,
        **usage,
    )


def american_pale() -> Recipe:
    return Recipe(
        id="apa",
        name="Backyard Pale",
        ingredients=[
            line("m1", 10),
            line("h1", 2, Unit.OZ, hop_use=HopUse.BOIL, boil_time=60),
            line("y1", 1, Unit.PACKET),
        ],
    )


def values(srm=3.0, abv=5.2, ibu=35, og=1.050, fg=1.011) -> DerivedValues:
    return DerivedValues(
        original_gravity=og,
        final_gravity=fg,
        abv=abv,
        ibu=ibu,
        srm=srm,
        calories_per_12oz=160,
        carbs_per_12oz=14.0,
    )


def style(name="Test Style", category="Test", **ranges) -> BeerStyle:
    defaults = {
        "og_range": (1.040, 1.060),
        "fg_range": (1.008, 1.014),
        "abv_range": (4.0, 6.0),
        "ibu_range": (20, 40),
        "srm_range": (4, 10),
    }
    defaults.update(ranges)
    return BeerStyle(name=name, category=category, **defaults)


class TestScoreParameter:
    """Tests for graduated parameter scoring."""

    def test_center_scores_full_weight(self):
        assert score_parameter(5, (0, 10), 30) == pytest.approx(30)

    def test_edge_scores_seventy_percent(self):
        assert score_parameter(10, (0, 10), 30) == pytest.approx(21)

    def test_inside_tolerance_band(self):
        # Band is 1.5 wide; halfway through it earns a quarter of the weight
        assert score_parameter(10.75, (0, 10), 20) == pytest.approx(5)

    def test_beyond_tolerance_band(self):
        assert score_parameter(12, (0, 10), 20) == 0

    def test_below_range(self):
        assert score_parameter(-0.75, (0, 10), 20) == pytest.approx(5)

    def test_zero_width_range_hit(self):
        assert score_parameter(5, (5, 5), 10) == 10

    def test_zero_width_range_miss(self):
        assert score_parameter(5.1, (5, 5), 10) == 0


class TestIngredientBonus:
    """Tests for tell-tale ingredient bonuses."""

    def test_wheat_beer(self):
        wheat = default_catalog().get_style("Wheat Beer")
        assert ingredient_bonus(wheat, ["wheat malt"]) == 10

    def test_wheat_bonus_is_style_specific(self):
        hefe = default_catalog().get_style("Hefeweizen")
        assert ingredient_bonus(hefe, ["wheat malt"]) == 0

    def test_roast_in_stout(self):
        stout = default_catalog().get_style("Dry Stout")
        assert ingredient_bonus(stout, ["roasted barley"]) == 10

    def test_candi_in_belgian(self):
        tripel = default_catalog().get_style("Belgian Tripel")
        assert ingredient_bonus(tripel, ["belgian candi sugar (clear)"]) == 5

    def test_american_hops_in_pale_ale(self):
        apa = default_catalog().get_style("American Pale Ale")
        assert ingredient_bonus(apa, ["2-row pale malt", "cascade"]) == 5

    def test_no_bonus(self):
        apa = default_catalog().get_style("American Pale Ale")
        assert ingredient_bonus(apa, ["2-row pale malt", "fuggle"]) == 0


class TestScoreStyle:
    """Tests for whole-style scoring."""

    def test_pale_ale_beats_stout(self):
        catalog = default_catalog()
        apa = score_style(catalog.get_style("American Pale Ale"), values(), [])
        stout = score_style(catalog.get_style("Dry Stout"), values(), [])
        assert apa.confidence > stout.confidence

    def test_matched_parameters(self):
        apa = score_style(default_catalog().get_style("American Pale Ale"), values(), [])
        assert apa.matches == ["SRM", "ABV", "IBU", "OG", "FG"]

    def test_confidence_capped(self):
        exact = style(
            og_range=(1.050, 1.050),
            fg_range=(1.011, 1.011),
            abv_range=(5.2, 5.2),
            ibu_range=(35, 35),
            srm_range=(3, 3),
            category="Pale Ale",
        )
        match = score_style(exact, values(), ["citra"])
        assert match.confidence == 100

    def test_no_overlap_scores_zero(self):
        far = style(
            og_range=(1.100, 1.120),
            fg_range=(1.030, 1.040),
            abv_range=(10, 12),
            ibu_range=(80, 100),
            srm_range=(35, 40),
        )
        match = score_style(far, values(), [])
        assert match.confidence == 0
        assert match.matches == []


class TestMatchStyles:
    """Tests for ranking a recipe against a catalog."""

    def test_american_pale_ale_ranks_first(self):
        matches = match_styles(american_pale())
        assert matches[0].style == "American Pale Ale"

    def test_pale_styles_above_stouts(self):
        catalog = default_catalog()
        matches = match_styles(american_pale(), limit=len(catalog.styles))
        by_name = {m.style: m.confidence for m in matches}
        stouts = catalog.styles_in_category("Stout")
        assert all(by_name["American Pale Ale"] > by_name[s.name] for s in stouts)

    def test_sorted_descending(self):
        matches = match_styles(american_pale(), limit=10)
        confidences = [m.confidence for m in matches]
        assert confidences == sorted(confidences, reverse=True)

    def test_confidence_bounds(self):
        catalog = default_catalog()
        for match in match_styles(american_pale(), limit=len(catalog.styles)):
            assert 0 <= match.confidence <= 100

    @pytest.mark.parametrize(
        "extreme",
        [
            values(srm=-5.0, abv=-3.0, ibu=-20, og=0.9, fg=0.95),
            values(srm=900.0, abv=80.0, ibu=5000, og=2.5, fg=1.9),
            values(srm=0.0, abv=0.0, ibu=0, og=1.0, fg=1.0),
        ],
    )
    def test_confidence_bounds_extreme_values(self, extreme):
        every_bonus = [
            "wheat malt",
            "roasted barley",
            "black patent",
            "chocolate malt",
            "belgian candi sugar",
            "cascade",
            "citra",
        ]
        for catalog_style in default_catalog().styles:
            match = score_style(catalog_style, extreme, every_bonus)
            assert 0 <= match.confidence <= 100

    def test_default_limit(self):
        assert len(match_styles(american_pale())) == 5

    def test_custom_limit(self):
        assert len(match_styles(american_pale(), limit=2)) == 2

    def test_injected_catalog(self):
        catalog = BrewingCatalog(styles=(style(name="House Ale"),))
        matches = match_styles(american_pale(), catalog=catalog)
        assert [m.style for m in matches] == ["House Ale"]

    def test_ties_keep_catalog_order(self):
        catalog = BrewingCatalog(styles=(style(name="First"), style(name="Second")))
        matches = match_styles(american_pale(), catalog=catalog)
        assert [m.style for m in matches] == ["First", "Second"]

    def test_empty_catalog(self):
        assert match_styles(american_pale(), catalog=BrewingCatalog()) == []

    def test_deterministic(self):
        assert match_styles(american_pale()) == match_styles(american_pale())
