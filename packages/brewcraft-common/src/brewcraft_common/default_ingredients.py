"""
Default ingredient catalog.

Seed data loaded into a fresh ingredient store. Identifiers are stable:
``m*`` malts, ``h*`` hops, ``y*`` yeasts and ``a*`` adjuncts.
"""

from brewcraft_common.models import Flocculation, Ingredient, IngredientType


def _malt(id: str, name: str, lovibond: float, ppg: float) -> Ingredient:
    return Ingredient(id=id, name=name, type=IngredientType.MALT, lovibond=lovibond, ppg=ppg)


def _hop(id: str, name: str, alpha_acid: float) -> Ingredient:
    return Ingredient(id=id, name=name, type=IngredientType.HOP, alpha_acid=alpha_acid)


def _yeast(
    id: str,
    name: str,
    attenuation: int,
    flocculation: Flocculation,
    temp_range: tuple[float, float],
) -> Ingredient:
    return Ingredient(
        id=id,
        name=name,
        type=IngredientType.YEAST,
        attenuation=attenuation,
        flocculation=flocculation,
        temp_range=temp_range,
    )


def _adjunct(id: str, name: str) -> Ingredient:
    return Ingredient(id=id, name=name, type=IngredientType.ADJUNCT)


MALTS: tuple[Ingredient, ...] = (
    _malt("m1", "2-Row Pale Malt", 1.8, 37),
    _malt("m2", "Pilsner Malt", 1.4, 37),
    _malt("m3", "Munich Malt", 9, 35),
    _malt("m4", "Vienna Malt", 3.5, 35),
    _malt("m5", "Maris Otter", 3, 38),
    _malt("m6", "Golden Promise", 2.5, 37),
    _malt("m7", "Pale Ale Malt", 3.5, 37),
    _malt("m8", "Wheat Malt", 2, 38),
    _malt("m9", "Rye Malt", 3.5, 29),
    _malt("m10", "Munich Malt (Dark)", 20, 33),
    _malt("m11", "Caramel/Crystal 10L", 10, 35),
    _malt("m12", "Caramel/Crystal 20L", 20, 35),
    _malt("m13", "Caramel/Crystal 40L", 40, 34),
    _malt("m14", "Caramel/Crystal 60L", 60, 34),
    _malt("m15", "Caramel/Crystal 80L", 80, 34),
    _malt("m16", "Caramel/Crystal 120L", 120, 33),
    _malt("m17", "Special B", 180, 30),
    _malt("m18", "Chocolate Malt", 350, 28),
    _malt("m19", "Pale Chocolate", 200, 30),
    _malt("m20", "Roasted Barley", 500, 25),
    _malt("m21", "Black Patent Malt", 500, 28),
    _malt("m22", "Carafa I", 337, 30),
    _malt("m23", "Carafa II", 412, 30),
    _malt("m24", "Carafa III", 470, 30),
    _malt("m25", "Victory Malt", 28, 34),
    _malt("m26", "Biscuit Malt", 23, 35),
    _malt("m27", "Aromatic Malt", 26, 36),
    _malt("m28", "Melanoidin Malt", 28, 37),
    _malt("m29", "Brown Malt", 65, 32),
    _malt("m30", "Amber Malt", 30, 35),
    _malt("m31", "Honey Malt", 25, 37),
    _malt("m32", "Acidulated Malt", 2, 27),
    _malt("m33", "Flaked Oats", 1, 33),
    _malt("m34", "Flaked Wheat", 1.6, 35),
    _malt("m35", "Flaked Barley", 1.7, 32),
    _malt("m36", "Torrified Wheat", 1.5, 36),
)

HOPS: tuple[Ingredient, ...] = (
    _hop("h1", "Cascade", 5.5),
    _hop("h2", "Centennial", 10),
    _hop("h3", "Chinook", 13),
    _hop("h4", "Citra", 12),
    _hop("h5", "Mosaic", 12.25),
    _hop("h6", "Simcoe", 13),
    _hop("h7", "Amarillo", 8.5),
    _hop("h8", "Columbus", 15),
    _hop("h9", "Warrior", 16),
    _hop("h10", "Magnum", 14),
    _hop("h11", "Nugget", 13),
    _hop("h12", "Willamette", 5),
    _hop("h13", "Cluster", 7),
    _hop("h14", "Liberty", 4),
    _hop("h15", "Mount Hood", 6),
    _hop("h16", "Sterling", 7.5),
    _hop("h17", "Idaho 7", 13),
    _hop("h18", "Azacca", 14.5),
    _hop("h19", "El Dorado", 15),
    _hop("h20", "Ekuanot", 14.5),
    _hop("h21", "Falconer's Flight", 10.5),
    _hop("h22", "Loral", 11.5),
    _hop("h23", "Comet", 10),
    _hop("h24", "CTZ (Columbus/Tomahawk/Zeus)", 15.5),
    _hop("h25", "Hallertau Mittelfrüh", 4),
    _hop("h26", "Hallertau Tradition", 5.5),
    _hop("h27", "Tettnang", 4.5),
    _hop("h28", "Saaz", 3.5),
    _hop("h29", "Spalter", 4.5),
    _hop("h30", "Perle", 8),
    _hop("h31", "Northern Brewer", 9),
    _hop("h32", "Magnum (German)", 14),
    _hop("h33", "Hersbrucker", 3.5),
    _hop("h34", "Mandarina Bavaria", 8.5),
    _hop("h35", "Hüll Melon", 7),
    _hop("h36", "Polaris", 18),
    _hop("h37", "East Kent Goldings", 5),
    _hop("h38", "Fuggle", 4.5),
    _hop("h39", "Target", 10.5),
    _hop("h40", "Challenger", 7.5),
    _hop("h41", "Progress", 6.5),
    _hop("h42", "Bramling Cross", 6),
    _hop("h43", "Admiral", 14),
    _hop("h44", "Jester", 5.5),
    _hop("h45", "Galaxy", 14),
    _hop("h46", "Nelson Sauvin", 12),
    _hop("h47", "Motueka", 7),
    _hop("h48", "Riwaka", 5.5),
    _hop("h49", "Wakatu", 8),
    _hop("h50", "Pacific Jade", 13),
    _hop("h51", "Rakau", 11),
    _hop("h52", "Enigma", 17),
    _hop("h53", "Vic Secret", 16),
    _hop("h54", "Ella", 15),
    _hop("h55", "Styrian Goldings", 5),
    _hop("h56", "Strisselspalt", 3),
    _hop("h57", "Aramis", 7.5),
    _hop("h58", "Mistral", 8),
)

YEASTS: tuple[Ingredient, ...] = (
    _yeast("y1", "US-05 American Ale", 78, Flocculation.MEDIUM, (59, 75)),
    _yeast("y2", "WLP001 California Ale", 76, Flocculation.MEDIUM, (68, 73)),
    _yeast("y3", "Wyeast 1056 American Ale", 75, Flocculation.MEDIUM, (60, 72)),
    _yeast("y4", "WLP051 California Ale V", 77, Flocculation.MEDIUM, (66, 70)),
    _yeast("y5", "US-04 American Ale", 75, Flocculation.MEDIUM, (54, 77)),
    _yeast("y6", "S-04 English Ale", 75, Flocculation.HIGH, (59, 75)),
    _yeast("y7", "WLP002 English Ale", 68, Flocculation.HIGH, (65, 68)),
    _yeast("y8", "Wyeast 1968 London ESB", 70, Flocculation.HIGH, (64, 72)),
    _yeast("y9", "WLP007 Dry English Ale", 75, Flocculation.HIGH, (65, 70)),
    _yeast("y10", "Wyeast 1318 London Ale III", 75, Flocculation.HIGH, (64, 74)),
    _yeast("y11", "Belgian Strong Ale", 78, Flocculation.MEDIUM, (68, 78)),
    _yeast("y12", "WLP500 Trappist Ale", 78, Flocculation.LOW, (65, 72)),
    _yeast("y13", "Wyeast 3787 Trappist High Gravity", 78, Flocculation.LOW, (64, 78)),
    _yeast("y14", "WLP530 Abbey Ale", 77, Flocculation.MEDIUM, (66, 72)),
    _yeast("y15", "T-58 Belgian Ale", 75, Flocculation.MEDIUM, (59, 75)),
    _yeast("y16", "WLP550 Belgian Ale", 78, Flocculation.MEDIUM, (68, 78)),
    _yeast("y17", "Wyeast 3942 Belgian Wheat", 74, Flocculation.LOW, (62, 75)),
    _yeast("y18", "WLP400 Belgian Wit", 76, Flocculation.MEDIUM, (67, 74)),
    _yeast("y19", "WLP300 Hefeweizen", 74, Flocculation.LOW, (68, 72)),
    _yeast("y20", "Wyeast 3068 Weihenstephan Weizen", 77, Flocculation.LOW, (64, 75)),
    _yeast("y21", "WB-06 Wheat Beer", 80, Flocculation.LOW, (59, 75)),
    _yeast("y22", "Saflager W-34/70", 83, Flocculation.HIGH, (48, 59)),
    _yeast("y23", "WLP830 German Lager", 76, Flocculation.MEDIUM, (50, 55)),
    _yeast("y24", "Wyeast 2124 Bohemian Lager", 73, Flocculation.MEDIUM, (48, 56)),
    _yeast("y25", "WLP940 Mexican Lager", 77, Flocculation.HIGH, (50, 55)),
    _yeast("y26", "Wyeast 2206 Bavarian Lager", 75, Flocculation.MEDIUM, (46, 58)),
    _yeast("y27", "S-23 Saflager", 82, Flocculation.HIGH, (54, 59)),
    _yeast("y28", "WLP090 San Diego Super Yeast", 80, Flocculation.MEDIUM, (65, 68)),
    _yeast("y29", "Kveik Voss", 80, Flocculation.HIGH, (68, 98)),
    _yeast("y30", "WLP644 Sacch. Trois", 85, Flocculation.MEDIUM, (68, 85)),
    _yeast("y31", "Wyeast 3711 French Saison", 85, Flocculation.LOW, (65, 77)),
    _yeast("y32", "WLP566 Belgian Saison II", 78, Flocculation.MEDIUM, (68, 78)),
    _yeast("y33", "Nottingham Ale Yeast", 77, Flocculation.HIGH, (57, 70)),
    _yeast("y34", "Windsor Ale Yeast", 72, Flocculation.HIGH, (59, 75)),
)

ADJUNCTS: tuple[Ingredient, ...] = (
    _adjunct("a1", "Corn Sugar (Dextrose)"),
    _adjunct("a2", "Table Sugar (Sucrose)"),
    _adjunct("a3", "Belgian Candi Sugar (Clear)"),
    _adjunct("a4", "Belgian Candi Sugar (Dark)"),
    _adjunct("a5", "Belgian Candi Syrup (Dark)"),
    _adjunct("a6", "Brown Sugar"),
    _adjunct("a7", "Molasses"),
    _adjunct("a8", "Honey"),
    _adjunct("a9", "Maple Syrup"),
    _adjunct("a10", "Turbinado Sugar"),
    _adjunct("a11", "Rice Syrup Solids"),
    _adjunct("a12", "Invert Sugar"),
    _adjunct("a13", "Lactose"),
    _adjunct("a14", "Maltodextrin"),
    _adjunct("a15", "Oats"),
    _adjunct("a16", "Rice Hulls"),
    _adjunct("a17", "Corn (Flaked)"),
    _adjunct("a18", "Rice (Flaked)"),
    _adjunct("a19", "Irish Moss"),
    _adjunct("a20", "Whirlfloc Tablet"),
    _adjunct("a21", "Yeast Nutrient"),
    _adjunct("a22", "Gypsum (Calcium Sulfate)"),
    _adjunct("a23", "Calcium Chloride"),
    _adjunct("a24", "Lactic Acid"),
    _adjunct("a25", "Phosphoric Acid"),
    _adjunct("a26", "Baking Soda"),
    _adjunct("a27", "Chalk (Calcium Carbonate)"),
    _adjunct("a28", "Epsom Salt (Magnesium Sulfate)"),
    _adjunct("a29", "Coriander Seed"),
    _adjunct("a30", "Orange Peel (Bitter)"),
    _adjunct("a31", "Orange Peel (Sweet)"),
    _adjunct("a32", "Cinnamon Stick"),
    _adjunct("a33", "Vanilla Bean"),
    _adjunct("a34", "Vanilla Extract"),
    _adjunct("a35", "Cacao Nibs"),
    _adjunct("a36", "Coffee (Whole Bean)"),
    _adjunct("a37", "Coffee (Ground)"),
    _adjunct("a38", "Cold Brew Coffee"),
    _adjunct("a39", "Ginger Root"),
    _adjunct("a40", "Juniper Berries"),
    _adjunct("a41", "Star Anise"),
    _adjunct("a42", "Cloves"),
    _adjunct("a43", "Nutmeg"),
    _adjunct("a44", "Allspice"),
    _adjunct("a45", "Cardamom"),
    _adjunct("a46", "Black Pepper"),
    _adjunct("a47", "Grains of Paradise"),
    _adjunct("a48", "Chamomile"),
    _adjunct("a49", "Hibiscus"),
    _adjunct("a50", "Rose Hips"),
    _adjunct("a51", "Lavender"),
    _adjunct("a52", "Cherry Puree"),
    _adjunct("a53", "Raspberry Puree"),
    _adjunct("a54", "Blackberry Puree"),
    _adjunct("a55", "Blueberry Puree"),
    _adjunct("a56", "Strawberry Puree"),
    _adjunct("a57", "Peach Puree"),
    _adjunct("a58", "Apricot Puree"),
    _adjunct("a59", "Mango Puree"),
    _adjunct("a60", "Passion Fruit Puree"),
    _adjunct("a61", "Pumpkin Puree"),
    _adjunct("a62", "Apple Juice/Cider"),
    _adjunct("a63", "Lemon Zest"),
    _adjunct("a64", "Lime Zest"),
    _adjunct("a65", "Grapefruit Zest"),
    _adjunct("a66", "Oak Chips (American)"),
    _adjunct("a67", "Oak Chips (French)"),
    _adjunct("a68", "Oak Cubes (Toasted)"),
    _adjunct("a69", "Coconut (Toasted)"),
    _adjunct("a70", "Peanut Butter Powder"),
)

DEFAULT_INGREDIENTS: tuple[Ingredient, ...] = MALTS + HOPS + YEASTS + ADJUNCTS
