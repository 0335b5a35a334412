"""
Default beer style table.

Ranges follow the BJCP guidelines, widened slightly where homebrew
recipes commonly land just outside them. Order matters: the style matcher
breaks confidence ties by position in this table.
"""

from brewcraft_common.models import BeerStyle


def _style(
    name: str,
    category: str,
    og: tuple[float, float],
    fg: tuple[float, float],
    abv: tuple[float, float],
    ibu: tuple[float, float],
    srm: tuple[float, float],
    description: str,
) -> BeerStyle:
    return BeerStyle(
        name=name,
        category=category,
        og_range=og,
        fg_range=fg,
        abv_range=abv,
        ibu_range=ibu,
        srm_range=srm,
        description=description,
    )


BEER_STYLES: tuple[BeerStyle, ...] = (
    # Pale Ales
    _style(
        "American Pale Ale", "Pale Ale",
        (1.045, 1.060), (1.010, 1.015), (4.5, 6.2), (30, 50), (3, 10),
        "Pale, refreshing and hoppy with American hop citrus and pine over a clean malt base.",
    ),
    _style(
        "English Pale Ale", "Pale Ale",
        (1.040, 1.048), (1.008, 1.012), (3.8, 4.6), (25, 40), (8, 16),
        "Balanced British bitter with bready malt, earthy hops and mild fruity esters.",
    ),
    _style(
        "Blonde Ale", "Pale Ale",
        (1.038, 1.054), (1.008, 1.013), (3.8, 5.5), (15, 28), (3, 6),
        "Easy-drinking, malt-leaning pale ale with soft bitterness.",
    ),
    # IPAs
    _style(
        "American IPA", "IPA",
        (1.056, 1.070), (1.008, 1.014), (5.5, 7.5), (40, 70), (6, 14),
        "Decisively hoppy and bitter with a dry finish and American hop aroma.",
    ),
    _style(
        "English IPA", "IPA",
        (1.050, 1.070), (1.010, 1.015), (5.0, 7.5), (40, 60), (6, 14),
        "Hoppy, moderately strong pale ale with English hop character and biscuity malt.",
    ),
    _style(
        "Session IPA", "IPA",
        (1.038, 1.050), (1.006, 1.012), (3.5, 5.0), (35, 55), (3, 7),
        "IPA hop intensity in a light, sessionable body.",
    ),
    _style(
        "New England IPA", "IPA",
        (1.060, 1.085), (1.010, 1.015), (6.0, 9.0), (25, 60), (3, 7),
        "Hazy, juicy IPA with saturated hop aroma and soft perceived bitterness.",
    ),
    _style(
        "Double IPA", "IPA",
        (1.065, 1.085), (1.008, 1.018), (7.5, 10.0), (60, 100), (6, 14),
        "Intensely hoppy, strong and dry, with enough malt to support the bitterness.",
    ),
    # Amber & Brown
    _style(
        "American Amber Ale", "Amber Ale",
        (1.045, 1.060), (1.010, 1.015), (4.5, 6.2), (25, 40), (10, 17),
        "Caramel malt balanced by American hops in an amber, medium-bodied ale.",
    ),
    _style(
        "Irish Red Ale", "Amber Ale",
        (1.036, 1.046), (1.010, 1.014), (3.8, 5.0), (18, 28), (9, 14),
        "Malt-focused red ale with light caramel and a dry, faintly roasty finish.",
    ),
    _style(
        "American Brown Ale", "Brown Ale",
        (1.045, 1.060), (1.010, 1.016), (4.3, 6.2), (20, 30), (18, 35),
        "Chocolate and caramel malt flavours with moderate American hop presence.",
    ),
    # Porters
    _style(
        "English Porter", "Porter",
        (1.040, 1.052), (1.008, 1.014), (4.0, 5.4), (18, 35), (20, 30),
        "Moderate-strength brown beer with restrained roast and chocolate notes.",
    ),
    _style(
        "American Porter", "Porter",
        (1.050, 1.070), (1.012, 1.018), (4.8, 6.5), (25, 50), (22, 40),
        "Substantial, malty dark ale with assertive roast and often noticeable hops.",
    ),
    _style(
        "Baltic Porter", "Porter",
        (1.060, 1.090), (1.016, 1.024), (6.5, 9.5), (20, 40), (17, 30),
        "Strong, smooth, lager-fermented porter with dark fruit and caramel.",
    ),
    # Stouts
    _style(
        "Dry Stout", "Stout",
        (1.036, 1.044), (1.007, 1.011), (4.0, 4.5), (25, 45), (25, 40),
        "Black, roasty and dry with coffee-like bitterness from roasted barley.",
    ),
    _style(
        "Sweet Stout", "Stout",
        (1.044, 1.060), (1.012, 1.024), (4.0, 6.0), (20, 40), (30, 40),
        "Full-bodied, sweet dark ale, often with lactose, and restrained roast.",
    ),
    _style(
        "Oatmeal Stout", "Stout",
        (1.045, 1.065), (1.010, 1.018), (4.2, 5.9), (25, 40), (22, 40),
        "Silky, full stout with oat smoothness and medium roast.",
    ),
    _style(
        "American Stout", "Stout",
        (1.050, 1.075), (1.010, 1.022), (5.0, 7.0), (35, 75), (30, 40),
        "Roasty, hoppy stout with coffee and chocolate backed by American hops.",
    ),
    _style(
        "Imperial Stout", "Stout",
        (1.075, 1.115), (1.018, 1.030), (8.0, 12.0), (50, 90), (30, 40),
        "Intensely flavoured, strong black ale with deep roast and dark fruit.",
    ),
    # Belgian
    _style(
        "Witbier", "Belgian",
        (1.044, 1.052), (1.008, 1.012), (4.5, 5.5), (8, 20), (2, 4),
        "Hazy wheat ale spiced with coriander and orange peel.",
    ),
    _style(
        "Belgian Blonde Ale", "Belgian",
        (1.062, 1.075), (1.008, 1.018), (6.0, 7.5), (15, 30), (4, 7),
        "Moderately strong golden ale with light spice and subtle sweetness.",
    ),
    _style(
        "Saison", "Belgian",
        (1.048, 1.065), (1.002, 1.008), (3.5, 9.5), (20, 35), (5, 14),
        "Highly attenuated, peppery and fruity farmhouse ale with high carbonation.",
    ),
    _style(
        "Belgian Dubbel", "Belgian",
        (1.062, 1.075), (1.008, 1.018), (6.0, 7.6), (15, 25), (10, 17),
        "Rich, dark abbey ale with dried fruit and caramelised sugar notes.",
    ),
    _style(
        "Belgian Tripel", "Belgian",
        (1.075, 1.085), (1.008, 1.014), (7.5, 9.5), (20, 40), (4.5, 7),
        "Strong, pale and dry abbey ale with spicy yeast character.",
    ),
    _style(
        "Belgian Dark Strong Ale", "Belgian",
        (1.075, 1.110), (1.010, 1.024), (8.0, 12.0), (20, 35), (12, 22),
        "Complex, rich and warming dark ale with plum, raisin and candi sugar.",
    ),
    # Wheat
    _style(
        "Wheat Beer", "Wheat",
        (1.040, 1.055), (1.008, 1.013), (4.0, 5.5), (15, 30), (3, 6),
        "Refreshing American wheat ale with bready wheat and clean fermentation.",
    ),
    _style(
        "Hefeweizen", "Wheat",
        (1.044, 1.052), (1.010, 1.014), (4.3, 5.6), (8, 15), (2, 6),
        "Cloudy Bavarian wheat beer with banana and clove yeast character.",
    ),
    # Lagers
    _style(
        "American Light Lager", "Lager",
        (1.028, 1.040), (0.998, 1.008), (2.8, 4.2), (8, 12), (2, 3),
        "Very pale, highly carbonated and crisp with minimal flavour.",
    ),
    _style(
        "German Pilsner", "Lager",
        (1.044, 1.050), (1.008, 1.013), (4.4, 5.2), (22, 40), (2, 5),
        "Crisp, bitter pale lager with floral noble hop aroma.",
    ),
    _style(
        "Munich Helles", "Lager",
        (1.044, 1.048), (1.006, 1.012), (4.7, 5.4), (16, 22), (3, 5),
        "Clean, malty golden lager with soft grainy sweetness.",
    ),
    _style(
        "Vienna Lager", "Lager",
        (1.048, 1.055), (1.010, 1.014), (4.7, 5.5), (18, 30), (9, 15),
        "Amber lager with toasty malt and a dry, balanced finish.",
    ),
    _style(
        "Märzen", "Lager",
        (1.054, 1.060), (1.010, 1.014), (5.8, 6.3), (18, 24), (8, 17),
        "Elegant, malty amber lager with toasty richness.",
    ),
    _style(
        "Bock", "Lager",
        (1.064, 1.072), (1.013, 1.019), (6.3, 7.2), (20, 27), (14, 22),
        "Strong, malty dark lager with rich Maillard flavours.",
    ),
    _style(
        "Schwarzbier", "Lager",
        (1.046, 1.052), (1.010, 1.016), (4.4, 5.4), (20, 30), (17, 30),
        "Dark, smooth lager with mild roast and a clean finish.",
    ),
    # Hybrid & Strong
    _style(
        "Cream Ale", "Hybrid",
        (1.042, 1.055), (1.006, 1.012), (4.2, 5.6), (8, 20), (2.5, 5),
        "Clean, light-bodied ale brewed like a lager, often with corn.",
    ),
    _style(
        "Kölsch", "Hybrid",
        (1.044, 1.050), (1.007, 1.011), (4.4, 5.2), (18, 30), (3.5, 5),
        "Delicate, crisp golden ale from Cologne with subtle fruit.",
    ),
    _style(
        "Scotch Ale", "Strong Ale",
        (1.070, 1.130), (1.018, 1.040), (6.5, 10.0), (17, 35), (14, 25),
        "Rich, malty and kettle-caramelised strong ale with low hop character.",
    ),
    _style(
        "English Barleywine", "Strong Ale",
        (1.080, 1.120), (1.018, 1.030), (8.0, 12.0), (35, 70), (8, 22),
        "Very strong, richly malty ale with dark fruit and a warming finish.",
    ),
)
