"""Melbourne demo catalog used to seed a fresh store."""

from uuid import UUID

from reeleats.domain.restaurants import Category, PriceTier, Restaurant, SocialSource
from reeleats.services.catalog import CatalogService

DEMO_SAVED_COUNT = 10


def _demo(  # noqa: PLR0913
    name: str,
    category: Category,
    description: str,
    rating: float,
    price: PriceTier,
    address: str,
    latitude: float,
    longitude: float,
    tags: tuple[str, ...],
    source: SocialSource,
) -> Restaurant:
    return Restaurant(
        name=name,
        category=category,
        rating=rating,
        price=price,
        address=address,
        latitude=latitude,
        longitude=longitude,
        tags=tags,
        source=source,
        description=description,
    )


DEMO_RESTAURANTS: tuple[Restaurant, ...] = (
    _demo("Baker Bleu", Category.RESTAURANTS, "artisan sourdough bakery", 4.6,
          PriceTier.MODERATE, "65 Dover St, Cremorne VIC 3121", -37.8289, 144.9923,
          ("Restaurants", "Brunch"), SocialSource.INSTAGRAM),
    _demo("Seven Seeds Coffee Roasters", Category.CAFE, "specialty coffee roasters",
          4.6, PriceTier.MODERATE, "114 Berkeley St, Carlton VIC 3053", -37.8146,
          144.9596, ("Cafe",), SocialSource.INSTAGRAM),
    _demo("Cumulus Inc.", Category.RESTAURANTS, "modern fine dining", 4.3,
          PriceTier.MODERATE, "45 Flinders Ln, Melbourne VIC 3000", -37.8176,
          144.9653, ("Restaurants", "Fine Dining"), SocialSource.WEB),
    _demo("The Everleigh", Category.BARS, "classic cocktail bar", 4.4,
          PriceTier.EXPENSIVE, "150-156 Gertrude St, Fitzroy VIC 3065", -37.8136,
          144.9631, ("Bars",), SocialSource.TIKTOK),
    _demo("Proud Mary Coffee", Category.CAFE, "all-day brunch spot", 4.8,
          PriceTier.BUDGET, "172 Oxford St, Collingwood VIC 3066", -37.8176,
          144.9653, ("Cafe", "Brunch"), SocialSource.INSTAGRAM),
    _demo("Chin Chin Restaurant", Category.RESTAURANTS, "modern southeast asian",
          4.5, PriceTier.MODERATE, "125 Flinders Ln, Melbourne VIC 3000", -37.8167,
          144.9657, ("Restaurants", "Asian"), SocialSource.INSTAGRAM),
    _demo("Industry Beans", Category.CAFE, "innovative brunch menu", 4.9,
          PriceTier.BUDGET, "3/62 Rose St, Fitzroy VIC 3065", -37.8176, 144.9653,
          ("Cafe", "Brunch"), SocialSource.TIKTOK),
    _demo("Black Pearl Bar", Category.BARS, "hidden cocktail bar", 4.7,
          PriceTier.MODERATE, "304 Brunswick St, Fitzroy VIC 3065", -37.8136,
          144.9631, ("Bars",), SocialSource.WEB),
    _demo("Nobu Melbourne", Category.RESTAURANTS, "japanese fine dining", 4.8,
          PriceTier.EXPENSIVE, "Crown Entertainment Complex, Southbank VIC 3006",
          -37.8226, 144.9598, ("Restaurants", "Asian", "Fine Dining"),
          SocialSource.INSTAGRAM),
    _demo("Attica", Category.RESTAURANTS, "native australian cuisine", 4.9,
          PriceTier.EXPENSIVE, "74 Glen Eira Rd, Ripponlea VIC 3185", -37.8676,
          145.0187, ("Restaurants", "Fine Dining"), SocialSource.WEB),
    _demo("Bar Americano", Category.BARS, "intimate american bar", 4.6,
          PriceTier.EXPENSIVE, "20 Presgrave Pl, Melbourne VIC 3000", -37.8136,
          144.9631, ("Bars",), SocialSource.TIKTOK),
    _demo("Patricia Coffee Brewers", Category.CAFE, "specialty coffee brewers", 4.5,
          PriceTier.MODERATE, "Cnr Little Bourke & Somerset Pl, Melbourne VIC 3000",
          -37.8146, 144.9596, ("Cafe",), SocialSource.INSTAGRAM),
    _demo("Tipo 00", Category.RESTAURANTS, "authentic italian pasta", 4.7,
          PriceTier.MODERATE, "361 Little Bourke St, Melbourne VIC 3000", -37.8123,
          144.9589, ("Restaurants", "Italian"), SocialSource.INSTAGRAM),
    _demo("Romeo Lane", Category.BARS, "intimate wine bar", 4.4, PriceTier.MODERATE,
          "Shop 4/108 Bourke St, Melbourne VIC 3000", -37.8136, 144.9631,
          ("Bars",), SocialSource.WEB),
    _demo("Market Lane Coffee", Category.CAFE, "award-winning coffee", 4.3,
          PriceTier.MODERATE, "Shop 19 Prahran Market, Prahran VIC 3181", -37.8456,
          144.9876, ("Cafe",), SocialSource.INSTAGRAM),
    _demo("Flower Drum", Category.RESTAURANTS, "cantonese fine dining", 4.8,
          PriceTier.EXPENSIVE, "17 Market Ln, Melbourne VIC 3000", -37.8156,
          144.9687, ("Restaurants", "Chinese", "Fine Dining"), SocialSource.WEB),
    _demo("1806", Category.BARS, "creative cocktail bar", 4.9, PriceTier.EXPENSIVE,
          "169 Exhibition St, Melbourne VIC 3000", -37.8156, 144.9734, ("Bars",),
          SocialSource.INSTAGRAM),
)


def _ids_named(*fragments: str, limit: int = 3) -> list[UUID]:
    matched = [
        restaurant.id
        for restaurant in DEMO_RESTAURANTS
        if any(fragment in restaurant.name for fragment in fragments)
    ]
    return matched[:limit]


def seed_demo_catalog(catalog: CatalogService) -> None:
    """Save the first demo restaurants and create the starter collections.

    Collections may reference demo restaurants that were not saved; they are
    skipped at resolution time.
    """
    for restaurant in DEMO_RESTAURANTS[:DEMO_SAVED_COUNT]:
        catalog.add(restaurant)

    bars = [r.id for r in DEMO_RESTAURANTS if r.category is Category.BARS][:4]
    catalog.create_collection(
        "date night", restaurant_ids=_ids_named("Nobu", "Attica", "Flower Drum")
    )
    catalog.create_collection(
        "road trip",
        restaurant_ids=_ids_named("Baker Bleu", "Seven Seeds", "Market Lane"),
    )
    catalog.create_collection(
        "bars",
        restaurant_ids=bars,
        creators=(catalog.owner_name, "Sam"),
        is_collaborative=True,
    )
    catalog.create_collection(
        "best jap",
        restaurant_ids=_ids_named("Nobu", "Chin Chin", "Tipo"),
        creators=("Mia",),
    )
