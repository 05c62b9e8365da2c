"""Simplified, aggregated views of entries."""

from nutrition_entries.domain.entries import Entry, SimplifiedEntry

SEPARATOR = " + "


def simplify(entry: Entry) -> SimplifiedEntry:
    """Fold an entry's foods into one summary record.

    Totals are plain float sums. The image is the first non-empty thumbnail
    in food order.
    """
    calories = protein = carbs = fat = 0.0
    names: list[str] = []
    servings: list[str] = []
    image_url: str | None = None

    for food in entry.nutrients.foods:
        calories += food.nf_calories
        protein += food.nf_protein
        carbs += food.nf_total_carbohydrate
        fat += food.nf_total_fat
        names.append(food.food_name)
        servings.append(f"{food.serving_qty:.1f} {food.serving_unit}")
        if image_url is None and food.photo.thumb:
            image_url = food.photo.thumb

    return SimplifiedEntry(
        id=entry.id,
        date=entry.date,
        query=entry.query,
        food_name=SEPARATOR.join(names),
        serving_size=SEPARATOR.join(servings),
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        created_at=entry.created_at,
        image_url=image_url,
    )
