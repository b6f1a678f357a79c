"""검색 필터로 안내하는 대표 장소 유형 목록."""

PLACE_TYPES: tuple[str, ...] = (
    "restaurant",
    "gas_station",
    "hospital",
    "pharmacy",
    "bank",
    "atm",
    "shopping_mall",
    "grocery_store",
    "hotel",
    "tourist_attraction",
    "park",
    "school",
    "university",
    "gym",
    "movie_theater",
    "library",
    "church",
    "mosque",
    "synagogue",
    "police",
    "fire_station",
    "post_office",
    "car_rental",
    "car_repair",
    "beauty_salon",
    "hair_care",
    "dentist",
    "doctor",
    "veterinary_care",
)


def list_place_types() -> list[str]:
    return list(PLACE_TYPES)
