"""Domain ranges shared by the catalog loader and the search engine."""

RATING_RANGE: tuple[int, int] = (1, 5)
DISTANCE_RANGE: tuple[int, int] = (1, 10)
PRICE_RANGE: tuple[int, int] = (10, 50)

# Ranked results returned per search
MAX_RESULTS = 5

UNKNOWN_CUISINE = "Other"

# Sort keys, highest priority first
RANKING_COLUMNS = ["distance", "rating", "price"]
RANKING_ASCENDING = [True, False, True]
