"""Static filter schema for Shutterstock image search."""

from shutterstock_connector.connectors.localization import Translator
from shutterstock_connector.models.filters import FilterDefinition, FilterOption

COLLECTION_FILTER = "collection"
CATEGORY_FILTER = "category"
QUERY_FIELD = "q"

# Display order of the filters; collection and category options are fetched live
FILTER_NAMES: tuple[str, ...] = (
    COLLECTION_FILTER,
    "orientation",
    CATEGORY_FILTER,
    "color",
    "image_type",
    "people_ethnicity",
    "people_gender",
    "people_age",
)

# (label key suffix, API value); the empty value means "any"
STATIC_OPTIONS: dict[str, list[tuple[str, str]]] = {
    "orientation": [
        ("any", ""),
        ("horizontal", "horizontal"),
        ("vertical", "vertical"),
    ],
    "color": [
        ("any", ""),
        ("grayscale", "grayscale"),
        ("blue", "0000FF"),
        ("fuschia", "FF00FF"),
        ("green", "00FF00"),
        ("orange", "FFA500"),
        ("purple", "800080"),
        ("red", "FF0000"),
        ("teal", "008080"),
        ("yellow", "FFFF00"),
    ],
    "image_type": [
        ("any", ""),
        ("photo", "photo"),
        ("vector", "vector"),
        ("illustration", "illustration"),
    ],
    "people_ethnicity": [
        ("any", ""),
        ("african", "african"),
        ("african_american", "african_american"),
        ("brazilian", "brazilian"),
        ("caucasian", "caucasian"),
        ("chinese", "chinese"),
        ("east_asian", "east_asian"),
        ("hispanic", "hispanic"),
        ("japanese", "japanese"),
        ("middle_eastern", "middle_eastern"),
        ("native_american", "native_american"),
        ("pacific_islander", "pacific_islander"),
        ("south_asian", "south_asian"),
        ("southeast_asian", "southeast_asian"),
        ("other", "other"),
    ],
    "people_gender": [
        ("any", ""),
        ("male", "male"),
        ("female", "female"),
    ],
    "people_age": [
        ("any", ""),
        ("infants", "infants"),
        ("children", "children"),
        ("teenagers", "teenagers"),
        ("20s", "20s"),
        ("30s", "30s"),
        ("40s", "40s"),
        ("50s", "50s"),
        ("60s", "60s"),
        ("older", "older"),
    ],
}


def filter_label(name: str, translate: Translator) -> str:
    return translate(f"filter.{name}.label")


def any_option(name: str, translate: Translator) -> FilterOption:
    """The leading option that clears a filter."""
    return FilterOption(label=translate(f"filter.{name}.I.any"), value="")


def static_filter(name: str, translate: Translator) -> FilterDefinition:
    """Build one of the fixed enumerations with translated labels."""
    options = [
        FilterOption(label=translate(f"filter.{name}.I.{suffix}"), value=value)
        for suffix, value in STATIC_OPTIONS[name]
    ]
    return FilterDefinition(label=filter_label(name, translate), options=options)


def disabled_in_collection_mode() -> list[str]:
    """Filters (and the search input) that do not apply when browsing a collection."""
    return [name for name in FILTER_NAMES if name != COLLECTION_FILTER] + [QUERY_FIELD]
