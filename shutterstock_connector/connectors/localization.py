"""Label lookup for host-displayed strings.

The host owns translations; it passes a ``Translator`` that maps a label key
(``filter.color.I.blue``) to the text in the editor's language. Without one,
the built-in English catalog is used.
"""

from collections.abc import Callable

Translator = Callable[[str], str]

ENGLISH_LABELS: dict[str, str] = {
    "button.add_media": "Add Shutterstock media",
    "button.submit": "Add selected media",
    "button.cancel": "Cancel",
    "placeholder.search": "Search Shutterstock images",
    "filter.collection.label": "Collection",
    "filter.collection.I.any": "All images",
    "filter.orientation.label": "Orientation",
    "filter.orientation.I.any": "Any orientation",
    "filter.orientation.I.horizontal": "Horizontal",
    "filter.orientation.I.vertical": "Vertical",
    "filter.category.label": "Category",
    "filter.category.I.any": "Any category",
    "filter.color.label": "Color",
    "filter.color.I.any": "Any color",
    "filter.color.I.grayscale": "Grayscale",
    "filter.color.I.blue": "Blue",
    "filter.color.I.fuschia": "Fuchsia",
    "filter.color.I.green": "Green",
    "filter.color.I.orange": "Orange",
    "filter.color.I.purple": "Purple",
    "filter.color.I.red": "Red",
    "filter.color.I.teal": "Teal",
    "filter.color.I.yellow": "Yellow",
    "filter.image_type.label": "Image type",
    "filter.image_type.I.any": "Any type",
    "filter.image_type.I.photo": "Photo",
    "filter.image_type.I.vector": "Vector",
    "filter.image_type.I.illustration": "Illustration",
    "filter.people_ethnicity.label": "Ethnicity",
    "filter.people_ethnicity.I.any": "Any ethnicity",
    "filter.people_ethnicity.I.african": "African",
    "filter.people_ethnicity.I.african_american": "African American",
    "filter.people_ethnicity.I.brazilian": "Brazilian",
    "filter.people_ethnicity.I.caucasian": "Caucasian",
    "filter.people_ethnicity.I.chinese": "Chinese",
    "filter.people_ethnicity.I.east_asian": "East Asian",
    "filter.people_ethnicity.I.hispanic": "Hispanic",
    "filter.people_ethnicity.I.japanese": "Japanese",
    "filter.people_ethnicity.I.middle_eastern": "Middle Eastern",
    "filter.people_ethnicity.I.native_american": "Native American",
    "filter.people_ethnicity.I.pacific_islander": "Pacific Islander",
    "filter.people_ethnicity.I.south_asian": "South Asian",
    "filter.people_ethnicity.I.southeast_asian": "Southeast Asian",
    "filter.people_ethnicity.I.other": "Other",
    "filter.people_gender.label": "Gender",
    "filter.people_gender.I.any": "Any gender",
    "filter.people_gender.I.male": "Male",
    "filter.people_gender.I.female": "Female",
    "filter.people_age.label": "Age",
    "filter.people_age.I.any": "Any age",
    "filter.people_age.I.infants": "Infants",
    "filter.people_age.I.children": "Children",
    "filter.people_age.I.teenagers": "Teenagers",
    "filter.people_age.I.20s": "20s",
    "filter.people_age.I.30s": "30s",
    "filter.people_age.I.40s": "40s",
    "filter.people_age.I.50s": "50s",
    "filter.people_age.I.60s": "60s",
    "filter.people_age.I.older": "Older",
}


def default_translator(key: str) -> str:
    """Look up an English label, falling back to the key itself."""
    return ENGLISH_LABELS.get(key, key)
