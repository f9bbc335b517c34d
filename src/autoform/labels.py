"""Turn raw field keys into display labels."""

from .consts import (
    ACRONYM_BOUNDARY_PATTERN,
    CAMEL_BOUNDARY_PATTERN,
    SEPARATOR_PATTERN,
)


def split_words(key: str) -> list[str]:
    """Split a field key into words.

    Words are separated by underscores, hyphens, whitespace, lower-to-upper
    case transitions, and the end of an uppercase run that is followed by a
    capitalized word.

    Examples:
        >>> split_words("XMLParser")
        ['XML', 'Parser']
        >>> split_words("user_firstName")
        ['user', 'first', 'Name']
    """
    spaced = ACRONYM_BOUNDARY_PATTERN.sub(r"\1 \2", key)
    spaced = CAMEL_BOUNDARY_PATTERN.sub(r"\1 \2", spaced)
    return [word for word in SEPARATOR_PATTERN.split(spaced) if word]


def humanize(key: str) -> str:
    """Convert a raw field key into a human-readable label.

    Args:
        key: Field key in snake_case, kebab-case, camelCase or PascalCase

    Returns:
        Words of the key with their first letter capitalized, joined by
        single spaces. Acronyms keep their casing.

    Examples:
        >>> humanize("tag_list")
        'Tag List'
        >>> humanize("config-value")
        'Config Value'
        >>> humanize("firstName")
        'First Name'
        >>> humanize("XMLParser")
        'XML Parser'
    """
    return " ".join(word[0].upper() + word[1:] for word in split_words(key))
