"""Text processing utilities."""

import re


def format_label(slug: str) -> str:
    """Turn a resource slug into a human-readable label.

    Converts the input string by:
    - Splitting camelCase boundaries
    - Treating hyphens and underscores as spaces
    - Capitalizing each word

    Args:
        slug: The resource identifier to format

    Returns:
        Title-cased label

    Examples:
        >>> format_label("backend-users")
        'Backend Users'
        >>> format_label("blogPosts")
        'Blog Posts'
    """
    label = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", slug)
    label = re.sub(r"[-_\s]+", " ", label).strip()
    return " ".join(word[:1].upper() + word[1:] for word in label.split(" ") if word)
