"""Breed label extraction from Dog CEO image URLs.

Image URLs look like ``https://images.dog.ceo/breeds/<slug>/<file>.jpg`` where
the slug is the lowercase, hyphen-joined breed name.
"""

import logging

from app.utils.error_handling import MalformedUrl

logger = logging.getLogger(__name__)

UNKNOWN_BREED = "unknown"


def breed_slug(url: str) -> str:
    """Return the second-to-last ``/`` segment of an image URL.

    Raises:
        MalformedUrl: if the URL has fewer than two segments.
    """
    parts = url.split('/')
    if len(parts) < 2:
        raise MalformedUrl(f"No breed segment in URL: {url!r}")
    return parts[len(parts) - 2]


def format_breed_slug(slug: str) -> str:
    """Turn a slug into a display label.

    Only the first hyphen becomes a space, so ``english-cocker-spaniel`` reads
    ``English Cocker-spaniel``.
    """
    words = slug.replace('-', ' ', 1).split(' ')
    return ' '.join(word[:1].upper() + word[1:] for word in words)


def extract_breed_label(url: str) -> str:
    """Human-readable breed label for an image URL, or UNKNOWN_BREED."""
    try:
        slug = breed_slug(url)
    except MalformedUrl:
        logger.debug(f"Could not extract breed from {url!r}")
        return UNKNOWN_BREED
    return format_breed_slug(slug)
