#!/usr/bin/python

"""
Entry points for templates.

Templates hand over either a plain str or a content.TypedContent wrapper.
These functions unwrap the wrapper, run the matching filter from the
filters module on its string, and return a value of the shape the template
expects.  Number and color results keep the wrapper's kind, since a
filtered number or color needs no further escaping in the context the
wrapper vouches for.  URL results are always a plain str that still needs
escaping for its attribute.

Any other value, None included, yields None.
"""

import logging

from taintfilter import content
from taintfilter import filters


LOGGER = logging.getLogger(__name__)


def _unwrap(value):
    """
    Returns (text, wrapper) where wrapper is the TypedContent value came in,
    or None if value was a plain str.  Returns (None, None) for anything else.
    """
    if isinstance(value, content.TypedContent):
        return value.content, value
    if isinstance(value, str):
        return value, None
    if value is not None:
        LOGGER.debug("cannot filter a %s", type(value).__name__)
    return None, None


def _filter_keeping_kind(sanitizer, value, *args):
    """Applies sanitizer to the text of value, rewrapping typed content."""
    text, wrapper = _unwrap(value)
    if text is None:
        return None
    filtered = sanitizer(text, *args)
    if wrapper is not None:
        return wrapper.rewrap(filtered)
    return filtered


def as_number(value, default=filters.DEFAULT_NUMBER):
    """
    Filters value for a numeric literal context.

    value - A str or TypedContent.
    default - Returned (possibly wrapped) when value is not a number.

    Returns the result of filters.filter_number, wrapped like value.
    """
    return _filter_keeping_kind(filters.filter_number, value, default)


def as_css_color(value, default=filters.DEFAULT_CSS_COLOR):
    """
    Filters value for a CSS color context.

    value - A str or TypedContent.
    default - Returned (possibly wrapped) when value is not a color.

    Returns the result of filters.filter_css_color, wrapped like value.
    """
    return _filter_keeping_kind(filters.filter_css_color, value, default)


def as_url(value):
    """Whitelist URL filter; see filters.filter_url_strict."""
    text, _ = _unwrap(value)
    return filters.filter_url_strict(text)


def as_flexible_url(value):
    """Blacklist URL filter; see filters.filter_url_flexible."""
    text, _ = _unwrap(value)
    return filters.filter_url_flexible(text)
