#!/usr/bin/python

"""
Filters for tainted values that cannot be escaped.

Escapers make any string safe by adding escape sequences, but some contexts
have no escape syntax: a numeric literal in a script, a CSS color value,
the scheme of a URL.  The functions here validate a value against a strict
grammar instead, and substitute a neutral value when it does not match.

A filter never raises for bad input.  Failure is modelled as substitution,
so a caller can only tell a valid value from a defaulted one by comparing
them.  None passes through as None.

Filter output is plain text.  It still needs the escaper for the embedding
context, e.g.
    <iframe src="{{escape_html_attribute(filter_url_strict(url))}}">
"""

import logging
import re


LOGGER = logging.getLogger(__name__)

# Returned by filter_number for anything that is not a number.
DEFAULT_NUMBER = "0"

# Returned by filter_css_color for anything that is not a color.
# This is a token that CSS parsers reject, so the whole declaration is
# dropped and the property keeps its own initial or inherited value.
# "transparent" or "inherit" would each be wrong for some properties:
# background-color defaults to transparent while color inherits.
DEFAULT_CSS_COLOR = "invalid"

# Prepended to URLs that might carry a script scheme.  A value starting with
# "./" is a same-directory relative reference, never an absolute URL.
RELATIVE_URL_PREFIX = "./"

# Schemes that filter_url_flexible refuses.  All lower case.
BLACKLISTED_SCHEMES = frozenset(["javascript", "vbscript", "data", "about"])


# \Z rather than $, which also matches before a trailing newline.
_OCTAL = re.compile(r'^(0+)([0-7]*)\Z')

_NUMBER = re.compile(r'^[-+]?(?:\.[0-9]+|[0-9]+\.?[0-9]*)\Z')

_HEX_NUMBER = re.compile(r'^0x[0-9a-fA-F]+\Z')

_CSS_HEX_COLOR = re.compile(r'^#[0-9a-fA-F]{3}(?:[0-9a-fA-F]{3})?\Z')

# Does not consult the table of CSS color names.  Anything alphabetic gets
# through and an unknown name is left for the CSS parser to ignore.
_CSS_NAMED_COLOR = re.compile(r'^[a-zA-Z]{1,20}\Z')

_SAFE_URL_PREFIX = re.compile(r'(?ai)^(?:/|\\\\|https?:|ftp:|mailto:)')

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." ) per RFC 3986.
# Leading digits and dots are tolerated here; they only make the scan stop
# later, never earlier.
_SCHEME_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.+-")

# Characters that end a relative reference's first segment in every URL
# parser and that browsers never strip.
_URL_DELIMITERS = frozenset("/?#")


def filter_number(value, default=DEFAULT_NUMBER):
    """
    Filters a value that is to be emitted as a numeric literal, e.g.
        <script>var userNum = {{filter_number(n)}};</script>

    Decimal numbers and hex numbers like 0x41 pass through with surrounding
    white space removed.  Numbers made only of leading zeros and octal
    digits have their zeros stripped so that no consumer reads them as
    octal: "0777" becomes "777" and "00" becomes "".

    value - The potential number.  May be None.
    default - Returned when value is not a number.

    Returns the filtered number, default, or None if value is None.
    """
    if value is None:
        return None
    trimmed = value.strip()

    octal = _OCTAL.match(trimmed)
    if octal:
        return octal.group(2)

    if _NUMBER.match(trimmed) or _HEX_NUMBER.match(trimmed):
        return trimmed
    LOGGER.debug("not a number, using %r: %r", default, value)
    return default


def filter_css_color(value, default=DEFAULT_CSS_COLOR):
    """
    Filters a value that is to be emitted as a CSS color, e.g.
        <style>.profile { background-color: {{filter_css_color(c)}} }</style>

    CSS strings cannot hold colors, so quoting is not an option.

    value - The potential color: "#rgb", "#rrggbb" or up to 20 letters.
        Not trimmed.  May be None.
    default - Returned when value is not a color.  The default, "invalid",
        makes the CSS parser drop the declaration, as if it were never
        specified.

    Returns the color, default, or None if value is None.
    """
    if value is None:
        return None
    if _CSS_HEX_COLOR.match(value) or _CSS_NAMED_COLOR.match(value):
        return value
    LOGGER.debug("not a CSS color, using %r: %r", default, value)
    return default


def filter_url_strict(value):
    """
    Passes URLs that start with a known safe prefix and turns everything
    else into a relative URL.

    These pass unchanged:
        /path/from/root        \\\\server\\share\\file.xls
        http:...  https:...  ftp:...  mailto:...
    Scheme names are matched case-insensitively.  Other values are
    prefixed with "./", so
        file.html              becomes ./file.html
        ?query                 becomes ./?query
        javascript:alert(1)    becomes ./javascript:alert(1)

    Legitimate but uncommon schemes like tel: are mangled too; see
    filter_url_flexible for a variant that only refuses known bad schemes.

    This does not make a URL safe to load as active content: script or
    style sources, CSS @import, plugins and the like.

    value - The tainted URL.  May be None.

    Returns the URL, a relative version of it, or None if value is None.
    """
    if value is None:
        return None
    if not value or _SAFE_URL_PREFIX.match(value):
        return value
    LOGGER.debug("URL prefix not whitelisted: %r", value)
    return RELATIVE_URL_PREFIX + value


def filter_url_flexible(value):
    """
    Like filter_url_strict but refuses only the javascript, vbscript, data
    and about schemes.  Any other scheme is allowed as long as the scheme
    name is directly followed by a colon, so "tel:5556667777" and
    "gopher:x" pass.

    Browsers strip newlines and NULs from URLs and some tolerate other junk
    before the colon, so matching the start of the string against the
    blacklist is not enough.  Instead we scan the characters that may
    appear in a scheme.  If the scan runs off the end there is no colon and
    the value is a plain relative path.  If it stops at "/", "?" or "#" the
    value is a relative path, query or fragment.  If it stops at a colon we
    have a scheme and look it up.  If it stops anywhere else the value is
    made relative: "javascript\\n:alert(1)" must not survive.

    value - The tainted URL.  May be None.

    Returns the URL, a relative version of it, or None if value is None.
    """
    if value is None:
        return None

    # Also allows scheme-relative URLs like //example.com/.
    if value.startswith("/") or value.startswith("\\\\"):
        return value

    i, n = 0, len(value)
    while i < n and value[i] in _SCHEME_CHARS:
        i += 1

    if i == n:
        return value
    stop = value[i]
    if stop in _URL_DELIMITERS:
        return value
    if stop == ":" and value[:i].lower() not in BLACKLISTED_SCHEMES:
        return value

    LOGGER.debug("URL scheme refused: %r", value)
    return RELATIVE_URL_PREFIX + value
