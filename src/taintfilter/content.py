#!/usr/bin/python

"""
Defines non-plain text string wrappers.

A plain str is untrusted text.  A TypedContent instance vouches that its
string is safe to emit, unescaped, in the context named by its kind.
"""

# text/plain
CONTENT_KIND_PLAIN = 0

# text/css
# A string in one of the CSS (stylesheet, rule, value) productions, or a
# semicolon separated list of CSS properties.
CONTENT_KIND_CSS = 1

# text/html
# A snippet of HTML that does not start or end inside a tag, comment, entity,
# or DOCTYPE; and that does not contain any executable code from a different
# trust domain.
CONTENT_KIND_HTML = 2

# text/html
# An HTML attribute like name=value.
CONTENT_KIND_HTML_ATTR = 3

# text/javascript
# A JS expression, or SourceElement list.
CONTENT_KIND_JS = 4

# A sequence of code units that can appear between quotes (either kind) in a
# JS program without causing a parse error or any side effects.
CONTENT_KIND_JS_STR_CHARS = 5

# A properly encoded portion of a URL.
CONTENT_KIND_URL = 6


class TypedContent(object):
    """
    A wrapped string whose content is of a particular kind.
    For example, an instance's kind property might indicate that it is a string
    of HTML, not a string of plain text.
    """

    def __init__(self, content, kind):
        if not isinstance(content, str):
            raise TypeError(content)
        if type(kind) is not int:
            raise ValueError(kind)
        # The string content.
        self.content = content
        # Describes the context in which content is safe.
        self.kind = kind

    def __str__(self):
        return self.content

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.content)

    def __eq__(self, other):
        return (type(other) is type(self)
                and other.kind == self.kind
                and other.content == self.content)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self.kind, self.content))

    def rewrap(self, content):
        """
        Returns a wrapper of the same class and kind around content.
        """
        copy = object.__new__(type(self))
        TypedContent.__init__(copy, content, self.kind)
        return copy


class SafeCSS(TypedContent):
    """
    CSS encapsulates known safe content that matches any of:
      1. The CSS3 stylesheet production, such as `p { color: purple }`.
      2. The CSS3 rule production, such as `a[href=~"https:"].foo#bar`.
      3. CSS3 declaration productions, such as `color: red; margin: 2px`.
      4. The CSS3 value production, such as `rgba(0, 0, 255, 127)`.
    """

    def __init__(self, content):
        TypedContent.__init__(self, content, CONTENT_KIND_CSS)


class SafeHTML(TypedContent):
    """
    HTML encapsulates a known safe HTML document fragment.
    It should not be used for HTML from a third-party, or HTML with
    unclosed tags or comments.  The outputs of a sound HTML sanitizer and of
    the filters in this package are fine for use with HTML.
    """

    def __init__(self, content):
        TypedContent.__init__(self, content, CONTENT_KIND_HTML)


class SafeHTMLAttr(TypedContent):
    """
    HTMLAttr encapsulates an HTML attribute from a trusted source,
    for example: ` dir="ltr"`.
    """

    def __init__(self, content):
        TypedContent.__init__(self, content, CONTENT_KIND_HTML_ATTR)


class SafeJS(TypedContent):
    """
    JS encapsulates a known safe EcmaScript5 Expression, for example,
    `(x + y * z())`.
    """

    def __init__(self, content):
        TypedContent.__init__(self, content, CONTENT_KIND_JS)


class SafeJSStr(TypedContent):
    """
    JSStr encapsulates a sequence of characters meant to be embedded
    between quotes in a JavaScript expression.
    SafeJSStr('foo\\nbar') is fine, but SafeJSStr('foo\\\nbar') is not.
    """

    def __init__(self, content):
        TypedContent.__init__(self, content, CONTENT_KIND_JS_STR_CHARS)


class SafeURL(TypedContent):
    """
    URL encapsulates a known safe URL as defined in RFC 3986.
    Dynamic `javascript:` URLs are still filtered out by the URL filters
    since they are a frequently exploited injection vector.
    """

    def __init__(self, content):
        TypedContent.__init__(self, content, CONTENT_KIND_URL)
