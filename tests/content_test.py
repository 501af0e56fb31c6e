#!/usr/bin/env python -O

"""Testcases for module content"""

import unittest

from taintfilter import content


class ContentTest(unittest.TestCase):
    """Testcases for module content"""

    def test_kinds(self):
        """Each wrapper class fixes its kind."""
        tests = (
            (content.SafeCSS, content.CONTENT_KIND_CSS),
            (content.SafeHTML, content.CONTENT_KIND_HTML),
            (content.SafeHTMLAttr, content.CONTENT_KIND_HTML_ATTR),
            (content.SafeJS, content.CONTENT_KIND_JS),
            (content.SafeJSStr, content.CONTENT_KIND_JS_STR_CHARS),
            (content.SafeURL, content.CONTENT_KIND_URL),
            )
        for cls, kind in tests:
            wrapped = cls("x")
            self.assertEqual(kind, wrapped.kind, cls.__name__)
            self.assertEqual("x", wrapped.content)
            self.assertEqual("x", str(wrapped))

    def test_bad_construction(self):
        """Content must be a str and kind an int."""
        self.assertRaises(TypeError, content.TypedContent, None,
                          content.CONTENT_KIND_HTML)
        self.assertRaises(TypeError, content.SafeHTML, b"<b>")
        self.assertRaises(ValueError, content.TypedContent, "x", "html")

    def test_equality(self):
        """Wrappers compare by class, kind and content."""
        self.assertEqual(content.SafeHTML("a"), content.SafeHTML("a"))
        self.assertEqual(hash(content.SafeHTML("a")),
                         hash(content.SafeHTML("a")))
        self.assertNotEqual(content.SafeHTML("a"), content.SafeHTML("b"))
        self.assertNotEqual(content.SafeHTML("a"), content.SafeURL("a"))
        self.assertNotEqual(content.SafeHTML("a"), "a")

    def test_rewrap(self):
        """rewrap keeps class and kind."""
        wrapped = content.SafeURL("javascript:x").rewrap("./javascript:x")
        self.assertIs(content.SafeURL, type(wrapped))
        self.assertEqual(content.CONTENT_KIND_URL, wrapped.kind)
        self.assertEqual("./javascript:x", wrapped.content)

        plain = content.TypedContent("1", content.CONTENT_KIND_PLAIN)
        self.assertEqual(content.TypedContent("2", content.CONTENT_KIND_PLAIN),
                         plain.rewrap("2"))

    def test_repr(self):
        """repr names the wrapper."""
        self.assertEqual("SafeCSS('red')", repr(content.SafeCSS("red")))


if __name__ == '__main__':
    unittest.main()
