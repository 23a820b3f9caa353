# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

"""Quote-aware re-joining of delimiter-split text.

ARFF header tokens may be wrapped in single quotes so that they can contain
the delimiter they are split on (``'my relation'``, ``{'a,b',c}``). The text
is first split with a plain ``str.split`` and the fragments that fell inside
a quoted span are glued back together here.
"""

__all__ = ["QUOTE", "next_quoted", "iter_quoted"]

QUOTE = "'"


def next_quoted(fragments, delimiter):
    """Return the next logical token from an iterator of split fragments.

    Empty fragments before a token are skipped. A fragment opening a quote
    pulls in the following fragments, re-inserting ``delimiter`` between
    them, until one closes the quote; the surrounding quotes are removed.

    Returns None once ``fragments`` is exhausted, including when a quote is
    opened but never closed.
    """
    quoted = None  # fragments of an open quote, None outside one
    for fragment in fragments:
        if quoted is None:
            if not fragment:
                continue
            if not fragment.startswith(QUOTE):
                return fragment
            body = fragment[1:]
            # a lone quote opens an empty body and keeps scanning
            if body.endswith(QUOTE):
                return body[:-1]
            quoted = [body]
        else:
            quoted.append(fragment)
            if fragment.endswith(QUOTE):
                token = delimiter.join(quoted)
                return token[:-1]
    return None


def iter_quoted(text, delimiter):
    """Yield every quote-aware token of ``text`` split on ``delimiter``."""
    fragments = iter(text.split(delimiter))
    while True:
        token = next_quoted(fragments, delimiter)
        if token is None:
            return
        yield token
