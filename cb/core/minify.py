import re

_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE = re.compile(r"\s+")
_SEPARATOR = re.compile(r"\s*([{}:;,])\s*")
_TRAILING_SEMICOLON = re.compile(r";+}")


# Minifies generated CSS: strips comments, collapses whitespace, tightens separators and drops the last semicolon of
# each block. Running it twice gives the same result as running it once.
def minify(css: str) -> str:
    # Removing one comment can glue a "/" and "*" into a new one, so go until nothing changes.
    previous = None
    while previous != css:
        previous = css
        css = _COMMENT.sub("", css)
    css = _WHITESPACE.sub(" ", css)
    css = _SEPARATOR.sub(r"\1", css)
    css = _TRAILING_SEMICOLON.sub("}", css)
    return css.strip()
