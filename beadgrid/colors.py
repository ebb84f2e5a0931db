import re

HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})$")

WHITE = "#FFFFFF"
BLACK = "#000000"


def normalize_hex(s):
    s = (s or "").strip()
    if not s.startswith("#"):
        s = "#" + s
    if not HEX_RE.match(s):
        raise ValueError("Not a #RRGGBB color: %r" % (s,))
    return s.upper()


def to_bgr(color):
    '''OpenCV wants (blue, green, red)'''
    color = normalize_hex(color)
    r, g, b = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    return (b, g, r)
