"""Glyphstyler - Apply geometric styles to font outlines.

Glyphstyler loads a TrueType/OpenType/WOFF font, decodes every glyph outline
into an explicit path command model, and batch-applies geometric style
transforms (bold, thin, wide, condensed, italic, pixelate, flatten, jitter,
punk) before writing the font back out.

Example:
    $ glyphstyler apply Roboto-Regular.ttf --style bold

This will create Roboto-Regular-Bold.ttf with every outline expanded about
its centroid.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
