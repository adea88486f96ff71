"""Extract daisyUI themes into plain JSON style maps."""

__version__ = "0.3.0"
