"""Reference circle renderer with scenes, PPM output, cell noise, scan helpers and threading demos."""

__version__ = "0.1.0"