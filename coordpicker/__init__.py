"""Pick screen coordinates on a zoomable canvas with grid snapping and markers."""

__version__ = "0.1.5"