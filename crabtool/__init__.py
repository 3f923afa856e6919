"""Image browsing parts: image folder filtering, thumbnails, zoom state and rectangle selection."""

__version__ = "0.1.0"