"""strokeskel - Reduce rasterized handwriting strokes to one-pixel skeletons.

strokeskel takes a filled stroke shape (a binary foreground/background pixel
mask, or a contour that is rasterized first) and thins it with the Zhang-Suen
algorithm until only a topology-preserving, one-pixel-wide centerline is left.

Example:
    $ strokeskel thin stroke.png --output stroke-skeleton.png

The skeleton coordinates are also available programmatically through
``strokeskel.core.SkeletonProcessor``.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
