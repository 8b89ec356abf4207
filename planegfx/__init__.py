"""2D graphics toolkit: vectors, matrices, cameras, meshes, vertex packing, images and bitmap-font text."""

__version__ = "0.1.0"