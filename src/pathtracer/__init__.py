"""
Offline path tracer for scenes made of spheres.

Rays are cast through every pixel, scattered off diffuse, metal and glass
materials, and the sampled colors are averaged into a plain-text PPM image.
"""

__version__ = "0.1.0"
