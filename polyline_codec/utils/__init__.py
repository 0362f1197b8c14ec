"""Interop helpers for decoded paths.

- geometry: shapely LineString, numpy array, and pyproj geodesic length
"""
