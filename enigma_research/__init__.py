"""Astrological research calculations: aspects, midpoints, parallels, harmonics, oblique longitudes, hypothetical planets and control groups."""

__version__ = "0.1.0"