"""
Directrix
=========
Interactive view of a single parabola defined by a focus point and a
horizontal directrix line, the construction behind Fortune's sweep-line
algorithm for Voronoi diagrams.
"""
__version__ = "0.1.0"
