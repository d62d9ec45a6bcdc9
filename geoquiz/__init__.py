"""GeoQuiz - map quiz engine for German federal states, neighbors and places."""

__version__ = "0.1.0"
