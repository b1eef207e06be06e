"""Grid maze game: load a map file, scatter coins, walk and collect them."""

__version__ = "0.1.0"