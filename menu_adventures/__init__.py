"""Menu Adventures - text adventures where every move is picked from a menu"""

__version__ = "0.1.0"
