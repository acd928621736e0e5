"""
prettyscale — числовая разметка осей.

Range inversion, pretty breaks и подписи в научной нотации с надстрочным
показателем.
"""

__version__ = "0.1.0"
