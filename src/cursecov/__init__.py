"""cursecov - curse word coverage for code comments"""

__version__ = "0.1.0"
