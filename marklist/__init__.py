# marklist/__init__.py
# Marklist: review line-oriented lists by marking lines & looking up their items

__version__ = "0.1.0"
