# marklist/config/__init__.py
# Settings management w/ JSON persistence
