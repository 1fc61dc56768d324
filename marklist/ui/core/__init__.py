# marklist/ui/core/__init__.py
# Core UI building blocks
