# marklist/core/__init__.py
# Core layer: mark alphabet, buffer handle, line marker operations & command dispatch (pure - no I/O)
