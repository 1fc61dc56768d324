# marklist/ui/__init__.py
# Terminal UI: theming & the interactive review screen
