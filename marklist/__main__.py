# marklist/__main__.py
# Allow `python -m marklist`

from .main import main

main()
