from setuptools import setup, find_packages

setup(
    name="marklist",
    version="0.1.0",
    description="Mark the lines of a text file one by one & look up their items",
    packages=find_packages(include=["marklist", "marklist.*"]),
    install_requires=[
        "typer",
        "click",
        "rich",
        "readchar",
        "python-dotenv",
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-socket",
        ],
    },
    entry_points={
        "console_scripts": [
            "marklist=marklist.main:main",
        ],
    },
    python_requires=">=3.10",
)
