from setuptools import setup, find_packages

setup(
    name="cycleautocomplete",
    version="1.0.0",
    description="Cycle-Autocomplete — inline autocompletion based on words in the current document",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyQt5>=5.15",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cycleautocomplete=cycleautocomplete.main:main",
        ],
    },
)
