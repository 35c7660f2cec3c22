from setuptools import setup, find_packages

setup(
    name="deskparse",
    version="1.0.0",
    description="Strict parser for freedesktop.org .desktop files",
    license="GPLv3",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "qt": [
            "PyQt6>=6.7.0",
        ],
        "test": [
            "pytest>=7.4",
        ],
    },
)
