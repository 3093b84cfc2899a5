# setup.py
from setuptools import setup, find_packages

setup(
    name="parabola_engine",
    version="0.1.0",
    description="Quadratic function conversions and seeded step-by-step exercises",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "parabola-engine = parabola_engine.cli:main",
        ],
    },
)
