# setup.py
from setuptools import setup, find_packages

setup(
    name="linear_function",
    version="0.1.0",
    description="Parse and evaluate single-variable linear functions such as '2x + 3'",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
        "matplotlib",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "linear-function = linear_function.cli:main",
        ],
    },
)
