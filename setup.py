#!/usr/bin/env python3

from setuptools import setup, find_packages
from pathlib import Path
# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read version from __init__.py
version = "1.0.0"

# Core dependencies
install_requires = [
    # Image processing
    "Pillow>=11.0.0",

    # Configuration and utilities
    "PyYAML",
    "tqdm>=4.67.0",
    "pydantic>=2.10.3",
]

# Optional dependencies for different use cases
extras_require = {
    "test": [
        "pytest>=8.0.0",
    ],
}

# All optional dependencies
extras_require["all"] = list(set(sum(extras_require.values(), [])))

# Console scripts
console_scripts = [
    "jpegresize=main:main",
]

setup(
    name="jpegresize",
    version=version,
    description="Concurrent batch resizing of JPEG directories for viewing and the web",
    long_description=long_description,
    long_description_content_type="text/markdown",

    # Package information
    packages=find_packages(exclude=["tests*", "docs*", "examples*"]),
    py_modules=["main"],
    zip_safe=False,

    # Dependencies
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,

    # Console scripts
    entry_points={
        "console_scripts": console_scripts,
    },
)
