#!/usr/bin/env python3
"""
Setup script for plotpy - matplotlib figures composed as scripts.

This package lets plot entities accumulate matplotlib statements, composes
them into one figure script and renders it with an external Python process.
"""

from setuptools import setup, find_packages
import os

# Read the README file for long description
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "plotpy - matplotlib figures composed as scripts"

setup(
    name="plotpy-scripts",
    version="0.1.0",
    author="plotpy Development Team",
    author_email="plotpy-dev@example.com",
    description="Compose matplotlib figures as scripts and render them in a separate process",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['*.tests', '*.tests.*', 'tests*', 'docs*']),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Visualization",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        # numpy for array handling, matplotlib for the rendering interpreter
        "numpy>=1.26.3",
        "matplotlib>=3.8.2",
        "PyYAML>=6.0.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.4",
        ],
        "dev": [
            "pytest>=8.3.4",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    zip_safe=False,
    keywords="matplotlib, plotting, contour, figure, script generation",
)
