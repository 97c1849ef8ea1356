"""
Setup script for m3trans, the portable playlist exporter
"""

import sys

try:
    from setuptools import setup, find_packages
except ImportError:
    print("ERROR: setuptools is not installed.")
    print("\nInstall the package with pip instead, which brings setuptools along:")
    print("  pip install -e .")
    raise SystemExit(1)

from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

if len(sys.argv) == 1:
    print("NOTE: setup.py was run without a command.")
    print("\nInstall m3trans in development mode with:")
    print("  pip install -e .[dev]")
    sys.exit(0)

setup(
    name="m3trans",
    version="1.0.0",
    author="m3trans contributors",
    author_email="contact@example.com",
    description="Export a music library to copied tracks and M3U playlists mirroring its folder tree",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    python_requires=">=3.8",
    install_requires=[
        "mutagen>=1.45.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "m3trans=m3trans.main:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
