import sys
from pathlib import Path

from setuptools import find_packages, setup

if sys.version_info < (3, 10):
    sys.exit("Sorry, Python < 3.10 is not supported.")

README_PATH = Path(__file__).parent / "README.md"
setup(
    name="geojson-model",
    packages=find_packages(include=["geojson_model", "geojson_model.*"]),
    version="0.1.0",
    license="Apache-2.0",
    description="Immutable, self-validating GeoJSON (RFC 7946) models with polymorphic decoding",
    long_description=README_PATH.read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    author="",
    author_email="",
    url="https://github.com",
    include_package_data=True,
    keywords=["geojson", "rfc7946", "gis", "validation", "schemas", "pydantic"],
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.6",
        "geojson>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: GIS",
    ],
)
