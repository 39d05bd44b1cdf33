import os

from setuptools import setup

here = os.path.dirname(os.path.abspath(__file__))

version = {}
with open(os.path.join(here, "geojson_codec", "_version.py")) as f:
    exec(f.read(), version)

extras_require = {
    "yaml": ["pyyaml"],
    "test": ["pytest", "hypothesis", "pyyaml"],
}

setup(
    name="geojson-codec",
    version=version["__version__"],
    license="BSD",
    description="Typed GeoJSON (RFC 7946) decoding and encoding built on msgspec",
    packages=["geojson_codec"],
    package_data={"geojson_codec": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18.5"],
    extras_require=extras_require,
)
