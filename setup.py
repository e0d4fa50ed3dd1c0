import re
from os.path import dirname, join, realpath
from setuptools import find_packages, setup

_root = dirname(realpath(__file__))


def _get_version():
    with open(join(_root, "src", "mmtfwriter", "__init__.py")) as file:
        return re.search(
            r'^__version__ = "([^"]+)"', file.read(), re.MULTILINE
        ).group(1)


setup(
    name="mmtfwriter",
    version=_get_version(),
    description=(
        "Encoding of hierarchical macromolecular structures "
        "into the MMTF format"
    ),
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"mmtfwriter.structure.info": ["components.json"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy >= 1.25",
        "msgpack >= 0.5.6",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
)
