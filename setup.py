"""A setuptools based setup module.

See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""
import os

from setuptools import find_packages, setup

# pylint: disable=redefined-builtin

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, "README.rst"), encoding="utf-8") as fid:
    long_description = fid.read()

setup(
    name="non-empty-sequence",
    version="0.0.1",
    description="Provide a sequence which is guaranteed to hold at least one element.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    author="The non-empty-sequence developers",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    license="License :: OSI Approved :: MIT License",
    keywords="non-empty sequence list collection design-by-contract",
    packages=find_packages(exclude=["tests", "tests.*", "continuous_integration"]),
    python_requires=">=3.9",
    install_requires=["icontract>=2.6.1,<3"],
    extras_require={
        "dev": [
            "black==23.3.0",
            "mypy==1.5.1",
            "pylint==2.17.7",
            "coverage>=6.5.0,<7",
            "pytest>=7",
        ],
    },
    package_data={"non_empty_sequence": ["py.typed"]},
    data_files=[(".", ["LICENSE", "README.rst"])],
)
