""" ectower build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ectower

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ectower.name,
    version=ectower.__version__,
    license=ectower.__license__,
    author=ectower.__author__,
    author_email=ectower.__author_email__,
    description="Elliptic curves over prime fields and their tower extensions",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ectower": ["data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "elliptic-curves finite-fields extension-fields tower-fields "
        "frobenius twist scalar-multiplication"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
