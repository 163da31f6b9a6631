from setuptools import setup, find_packages

import re
import os

this_directory = os.path.abspath(os.path.dirname(__file__))
__version__ = re.findall(
    r"""__version__ = ["']+([0-9\.]*)["']+""",
    open(os.path.join(this_directory, "vmtypes/version.py")).read(),
)[0]

with open(os.path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="vmtypes",
    version=__version__,
    description="""Per-surface lattice containers and allocation routines for
    multi-surface vortex lattice (panel method) solvers.""",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="vortex lattice aerodynamic panel method",
    author="",
    author_email="",
    license="BSD 3-Clause License",
    packages=find_packages(
        where='./',
        include=['vmtypes*'],
        exclude=['tests']
        ),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "configobj",
        "colorama",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    classifiers=[
        "Operating System :: Linux, Mac OS",
        "Programming Language :: Python",
        ],
)
