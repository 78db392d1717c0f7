import os
import setuptools
from setuptools import setup


here = os.path.abspath(os.path.dirname(__file__))
requires_list = []
with open(os.path.join(here, 'requirements.txt'), encoding='utf-8') as f:
    for line in f:
        if line.strip():
            requires_list.append(line.strip())

setup(
    name="densityinterface",
    version="0.1",
    description="Trait-like interface for mathematical and statistical densities",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=requires_list,
    extras_require={"test": ["pytest", "numpy"]},
    python_requires=">=3.8",
)
