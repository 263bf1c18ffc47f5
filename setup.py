import os
from read_version import read_version
from setuptools import setup, find_packages
from pathlib import Path

here = os.path.abspath(os.path.dirname(__file__))

os.chdir(here)

version = read_version('polydist', '__init__.py')
long_description = (Path(here) / "README.md").read_text(encoding="utf-8")

setup(
    name="polydist",
    version=version,
    description="Nearest polygon boundary distances for annotated image points",
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="MIT",
    keywords="polygon distance annotation microscopy",
    packages=find_packages(include=["polydist", "polydist.*"], exclude=["tests", "tests.*"]),
    install_requires=[
        'pydantic >= 2.5',
        'pydantic-settings >= 2.1',
        'matplotlib >= 3.8.2',
        'click >= 8.2',
    ],
    extras_require={
        'test': [
            'pytest >= 7.4',
        ],
    },
    entry_points={
        'console_scripts': [
            'polydist = polydist.cli:polydist',
        ],
    },
    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    setup_requires=["wheel"],
)
