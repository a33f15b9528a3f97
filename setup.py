import codecs
import os.path

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("trendminer/requirements/release.txt") as f:
    requirements = f.read().splitlines()

with open("trendminer/requirements/dev.txt") as f:
    dev_requirements = f.read().splitlines()


def read(rel_path):
    here = os.path.abspath(os.path.dirname(__file__))
    with codecs.open(os.path.join(here, rel_path), "r") as fp:
        return fp.read()


def get_version(rel_path):
    for line in read(rel_path).splitlines():
        if line.startswith("__version__"):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]
    else:
        raise RuntimeError("Unable to find version string.")


setuptools.setup(
    name="trendminer",
    version=get_version("trendminer/__init__.py"),
    description="snapshot the trending stocks list into an Excel workbook",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    install_requires=requirements,
    extras_require={"test": dev_requirements},
    data_files=[
        (
            "trendminer",
            [
                "trendminer/requirements/release.txt",
                "trendminer/requirements/dev.txt",
            ],
        )
    ],
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    scripts=[
        "trendminer/stock_miner",
    ],
)
