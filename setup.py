#!/usr/bin/env python
from setuptools import (
    find_packages,
    setup,
)

extras_require = {
    "dev": [
        "build>=0.9.0",
        "bumpversion>=0.5.3",
        "ipython",
        "pre-commit>=3.4.0",
        "tox>=4.0.0",
        "twine",
        "wheel",
    ],
    "bestchain": [
        "cached-property>=1.5.1",
        "eth-typing>=3.3.0",
        "eth-utils>=2.0.0",
        "rlp>=3.0.0",
    ],
    "test": [
        "factory-boy>=3.0.0",
        "hypothesis>=5,<7",
        "pytest>=7.0.0",
        "pytest-cov>=4.0.0",
        "pytest-timeout>=2.0.0",
        "pytest-xdist>=3.0",
    ],
}


extras_require["dev"] = (
    extras_require["dev"] + extras_require["bestchain"] + extras_require["test"]
)

install_requires = extras_require["bestchain"]

with open("README.md") as readme_file:
    long_description = readme_file.read()

setup(
    name="py-bestchain",
    # *IMPORTANT*: Don't manually change the version here. Use the 'bumpversion' utility.
    version="0.1.0-alpha.1",
    description="Select the most-work chain from a forest of block headers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=install_requires,
    python_requires=">=3.8, <4",
    extras_require=extras_require,
    license="MIT",
    zip_safe=False,
    keywords="blockchain headers proof-of-work fork-choice",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"bestchain": ["py.typed"]},
    entry_points={
        "console_scripts": [
            "bestchain=bestchain.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
