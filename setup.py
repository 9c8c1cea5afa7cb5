from setuptools import setup, find_packages
import os
import re

# Import version from YamlEdit/__init__.py
with open(os.path.join('YamlEdit', '__init__.py'), 'r') as f:
    version = re.search(r"__version__\s*=\s*'(.*)'", f.read()).group(1)

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="YamlEdit",
    version=version,
    description="Merge YAML and JSON configuration data at arbitrary paths",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=5.4",
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "yaml-edit=YamlEdit.__main__:main",
        ],
    },
)
