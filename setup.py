"""A setuptools based setup module.

See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
https://github.com/pypa/sampleproject
"""

from setuptools import setup, find_packages
from os import path
import re

from io import open

HERE = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(HERE, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

VERSIONFILE=path.join(HERE, "enhanced_containers", "_version.py")
V_MATCH = re.match(
        r"^__version__ = ['\"]([^'\"]*)['\"]",
        open(VERSIONFILE, "rt").read()
)
if V_MATCH:
    VERSTR = V_MATCH.group(1)
else:
    raise RuntimeError("Unable to find version string in %s" % VERSIONFILE)


setup(
    name="enhanced-containers",  # Required

    version=VERSTR,  # Required

    description="Serializable list and map containers for items identified by a stable id.",  # Optional
    long_description=long_description,  # Optional
    long_description_content_type="text/markdown",  # Optional (see note above)
    packages=find_packages(exclude=["contrib", "docs", "test", "test.*"]),  # Required
    python_requires=">=3.10, <4",
    include_package_data=True,
    install_requires=[
            "filelock>=3.13.1",
            "pydantic>=2.5.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.1.3",
        ],
    },
)
