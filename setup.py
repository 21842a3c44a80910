from setuptools import setup
from optlist.const import VERSION_STR, DESCRIPTION

setup(
    name="optlist",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["optlist"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "optlist = optlist:main",
        ],
    },
    license="LGPL-3.0-or-later",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
