"""
Setup file.
"""

from setuptools import setup

URL = "https://github.com/bpsm/text-line-iterable"
KEYWORDS = "text lines iterator closeable memory bounded"


if __name__ == "__main__":
    setup(
        maintainer="Ben Smith-Mannschott",
        keywords=KEYWORDS,
        url=URL,
        include_package_data=True)
