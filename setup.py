import re
from pathlib import Path

from setuptools import setup

install_requires = [
    "httpx>=0.23,<1.0",
    "multidict>=4.5,<7.0",
    "yarl>=1.0,<2.0",
]

extras_require = {
    "aiohttp": ["aiohttp>=3.8,<4.0"],
    "test": [
        "aiohttp>=3.8,<4.0",
        "pytest",
        "pytest-asyncio",
        "pytest-aiohttp",
    ],
}


def read(*parts):
    return Path(__file__).resolve().parent.joinpath(*parts).read_text().strip()


def read_version():
    regexp = re.compile(r"^__version__\W*=\W*\"([\d.abrc]+)\"")
    for line in read("aio_call", "__init__.py").splitlines():
        match = regexp.match(line)
        if match is not None:
            return match.group(1)
    else:
        raise RuntimeError("Cannot find version in aio_call/__init__.py")


with open("README.md", "r") as fh:
    long_description = fh.read()


setup(
    name="aio-call",
    version=read_version(),
    description="Timeout-bounded JSON requests over a pluggable transport",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms=["macOS", "POSIX", "Windows"],
    python_requires=">=3.11",
    project_urls={},
    license="MIT",
    packages=["aio_call"],
    package_dir={"aio_call": "./aio_call"},
    package_data={"aio_call": ["py.typed"]},
    install_requires=install_requires,
    extras_require=extras_require,
    include_package_data=True,
)
