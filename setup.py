# setup.py
from setuptools import setup, find_packages

setup(
    name="indexscraper",
    version="0.1.0",
    description="Polite index-then-instances web scraper with an on-disk stash",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.11",
)
