# setup.py
from setuptools import setup, find_packages

setup(
    name="site_walker",
    version="0.1.0",
    description="Same-domain web crawler bounded by link depth and URL pattern caps",
    packages=find_packages(include=["site_walker", "site_walker.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "crawl=site_walker.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
