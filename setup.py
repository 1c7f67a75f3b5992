# setup.py
from setuptools import setup, find_packages

setup(
    name="indexnow-push",
    version="0.1.0",
    description="Submit every URL of a sitemap to IndexNow search engines",
    packages=find_packages(include=["indexnow_push", "indexnow_push.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "indexnow-push=indexnow_push.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
