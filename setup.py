"""
Setup script for chromepdf.

Allows development installation with `pip install -e .`
After installing, run `playwright install chromium` once to fetch the browser.
"""

from setuptools import setup, find_packages

setup(
    name="chromepdf",
    version="0.1.0",
    packages=find_packages(include=["chromepdf", "chromepdf.*", "pdf_service", "pdf_service.*"]),
    python_requires=">=3.11",
    install_requires=[
        "playwright>=1.40",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "python-dotenv>=1.0",
        "fastapi>=0.104",
        "uvicorn>=0.24",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
            "httpx>=0.25",
        ],
    },
    entry_points={
        "console_scripts": [
            "chromepdf=chromepdf.cli:main",
        ],
    },
)
