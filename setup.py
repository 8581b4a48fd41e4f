"""Setup file for shoplist package."""
from setuptools import setup, find_packages

setup(
    name="shoplist",
    version="0.1.0",
    description="Free-text shopping item parser with LLM extraction and local fallback",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "openai>=1.30",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
        "tenacity>=8.2",
    ],
    extras_require={
        "test": [
            "pytest>=8.1.1",
            "pytest-asyncio>=0.23",
            "httpx>=0.25",
        ],
    },
    entry_points={
        "console_scripts": [
            "shoplist=shoplist.cli:main",
        ],
    },
    python_requires=">=3.9",
)
