# setup.py
from setuptools import setup, find_packages

setup(
    name="robots-warden",
    version="0.1.0",
    description="Загрузка и разбор robots.txt с проверкой прав доступа для краулеров",
    packages=find_packages(include=["robots_warden", "robots_warden.*"]),
    install_requires=[
        "aiohttp>=3.9",
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
        "console_scripts": ["robots-warden=robots_warden.cli:cli"],
    },
    python_requires=">=3.11",
)
